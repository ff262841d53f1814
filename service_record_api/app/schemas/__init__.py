"""
Pydantic schema definitions.

``service_record`` defines the record accepted by the API and written
to Parquet, together with the columnar schema derived from it.
"""
