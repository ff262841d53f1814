"""
Service layer abstraction.

Services encapsulate the logic behind the API handlers.  The Parquet
service owns every file the application writes.
"""
