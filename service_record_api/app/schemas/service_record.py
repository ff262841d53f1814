"""
Schema for the service record written to Parquet.

A service record is a flat structure of four required text fields.
The Pydantic model is the single source of truth: the columnar schema
embedded in every Parquet file and the list of fields required by the
API are both derived from it, so the field order (``id``, ``name``,
``serviceName``, ``status``) is the same everywhere.
"""

from typing import Any, Dict, Tuple

import polars as pl
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ServiceRecord(BaseModel):
    """A single service record.

    Values are opaque strings; empty strings are valid and are kept as
    empty strings, never converted to nulls.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: StrictStr = Field(..., examples=["1"])
    name: StrictStr = Field(..., examples=["svc-a"])
    service_name: StrictStr = Field(..., alias="serviceName", examples=["alpha"])
    status: StrictStr = Field(..., examples=["UP"])

    def to_row(self) -> Dict[str, Any]:
        """Return the record keyed by its wire/column names."""
        return self.model_dump(by_alias=True)


# Every column is a plain, non-nested UTF-8 string column.
PARQUET_SCHEMA: Dict[str, Any] = {
    field.alias or name: pl.String for name, field in ServiceRecord.model_fields.items()
}

REQUIRED_FIELDS: Tuple[str, ...] = tuple(PARQUET_SCHEMA)
