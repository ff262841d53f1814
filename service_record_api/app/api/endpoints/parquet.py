"""
Parquet endpoints.

``POST /api/parquet/generate`` accepts a flat JSON object, checks that
the four service record fields are present and hands the object to
``ParquetService``.  Responses are plain text.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from service_record_api.app.core.storage import get_parquet_file_path
from service_record_api.app.schemas.service_record import REQUIRED_FIELDS
from service_record_api.app.services.parquet_service import ParquetService


logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_MESSAGE = f"Missing required fields. Required: {', '.join(REQUIRED_FIELDS)}"


@router.post("/generate", response_class=PlainTextResponse)
# Blocking file I/O runs on the event loop: requests are processed one at a time.
async def generate_parquet_file(data: Dict[str, Any]) -> PlainTextResponse:
    """Write the posted record to Parquet and read it back.

    Returns 400 without touching the filesystem when a required field
    is missing.  With the default error policy pipeline failures are
    only logged, so every complete request is answered with 200.
    """
    try:
        missing = [field for field in REQUIRED_FIELDS if field not in data]
        if missing:
            logger.info("Rejected record, missing fields: %s", ", ".join(missing))
            return PlainTextResponse(MISSING_FIELDS_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

        file_path = get_parquet_file_path()
        ParquetService.generate_parquet_file(data, file_path)

        return PlainTextResponse(f"Parquet file generated successfully at: {file_path}")
    except Exception as exc:
        logger.error("Parquet generation failed: %s", exc)
        return PlainTextResponse(
            f"Error generating Parquet file: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
