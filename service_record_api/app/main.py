"""
Main entrypoint for the Service Record Parquet API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn service_record_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.  Request bodies that cannot be read as a JSON object
are answered with 400 and a plain-text message, like every other
response of the API.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.router import router as api_router


logger = logging.getLogger(__name__)


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Answer unreadable request bodies with 400."""
    reasons = "; ".join(error.get("msg", "") for error in exc.errors())
    logger.info("Rejected unreadable body on %s: %s", request.url.path, reasons)
    return PlainTextResponse(f"Invalid request body: {reasons}", status_code=status.HTTP_400_BAD_REQUEST)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None, settings.error_log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
