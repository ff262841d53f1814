"""
Top-level API router.

Aggregates the resource routers under their prefixes.  The application
mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import parquet

router = APIRouter()

router.include_router(parquet.router, prefix="/parquet", tags=["parquet"])
