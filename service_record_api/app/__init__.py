"""
Application package initializer.

This package contains the FastAPI application and its submodules:
``core`` (settings, logging, output paths), ``schemas`` (the service
record), ``services`` (the Parquet pipeline) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
