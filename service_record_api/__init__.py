"""
Top-level package for the Service Record Parquet API.

The HTTP application lives in ``app``; ``client`` provides a small
``requests`` based client and command line tool for it.
"""

__all__ = []
