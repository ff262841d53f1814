"""
Logging configuration for the application.

Everything is logged through the root logger.  Progress messages of
the Parquet pipeline go to the console (standard error) and to an
optional log file.  Pipeline failures are logged with their stack
trace; an optional error file collects only those records, in a format
that also names the source location, so failed runs can be found
without reading the whole log.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ERROR_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(pathname)s:%(lineno)d): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so repeated setup calls are no-ops
# while handlers added by other tools (e.g. the test runner) are ignored.
_HANDLER_MARK = "_service_record_handler"


def _file_handler(path: str, level: int, fmt: str) -> logging.Handler:
    log_path = Path(path).resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    error_logfile: Optional[str] = None,
) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File receiving the same records as the console.
    error_logfile : Optional[str]
        File receiving only ``ERROR`` and above, with source location.
    """
    logger = logging.getLogger()
    if any(getattr(handler, _HANDLER_MARK, False) for handler in logger.handlers):
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handlers = [console_handler]

    if logfile:
        handlers.append(_file_handler(logfile, logging.NOTSET, LOG_FORMAT))
    if error_logfile:
        handlers.append(_file_handler(error_logfile, logging.ERROR, ERROR_LOG_FORMAT))

    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
