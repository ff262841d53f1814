"""
Output file locations.

All files produced by the service live in ``settings.output_dir``.
The Parquet path handed to the pipeline is kept relative (it is echoed
back to clients), while the two verification dumps are resolved against
the current working directory.
"""

import os
import posixpath
from pathlib import Path

from .config import settings


PARQUET_FILE_NAME = "service_record.parquet"
INPUT_DUMP_FILE_NAME = "input_content.json"
READ_OUTPUT_FILE_NAME = "parquet_read_output.txt"


def get_output_dir() -> Path:
    """Return the absolute output directory.

    An absolute ``settings.output_dir`` is used as is; a relative one
    is resolved against the current working directory.
    """
    output_dir = settings.output_dir
    if os.path.isabs(output_dir):
        return Path(output_dir)
    return Path.cwd() / output_dir


def get_parquet_file_path() -> str:
    """Path of the Parquet file as reported to clients (e.g. ``output/service_record.parquet``)."""
    return posixpath.join(settings.output_dir, PARQUET_FILE_NAME)


def get_input_dump_path() -> Path:
    return get_output_dir() / INPUT_DUMP_FILE_NAME


def get_read_output_path() -> Path:
    return get_output_dir() / READ_OUTPUT_FILE_NAME


def ensure_parent_dir(path: Path) -> None:
    """Create the parent directory of ``path`` if it does not exist."""
    path.parent.mkdir(parents=True, exist_ok=True)
