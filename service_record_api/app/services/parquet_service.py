"""
Service layer for writing service records to Parquet.

``ParquetService.generate_parquet_file`` is the whole pipeline: it
stores the raw input next to the output, writes a single record to a
Snappy-compressed Parquet file (replacing any previous file), reads the
file straight back and stores a textual dump of what was read so the
result can be checked by hand.

Failures anywhere in the pipeline are logged with their stack trace.
Whether they are then swallowed or re-raised is decided by
``settings.pipeline_error_policy``; with the default ``log`` policy the
caller cannot tell a failed run from a successful one except through
the logs and the output files.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import polars as pl

from service_record_api.app.core.config import settings, ERROR_POLICY_RAISE
from service_record_api.app.core.storage import (
    ensure_parent_dir,
    get_input_dump_path,
    get_read_output_path,
)
from service_record_api.app.schemas.service_record import (
    PARQUET_SCHEMA,
    REQUIRED_FIELDS,
    ServiceRecord,
)


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

COMPRESSION_CODEC = "snappy"


class ParquetService:
    """Write a service record to Parquet and verify it by reading it back."""

    @classmethod
    def generate_parquet_file(cls, data: Dict[str, Any], file_path: str) -> None:
        """Generate a Parquet file from ``data`` and verify it.

        Parameters
        ----------
        data : Dict[str, Any]
            Mapping with the keys ``id``, ``name``, ``serviceName`` and
            ``status``.  Extra keys are ignored.  Numbers and booleans
            are stored as their JSON text.
        file_path : str
            Destination of the Parquet file.  Relative paths are
            resolved against the working directory.  An existing file
            is deleted first.
        """
        try:
            fields = {key: cls._as_text(data.get(key)) for key in REQUIRED_FIELDS}
            cls.store_input_content(fields, get_input_dump_path())

            record = ServiceRecord.model_validate(fields)

            output_file = Path(file_path)
            ensure_parent_dir(output_file)
            if output_file.exists():
                output_file.unlink()

            cls.write_to_parquet_file(record, output_file)

            cls.read_and_store_parquet_file(file_path, get_read_output_path())
        except Exception as exc:
            logger.exception("Error generating Parquet file: %s", exc)
            if settings.pipeline_error_policy == ERROR_POLICY_RAISE:
                raise

    @classmethod
    def store_input_content(cls, data: Dict[str, Any], file_path: PathLike) -> None:
        """Store the raw input as a hand-formatted JSON-like document.

        Values are interpolated verbatim.  Quotes and control characters
        are not escaped, so the file is only valid JSON for plain values.
        """
        path = Path(file_path)
        ensure_parent_dir(path)
        lines = ["{"]
        for index, key in enumerate(REQUIRED_FIELDS):
            separator = "," if index < len(REQUIRED_FIELDS) - 1 else ""
            lines.append(f'  "{key}": "{cls._raw(data.get(key))}"{separator}')
        lines.append("}")
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        logger.info("Input content stored to file: %s", path)

    @classmethod
    def write_to_parquet_file(cls, record: ServiceRecord, file_path: PathLike) -> None:
        """Write ``record`` as the only row of a Parquet file."""
        frame = pl.DataFrame(
            {column: [value] for column, value in record.to_row().items()},
            schema=PARQUET_SCHEMA,
        )
        frame.write_parquet(file_path, compression=COMPRESSION_CODEC)
        logger.info("Successfully wrote record to Parquet file: %s", file_path)

    @classmethod
    def read_records(cls, file_path: PathLike) -> List[ServiceRecord]:
        """Read every record stored in a Parquet file.

        The schema embedded in the file must have exactly the service
        record columns, in order; otherwise ``ValueError`` is raised.
        """
        columns = pl.scan_parquet(file_path).collect_schema().names()
        if columns != list(REQUIRED_FIELDS):
            raise ValueError(
                f"Unexpected Parquet schema in {file_path}: {columns}, expected {list(REQUIRED_FIELDS)}"
            )
        frame = pl.read_parquet(file_path)
        return [ServiceRecord.model_validate(row) for row in frame.iter_rows(named=True)]

    @classmethod
    def read_and_store_parquet_file(cls, parquet_file_path: PathLike, output_file_path: PathLike) -> None:
        """Read a Parquet file and store its content as text.

        The output starts with a header naming the source file followed
        by one labelled block per record.  Each line is echoed to
        standard output as well.
        """
        output_path = Path(output_file_path)
        ensure_parent_dir(output_path)
        records = cls.read_records(parquet_file_path)

        with open(output_path, "w", encoding="utf-8") as writer:
            cls._emit(writer, f"Reading Parquet file content from: {parquet_file_path}")
            for record in records:
                cls._emit(writer, "Record content:")
                cls._emit(writer, f"  id: {record.id}")
                cls._emit(writer, f"  name: {record.name}")
                cls._emit(writer, f"  serviceName: {record.service_name}")
                cls._emit(writer, f"  status: {record.status}")
        logger.info("Parquet read output stored to file: %s", output_path)

    @staticmethod
    def _emit(writer, line: str) -> None:
        writer.write(line + "\n")
        print(line)

    @staticmethod
    def _raw(value: Any) -> str:
        # Missing or JSON null values render as a bare ``null``.
        return "null" if value is None else str(value)

    @staticmethod
    def _as_text(value: Any) -> Any:
        """Render JSON scalars as text: ``1`` -> ``"1"``, ``true`` -> ``"true"``.

        ``None``, lists and objects are passed through unchanged and are
        rejected by the record model.
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value
