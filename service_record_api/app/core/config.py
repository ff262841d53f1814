"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box and writes its files under ``output/`` in
the current working directory.
"""

import os
from dataclasses import dataclass


# Pipeline failures are always logged.  ``log`` swallows them so the
# request still succeeds, ``raise`` propagates them to the HTTP layer.
ERROR_POLICY_LOG = "log"
ERROR_POLICY_RAISE = "raise"
ERROR_POLICIES = {ERROR_POLICY_LOG, ERROR_POLICY_RAISE}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Service Record Parquet API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    # Only pipeline failures (ERROR and above), with source location.
    error_log_file: str = os.getenv("ERROR_LOG_FILE", "")

    # Directory holding the Parquet file and both verification dumps.
    # Relative paths are resolved against the working directory of the
    # process at the time of each request.
    output_dir: str = os.getenv("OUTPUT_DIR", "output")

    pipeline_error_policy: str = os.getenv("PIPELINE_ERROR_POLICY", ERROR_POLICY_LOG).lower()

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def __post_init__(self) -> None:
        if self.pipeline_error_policy not in ERROR_POLICIES:
            raise ValueError(
                f"PIPELINE_ERROR_POLICY must be one of {sorted(ERROR_POLICIES)}, "
                f"got {self.pipeline_error_policy!r}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
