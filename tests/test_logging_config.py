"""Tests for logging setup."""

import logging

import pytest

from service_record_api.app.core.logging_config import _HANDLER_MARK, setup_logging


def installed_handlers(root):
    return [handler for handler in root.handlers if getattr(handler, _HANDLER_MARK, False)]


@pytest.fixture
def root_logger(monkeypatch):
    """Root logger stripped of handlers; restored after the test."""
    root = logging.getLogger()
    original_level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    for handler in installed_handlers(root):
        handler.close()
    root.setLevel(original_level)


class TestSetupLogging:
    """Handlers installed by setup_logging."""

    def test_error_file_only_receives_errors(self, root_logger, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        error_file = tmp_path / "logs" / "errors.log"
        setup_logging("INFO", str(log_file), str(error_file))

        log = logging.getLogger("service_record_api.test")
        log.info("record written")
        try:
            raise OSError("disk full")
        except OSError:
            log.exception("Error generating Parquet file: disk full")
        for handler in root_logger.handlers:
            handler.flush()

        full = log_file.read_text(encoding="utf-8")
        errors = error_file.read_text(encoding="utf-8")
        assert "record written" in full
        assert "Error generating Parquet file" in full
        assert "record written" not in errors
        assert "Error generating Parquet file: disk full" in errors
        assert "test_logging_config.py:" in errors
        assert "OSError: disk full" in errors

    def test_second_call_adds_nothing(self, root_logger):
        setup_logging("DEBUG")
        setup_logging("DEBUG")

        assert len(installed_handlers(root_logger)) == 1
        assert root_logger.level == logging.DEBUG

    def test_foreign_handlers_do_not_block_setup(self, root_logger):
        foreign = logging.NullHandler()
        root_logger.addHandler(foreign)

        setup_logging("WARNING")

        assert foreign in root_logger.handlers
        assert len(installed_handlers(root_logger)) == 1
        assert root_logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, root_logger):
        setup_logging("LOUD")

        assert root_logger.level == logging.INFO
