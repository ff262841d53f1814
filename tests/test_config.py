"""Tests for settings and output path resolution."""

import pytest

from service_record_api.app.core import storage
from service_record_api.app.core.config import Settings, settings
from service_record_api.app.schemas.service_record import REQUIRED_FIELDS


class TestSettings:
    """Settings validation."""

    def test_error_policies_accepted(self):
        for policy in ["log", "raise"]:
            assert Settings(pipeline_error_policy=policy).pipeline_error_policy == policy

    def test_unknown_error_policy_rejected(self):
        with pytest.raises(ValueError, match="PIPELINE_ERROR_POLICY"):
            Settings(pipeline_error_policy="ignore")


class TestStoragePaths:
    """Output locations derived from settings."""

    def test_default_paths(self, workdir):
        assert storage.get_parquet_file_path() == "output/service_record.parquet"
        assert storage.get_input_dump_path() == workdir / "output" / "input_content.json"
        assert storage.get_read_output_path() == workdir / "output" / "parquet_read_output.txt"

    def test_custom_relative_output_dir(self, workdir, monkeypatch):
        monkeypatch.setattr(settings, "output_dir", "data/out")

        assert storage.get_parquet_file_path() == "data/out/service_record.parquet"
        assert storage.get_output_dir() == workdir / "data" / "out"

    def test_absolute_output_dir(self, workdir, tmp_path_factory, monkeypatch):
        target = tmp_path_factory.mktemp("absolute")
        monkeypatch.setattr(settings, "output_dir", str(target))

        assert storage.get_output_dir() == target
        assert storage.get_read_output_path() == target / "parquet_read_output.txt"


def test_required_fields_order():
    assert REQUIRED_FIELDS == ("id", "name", "serviceName", "status")
