"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Dict

import pytest
from fastapi.testclient import TestClient

from service_record_api.app.core.config import settings, ERROR_POLICY_LOG, ERROR_POLICY_RAISE
from service_record_api.app.main import app


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test inside an empty working directory with default settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "output_dir", "output")
    monkeypatch.setattr(settings, "pipeline_error_policy", ERROR_POLICY_LOG)
    return tmp_path


@pytest.fixture
def output_dir(workdir: Path) -> Path:
    return workdir / "output"


@pytest.fixture
def raise_policy(workdir: Path, monkeypatch) -> None:
    """Propagate pipeline failures instead of swallowing them."""
    monkeypatch.setattr(settings, "pipeline_error_policy", ERROR_POLICY_RAISE)


@pytest.fixture
def client(workdir: Path) -> TestClient:
    return TestClient(app)


@pytest.fixture
def sample_payload() -> Dict[str, str]:
    """Sample service record as posted by clients."""
    return {
        "id": "1",
        "name": "svc-a",
        "serviceName": "alpha",
        "status": "UP",
    }
