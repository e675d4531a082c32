"""Shared fixtures for integration tests."""

from pathlib import Path

import pytest
from loguru import logger

import atscore.utils.logger as logger_utils

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_resume() -> Path:
    return FIXTURES_PATH / "sample_resume.txt"


@pytest.fixture
def sample_resume_pdf() -> Path:
    return FIXTURES_PATH / "sample_resume.pdf"


@pytest.fixture
def sample_job() -> Path:
    return FIXTURES_PATH / "sample_job.txt"


@pytest.fixture
def isolated_logs(tmp_path: Path, monkeypatch):
    """Send CLI log files to tmp_path and drop the sinks afterwards."""
    monkeypatch.setattr(logger_utils, "LOGS_PATH", tmp_path / "logs")
    yield tmp_path / "logs"
    logger.remove()
