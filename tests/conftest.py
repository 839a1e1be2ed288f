"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from content_detect.config import ENV_VARS

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every CONTENT_DETECT_* limit override for the duration of a test."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # load_limits() re-reads ROOT/.env; point it somewhere empty
    monkeypatch.setattr("content_detect.config.ROOT", Path("/nonexistent-content-detect-root"))
    return monkeypatch
