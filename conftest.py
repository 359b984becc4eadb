"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep a developer's .env / shell settings out of the CLI tests."""
    monkeypatch.delenv("BRDOC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BRDOC_VALIDATION_MODE", raising=False)
    yield
