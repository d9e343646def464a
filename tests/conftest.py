"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from recordkit import Record
from recordkit.config import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear RECORDKIT_* env and the settings cache around a test."""
    for name in ("RECORDKIT_DUPLICATE_ID_POLICY", "RECORDKIT_LOG_LEVEL", "RECORDKIT_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def sid():
    """Record with a non-zero id."""
    return Record.build(100, "Sid", 10, 120)


@pytest.fixture
def sid_zero():
    """Same payload as `sid`, id 0."""
    return Record.build(0, "Sid", 10, 120)
