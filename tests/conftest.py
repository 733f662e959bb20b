"""Pytest configuration and fixtures for sanitize-filename tests."""

import pytest

from sanitize_filename import Options

_ENV_VARS = (
    "SANITIZE_REPLACEMENT",
    "SANITIZE_WINDOWS",
    "SANITIZE_TRUNCATE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env or shell settings out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def windows_options():
    return Options(windows=True, truncate=True, replacement="")


@pytest.fixture
def posix_options():
    return Options(windows=False, truncate=True, replacement="")
