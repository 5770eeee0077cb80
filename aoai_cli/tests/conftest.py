"""Pytest configuration for aoai_cli tests.

Isolates every test from the developer's Azure environment variables and the
cached settings object.
"""
from __future__ import annotations

import pytest

from aoai_cli.config import get_settings

AZURE_ENV_VARS = (
    "AZURE_OPENAI_API_KEY",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_DEPLOYMENT_NAME",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in AZURE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

