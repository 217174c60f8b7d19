"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from collections.abc import Generator

import pytest

from curl_mcp.config import Settings, get_settings


@pytest.fixture  # type: ignore[misc]
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(curl_binary="curl", log_level="DEBUG")


@pytest.fixture  # type: ignore[misc]
def python_binary() -> str:
    """Interpreter used as a stand-in child process for executor tests."""
    return sys.executable


@pytest.fixture(autouse=True)  # type: ignore[misc]
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
