"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest

# Set test environment before any engine code reads settings
os.environ["READINESS_ENV"] = "test"
os.environ.pop("READINESS_PILLAR_WEIGHTS", None)
os.environ.pop("READINESS_DIMENSION_WEIGHTS", None)


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so env changes made by a test stay in that test."""
    from readiness.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
