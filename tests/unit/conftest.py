"""Shared fixtures for unit tests."""

import pytest

from webpage_extract.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]
