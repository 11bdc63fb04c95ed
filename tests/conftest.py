"""Shared fixtures."""

from collections.abc import Iterator

import pytest

from extractor.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reload settings so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def valid_input() -> dict:
    return {"email": " test@example.com ", "age": 30}


@pytest.fixture
def invalid_input() -> dict:
    return {"email": "invalid-email", "age": "not-a-number"}
