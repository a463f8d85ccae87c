"""Root conftest — shared test configuration."""

import os

import pytest

from moviedms.config import get_settings

# Ensure tests never pick up a developer's MOVIEDMS_* overrides
for _key in [k for k in os.environ if k.startswith("MOVIEDMS_")]:
    del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached; every test starts from a clean cache."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
