"""Pytest configuration for all tests."""

import pytest

from blockutils.core.config import Settings, get_settings
from blockutils.core.logging import clear_context, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Configure warning-level logging and reset cached state around each test."""
    get_settings.cache_clear()
    configure_logging(Settings(_env_file=None, environment="testing", log_level="WARNING"))
    yield
    clear_context()
    get_settings.cache_clear()
