import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from blockutils.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.app_name == "blockutils"
    assert settings.environment == "production"
    assert settings.log_level == "WARNING"
    assert settings.log_format == "console"
    assert settings.default_string_length == 16
    assert settings.default_token_length == 32
    assert settings.default_charset == "special"
    assert settings.is_production is True
    assert settings.is_development is False
    assert settings.is_testing is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    with patch.dict(os.environ, {
        "BLOCKUTILS_ENVIRONMENT": "testing",
        "BLOCKUTILS_LOG_LEVEL": "debug",
        "BLOCKUTILS_DEFAULT_TOKEN_LENGTH": "64",
        "BLOCKUTILS_DEFAULT_CHARSET": "human",
    }):
        settings = Settings(_env_file=None)

    assert settings.is_testing is True
    assert settings.log_level == "DEBUG"
    assert settings.default_token_length == 64
    assert settings.default_charset == "human"


@pytest.mark.parametrize("field", ["default_string_length", "default_token_length"])
def test_non_positive_default_length_rejected(field):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})


def test_unknown_charset_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_charset="emoji")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
