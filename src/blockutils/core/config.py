"""Configuration management for blockutils.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings only supply defaults for the
command line; the generators themselves take explicit arguments.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CharsetName = Literal["numeric", "alphanumeric", "human", "special"]


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at load time.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BLOCKUTILS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "blockutils"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "production"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    # Generator Defaults
    default_string_length: int = Field(
        default=16,
        description="Length used by the CLI when --length is not given for strings",
    )
    default_token_length: int = Field(
        default=32,
        description="Length used by the CLI when --length is not given for tokens",
    )
    default_charset: CharsetName = "special"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("default_string_length", "default_token_length")
    @classmethod
    def validate_positive_length(cls, v: int) -> int:
        """Validate default lengths are positive."""
        if v <= 0:
            raise ValueError("Default length must be a positive integer")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
