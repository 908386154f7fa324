"""Configuration management for KeySmith.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once and is
immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bounds shared with RandomPasswordConfig
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 26


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KEYSMITH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "KeySmith"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Random Password Defaults
    default_length: int = Field(
        default=16,
        description="Length used when a random password is requested without one",
    )
    include_numbers: bool = True
    include_symbols: bool = True

    # Memorable Password Defaults
    default_word_count: int = Field(default=3, ge=1)
    default_separator: str = "-"
    capitalize_first: bool = True
    word_list_path: str | None = Field(
        default=None,
        description="Optional text file (one word per line) replacing the built-in word list",
    )

    # Generator Settings
    max_generation_attempts: int = Field(
        default=1000,
        ge=1,
        description="Upper bound on rejection-sampling attempts per random password",
    )

    @field_validator("default_length")
    @classmethod
    def validate_default_length(cls, v: int) -> int:
        """Validate the default length fits the generator bounds."""
        if not MIN_PASSWORD_LENGTH <= v <= MAX_PASSWORD_LENGTH:
            raise ValueError(
                f"default_length must be between {MIN_PASSWORD_LENGTH} "
                f"and {MAX_PASSWORD_LENGTH}, got {v}"
            )
        return v

    @model_validator(mode="after")
    def validate_separator(self) -> "Settings":
        """Reject separators that would be confused with line breaks."""
        if "\n" in self.default_separator or "\r" in self.default_separator:
            raise ValueError("default_separator must not contain line breaks")
        return self

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

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
