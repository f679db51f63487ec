"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from sumcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.adapter.log_captured
    True

    # Or with environment variables:
    # SUMCASE_LOG_LEVEL=DEBUG
    # SUMCASE_ADAPTER_INCLUDE_TRACEBACK=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``sumcase`` logger tree."""

    model_config = SettingsConfigDict(
        env_prefix="SUMCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


class AdapterSettings(BaseSettings):
    """Behaviour of resultify when it captures an exception."""

    model_config = SettingsConfigDict(
        env_prefix="SUMCASE_ADAPTER_",
        extra="ignore",
    )

    log_captured: bool = Field(default=True, description="Log every exception turned into Err")
    log_level: LogLevel = Field(default="DEBUG", description="Level for captured-exception records")
    include_traceback: bool = Field(default=False, description="Attach exc_info to the record")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class SumcaseSettings(BaseSettings):
    """Root settings for sumcase.

    Loads configuration from environment variables with SUMCASE_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        SUMCASE_DEBUG=true
        SUMCASE_LOG_LEVEL=DEBUG
        SUMCASE_LOG_FORMAT=json
        SUMCASE_ADAPTER_LOG_CAPTURED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="SUMCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with SUMCASE_LOG_, SUMCASE_ADAPTER_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    adapter: AdapterSettings = Field(default_factory=AdapterSettings)

    @computed_field
    @property
    def effective_log_level(self) -> LogLevel:
        """DEBUG when debug mode is on, the configured level otherwise."""
        return "DEBUG" if self.debug else self.logging.level


# Singleton pattern for settings
@lru_cache(maxsize=1)
def get_settings() -> SumcaseSettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().debug
        False
    """
    return SumcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
