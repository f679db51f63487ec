"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    AdapterSettings,
    LoggingSettings,
    SumcaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "AdapterSettings",
    "LoggingSettings",
    "SumcaseSettings",
    "clear_settings_cache",
    "get_settings",
]
