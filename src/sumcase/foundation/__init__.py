"""Foundation: configuration shared by the rest of sumcase."""

from .config import (
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
