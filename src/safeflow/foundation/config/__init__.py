"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    AdapterSettings,
    LoggingSettings,
    SafeflowSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "AdapterSettings",
    "LoggingSettings",
    "SafeflowSettings",
    "clear_settings_cache",
    "get_settings",
]
