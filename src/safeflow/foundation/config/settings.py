"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from safeflow.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'
    >>> settings.adapters.log_suppressed
    True

    # Or with environment variables:
    # SAFEFLOW_LOG_LEVEL=DEBUG
    # SAFEFLOW_ADAPTERS_LOG_SUPPRESSED=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SAFEFLOW_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class AdapterSettings(BaseSettings):
    """Adapter layer behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="SAFEFLOW_ADAPTERS_",
        extra="ignore",
    )

    log_suppressed: bool = Field(
        default=True,
        description="Emit a debug event for faults discarded by safe_function_optional",
    )
    log_propagated: bool = Field(
        default=True,
        description="Emit a debug event when a wrapped callable re-raises",
    )


class SafeflowSettings(BaseSettings):
    """Root settings for safeflow.

    Loads configuration from environment variables with SAFEFLOW_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        SAFEFLOW_DEBUG=true
        SAFEFLOW_LOG_LEVEL=DEBUG
        SAFEFLOW_LOG_FORMAT=json
        SAFEFLOW_ADAPTERS_LOG_SUPPRESSED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="SAFEFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    adapters: AdapterSettings = Field(default_factory=AdapterSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG regardless of the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> SafeflowSettings:
    """Get the global settings instance (cached)."""
    return SafeflowSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
