"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from contextlog.foundation.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.logging.sink)
    'logging'

    # Or with environment variables:
    # CONTEXTLOG_LOG_SINK=stream
    # CONTEXTLOG_LOG_SORT_KEYS=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Sink and encoding configuration for structured events."""

    model_config = SettingsConfigDict(
        env_prefix="CONTEXTLOG_LOG_",
        extra="ignore",
    )

    sink: Literal["logging", "stream", "none"] = "logging"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    stream: Literal["stdout", "stderr"] = "stderr"
    sort_keys: bool = Field(default=False, description="Emit JSON object keys in sorted order")
    logger_name: str | None = Field(
        default=None,
        description="Fixed stdlib logger name; None routes each event to a logger named after its namespace",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ContextlogSettings(BaseSettings):
    """Root settings for contextlog.

    Loads configuration from environment variables with CONTEXTLOG_ prefix.

    Example environment variables:
        CONTEXTLOG_LOG_SINK=stream
        CONTEXTLOG_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTEXTLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    # Nested settings (loaded with CONTEXTLOG_LOG_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ContextlogSettings:
    """Get the global settings instance (cached)."""
    return ContextlogSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
