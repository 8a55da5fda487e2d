"""Configuration management using pydantic-settings."""

from .settings import (
    ContextlogSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ContextlogSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
