"""Foundation: configuration, shared types, and exception description."""

from .config import ContextlogSettings, LoggingSettings, clear_settings_cache, get_settings
from .errors import (
    ExceptionReport,
    JsonDict,
    LogLevel,
    describe_exception,
    render_stacktrace,
)

__all__ = [
    "ContextlogSettings", "LoggingSettings", "clear_settings_cache", "get_settings",
    "ExceptionReport", "JsonDict", "LogLevel",
    "describe_exception", "render_stacktrace",
]
