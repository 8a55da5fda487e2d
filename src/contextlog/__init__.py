"""contextlog - JSON structured logging with ambient, scoped context.

Log calls made inside ``in_log_context`` blocks carry that block's data and
tags. Scopes nest: outer data wins when an inner scope repeats a key, and
tags accumulate. Context values may be zero-argument callables, evaluated
each time an event is written.

Quick Start:
    >>> from contextlog import configure_logging, in_log_context, info
    >>>
    >>> configure_logging("stream")
    >>> with in_log_context({"env": "prod", "tags": ["svc"]}):
    ...     info({"msg": "hi", "tags": ["req"]})
    {"level":"INFO","timestamp":"...","function":"<module>","namespace":"__main__",
     "data":{"msg":"hi"},"tags":["svc","req"],"context":{"env":"prod"}}

Timing and failure logging:
    >>> with log_time("db-query", {"table": "users"}):
    ...     rows = fetch()
    >>> with logging_exceptions():
    ...     risky()
"""

from contextlog.foundation.config import ContextlogSettings, LoggingSettings, clear_settings_cache, get_settings
from contextlog.foundation.errors import ExceptionReport, LogLevel, describe_exception, render_stacktrace
from contextlog.observability.logging import (
    ROOT_FRAME,
    LogEvent,
    LogFrame,
    LogSink,
    MemorySink,
    NoOpSink,
    StdlibSink,
    StreamSink,
    build_event,
    call_site,
    configure_logging,
    current,
    current_function_name,
    encode_event,
    error,
    get_sink,
    guarded,
    in_log_context,
    info,
    log_context,
    log_time,
    logging_exceptions,
    reset_logging,
    set_sink,
    structured_log,
    timed,
    warn,
    with_context,
)

__version__ = "0.1.0"

__all__ = [
    # Level functions
    "info", "warn", "error",
    # Context scopes
    "in_log_context", "with_context", "log_context", "current", "LogFrame", "ROOT_FRAME",
    # Helpers
    "log_time", "timed", "logging_exceptions", "guarded",
    # Assembly
    "structured_log", "build_event", "encode_event", "LogEvent", "LogLevel",
    "call_site", "current_function_name",
    # Sinks & configuration
    "LogSink", "MemorySink", "NoOpSink", "StdlibSink", "StreamSink",
    "configure_logging", "get_sink", "set_sink", "reset_logging",
    "ContextlogSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    # Errors
    "ExceptionReport", "describe_exception", "render_stacktrace",
]
