"""Structured logging module: ambient context scopes and JSON event assembly."""

from .assembler import LogEvent, build_event, is_lazy, resolve_context, structured_log
from .context import (
    ROOT_FRAME,
    LogFrame,
    current,
    distinct,
    in_log_context,
    log_context,
    with_context,
)
from .encoder import encode_event, format_millis, now_millis, timestamp
from .guards import guarded, logging_exceptions
from .logger import call_site, current_function_name, error, info, warn
from .sinks import (
    LogSink,
    MemorySink,
    NoOpSink,
    StdlibSink,
    StreamSink,
    configure_logging,
    get_sink,
    reset_logging,
    set_sink,
)
from .timing import log_time, timed

__all__ = [
    # Context
    "LogFrame", "ROOT_FRAME", "current", "distinct", "in_log_context", "log_context", "with_context",
    # Assembly
    "LogEvent", "build_event", "is_lazy", "resolve_context", "structured_log",
    # Encoding
    "encode_event", "format_millis", "now_millis", "timestamp",
    # Level functions
    "info", "warn", "error", "call_site", "current_function_name",
    # Helpers
    "log_time", "timed", "logging_exceptions", "guarded",
    # Sinks
    "LogSink", "MemorySink", "NoOpSink", "StdlibSink", "StreamSink",
    "configure_logging", "get_sink", "reset_logging", "set_sink",
]
