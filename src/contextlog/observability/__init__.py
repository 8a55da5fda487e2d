"""Observability: structured, context-aware logging.

Quick Start:
    >>> from contextlog.observability import configure_logging, in_log_context, info
    >>>
    >>> configure_logging("stream")
    >>> with in_log_context(request_id="abc", tags=["http"]):
    ...     info({"msg": "processing"})
"""

from .logging import (
    LogEvent,
    LogFrame,
    LogSink,
    MemorySink,
    NoOpSink,
    StdlibSink,
    StreamSink,
    configure_logging,
    current,
    error,
    get_sink,
    guarded,
    in_log_context,
    info,
    log_context,
    log_time,
    logging_exceptions,
    set_sink,
    structured_log,
    timed,
    warn,
    with_context,
)

__all__ = [
    "LogEvent", "LogFrame", "LogSink", "MemorySink", "NoOpSink", "StdlibSink", "StreamSink",
    "configure_logging", "current", "error", "get_sink", "guarded", "in_log_context", "info",
    "log_context", "log_time", "logging_exceptions", "set_sink", "structured_log", "timed",
    "warn", "with_context",
]
