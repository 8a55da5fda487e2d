"""Destinations for encoded log events.

The assembler produces one JSON string per event and hands it to the active
sink together with the event level and namespace. The default sink forwards
to the standard library ``logging`` module, so handlers, formatters and
level thresholds configured there apply unchanged.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO, runtime_checkable

from contextlog.foundation.config import get_settings
from contextlog.foundation.errors import LogLevel


@runtime_checkable
class LogSink(Protocol):
    """Protocol for event destinations."""

    def write(self, level: LogLevel, namespace: str, line: str) -> None: ...


@dataclass(slots=True)
class StdlibSink:
    """Forward each line to a stdlib logger at the matching level.

    The logger is named after the event namespace unless ``logger_name``
    pins a single logger for all events.
    """

    logger_name: str | None = None

    def write(self, level: LogLevel, namespace: str, line: str) -> None:
        logging.getLogger(self.logger_name or namespace).log(level.stdlib, line)


@dataclass(slots=True)
class StreamSink:
    """JSON Lines output to a text stream."""

    output: TextIO = field(default_factory=lambda: sys.stderr)

    def write(self, level: LogLevel, namespace: str, line: str) -> None:
        print(line, file=self.output, flush=True)


@dataclass(slots=True)
class MemorySink:
    """Collects written lines in memory. Intended for tests."""

    records: list[tuple[LogLevel, str, str]] = field(default_factory=list)

    def write(self, level: LogLevel, namespace: str, line: str) -> None:
        self.records.append((level, namespace, line))

    @property
    def lines(self) -> list[str]:
        return [line for _, _, line in self.records]

    def clear(self) -> None:
        self.records.clear()


@dataclass(slots=True)
class NoOpSink:
    """Silent sink."""

    def write(self, level: LogLevel, namespace: str, line: str) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class _SinkState:
    """Process-wide sink configuration, shared by all threads and tasks."""

    sink: LogSink | None = None
    sort_keys: bool | None = None


_state = _SinkState()


def configure_logging(
    sink: str | LogSink | None = None,
    *,
    level: str | None = None,
    output: TextIO | None = None,
    sort_keys: bool | None = None,
) -> LogSink:
    """Configure the sink used for structured events.

    Arguments left as None fall back to ``get_settings().logging``.
    ``sink`` is "logging" (stdlib), "stream" (JSON Lines to ``output``),
    "none", or a ready LogSink instance. For the stdlib sink, ``level`` is
    applied to the target logger (the root logger when events are routed
    per namespace) and a stream handler is attached if none exists.
    """
    cfg = get_settings().logging
    choice = cfg.sink if sink is None else sink
    match choice:
        case "logging":
            built: LogSink = StdlibSink(logger_name=cfg.logger_name)
            _prepare_stdlib(cfg.logger_name, (level or cfg.level).upper(), output)
        case "stream":
            built = StreamSink(output=output or _named_stream(cfg.stream))
        case "none":
            built = NoOpSink()
        case LogSink():
            built = choice
        case _:
            raise ValueError(f"Unknown sink: {choice!r}. Use 'logging', 'stream', 'none', or a LogSink")
    _state.sink = built
    _state.sort_keys = cfg.sort_keys if sort_keys is None else sort_keys
    return built


def get_sink() -> LogSink:
    """Configured sink, or the settings default if none was configured."""
    if (sink := _state.sink) is None:
        _state.sink = sink = StdlibSink(logger_name=get_settings().logging.logger_name)
    return sink


def set_sink(sink: LogSink | None) -> None:
    """Install a sink directly (None reverts to the settings default on next use)."""
    _state.sink = sink


def sort_keys_enabled() -> bool:
    if (value := _state.sort_keys) is None:
        return get_settings().logging.sort_keys
    return value


def _named_stream(name: str) -> TextIO:
    return sys.stdout if name == "stdout" else sys.stderr


def _prepare_stdlib(logger_name: str | None, level: str, output: TextIO | None) -> None:
    target = logging.getLogger(logger_name)
    target.setLevel(getattr(logging, level, logging.INFO))
    if not target.handlers:
        handler = logging.StreamHandler(output or _named_stream(get_settings().logging.stream))
        handler.setFormatter(logging.Formatter("%(message)s"))
        target.addHandler(handler)


def reset_logging() -> None:
    """Drop configured sink and encoding options (useful for testing)."""
    _state.sink = None
    _state.sort_keys = None
