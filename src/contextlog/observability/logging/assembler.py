"""Event assembly: merge call-site input with the ambient frame and emit.

Every level function funnels into ``structured_log``. It reads the current
frame once, builds a ``LogEvent``, resolves lazy context values, encodes the
event and writes exactly one line to the active sink. Nothing here catches
exceptions: a failing lazy value or an unencodable payload surfaces at the
call site.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from contextlog.foundation.errors import JsonDict, LogLevel

from .context import LogFrame, current, distinct, normalize_tags
from .encoder import encode_event, timestamp
from .sinks import LogSink, get_sink, sort_keys_enabled


def is_lazy(value: Any) -> bool:
    """Whether a context value is deferred until emission.

    Plain callables count; classes do not, so a type stored as context data
    is logged by name rather than instantiated.
    """
    return callable(value) and not isinstance(value, type)


def resolve_context(data: Mapping[str, Any]) -> JsonDict:
    """Copy of ``data`` with every lazy value replaced by its result."""
    return {k: (v() if is_lazy(v) else v) for k, v in data.items()}


@dataclass(frozen=True, slots=True)
class LogEvent:
    """A fully assembled event, ready for encoding."""

    level: str
    timestamp: str
    function: str
    namespace: str
    data: JsonDict
    tags: tuple[str, ...] = ()
    context: JsonDict | None = None

    def to_dict(self) -> JsonDict:
        """Wire-format map; ``tags`` and ``context`` only when non-empty."""
        event: JsonDict = {
            "level": self.level,
            "timestamp": self.timestamp,
            "function": self.function,
            "namespace": self.namespace,
            "data": self.data,
        }
        if self.tags:
            event["tags"] = list(self.tags)
        if self.context:
            event["context"] = self.context
        return event


def build_event(
    level: LogLevel | str,
    tags: str | Iterable[str] | None,
    namespace: str,
    function: str,
    data: Mapping[str, Any] | None,
    *,
    frame: LogFrame | None = None,
) -> LogEvent:
    """Assemble an event against ``frame`` (the ambient frame by default)."""
    frame = current() if frame is None else frame
    return LogEvent(
        level=LogLevel.parse(level).label,
        timestamp=timestamp(),
        function=function,
        namespace=str(namespace),
        data=dict(data or {}),
        tags=distinct(frame.tags, normalize_tags(tags)),
        context=resolve_context(frame.data) if frame.data else None,
    )


def structured_log(
    level: LogLevel | str,
    tags: str | Iterable[str] | None,
    namespace: str,
    function: str,
    data: Mapping[str, Any] | None,
    *,
    sink: LogSink | None = None,
) -> str:
    """Assemble, encode and write one event. Returns the encoded line.

    Args:
        level: "info", "warn" or "error"
        tags: Call-site tags, appended after the ambient tags
        namespace: Originating module name
        function: Originating function name
        data: Caller-supplied payload
        sink: Destination override (the configured sink by default)

    Raises:
        ValueError: Unknown level name
        orjson.JSONEncodeError: Payload cannot be encoded
        Exception: Anything raised by a lazy context value
    """
    lvl = LogLevel.parse(level)
    line = encode_event(build_event(lvl, tags, namespace, function, data).to_dict(),
                        sort_keys=sort_keys_enabled())
    (sink or get_sink()).write(lvl, str(namespace), line)
    return line
