"""JSON encoding and timestamps for log events.

orjson handles the natively supported types (dicts, lists, dataclasses,
datetimes, UUIDs, enums, numpy arrays). Anything else falls back to its
``str()`` form, so functions and arbitrary objects can be logged without
breaking the event.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Any

import orjson

_BASE_OPTIONS = orjson.OPT_NON_STR_KEYS


def _default(obj: Any) -> str:
    return str(obj)


def encode_event(event: Any, *, sort_keys: bool = False) -> str:
    """Serialize an event map to a JSON string.

    Raises:
        orjson.JSONEncodeError: If a value cannot be encoded even through
            the string fallback (e.g. its ``__str__`` raises, or nesting
            is too deep).
    """
    option = _BASE_OPTIONS | (orjson.OPT_SORT_KEYS if sort_keys else 0)
    return orjson.dumps(event, default=_default, option=option).decode()


def now_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def format_millis(millis: int) -> str:
    """ISO-8601 UTC string for an epoch-milliseconds timestamp."""
    return datetime.fromtimestamp(millis / 1000, tz=UTC).isoformat(timespec="milliseconds")


def timestamp() -> str:
    """Current time as an ISO-8601 UTC string."""
    return format_millis(now_millis())
