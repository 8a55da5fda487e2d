"""Ambient log context: the frame stack consulted by every log call.

A frame holds context data and tags. Entering ``in_log_context`` installs a
new frame built on top of the current one; leaving the block restores the
previous frame exactly, whether the block finished or raised.

Frames live in a ContextVar, so each thread and each asyncio task sees only
the frames its own code entered.

Example:
    >>> with in_log_context({"request_id": "abc", "tags": ["http"]}):
    ...     info({"msg": "handling"})   # context={"request_id": "abc"}, tags=["http"]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from contextlog.foundation.errors import JsonDict

if TYPE_CHECKING:
    from types import TracebackType

T = TypeVar("T")

TAGS_KEY = "tags"

_EMPTY_DATA: Mapping[str, Any] = MappingProxyType({})


def distinct(*groups: Iterable[str]) -> tuple[str, ...]:
    """Concatenate tag groups, keeping the first occurrence of each tag."""
    return tuple(dict.fromkeys(t for g in groups for t in g))


def normalize_tags(tags: str | Iterable[Any] | None) -> list[str]:
    """Tag list from an iterable of tags; a bare string is a single tag."""
    if not tags:
        return []
    return [tags] if isinstance(tags, str) else [str(t) for t in tags]


def split_tags(log_map: Mapping[str, Any] | None) -> tuple[list[str], JsonDict]:
    """Separate the reserved ``tags`` entry from the rest of a map."""
    if not log_map:
        return [], {}
    data = {k: v for k, v in log_map.items() if k != TAGS_KEY}
    return normalize_tags(log_map.get(TAGS_KEY)), data


@dataclass(frozen=True, slots=True)
class LogFrame:
    """One layer of ambient context. Immutable - ``push`` returns a new frame.

    ``parent`` is the frame this one was pushed onto; leaving a scope
    reinstalls it.
    """

    data: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_DATA)
    tags: tuple[str, ...] = ()
    parent: LogFrame | None = field(default=None, compare=False, repr=False)

    def push(self, new_context: Mapping[str, Any]) -> LogFrame:
        """Frame for a nested scope.

        Data keys already present here are kept over the new values; new
        keys are added. New tags are sorted and appended, duplicates dropped.
        """
        new_tags, new_data = split_tags(new_context)
        return LogFrame(
            data=MappingProxyType({**new_data, **self.data}),
            tags=distinct(self.tags, sorted(new_tags)),
            parent=self,
        )

    def is_empty(self) -> bool:
        return not self.data and not self.tags


ROOT_FRAME = LogFrame()

_frame: ContextVar[LogFrame] = ContextVar("contextlog_frame", default=ROOT_FRAME)


def current() -> LogFrame:
    """Current ambient frame (read-only snapshot)."""
    return _frame.get()


def log_context() -> JsonDict:
    """Ambient data with the tags as a top-level ``tags`` key.

    Suitable for carrying context to another process or task and entering
    it again later with ``in_log_context``. Lazy values are returned as-is.
    """
    frame = _frame.get()
    return {**frame.data, TAGS_KEY: list(frame.tags)}


class in_log_context:
    """Context manager adding data and tags to every log event within its scope.

    Holds no per-entry state: one instance may be entered again while active,
    or from several threads and tasks at once. Each exit reinstalls the frame
    that preceded the matching entry.

    Accepts a mapping, keyword arguments, or both (keywords win over the
    mapping). The reserved ``tags`` key holds tag names; every other key
    becomes context data. Values may be zero-argument callables, evaluated
    each time an event is emitted.

    Example:
        >>> with in_log_context({"conn": 7}, tags=["server"]):
        ...     with in_log_context(request_id=lambda: current_request().id):
        ...         info({"msg": "ok"})
    """

    __slots__ = ("_ctx",)

    def __init__(self, context: Mapping[str, Any] | None = None, /, **kw: Any) -> None:
        self._ctx: JsonDict = {**(context or {}), **kw}

    def __enter__(self) -> LogFrame:
        frame = _frame.get().push(self._ctx)
        _frame.set(frame)
        return frame

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        _frame.set(_frame.get().parent or ROOT_FRAME)


def with_context(context: Mapping[str, Any] | None, body: Callable[[], T]) -> T:
    """Run ``body`` inside ``in_log_context(context)`` and return its result."""
    with in_log_context(context):
        return body()
