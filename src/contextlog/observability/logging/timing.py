"""Timing helpers: log when a block starts and how long it took.

A start event is written before the block runs and a summary event after it
completes. A block that raises gets only the start event; pair with
``logging_exceptions`` to record the failure itself.

Example:
    >>> with log_time("db-query", {"table": "users"}):
    ...     rows = fetch_users()
    >>> rows = timed("db-query", {"table": "users"}, fetch_users)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Callable, TypeVar

from .encoder import format_millis, now_millis
from .logger import call_site, info

T = TypeVar("T")


@contextmanager
def _timing(tag: str, extra_info: Mapping[str, Any] | None, site: tuple[str, str]) -> Iterator[None]:
    namespace, function = site
    start = now_millis()
    start_pretty = format_millis(start)
    info({"start": start, "start-pretty": start_pretty, "tags": [f"{tag}-timing-start"]},
         namespace=namespace, function=function)
    yield
    info({"start": start,
          "start-pretty": start_pretty,
          "millis-elapsed": now_millis() - start,
          "extra-info": dict(extra_info) if extra_info is not None else None,
          "tags": [f"{tag}-timing-summary"]},
         namespace=namespace, function=function)


def log_time(tag: str, extra_info: Mapping[str, Any] | None = None):
    """Context manager (or decorator) timing the wrapped code.

    Events carry the tags ``<tag>-timing-start`` and ``<tag>-timing-summary``
    and are attributed to the code that called ``log_time``.
    """
    return _timing(str(tag), extra_info, call_site(1))


def timed(tag: str, extra_info: Mapping[str, Any] | None, computation: Callable[[], T]) -> T:
    """Run ``computation`` under ``log_time`` and return its result."""
    with _timing(str(tag), extra_info, call_site(1)):
        return computation()
