"""Log-and-reraise guard for unhandled exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Callable, TypeVar

from contextlog.foundation.errors import ExceptionReport

from .logger import call_site, error

T = TypeVar("T")


@contextmanager
def _guard(site: tuple[str, str]) -> Iterator[None]:
    namespace, function = site
    try:
        yield
    except BaseException as e:
        error(ExceptionReport.from_exception(e).as_log_map(), namespace=namespace, function=function)
        raise


def logging_exceptions():
    """Context manager (or decorator) logging any exception as an ERROR event, then re-raising it.

    Every BaseException is logged, KeyboardInterrupt and SystemExit included.
    The exception propagates unchanged; the only visible difference is the
    extra event carrying ``exception-message`` and ``stacktrace``.

    Example:
        >>> with logging_exceptions():
        ...     process(job)
    """
    return _guard(call_site(1))


def guarded(computation: Callable[[], T]) -> T:
    """Run ``computation`` under ``logging_exceptions`` and return its result."""
    with _guard(call_site(1)):
        return computation()
