"""Exception description helpers for error events.

Provides a frozen Pydantic model capturing what the exception guard writes
into an error event, plus the message/stacktrace renderers it is built from.
"""

from __future__ import annotations

import traceback
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field

from .types import JsonDict


def describe_exception(exc: BaseException) -> str:
    """One-line description: exception class name followed by its message.

    Example:
        >>> describe_exception(ValueError("bad input"))
        'ValueError: bad input'
        >>> describe_exception(KeyboardInterrupt())
        'KeyboardInterrupt'
    """
    name = type(exc).__name__
    return f"{name}: {exc}" if str(exc) else name


def render_stacktrace(exc: BaseException) -> str:
    """Full formatted traceback for an exception, including chained causes."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


class ExceptionReport(BaseModel):
    """Structured description of a failure, logged by the exception guard.

    Attributes:
        exception_message: Class name and message of the exception
        stacktrace: Rendered traceback text
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    exception_message: Annotated[str, Field(
        min_length=1,
        alias="exception-message",
        description="Exception class name and message",
    )]
    stacktrace: str = Field(description="Rendered traceback")

    @classmethod
    def from_exception(cls, exc: BaseException) -> Self:
        """Build a report from a raised exception."""
        return cls(exception_message=describe_exception(exc), stacktrace=render_stacktrace(exc))

    def as_log_map(self) -> JsonDict:
        """Event data with the wire-format (hyphenated) keys."""
        return self.model_dump(by_alias=True)
