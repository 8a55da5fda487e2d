"""Shared types and error description for contextlog.

- LogLevel: severity levels with event label and stdlib mapping
- ExceptionReport: structured failure description for error events
- describe_exception/render_stacktrace: exception text renderers
- JsonDict: JSON object alias
"""

from .errors import ExceptionReport, describe_exception, render_stacktrace
from .types import JsonDict, LogLevel

__all__ = [
    # Levels
    "LogLevel",
    # Exception description
    "ExceptionReport", "describe_exception", "render_stacktrace",
    # JSON aliases
    "JsonDict",
]
