"""Level functions: ``info``, ``warn`` and ``error``.

Each takes a log map (and/or keyword fields), pulls out the reserved
``tags`` entry and forwards everything else as event data. The originating
namespace and function are read from the caller's stack frame; pass
``namespace=`` / ``function=`` to set them explicitly, e.g. from helpers
that log on behalf of their caller.

Example:
    >>> info({"msg": "cache miss", "key": key, "tags": ["cache"]})
    >>> warn(msg="slow response", elapsed_ms=912)
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any

from contextlog.foundation.errors import LogLevel

from .assembler import structured_log
from .context import split_tags


def call_site(depth: int = 0) -> tuple[str, str]:
    """(namespace, function) of the code calling this function.

    ``depth`` walks further out the stack: 1 is the caller's caller.
    Module-level code reports ``<module>`` as its function.
    """
    frame = sys._getframe(depth + 1)
    return frame.f_globals.get("__name__", "__main__"), frame.f_code.co_qualname


def current_function_name(depth: int = 0) -> str:
    """Qualified name of the calling function."""
    return call_site(depth + 1)[1]


def _log(level: LogLevel, log_map: Mapping[str, Any] | None, fields: dict[str, Any],
         namespace: str | None, function: str | None, depth: int) -> str:
    if namespace is None or function is None:
        ns, fn = call_site(depth + 1)
        namespace = ns if namespace is None else namespace
        function = fn if function is None else function
    tags, data = split_tags({**(log_map or {}), **fields})
    return structured_log(level, tags, namespace, function, data)


def info(log_map: Mapping[str, Any] | None = None, /, *, namespace: str | None = None,
         function: str | None = None, **fields: Any) -> str:
    """Log at INFO. Ambient context and tags are added; ``tags`` in the map are appended."""
    return _log(LogLevel.INFO, log_map, fields, namespace, function, 1)


def warn(log_map: Mapping[str, Any] | None = None, /, *, namespace: str | None = None,
         function: str | None = None, **fields: Any) -> str:
    """Log at WARN. Ambient context and tags are added; ``tags`` in the map are appended."""
    return _log(LogLevel.WARN, log_map, fields, namespace, function, 1)


def error(log_map: Mapping[str, Any] | None = None, /, *, namespace: str | None = None,
          function: str | None = None, **fields: Any) -> str:
    """Log at ERROR. Ambient context and tags are added; ``tags`` in the map are appended."""
    return _log(LogLevel.ERROR, log_map, fields, namespace, function, 1)
