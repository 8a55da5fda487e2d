"""Type aliases and level definitions shared by the logging layers."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

JsonDict = dict[str, Any]


class LogLevel(StrEnum):
    """Severity levels understood by the event assembler.

    The member value is the level name used at call sites; ``label`` is the
    upper-cased form written into events and ``stdlib`` the numeric level
    handed to the standard library logger.
    """
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def stdlib(self) -> int:
        return _STDLIB_LEVELS[self]

    @classmethod
    def parse(cls, level: LogLevel | str) -> LogLevel:
        """Coerce a level name (any case) into a LogLevel. Raises ValueError if unknown."""
        if isinstance(level, cls):
            return level
        try:
            return cls(str(level).lower())
        except ValueError:
            raise ValueError(f"Unknown log level: {level!r}. Use 'info', 'warn', or 'error'") from None


_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}
