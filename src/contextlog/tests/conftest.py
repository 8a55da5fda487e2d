"""Shared fixtures: every test writes into a fresh in-memory sink."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import orjson
import pytest

from contextlog import MemorySink, clear_settings_cache, reset_logging, set_sink


class CapturedEvents:
    """MemorySink wrapper decoding written lines back into dicts."""

    def __init__(self, sink: MemorySink) -> None:
        self.sink = sink

    @property
    def events(self) -> list[dict[str, Any]]:
        return [orjson.loads(line) for line in self.sink.lines]

    @property
    def last(self) -> dict[str, Any]:
        return self.events[-1]

    def __len__(self) -> int:
        return len(self.sink.records)


@pytest.fixture(autouse=True)
def captured(monkeypatch: pytest.MonkeyPatch) -> Iterator[CapturedEvents]:
    """Reset settings and install a memory sink around each test."""
    for var in ("CONTEXTLOG_LOG_SINK", "CONTEXTLOG_LOG_LEVEL", "CONTEXTLOG_LOG_STREAM",
                "CONTEXTLOG_LOG_SORT_KEYS", "CONTEXTLOG_LOG_LOGGER_NAME"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    reset_logging()
    sink = MemorySink()
    set_sink(sink)
    yield CapturedEvents(sink)
    reset_logging()
    clear_settings_cache()
