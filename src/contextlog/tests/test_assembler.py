"""Tests for event assembly, encoding and level functions."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import orjson
import pytest

from contextlog import (
    LogFrame,
    LogLevel,
    build_event,
    current_function_name,
    encode_event,
    error,
    in_log_context,
    info,
    structured_log,
    warn,
    with_context,
)


# ─────────────────────────────────────────────────────────────────────────────
# Event Shape
# ─────────────────────────────────────────────────────────────────────────────


def test_minimal_event_has_base_keys_only(captured: Any) -> None:
    info({"msg": "hi"})
    event = captured.last
    assert set(event) == {"level", "timestamp", "function", "namespace", "data"}
    assert event["level"] == "INFO"
    assert event["data"] == {"msg": "hi"}


def test_timestamp_is_iso_utc(captured: Any) -> None:
    info({})
    parsed = datetime.fromisoformat(captured.last["timestamp"])
    assert parsed.utcoffset() is not None and parsed.utcoffset().total_seconds() == 0


@pytest.mark.parametrize(("fn", "label"), [(info, "INFO"), (warn, "WARN"), (error, "ERROR")])
def test_level_labels(captured: Any, fn: Any, label: str) -> None:
    fn({"n": 1})
    assert captured.last["level"] == label
    assert captured.sink.records[-1][0] is LogLevel(label.lower())


def test_one_write_per_call(captured: Any) -> None:
    info({"a": 1})
    warn({"b": 2})
    assert len(captured) == 2


def test_returns_encoded_line(captured: Any) -> None:
    line = info({"a": 1})
    assert line == captured.sink.lines[-1]


# ─────────────────────────────────────────────────────────────────────────────
# Context & Tags
# ─────────────────────────────────────────────────────────────────────────────


def test_scope_and_call_site_tags(captured: Any) -> None:
    with_context({"env": "prod", "tags": ["svc"]}, lambda: info({"msg": "hi", "tags": ["req"]}))
    event = captured.last
    assert event["tags"] == ["svc", "req"]
    assert event["context"] == {"env": "prod"}
    assert event["data"] == {"msg": "hi"}


def test_nested_outer_data_wins(captured: Any) -> None:
    with in_log_context({"a": 1}):
        with in_log_context({"a": 2, "b": 3}):
            info({})
    assert captured.last["context"] == {"a": 1, "b": 3}


def test_duplicate_tags_appear_once(captured: Any) -> None:
    with in_log_context(tags=["svc", "api"]):
        with in_log_context(tags=["svc", "db"]):
            info({"tags": ["db", "req", "req"]})
    assert captured.last["tags"] == ["api", "svc", "db", "req"]


def test_tags_keyword_field(captured: Any) -> None:
    info(msg="hi", tags=["kw"])
    assert captured.last["tags"] == ["kw"]
    assert captured.last["data"] == {"msg": "hi"}


def test_context_absent_outside_scope(captured: Any) -> None:
    with in_log_context(a=1):
        pass
    info({})
    assert "context" not in captured.last
    assert "tags" not in captured.last


# ─────────────────────────────────────────────────────────────────────────────
# Lazy Values
# ─────────────────────────────────────────────────────────────────────────────


def test_lazy_value_called_once_per_event(captured: Any) -> None:
    calls: list[int] = []

    def counter() -> int:
        calls.append(1)
        return len(calls)

    with in_log_context(seq=counter):
        assert calls == []
        info({})
        info({})
    assert [e["context"]["seq"] for e in captured.events] == [1, 2]
    assert len(calls) == 2


def test_lazy_value_failure_propagates(captured: Any) -> None:
    def broken() -> str:
        raise LookupError("no request")

    with in_log_context(request=broken):
        with pytest.raises(LookupError, match="no request"):
            info({"msg": "x"})
    assert len(captured) == 0


def test_class_values_are_not_invoked(captured: Any) -> None:
    with in_log_context(kind=ValueError):
        info({})
    assert captured.last["context"]["kind"] == str(ValueError)


# ─────────────────────────────────────────────────────────────────────────────
# Call Site
# ─────────────────────────────────────────────────────────────────────────────


def test_call_site_is_captured(captured: Any) -> None:
    def handler() -> None:
        info({"msg": "inside"})

    handler()
    event = captured.last
    assert event["namespace"] == __name__
    assert event["function"].endswith("handler")
    assert captured.sink.records[-1][1] == __name__


def test_explicit_call_site_overrides(captured: Any) -> None:
    info({}, namespace="svc.api", function="serve")
    assert captured.last["namespace"] == "svc.api"
    assert captured.last["function"] == "serve"


def test_empty_call_site_is_kept(captured: Any) -> None:
    info({}, namespace="", function="")
    assert captured.last["namespace"] == ""
    assert captured.last["function"] == ""


def test_current_function_name() -> None:
    assert current_function_name() == "test_current_function_name"


# ─────────────────────────────────────────────────────────────────────────────
# Assembler & Encoder
# ─────────────────────────────────────────────────────────────────────────────


def test_build_event_against_explicit_frame() -> None:
    frame = LogFrame().push({"a": 1, "tags": ["t"]})
    event = build_event("warn", ["u", "t"], "ns", "fn", {"k": "v"}, frame=frame).to_dict()
    assert event["level"] == "WARN"
    assert event["tags"] == ["t", "u"]
    assert event["context"] == {"a": 1}


def test_bare_string_tag_is_one_tag(captured: Any) -> None:
    with in_log_context(tags=["svc"]):
        structured_log("info", "req", "ns", "fn", {})
    assert captured.last["tags"] == ["svc", "req"]
    assert build_event("info", "req", "ns", "fn", {}, frame=LogFrame()).tags == ("req",)


def test_structured_log_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        structured_log("verbose", [], "ns", "fn", {})


def test_unknown_objects_render_as_strings(captured: Any) -> None:
    class Widget:
        def __str__(self) -> str:
            return "widget#1"

    info({"w": Widget(), "fn": len})
    data = captured.last["data"]
    assert data["w"] == "widget#1"
    assert data["fn"] == str(len)


def test_unencodable_value_propagates() -> None:
    class Hostile:
        def __str__(self) -> str:
            raise RuntimeError("no string form")

    with pytest.raises(orjson.JSONEncodeError):
        encode_event({"h": Hostile()})


def test_sort_keys_option() -> None:
    assert encode_event({"b": 1, "a": 2}, sort_keys=True) == '{"a":2,"b":1}'
    assert encode_event({"b": 1, "a": 2}) == '{"b":1,"a":2}'


def test_stdlib_sink_receives_line(caplog: pytest.LogCaptureFixture) -> None:
    from contextlog import StdlibSink

    with caplog.at_level(logging.WARNING, logger="svc.worker"):
        structured_log("warn", [], "svc.worker", "run", {"n": 1}, sink=StdlibSink())
    record = caplog.records[-1]
    assert record.name == "svc.worker"
    assert record.levelno == logging.WARNING
    assert orjson.loads(record.getMessage())["data"] == {"n": 1}
