"""Tests for structural pattern matching on Outcome."""

from __future__ import annotations

import twofold as tf


def _describe(outcome: tf.Outcome[int, str]) -> str:
    match outcome:
        case tf.Success(value):
            return f"ok {value}"
        case tf.Error(error):
            return f"err {error}"
    raise AssertionError("unreachable")


def test_outcome_pattern_matching() -> None:
    """Test both variants can be matched positionally."""
    assert _describe(tf.Success(42)) == "ok 42"
    assert _describe(tf.Error("Something went wrong")) == "err Something went wrong"


def test_keyword_pattern_matching() -> None:
    """Test the payload fields can be matched by name."""
    match tf.Outcome.error("boom"):
        case tf.Error(error=message):
            assert message == "boom"
        case _:
            raise AssertionError("expected Error")


def test_nested_pattern_matching() -> None:
    """Test nested outcomes."""
    outcomes: list[tf.Outcome[tf.Outcome[int, str], str]] = [
        tf.Success(tf.Success(10)),
        tf.Success(tf.Error("inner")),
        tf.Error("outer"),
    ]
    seen: list[str] = []
    for outcome in outcomes:
        match outcome:
            case tf.Success(tf.Success(value)):
                seen.append(f"ok ok {value}")
            case tf.Success(tf.Error(error)):
                seen.append(f"ok err {error}")
            case tf.Error(error):
                seen.append(f"err {error}")
    assert seen == ["ok ok 10", "ok err inner", "err outer"]


def test_with_guards() -> None:
    """Test pattern matching with guards."""
    threshold = 10
    outcomes: list[tf.Outcome[int, str]] = [
        tf.Success(5),
        tf.Success(15),
        tf.Error("invalid"),
    ]
    seen: list[str] = []
    for outcome in outcomes:
        match outcome:
            case tf.Success(value) if value > threshold:
                seen.append("big")
            case tf.Success(_):
                seen.append("small")
            case tf.Error(_):
                seen.append("error")
    assert seen == ["small", "big", "error"]
