"""Tests for assertions/raises.py - raises() and RaisesAssertion."""

from __future__ import annotations

import pytest

from assertly import AssertionAborted, raises, that_callable
from assertly.sinks.sink import ListSink


def boom() -> None:
    raise RuntimeError("boom: disk full")


def quiet() -> int:
    return 1


class TestRaises:
    """Tests for the raises() helper."""

    def test_matching_exception(self, sink: ListSink) -> None:
        """The caught exception is returned."""
        err = raises(sink, boom, r"disk \w+")
        assert isinstance(err, RuntimeError)
        assert len(sink) == 0

    def test_empty_pattern_accepts_any(self, sink: ListSink) -> None:
        """Any exception passes without a pattern."""
        assert raises(sink, boom) is not None
        assert len(sink) == 0

    def test_nothing_raised(self, sink: ListSink) -> None:
        """Not raising is a failure."""
        assert raises(sink, quiet, "x") is None
        assert sink.messages == ["Assertion failed: expected function to raise, but it did not"]

    def test_pattern_mismatch(self, sink: ListSink) -> None:
        """The exception text and pattern are quoted."""
        raises(sink, boom, "timeout", "while saving")
        message = sink.messages[0]
        assert 'got "boom: disk full" which does not match "timeout"' in message
        assert ' message: "while saving"' in message

    def test_invalid_pattern(self, sink: ListSink) -> None:
        """Invalid patterns are reported."""
        raises(sink, boom, "(")
        assert sink.messages[0].startswith("Assertion failed: invalid pattern")

    def test_failures_are_recorded_not_fatal(self, sink: ListSink) -> None:
        """raises() never aborts."""
        raises(sink, quiet)
        assert not sink.failures[0].fatal


class TestRaisesAssertion:
    """Tests for that_callable()."""

    def test_chain(self, sink: ListSink) -> None:
        """raises and does_not_raise chain."""
        that_callable(sink, boom).raises("boom")
        that_callable(sink, quiet).does_not_raise()
        assert len(sink) == 0

    def test_does_not_raise_failure(self, sink: ListSink) -> None:
        """The raised exception is named."""
        that_callable(sink, boom).does_not_raise()
        assert "expected function not to raise, but it raised RuntimeError" in sink.messages[0]

    def test_require(self, sink: ListSink) -> None:
        """Aborting mode applies to that_callable chains."""
        with pytest.raises(AssertionAborted):
            that_callable(sink, quiet).require().raises()

    def test_non_callable(self, sink: ListSink) -> None:
        """Non-callables are reported."""
        that_callable(sink, 5).raises()  # type: ignore[arg-type]
        assert "unsupported value" in sink.messages[0]
