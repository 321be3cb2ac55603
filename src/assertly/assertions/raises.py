"""Assertions on callables that are expected to raise (or not)."""

from __future__ import annotations

import re
from typing import Any, Callable, Self

from assertly.core.assertion import Assertion
from assertly.core.render import AssertionOption, quote, type_name
from assertly.sinks.sink import ReportingSink


class RaisesAssertion(Assertion[Callable[[], Any]]):
    """Call the wrapped zero-argument function and check what it raises.

    The exception caught by the last `raises` call is kept in `caught`.
    """

    caught: Exception | None = None

    def _checked(self, msg: tuple[str, ...]) -> bool:
        if callable(self._value):
            return True
        self._fail(
            "unsupported value",
            ("actual", f"({type_name(self._value)}) {self.render(self._value)}"),
            msg=msg,
        )
        return False

    def raises(self, pattern: str = "", *msg: str) -> Self:
        """Require the function to raise an exception whose text matches `pattern`.

        The pattern is searched for in ``str(exc)``; the empty pattern accepts
        any exception.
        """
        if not self._checked(msg):
            return self
        try:
            self._value()
        except Exception as e:
            self.caught = e
        else:
            self.caught = None
            self._fail("expected function to raise, but it did not", msg=msg)
            return self
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            self._fail(
                "invalid pattern",
                ("pattern", quote(pattern)),
                ("error", quote(str(e))),
                msg=msg,
            )
            return self
        text = str(self.caught)
        if compiled.search(text) is None:
            self._fail(
                f"got {quote(text)} which does not match {quote(pattern)}",
                ("actual", repr(self.caught)),
                msg=msg,
            )
        return self

    def does_not_raise(self, *msg: str) -> Self:
        if not self._checked(msg):
            return self
        try:
            self._value()
        except Exception as e:
            self._fail(f"expected function not to raise, but it raised {e!r}", msg=msg)
        return self


def raises(
    sink: ReportingSink,
    fn: Callable[[], Any],
    pattern: str = "",
    *msg: str,
) -> Exception | None:
    """Call `fn` and record a failure unless it raises a matching exception.

    Failures are always recorded, never fatal. Returns the exception that
    was raised, or None.

    Usage:
        err = raises(sink, lambda: parse("{"), r"unexpected end")
    """
    assertion = RaisesAssertion(sink, fn).raises(pattern, *msg)
    return assertion.caught


def that_callable(
    sink: ReportingSink, fn: Callable[[], Any], *options: AssertionOption
) -> RaisesAssertion:
    return RaisesAssertion(sink, fn, *options)
