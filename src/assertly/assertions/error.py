"""Assertions on exceptions.

An error value is either None (no error) or a BaseException instance.
Matching against a target walks the exception chain built by
``raise ... from ...`` and implicit context.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any, Self

from assertly.core.assertion import Assertion
from assertly.core.render import quote, type_name


def iter_chain(error: BaseException) -> Iterator[BaseException]:
    """Yield `error` and every exception it was caused by, without cycles."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def matches_target(error: BaseException | None, target: Any) -> bool:
    """Whether `error` or any exception in its chain matches `target`.

    An exception class matches by isinstance, anything else by identity.
    """
    if error is None:
        return target is None
    if isinstance(target, type) and issubclass(target, BaseException):
        return any(isinstance(e, target) for e in iter_chain(error))
    return any(e is target for e in iter_chain(error))


class ErrorAssertion(Assertion[BaseException | None]):
    """Assertions on an exception instance or None."""

    def _checked(self, msg: tuple[str, ...]) -> bool:
        if self._value is None or isinstance(self._value, BaseException):
            return True
        self._fail(
            "unsupported value",
            ("actual", f"({type_name(self._value)}) {self.render(self._value)}"),
            msg=msg,
        )
        return False

    def _describe(self, error: Any) -> str:
        if error is None:
            return "None"
        if isinstance(error, type):
            return type_name(error)
        return repr(error)

    def is_nil(self, *msg: str) -> Self:
        if self._checked(msg) and self._value is not None:
            self._fail(
                "expected error to be nil, but it is not",
                ("actual", self._describe(self._value)),
                msg=msg,
            )
        return self

    def is_not_nil(self, *msg: str) -> Self:
        if self._checked(msg) and self._value is None:
            self._fail("expected error to be non-nil, but it is nil", msg=msg)
        return self

    def is_(self, target: Any, *msg: str) -> Self:
        if self._checked(msg) and not matches_target(self._value, target):
            self._fail(
                "expected error to be equal to target, but they are different",
                ("actual", self._describe(self._value)),
                ("expected", self._describe(target)),
                msg=msg,
            )
        return self

    def is_not(self, target: Any, *msg: str) -> Self:
        if self._checked(msg) and matches_target(self._value, target):
            self._fail(
                "expected error not to be equal to target, but they are equal",
                ("actual", self._describe(self._value)),
                ("expected", self._describe(target)),
                msg=msg,
            )
        return self

    def contains_message(self, substr: str, *msg: str) -> Self:
        if not self._checked(msg):
            return self
        if self._value is None:
            self._fail("expected non-nil error, but got nil", msg=msg)
        elif substr not in str(self._value):
            self._fail(
                f"expected error message to contain {quote(substr)}, but it does not",
                ("actual", quote(str(self._value))),
                msg=msg,
            )
        return self

    def matches(self, pattern: str, *msg: str) -> Self:
        """Search the error message for `pattern`."""
        if not self._checked(msg):
            return self
        if self._value is None:
            self._fail("expected non-nil error, but got nil", msg=msg)
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
        if compiled.search(str(self._value)) is None:
            self._fail(
                "expected error message to match the pattern, but it does not",
                ("actual", quote(str(self._value))),
                ("pattern", quote(pattern)),
                msg=msg,
            )
        return self
