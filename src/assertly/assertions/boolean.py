"""Assertions on booleans."""

from __future__ import annotations

from typing import Self

from assertly.core.assertion import Assertion


class BoolAssertion(Assertion[bool]):
    def _checked(self, msg: tuple[str, ...]) -> bool:
        if isinstance(self._value, bool):
            return True
        self._fail("unsupported value", ("actual", self.render(self._value)), msg=msg)
        return False

    def is_true(self, *msg: str) -> Self:
        if self._checked(msg) and not self._value:
            self._fail("expected value to be true, but it is false", msg=msg)
        return self

    def is_false(self, *msg: str) -> Self:
        if self._checked(msg) and self._value:
            self._fail("expected value to be false, but it is true", msg=msg)
        return self

    def equal(self, expect: bool, *msg: str) -> Self:
        if self._checked(msg) and self._value is not expect:
            self._fail(
                f"expected value to be {expect}, but it is {self._value}",
                msg=msg,
            )
        return self
