"""Assertions on ints and floats.

All comparisons go through `numeric_compare`, so a NaN on one side makes
every ordering predicate fail. `is_nan` and `is_inf` are only ever true
for floats.
"""

from __future__ import annotations

from typing import Any, Self

from assertly.core.assertion import Assertion
from assertly.core.equality import (
    between,
    is_finite,
    is_in_delta,
    is_inf,
    is_nan,
    is_number,
    numeric_compare,
)
from assertly.core.render import format_number, type_name
from assertly.types import Number, Ordering


class NumberAssertion(Assertion[Number]):
    """Assertions on a number.

    Messages render numbers with `format_number`, so infinities show up as
    ``+Inf`` / ``-Inf`` and NaN as ``NaN``.
    """

    def _checked(self, msg: tuple[str, ...], *expect: Any) -> bool:
        """Report a failure if the wrapped value or any argument is not a number."""
        if not is_number(self._value):
            self._fail(
                "unsupported value",
                ("actual", f"({type_name(self._value)}) {self.render(self._value)}"),
                msg=msg,
            )
            return False
        for e in expect:
            if not is_number(e):
                self._fail(
                    "unsupported expect value",
                    ("expected", f"({type_name(e)}) {self.render(e)}"),
                    msg=msg,
                )
                return False
        return True

    def _compare(self, expect: Number) -> Ordering | None:
        return numeric_compare(self._value, expect)

    @property
    def _got(self) -> str:
        return format_number(self._value)

    def equal(self, expect: Number, *msg: str) -> Self:
        if self._checked(msg, expect) and self._compare(expect) is not Ordering.EQ:
            self._fail(
                f"expected number to be equal to {format_number(expect)}, but got {self._got}",
                msg=msg,
            )
        return self

    def not_equal(self, expect: Number, *msg: str) -> Self:
        if self._checked(msg, expect) and self._compare(expect) is Ordering.EQ:
            self._fail(
                f"expected number not to be equal to {format_number(expect)}, but it is",
                msg=msg,
            )
        return self

    def greater_than(self, expect: Number, *msg: str) -> Self:
        if self._checked(msg, expect) and self._compare(expect) is not Ordering.GT:
            self._fail(
                f"expected number to be greater than {format_number(expect)}, but got {self._got}",
                msg=msg,
            )
        return self

    def greater_or_equal(self, expect: Number, *msg: str) -> Self:
        if self._checked(msg, expect) and self._compare(expect) not in (Ordering.GT, Ordering.EQ):
            self._fail(
                f"expected number to be greater than or equal to {format_number(expect)}, "
                f"but got {self._got}",
                msg=msg,
            )
        return self

    def less_than(self, expect: Number, *msg: str) -> Self:
        if self._checked(msg, expect) and self._compare(expect) is not Ordering.LT:
            self._fail(
                f"expected number to be less than {format_number(expect)}, but got {self._got}",
                msg=msg,
            )
        return self

    def less_or_equal(self, expect: Number, *msg: str) -> Self:
        if self._checked(msg, expect) and self._compare(expect) not in (Ordering.LT, Ordering.EQ):
            self._fail(
                f"expected number to be less than or equal to {format_number(expect)}, "
                f"but got {self._got}",
                msg=msg,
            )
        return self

    def is_zero(self, *msg: str) -> Self:
        if self._checked(msg) and self._compare(0) is not Ordering.EQ:
            self._fail(f"expected number to be zero, but got {self._got}", msg=msg)
        return self

    def is_not_zero(self, *msg: str) -> Self:
        if self._checked(msg) and self._compare(0) is Ordering.EQ:
            self._fail(f"expected number not to be zero, but got {self._got}", msg=msg)
        return self

    def is_positive(self, *msg: str) -> Self:
        if self._checked(msg) and self._compare(0) is not Ordering.GT:
            self._fail(f"expected number to be positive, but got {self._got}", msg=msg)
        return self

    def is_negative(self, *msg: str) -> Self:
        if self._checked(msg) and self._compare(0) is not Ordering.LT:
            self._fail(f"expected number to be negative, but got {self._got}", msg=msg)
        return self

    def is_non_negative(self, *msg: str) -> Self:
        if self._checked(msg) and self._compare(0) not in (Ordering.GT, Ordering.EQ):
            self._fail(f"expected number to be non-negative, but got {self._got}", msg=msg)
        return self

    def is_non_positive(self, *msg: str) -> Self:
        if self._checked(msg) and self._compare(0) not in (Ordering.LT, Ordering.EQ):
            self._fail(f"expected number to be non-positive, but got {self._got}", msg=msg)
        return self

    def is_between(self, lower: Number, upper: Number, *msg: str) -> Self:
        """Inclusive on both bounds."""
        if self._checked(msg, lower, upper) and not between(self._value, lower, upper):
            self._fail(
                f"expected number to be between {format_number(lower)} and "
                f"{format_number(upper)}, but got {self._got}",
                msg=msg,
            )
        return self

    def is_not_between(self, lower: Number, upper: Number, *msg: str) -> Self:
        if self._checked(msg, lower, upper) and between(self._value, lower, upper):
            self._fail(
                f"expected number not to be between {format_number(lower)} and "
                f"{format_number(upper)}, but got {self._got}",
                msg=msg,
            )
        return self

    def is_in_delta(self, expect: Number, delta: Number, *msg: str) -> Self:
        if self._checked(msg, expect, delta) and not is_in_delta(self._value, expect, delta):
            self._fail(
                f"expected number to be within ±{format_number(delta)} of "
                f"{format_number(expect)}, but got {self._got}",
                msg=msg,
            )
        return self

    def is_nan(self, *msg: str) -> Self:
        if self._checked(msg) and not is_nan(self._value):
            self._fail(f"expected number to be NaN, but got {self._got}", msg=msg)
        return self

    def is_inf(self, sign: int = 0, *msg: str) -> Self:
        """sign > 0 expects +Inf, sign < 0 expects -Inf, 0 accepts either."""
        if self._checked(msg) and not is_inf(self._value, sign):
            target = "+Inf" if sign > 0 else "-Inf" if sign < 0 else "±Inf"
            self._fail(f"expected number to be {target}, but got {self._got}", msg=msg)
        return self

    def is_finite(self, *msg: str) -> Self:
        if self._checked(msg) and not is_finite(self._value):
            self._fail(f"expected number to be finite, but got {self._got}", msg=msg)
        return self
