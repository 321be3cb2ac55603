"""Assertions on sequences.

`None` plays the role of a nil sequence: it is nil and empty at the same
time, while ``[]`` is empty but not nil. Every other predicate treats
`None` like an empty sequence.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Self

from assertly.core import ordering
from assertly.core.assertion import Assertion
from assertly.core.ordering import Found
from assertly.core.render import quote, type_name
from assertly.types import ElementPredicate, KeyFunction


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class SliceAssertion(Assertion[Sequence[Any] | None]):
    """Assertions on a list, tuple or any other non-string sequence."""

    @property
    def _items(self) -> Sequence[Any]:
        return () if self._value is None else self._value

    @property
    def _actual(self) -> tuple[str, str]:
        return ("actual", self.render(self._value))

    def _checked(self, msg: tuple[str, ...], *expect: Any) -> bool:
        if self._value is not None and not _is_sequence(self._value):
            self._fail(
                "unsupported value",
                ("actual", f"({type_name(self._value)}) {self.render(self._value)}"),
                msg=msg,
            )
            return False
        for e in expect:
            if not _is_sequence(e):
                self._fail(
                    "unsupported expect value",
                    ("expected", f"({type_name(e)}) {self.render(e)}"),
                    msg=msg,
                )
                return False
        return True

    def length(self, length: int, *msg: str) -> Self:
        if self._checked(msg) and len(self._items) != length:
            self._fail(
                f"expected slice to have length {length}, but it has length {len(self._items)}",
                self._actual,
                msg=msg,
            )
        return self

    def is_nil(self, *msg: str) -> Self:
        if self._checked(msg) and self._value is not None:
            self._fail("expected slice to be nil, but it is not", self._actual, msg=msg)
        return self

    def is_not_nil(self, *msg: str) -> Self:
        if self._checked(msg) and self._value is None:
            self._fail("expected slice not to be nil, but it is", self._actual, msg=msg)
        return self

    def is_empty(self, *msg: str) -> Self:
        if self._checked(msg) and len(self._items) != 0:
            self._fail("expected slice to be empty, but it is not", self._actual, msg=msg)
        return self

    def is_not_empty(self, *msg: str) -> Self:
        if self._checked(msg) and len(self._items) == 0:
            self._fail("expected slice not to be empty, but it is", self._actual, msg=msg)
        return self

    def equal(self, expect: Sequence[Any], *msg: str) -> Self:
        if not self._checked(msg, expect):
            return self
        index = ordering.first_sequence_difference(self._items, expect)
        if index is None:
            return self
        if len(self._items) != len(expect):
            summary = "expected slices to be equal, but their lengths are different"
        else:
            summary = f"expected slices to be equal, but values at index {index} are different"
        self._fail(summary, self._actual, ("expected", self.render(expect)), msg=msg)
        return self

    def not_equal(self, expect: Sequence[Any], *msg: str) -> Self:
        if not self._checked(msg, expect):
            return self
        if ordering.first_sequence_difference(self._items, expect) is None:
            self._fail("expected slices to be different, but they are equal", self._actual, msg=msg)
        return self

    def contains(self, element: Any, *msg: str) -> Self:
        if self._checked(msg) and not ordering.contains_element(self._items, element):
            self._fail(
                f"expected slice to contain element {self.render(element)}, but it is missing",
                self._actual,
                msg=msg,
            )
        return self

    def not_contains(self, element: Any, *msg: str) -> Self:
        if self._checked(msg) and ordering.contains_element(self._items, element):
            self._fail(
                f"expected slice not to contain element {self.render(element)}, but it is found",
                self._actual,
                msg=msg,
            )
        return self

    def contains_all(self, elements: Sequence[Any], *msg: str) -> Self:
        if not self._checked(msg, elements):
            return self
        missing = ordering.contains_all_of(self._items, elements)
        if missing is not None:
            self._fail(
                f"expected slice to contain all elements, but element "
                f"{self.render(missing.value)} is missing",
                self._actual,
                ("expected", self.render(elements)),
                msg=msg,
            )
        return self

    def contains_none(self, elements: Sequence[Any], *msg: str) -> Self:
        if not self._checked(msg, elements):
            return self
        found = ordering.contains_none_of(self._items, elements)
        if found is not None:
            self._fail(
                f"expected slice not to contain any of the elements, but element "
                f"{self.render(found.value)} is found",
                self._actual,
                ("expected", self.render(elements)),
                msg=msg,
            )
        return self

    def contains_slice(self, sub: Sequence[Any], *msg: str) -> Self:
        """Require `sub` to appear contiguously."""
        if self._checked(msg, sub) and not ordering.contains_subsequence(self._items, sub):
            self._fail(
                "expected slice to contain sub-slice, but it is not",
                self._actual,
                ("sub", self.render(sub)),
                msg=msg,
            )
        return self

    def not_contains_slice(self, sub: Sequence[Any], *msg: str) -> Self:
        if self._checked(msg, sub) and ordering.contains_subsequence(self._items, sub):
            self._fail(
                "expected slice not to contain sub-slice, but it is",
                self._actual,
                ("sub", self.render(sub)),
                msg=msg,
            )
        return self

    def has_prefix(self, prefix: Sequence[Any], *msg: str) -> Self:
        if self._checked(msg, prefix) and not ordering.has_prefix(self._items, prefix):
            self._fail(
                "expected slice to start with prefix, but it is not",
                self._actual,
                ("prefix", self.render(prefix)),
                msg=msg,
            )
        return self

    def has_suffix(self, suffix: Sequence[Any], *msg: str) -> Self:
        if self._checked(msg, suffix) and not ordering.has_suffix(self._items, suffix):
            self._fail(
                "expected slice to end with suffix, but it is not",
                self._actual,
                ("suffix", self.render(suffix)),
                msg=msg,
            )
        return self

    def _ordered(self, find, description: str, msg: tuple[str, ...]) -> None:
        try:
            index = find(self._items)
        except TypeError as e:
            self._fail(
                "expected slice elements to be comparable, but they are not",
                self._actual,
                ("error", quote(str(e))),
                msg=msg,
            )
            return
        if index is not None:
            self._fail(
                f"expected slice to be {description}, but it is not at index {index}",
                self._actual,
                msg=msg,
            )

    def is_increasing(self, *msg: str) -> Self:
        """Strictly increasing."""
        if self._checked(msg):
            self._ordered(ordering.first_not_increasing, "strictly increasing", msg)
        return self

    def is_decreasing(self, *msg: str) -> Self:
        """Strictly decreasing."""
        if self._checked(msg):
            self._ordered(ordering.first_not_decreasing, "strictly decreasing", msg)
        return self

    def is_sorted(self, *msg: str) -> Self:
        if self._checked(msg):
            self._ordered(ordering.first_unsorted, "sorted in ascending order", msg)
        return self

    def is_sorted_descending(self, *msg: str) -> Self:
        if self._checked(msg):
            self._ordered(ordering.first_unsorted_descending, "sorted in descending order", msg)
        return self

    non_decreasing = is_sorted
    non_increasing = is_sorted_descending

    def all_unique(self, *msg: str) -> Self:
        if not self._checked(msg):
            return self
        dup = ordering.first_duplicate(self._items)
        if dup is not None:
            self._fail(
                f"expected all elements in the slice to be unique, but duplicate element "
                f"{self.render(dup.value)} is found",
                self._actual,
                msg=msg,
            )
        return self

    def all_unique_by(self, key_fn: KeyFunction, *msg: str) -> Self:
        if not self._checked_fn(key_fn, msg):
            return self
        dup = ordering.first_duplicate_by(self._items, key_fn)
        if dup is not None:
            self._fail(
                f"expected all elements in the slice to be unique by key, but duplicate key "
                f"{self.render(dup.value)} is found",
                self._actual,
                msg=msg,
            )
        return self

    def _checked_fn(self, fn: Any, msg: tuple[str, ...]) -> bool:
        if not self._checked(msg):
            return False
        if not callable(fn):
            self._fail(
                "unsupported expect value",
                ("expected", f"({type_name(fn)}) {self.render(fn)}"),
                msg=msg,
            )
            return False
        return True

    def _first_where(self, fn: ElementPredicate, want: bool) -> Found | None:
        for i, v in enumerate(self._items):
            if bool(fn(v)) is want:
                return Found(i, v)
        return None

    def all_matches(self, fn: ElementPredicate, *msg: str) -> Self:
        if not self._checked_fn(fn, msg):
            return self
        bad = self._first_where(fn, False)
        if bad is not None:
            self._fail(
                f"expected all elements in the slice to satisfy the condition, but element "
                f"{self.render(bad.value)} does not",
                self._actual,
                msg=msg,
            )
        return self

    def any_matches(self, fn: ElementPredicate, *msg: str) -> Self:
        if self._checked_fn(fn, msg) and self._first_where(fn, True) is None:
            self._fail(
                "expected at least one element in the slice to satisfy the condition, "
                "but none do",
                self._actual,
                msg=msg,
            )
        return self

    def none_matches(self, fn: ElementPredicate, *msg: str) -> Self:
        if not self._checked_fn(fn, msg):
            return self
        hit = self._first_where(fn, True)
        if hit is not None:
            self._fail(
                f"expected no element in the slice to satisfy the condition, but element "
                f"{self.render(hit.value)} does",
                self._actual,
                msg=msg,
            )
        return self
