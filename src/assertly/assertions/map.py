"""Assertions on mappings."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Self

from assertly.core import ordering
from assertly.core.assertion import Assertion
from assertly.core.equality import deep_equal
from assertly.core.render import type_name


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_hashable(value: Any) -> bool:
    if not isinstance(value, Hashable):
        return False
    try:
        hash(value)
    except TypeError:
        # e.g. a tuple holding a list
        return False
    return True


class MapAssertion(Assertion[Mapping[Any, Any] | None]):
    """Assertions on a dict or any other Mapping.

    As with sequences, `None` is the nil mapping and counts as empty.
    """

    @property
    def _items(self) -> Mapping[Any, Any]:
        return {} if self._value is None else self._value

    @property
    def _actual(self) -> tuple[str, str]:
        return ("actual", self.render(self._value))

    def _checked(self, msg: tuple[str, ...], *expect: Any) -> bool:
        if self._value is not None and not isinstance(self._value, Mapping):
            self._fail(
                "unsupported value",
                ("actual", f"({type_name(self._value)}) {self.render(self._value)}"),
                msg=msg,
            )
            return False
        for e in expect:
            if not isinstance(e, Mapping):
                self._fail(
                    "unsupported expect value",
                    ("expected", f"({type_name(e)}) {self.render(e)}"),
                    msg=msg,
                )
                return False
        return True

    def _unsupported_expect(self, value: Any, msg: tuple[str, ...]) -> bool:
        self._fail(
            "unsupported expect value",
            ("expected", f"({type_name(value)}) {self.render(value)}"),
            msg=msg,
        )
        return False

    def _checked_key(self, key: Any, msg: tuple[str, ...]) -> bool:
        if not self._checked(msg):
            return False
        if not _is_hashable(key):
            return self._unsupported_expect(key, msg)
        return True

    def _checked_list(self, items: Any, msg: tuple[str, ...], *, keys: bool) -> bool:
        if not self._checked(msg):
            return False
        if not _is_sequence(items):
            return self._unsupported_expect(items, msg)
        if keys and not all(_is_hashable(k) for k in items):
            return self._unsupported_expect(items, msg)
        return True

    def length(self, length: int, *msg: str) -> Self:
        if self._checked(msg) and len(self._items) != length:
            self._fail(
                f"expected map to have length {length}, but it has length {len(self._items)}",
                self._actual,
                msg=msg,
            )
        return self

    def is_nil(self, *msg: str) -> Self:
        if self._checked(msg) and self._value is not None:
            self._fail("expected map to be nil, but it is not", self._actual, msg=msg)
        return self

    def is_not_nil(self, *msg: str) -> Self:
        if self._checked(msg) and self._value is None:
            self._fail("expected map not to be nil, but it is", self._actual, msg=msg)
        return self

    def is_empty(self, *msg: str) -> Self:
        if self._checked(msg) and len(self._items) != 0:
            self._fail("expected map to be empty, but it is not", self._actual, msg=msg)
        return self

    def is_not_empty(self, *msg: str) -> Self:
        if self._checked(msg) and len(self._items) == 0:
            self._fail("expected map to be non-empty, but it is empty", self._actual, msg=msg)
        return self

    def equal(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        if not self._checked(msg, expect):
            return self
        summary = None
        if len(self._items) != len(expect):
            summary = "expected maps to be equal, but their lengths are different"
        else:
            diff = ordering.missing_from(expect, self._items)
            if diff is not None:
                key, present = diff
                if present:
                    summary = (
                        f"expected maps to be equal, but values for key "
                        f"{self.render(key)} are different"
                    )
                else:
                    summary = f"expected maps to be equal, but key {self.render(key)} is missing"
        if summary is not None:
            self._fail(summary, self._actual, ("expected", self.render(expect)), msg=msg)
        return self

    def not_equal(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        if not self._checked(msg, expect):
            return self
        if deep_equal(dict(self._items), dict(expect)):
            self._fail("expected maps to be different, but they are equal", self._actual, msg=msg)
        return self

    def contains_key(self, key: Any, *msg: str) -> Self:
        if self._checked_key(key, msg) and key not in self._items:
            self._fail(
                f"expected map to contain key {self.render(key)}, but it is missing",
                self._actual,
                msg=msg,
            )
        return self

    def not_contains_key(self, key: Any, *msg: str) -> Self:
        if self._checked_key(key, msg) and key in self._items:
            self._fail(
                f"expected map not to contain key {self.render(key)}, but it is found",
                self._actual,
                msg=msg,
            )
        return self

    def contains_value(self, value: Any, *msg: str) -> Self:
        if self._checked(msg) and not ordering.contains_value(self._items, value):
            self._fail(
                f"expected map to contain value {self.render(value)}, but it is missing",
                self._actual,
                msg=msg,
            )
        return self

    def not_contains_value(self, value: Any, *msg: str) -> Self:
        if self._checked(msg) and ordering.contains_value(self._items, value):
            self._fail(
                f"expected map not to contain value {self.render(value)}, but it is found",
                self._actual,
                msg=msg,
            )
        return self

    def contains_key_value(self, key: Any, value: Any, *msg: str) -> Self:
        if not self._checked_key(key, msg):
            return self
        if key not in self._items:
            self._fail(
                f"expected map to contain key {self.render(key)}, but it is missing",
                self._actual,
                msg=msg,
            )
        elif not deep_equal(self._items[key], value):
            self._fail(
                f"expected value {self.render(value)} for key {self.render(key)}, "
                f"but got {self.render(self._items[key])} instead",
                self._actual,
                msg=msg,
            )
        return self

    def contains_keys(self, keys: Sequence[Any], *msg: str) -> Self:
        if not self._checked_list(keys, msg, keys=True):
            return self
        for key in keys:
            if key not in self._items:
                self._fail(
                    f"expected map to contain key {self.render(key)}, but it is missing",
                    self._actual,
                    ("expected", self.render(keys)),
                    msg=msg,
                )
                break
        return self

    def not_contains_keys(self, keys: Sequence[Any], *msg: str) -> Self:
        if not self._checked_list(keys, msg, keys=True):
            return self
        for key in keys:
            if key in self._items:
                self._fail(
                    f"expected map not to contain key {self.render(key)}, but it is found",
                    self._actual,
                    ("expected", self.render(keys)),
                    msg=msg,
                )
                break
        return self

    def contains_values(self, values: Sequence[Any], *msg: str) -> Self:
        if not self._checked_list(values, msg, keys=False):
            return self
        for value in values:
            if not ordering.contains_value(self._items, value):
                self._fail(
                    f"expected map to contain value {self.render(value)}, but it is missing",
                    self._actual,
                    ("expected", self.render(values)),
                    msg=msg,
                )
                break
        return self

    def not_contains_values(self, values: Sequence[Any], *msg: str) -> Self:
        if not self._checked_list(values, msg, keys=False):
            return self
        for value in values:
            if ordering.contains_value(self._items, value):
                self._fail(
                    f"expected map not to contain value {self.render(value)}, but it is found",
                    self._actual,
                    ("expected", self.render(values)),
                    msg=msg,
                )
                break
        return self

    def is_subset_of(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        """Every entry of the value must appear in `expect` with an equal value."""
        if not self._checked(msg, expect):
            return self
        diff = ordering.missing_from(self._items, expect)
        if diff is not None:
            key, present = diff
            if present:
                summary = (
                    f"expected map to be a subset, but values for key "
                    f"{self.render(key)} are different"
                )
            else:
                summary = f"expected map to be a subset, but unexpected key {self.render(key)} is found"
            self._fail(summary, self._actual, ("expected", self.render(expect)), msg=msg)
        return self

    def is_superset_of(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        """Every entry of `expect` must appear in the value with an equal value."""
        if not self._checked(msg, expect):
            return self
        diff = ordering.missing_from(expect, self._items)
        if diff is not None:
            key, present = diff
            if present:
                summary = (
                    f"expected map to be a superset, but values for key "
                    f"{self.render(key)} are different"
                )
            else:
                summary = f"expected map to be a superset, but key {self.render(key)} is missing"
            self._fail(summary, self._actual, ("expected", self.render(expect)), msg=msg)
        return self

    def has_same_keys(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        if not self._checked(msg, expect):
            return self
        if len(self._items) != len(expect):
            self._fail(
                "expected maps to have the same keys, but their lengths are different",
                self._actual,
                ("expected", self.render(expect)),
                msg=msg,
            )
            return self
        missing = ordering.first_key_difference(expect, self._items)
        if missing is not None:
            self._fail(
                f"expected maps to have the same keys, but key {self.render(missing.value)} "
                f"is missing",
                self._actual,
                ("expected", self.render(expect)),
                msg=msg,
            )
        return self

    def has_same_values(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        """Compare the values as multisets; keys are ignored."""
        if not self._checked(msg, expect):
            return self
        if len(self._items) != len(expect):
            self._fail(
                "expected maps to have the same values, but their lengths are different",
                self._actual,
                ("expected", self.render(expect)),
                msg=msg,
            )
        elif not ordering.same_values(self._items, expect):
            self._fail(
                "expected maps to have the same values, but they are different",
                self._actual,
                ("expected", self.render(expect)),
                msg=msg,
            )
        return self
