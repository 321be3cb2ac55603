"""Equality and numeric predicates shared by all wrappers.

Everything here is pure: no function mutates its arguments or talks to a
sink. Wrappers turn a False result into a failure message.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from assertly.types import Number, Ordering


def deep_equal(a: Any, b: Any) -> bool:
    """Return True if `a` and `b` are structurally equal.

    Equality is type-strict: ``1``, ``1.0`` and ``True`` are all different
    values. Floats compare by value with no epsilon, except that two NaNs
    are considered equal so that every value equals itself.
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if isinstance(a, float):
        return a == b or (math.isnan(a) and math.isnan(b))
    if isinstance(a, (str, bytes, int, complex, bool)) or a is None:
        return a == b

    # Composite values may reference themselves.
    pair = (id(a), id(b))
    if pair in visited:
        return True
    visited.add(pair)

    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, visited) for x, y in zip(a, b))

    if isinstance(a, Mapping):
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b:
                return False
            if not _deep_equal(value, b[key], visited):
                return False
        return True

    if isinstance(a, (set, frozenset)):
        return a == b

    if dataclasses.is_dataclass(a):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), visited)
            for f in dataclasses.fields(a)
        )

    if type(a).__eq__ is object.__eq__ and hasattr(a, "__dict__"):
        return _deep_equal(vars(a), vars(b), visited)

    return bool(a == b)


def is_number(v: Any) -> bool:
    """True for ints and floats, False for bools and everything else."""
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def numeric_compare(a: Number, b: Number) -> Ordering | None:
    """Three-way comparison of two numbers.

    Returns None when the pair is unordered, i.e. exactly one side is NaN.
    Two NaNs compare EQ.
    """
    if a < b:
        return Ordering.LT
    if a > b:
        return Ordering.GT
    if a == b or (is_nan(a) and is_nan(b)):
        return Ordering.EQ
    return None


def between(v: Number, lower: Number, upper: Number) -> bool:
    """Inclusive range check on both bounds."""
    return lower <= v <= upper


def is_in_delta(v: Number, expect: Number, delta: Number) -> bool:
    if delta < 0:
        return False
    # Equal infinities (and NaN against NaN) have no finite difference.
    if v == expect or (is_nan(v) and is_nan(expect)):
        return True
    return abs(v - expect) <= delta


def is_nan(v: Number) -> bool:
    # Integers can never be NaN
    return isinstance(v, float) and math.isnan(v)


def is_inf(v: Number, sign: int = 0) -> bool:
    """Check for infinity.

    sign > 0 checks +Inf, sign < 0 checks -Inf, sign == 0 accepts either.
    """
    if not isinstance(v, float) or not math.isinf(v):
        return False
    if sign > 0:
        return v > 0
    if sign < 0:
        return v < 0
    return True


def is_finite(v: Number) -> bool:
    return not is_nan(v) and not is_inf(v, 0)


def is_zero_value(v: Any) -> bool:
    """Return True if `v` is the zero value of its type.

    Zero values are None, False, 0, 0.0, empty strings/bytes/containers and
    dataclass instances whose fields are all zero values.
    """
    if v is None:
        return True
    if isinstance(v, (bool, int, float, complex)):
        return v == 0
    if isinstance(v, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(v) == 0
    if dataclasses.is_dataclass(v) and not isinstance(v, type):
        return all(is_zero_value(getattr(v, f.name)) for f in dataclasses.fields(v))
    return False


class Multiset:
    """Counts values using `deep_equal` semantics.

    Hashable values are bucketed by ``(type, value)`` so that ``1`` and
    ``True`` do not collide; unhashable values fall back to a linear scan.
    """

    def __init__(self, values: Iterable[Any] = ()):
        self._hashed: dict[tuple[type, Any], list[list[Any]]] = {}
        self._unhashed: list[list[Any]] = []
        for value in values:
            self.add(value)

    def _bucket(self, value: Any) -> list[list[Any]]:
        if _hashable(value):
            return self._hashed.setdefault((type(value), value), [])
        return self._unhashed

    def _slot(self, value: Any, create: bool) -> list[Any] | None:
        bucket = self._bucket(value)
        for slot in bucket:
            if deep_equal(slot[0], value):
                return slot
        if not create:
            return None
        slot = [value, 0]
        bucket.append(slot)
        return slot

    def add(self, value: Any, count: int = 1) -> int:
        """Add `count` (may be negative) to `value` and return the new count."""
        slot = self._slot(value, create=True)
        slot[1] += count  # type: ignore[index]
        return slot[1]  # type: ignore[index]

    def count(self, value: Any) -> int:
        slot = self._slot(value, create=False)
        return 0 if slot is None else slot[1]

    def __contains__(self, value: Any) -> bool:
        return self.count(value) > 0

    def is_balanced(self) -> bool:
        """True if every count is zero."""
        buckets = [*self._hashed.values(), self._unhashed]
        return all(slot[1] == 0 for bucket in buckets for slot in bucket)


def _hashable(value: Any) -> bool:
    if not isinstance(value, Hashable):
        return False
    # NaN breaks dict lookup by value, also when nested; keep it on the
    # deep_equal path.
    if _has_nan(value):
        return False
    try:
        hash(value)
    except TypeError:
        # e.g. a tuple holding a list
        return False
    return True


def _has_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, tuple):
        return any(_has_nan(v) for v in value)
    return False
