"""Sequence and mapping predicates.

Monotonicity checks return the index of the first violating element (the
right-hand side of the offending adjacent pair) or None when the sequence
satisfies the predicate.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

from assertly.core.equality import Multiset, deep_equal
from assertly.types import KeyFunction


@dataclass(frozen=True)
class Found:
    """A located element, used where the element itself may be None."""

    index: int
    value: Any


def _first_violation(seq: Sequence[Any], ok: Callable[[Any, Any], bool]) -> int | None:
    for i in range(1, len(seq)):
        if not ok(seq[i - 1], seq[i]):
            return i
    return None


def first_not_increasing(seq: Sequence[Any]) -> int | None:
    return _first_violation(seq, lambda a, b: a < b)


def first_not_decreasing(seq: Sequence[Any]) -> int | None:
    return _first_violation(seq, lambda a, b: a > b)


def first_unsorted(seq: Sequence[Any]) -> int | None:
    return _first_violation(seq, lambda a, b: not a > b)


def first_unsorted_descending(seq: Sequence[Any]) -> int | None:
    return _first_violation(seq, lambda a, b: not a < b)


def first_duplicate(seq: Sequence[Any]) -> Found | None:
    """Return the first element equal to an earlier one."""
    seen = Multiset()
    for i, v in enumerate(seq):
        if seen.add(v) > 1:
            return Found(i, v)
    return None


def first_duplicate_by(seq: Sequence[Any], key_fn: KeyFunction) -> Found | None:
    """Return the first element whose key equals an earlier element's key.

    The returned value is the duplicated key, not the element.
    """
    seen = Multiset()
    for i, v in enumerate(seq):
        key = key_fn(v)
        if seen.add(key) > 1:
            return Found(i, key)
    return None


def contains_element(seq: Sequence[Any], element: Any) -> bool:
    return any(deep_equal(v, element) for v in seq)


def contains_all_of(seq: Sequence[Any], elements: Sequence[Any]) -> Found | None:
    """Return the first of `elements` missing from `seq`, or None."""
    for i, element in enumerate(elements):
        if not contains_element(seq, element):
            return Found(i, element)
    return None


def contains_none_of(seq: Sequence[Any], elements: Sequence[Any]) -> Found | None:
    """Return the first of `elements` present in `seq`, or None."""
    for i, element in enumerate(elements):
        if contains_element(seq, element):
            return Found(i, element)
    return None


def _matches_at(haystack: Sequence[Any], needle: Sequence[Any], offset: int) -> bool:
    return all(deep_equal(haystack[offset + j], needle[j]) for j in range(len(needle)))


def contains_subsequence(haystack: Sequence[Any], needle: Sequence[Any]) -> bool:
    """True if `needle` appears contiguously in `haystack`.

    An empty needle always matches.
    """
    if len(needle) == 0:
        return True
    return any(
        _matches_at(haystack, needle, i) for i in range(len(haystack) - len(needle) + 1)
    )


def has_prefix(seq: Sequence[Any], prefix: Sequence[Any]) -> bool:
    if len(prefix) > len(seq):
        return False
    return _matches_at(seq, prefix, 0)


def has_suffix(seq: Sequence[Any], suffix: Sequence[Any]) -> bool:
    if len(suffix) > len(seq):
        return False
    return _matches_at(seq, suffix, len(seq) - len(suffix))


def first_sequence_difference(a: Sequence[Any], b: Sequence[Any]) -> int | None:
    """Index of the first position where `a` and `b` differ.

    Sequences of different length differ at ``min(len(a), len(b))`` when one
    is a prefix of the other.
    """
    for i, (x, y) in enumerate(zip(a, b)):
        if not deep_equal(x, y):
            return i
    if len(a) != len(b):
        return min(len(a), len(b))
    return None


def missing_from(sub: Mapping[Any, Any], sup: Mapping[Any, Any]) -> tuple[Any, bool] | None:
    """Find the first entry of `sub` not present in `sup`.

    Returns ``(key, key_present)`` where `key_present` tells whether the key
    exists in `sup` with a different value, or None if every entry of `sub`
    is in `sup`.
    """
    for key, value in sub.items():
        if key not in sup:
            return key, False
        if not deep_equal(sup[key], value):
            return key, True
    return None


def first_key_difference(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> Found | None:
    """Return the first key of `a` missing from `b`, or None."""
    for i, key in enumerate(a):
        if key not in b:
            return Found(i, key)
    return None


def same_keys(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
    return len(a) == len(b) and first_key_difference(a, b) is None


def same_values(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
    """Compare the value multisets of two mappings, ignoring keys."""
    if len(a) != len(b):
        return False
    counts = Multiset(a.values())
    for v in b.values():
        counts.add(v, -1)
    return counts.is_balanced()


def contains_value(mapping: Mapping[Any, Any], value: Any) -> bool:
    return any(deep_equal(v, value) for v in mapping.values())
