"""Tests for assertions/slice.py - SliceAssertion."""

from __future__ import annotations

import pytest

from assertly import that_slice
from assertly.sinks.sink import ListSink


class TestNilAndEmpty:
    """Tests for the nil / empty distinction."""

    def test_nil_is_also_empty(self, sink: ListSink) -> None:
        """None is nil and empty."""
        that_slice(sink, None).is_nil().is_empty().length(0)
        assert len(sink) == 0

    def test_empty_is_not_nil(self, sink: ListSink) -> None:
        """[] is empty but not nil."""
        that_slice(sink, []).is_empty().is_not_nil()
        assert len(sink) == 0
        that_slice(sink, []).is_nil()
        assert sink.messages[0].startswith(
            "Assertion failed: expected slice to be nil, but it is not"
        )

    def test_not_empty(self, sink: ListSink) -> None:
        """Non-empty sequences pass is_not_empty."""
        that_slice(sink, (1,)).is_not_empty().is_not_nil()
        assert len(sink) == 0
        that_slice(sink, None).is_not_empty().is_not_nil()
        assert len(sink) == 2

    def test_length(self, sink: ListSink) -> None:
        """Length mismatch names both lengths."""
        that_slice(sink, [1, 2]).length(3)
        assert "expected slice to have length 3, but it has length 2" in sink.messages[0]


class TestEquality:
    """Tests for equal / not_equal."""

    def test_equal(self, sink: ListSink) -> None:
        """Element-wise deep equality."""
        that_slice(sink, [1, [2]]).equal([1, [2]]).not_equal([1, [3]])
        that_slice(sink, None).equal([])
        assert len(sink) == 0

    def test_length_difference(self, sink: ListSink) -> None:
        """Different lengths are called out."""
        that_slice(sink, [1]).equal([1, 2])
        assert "but their lengths are different" in sink.messages[0]

    def test_index_difference(self, sink: ListSink) -> None:
        """The first differing index is named."""
        that_slice(sink, [1, 2, 3]).equal([1, 5, 3])
        message = sink.messages[0]
        assert "but values at index 1 are different" in message
        assert "  actual: [1, 2, 3]" in message
        assert "expected: [1, 5, 3]" in message

    def test_not_equal_fails(self, sink: ListSink) -> None:
        """Equal slices fail not_equal."""
        that_slice(sink, [1]).not_equal([1])
        assert "expected slices to be different, but they are equal" in sink.messages[0]


class TestMembership:
    """Tests for contains and friends."""

    def test_contains(self, sink: ListSink) -> None:
        """Single element membership."""
        that_slice(sink, ["a", "b"]).contains("a").not_contains("c")
        assert len(sink) == 0
        that_slice(sink, ["a"]).contains("c").not_contains("a")
        assert "expected slice to contain element 'c', but it is missing" in sink.messages[0]
        assert "expected slice not to contain element 'a', but it is found" in sink.messages[1]

    def test_contains_all_and_none(self, sink: ListSink) -> None:
        """The first offending element is reported."""
        that_slice(sink, [1, 2, 3]).contains_all([3, 1]).contains_none([4, 5])
        assert len(sink) == 0
        that_slice(sink, [1, 2, 3]).contains_all([1, 9]).contains_none([4, 2])
        assert "but element 9 is missing" in sink.messages[0]
        assert "but element 2 is found" in sink.messages[1]


class TestSubsequences:
    """Tests for contains_slice, has_prefix and has_suffix."""

    def test_contiguous_subslice(self, sink: ListSink) -> None:
        """[2, 3] is in [1, 2, 3, 4], [2, 4] is not."""
        that_slice(sink, [1, 2, 3, 4]).contains_slice([2, 3])
        assert len(sink) == 0
        that_slice(sink, [1, 2, 3, 4]).contains_slice([2, 4])
        assert sink.messages[0].splitlines() == [
            "Assertion failed: expected slice to contain sub-slice, but it is not",
            "  actual: [1, 2, 3, 4]",
            "     sub: [2, 4]",
        ]

    def test_not_contains_slice(self, sink: ListSink) -> None:
        """Present sub-slices fail."""
        that_slice(sink, [1, 2, 3]).not_contains_slice([1, 3])
        assert len(sink) == 0
        that_slice(sink, [1, 2, 3]).not_contains_slice([2, 3])
        assert "expected slice not to contain sub-slice, but it is" in sink.messages[0]

    @pytest.mark.parametrize("seq", [[], [1], [1, 2, 3], ("a", "b")], ids=repr)
    def test_self_prefix_suffix(self, sink: ListSink, seq: list) -> None:
        """Every sequence starts and ends with itself and with []."""
        that_slice(sink, seq).has_prefix(seq).has_suffix(seq).has_prefix([]).has_suffix([])
        assert len(sink) == 0

    def test_prefix_suffix_failures(self, sink: ListSink) -> None:
        """Prefix and suffix are anchored."""
        that_slice(sink, [1, 2, 3]).has_prefix([2]).has_suffix([2])
        assert "  prefix: [2]" in sink.messages[0]
        assert "  suffix: [2]" in sink.messages[1]


class TestOrdering:
    """Tests for ordering predicates."""

    def test_passing(self, sink: ListSink) -> None:
        """Ordered sequences pass."""
        that_slice(sink, [1, 2, 3]).is_increasing().is_sorted()
        that_slice(sink, [3, 2, 1]).is_decreasing().is_sorted_descending()
        that_slice(sink, [1, 1, 2]).is_sorted()
        assert len(sink) == 0

    def test_strictness(self, sink: ListSink) -> None:
        """Equal neighbours break strict monotonicity."""
        that_slice(sink, [1, 1, 2]).is_increasing()
        assert "expected slice to be strictly increasing, but it is not at index 1" in sink.messages[0]

    def test_sort_failures(self, sink: ListSink) -> None:
        """The violating index is reported."""
        that_slice(sink, [1, 3, 2]).is_sorted()
        that_slice(sink, [1, 3, 2]).is_sorted_descending()
        assert "sorted in ascending order, but it is not at index 2" in sink.messages[0]
        assert "sorted in descending order, but it is not at index 1" in sink.messages[1]

    def test_non_strict_aliases(self, sink: ListSink) -> None:
        """non_decreasing and non_increasing allow equal neighbours."""
        that_slice(sink, [1, 1, 2]).non_decreasing()
        that_slice(sink, [3, 3, 1]).non_increasing()
        assert len(sink) == 0
        that_slice(sink, [1, 3, 2]).non_decreasing()
        that_slice(sink, [1, 3, 2]).non_increasing()
        assert "sorted in ascending order, but it is not at index 2" in sink.messages[0]
        assert "sorted in descending order, but it is not at index 1" in sink.messages[1]

    def test_incomparable(self, sink: ListSink) -> None:
        """TypeError becomes a failure."""
        that_slice(sink, [1, "a"]).is_sorted()
        assert "expected slice elements to be comparable, but they are not" in sink.messages[0]


class TestUniqueness:
    """Tests for all_unique and all_unique_by."""

    def test_unique(self, sink: ListSink) -> None:
        """Distinct elements pass."""
        that_slice(sink, [1, 2, [3]]).all_unique().all_unique_by(repr)
        assert len(sink) == 0

    def test_duplicate(self, sink: ListSink) -> None:
        """The duplicate element is named."""
        that_slice(sink, [1, 2, 1]).all_unique()
        assert "but duplicate element 1 is found" in sink.messages[0]

    def test_duplicate_key(self, sink: ListSink) -> None:
        """The duplicated key is named."""
        that_slice(sink, ["apple", "avocado"]).all_unique_by(lambda w: w[0])
        assert "unique by key, but duplicate key 'a' is found" in sink.messages[0]


class TestPredicates:
    """Tests for all_matches, any_matches and none_matches."""

    def test_passing(self, sink: ListSink) -> None:
        """Predicates over elements."""
        positive = lambda v: v > 0  # noqa: E731
        that_slice(sink, [1, 2]).all_matches(positive).any_matches(positive)
        that_slice(sink, [-1]).none_matches(positive)
        assert len(sink) == 0

    def test_failures(self, sink: ListSink) -> None:
        """The offending element is named."""
        positive = lambda v: v > 0  # noqa: E731
        that_slice(sink, [1, -2]).all_matches(positive).none_matches(positive)
        that_slice(sink, [-1]).any_matches(positive)
        assert "but element -2 does not" in sink.messages[0]
        assert "but element 1 does" in sink.messages[1]
        assert "but none do" in sink.messages[2]

    def test_empty_sequence(self, sink: ListSink) -> None:
        """Vacuous truth for all/none, failure for any."""
        that_slice(sink, []).all_matches(bool).none_matches(bool).any_matches(bool)
        assert len(sink) == 1

    def test_non_callable_predicate(self, sink: ListSink) -> None:
        """A non-callable predicate is reported, not raised."""
        that_slice(sink, [1]).all_matches("x")  # type: ignore[arg-type]
        assert "unsupported expect value" in sink.messages[0]


class TestUnsupported:
    """Tests for shape mismatches."""

    def test_string_value(self, sink: ListSink) -> None:
        """Strings are not sequences here."""
        that_slice(sink, "abc").length(3)  # type: ignore[arg-type]
        assert "unsupported value" in sink.messages[0]

    def test_non_sequence_expect(self, sink: ListSink) -> None:
        """Non-sequence arguments are reported."""
        that_slice(sink, [1]).equal({1})  # type: ignore[arg-type]
        assert "unsupported expect value" in sink.messages[0]
