"""Tests for assertions/map.py - MapAssertion."""

from __future__ import annotations

from types import MappingProxyType

from assertly import that_map
from assertly.sinks.sink import ListSink


class TestNilAndEmpty:
    """Tests for the nil / empty distinction."""

    def test_nil_map(self, sink: ListSink) -> None:
        """None is nil and empty."""
        that_map(sink, None).is_nil().is_empty().length(0)
        assert len(sink) == 0

    def test_empty_map(self, sink: ListSink) -> None:
        """{} is empty but not nil."""
        that_map(sink, {}).is_empty().is_not_nil()
        assert len(sink) == 0
        that_map(sink, {}).is_nil().is_not_empty()
        assert "expected map to be nil, but it is not" in sink.messages[0]
        assert "expected map to be non-empty, but it is empty" in sink.messages[1]

    def test_other_mappings(self, sink: ListSink) -> None:
        """Any Mapping is accepted."""
        that_map(sink, MappingProxyType({"a": 1})).contains_key("a").length(1)
        assert len(sink) == 0


class TestEquality:
    """Tests for equal / not_equal."""

    def test_equal(self, sink: ListSink) -> None:
        """Key order does not matter."""
        that_map(sink, {"a": 1, "b": [2]}).equal({"b": [2], "a": 1}).not_equal({"a": 1})
        assert len(sink) == 0

    def test_length_difference(self, sink: ListSink) -> None:
        """Different sizes are reported first."""
        that_map(sink, {"a": 1}).equal({"a": 1, "b": 2})
        assert "expected maps to be equal, but their lengths are different" in sink.messages[0]

    def test_missing_key(self, sink: ListSink) -> None:
        """A key of the expected map is absent."""
        that_map(sink, {"a": 1}).equal({"b": 1})
        assert "but key 'b' is missing" in sink.messages[0]

    def test_different_value(self, sink: ListSink) -> None:
        """Values are compared with deep equality."""
        that_map(sink, {"a": 1}).equal({"a": 1.0})
        assert "but values for key 'a' are different" in sink.messages[0]

    def test_not_equal_fails(self, sink: ListSink) -> None:
        """Equal maps fail not_equal."""
        that_map(sink, {"a": 1}).not_equal({"a": 1})
        assert "expected maps to be different, but they are equal" in sink.messages[0]


class TestKeysAndValues:
    """Tests for key and value membership."""

    def test_single_key_value(self, sink: ListSink) -> None:
        """Keys, values and pairs."""
        m = {"a": 1, "b": [2]}
        that_map(sink, m).contains_key("a").not_contains_key("z")
        that_map(sink, m).contains_value([2]).not_contains_value(3)
        that_map(sink, m).contains_key_value("b", [2])
        assert len(sink) == 0

    def test_single_failures(self, sink: ListSink) -> None:
        """Each failure names the key or value."""
        m = {"a": 1}
        that_map(sink, m).contains_key("z").not_contains_key("a")
        that_map(sink, m).contains_value(2).not_contains_value(1)
        assert "expected map to contain key 'z', but it is missing" in sink.messages[0]
        assert "expected map not to contain key 'a', but it is found" in sink.messages[1]
        assert "expected map to contain value 2, but it is missing" in sink.messages[2]
        assert "expected map not to contain value 1, but it is found" in sink.messages[3]

    def test_key_value_failures(self, sink: ListSink) -> None:
        """Missing key and wrong value are distinct failures."""
        that_map(sink, {"a": 1}).contains_key_value("z", 1).contains_key_value("a", 2)
        assert "expected map to contain key 'z', but it is missing" in sink.messages[0]
        assert "expected value 2 for key 'a', but got 1 instead" in sink.messages[1]

    def test_many(self, sink: ListSink) -> None:
        """The first offending key or value is reported."""
        m = {"a": 1, "b": 2}
        that_map(sink, m).contains_keys(["a", "b"]).not_contains_keys(["x"])
        that_map(sink, m).contains_values([2, 1]).not_contains_values([3])
        assert len(sink) == 0
        that_map(sink, m).contains_keys(["a", "x", "y"]).not_contains_keys(["x", "b"])
        that_map(sink, m).contains_values([1, 5]).not_contains_values([5, 1])
        assert len(sink) == 4
        assert "expected map to contain key 'x', but it is missing" in sink.messages[0]
        assert "expected map not to contain key 'b', but it is found" in sink.messages[1]
        assert "expected map to contain value 5, but it is missing" in sink.messages[2]
        assert "expected map not to contain value 1, but it is found" in sink.messages[3]


class TestSubsetSuperset:
    """Tests for is_subset_of / is_superset_of."""

    def test_passing(self, sink: ListSink) -> None:
        """A smaller map is a subset of a larger one."""
        small, big = {"a": 1}, {"a": 1, "b": 2}
        that_map(sink, small).is_subset_of(big)
        that_map(sink, big).is_superset_of(small)
        that_map(sink, None).is_subset_of(big)
        assert len(sink) == 0

    def test_superset_names_missing_key(self, sink: ListSink) -> None:
        """{"a": 1} is not a superset of {"a": 1, "b": 2}."""
        that_map(sink, {"a": 1}).is_superset_of({"a": 1, "b": 2})
        assert sink.messages[0].splitlines() == [
            "Assertion failed: expected map to be a superset, but key 'b' is missing",
            "  actual: {'a': 1}",
            "expected: {'a': 1, 'b': 2}",
        ]

    def test_subset_failures(self, sink: ListSink) -> None:
        """Extra keys and different values."""
        that_map(sink, {"a": 1, "c": 3}).is_subset_of({"a": 1})
        that_map(sink, {"a": 2}).is_subset_of({"a": 1})
        assert "but unexpected key 'c' is found" in sink.messages[0]
        assert "but values for key 'a' are different" in sink.messages[1]

    def test_superset_different_value(self, sink: ListSink) -> None:
        """A present key with another value fails."""
        that_map(sink, {"a": 2}).is_superset_of({"a": 1})
        assert "superset, but values for key 'a' are different" in sink.messages[0]


class TestSameKeysAndValues:
    """Tests for has_same_keys / has_same_values."""

    def test_same_keys(self, sink: ListSink) -> None:
        """Values are ignored."""
        that_map(sink, {"a": 1, "b": 2}).has_same_keys({"b": 0, "a": 0})
        assert len(sink) == 0
        that_map(sink, {"a": 1}).has_same_keys({"a": 1, "b": 2})
        that_map(sink, {"a": 1}).has_same_keys({"b": 1})
        assert "but their lengths are different" in sink.messages[0]
        assert "expected maps to have the same keys, but key 'b' is missing" in sink.messages[1]

    def test_same_values_ignores_keys(self, sink: ListSink) -> None:
        """{a:1, b:2} and {x:1, y:2} have the same values."""
        that_map(sink, {"a": 1, "b": 2}).has_same_values({"x": 1, "y": 2})
        assert len(sink) == 0

    def test_same_values_nan_tuples(self, sink: ListSink) -> None:
        """Tuples holding NaN match like the NaN values themselves."""
        that_map(sink, {"a": (float("nan"),)}).has_same_values({"b": (float("nan"),)})
        assert len(sink) == 0

    def test_same_values_fails(self, sink: ListSink) -> None:
        """{a:1, b:2} and {a:1, b:3} do not."""
        that_map(sink, {"a": 1, "b": 2}).has_same_values({"a": 1, "b": 3})
        that_map(sink, {"a": 1}).has_same_values({"a": 1, "b": 1})
        assert "expected maps to have the same values, but they are different" in sink.messages[0]
        assert "but their lengths are different" in sink.messages[1]


class TestUnsupported:
    """Tests for shape mismatches."""

    def test_non_mapping_value(self, sink: ListSink) -> None:
        """Lists are not mappings."""
        that_map(sink, [("a", 1)]).contains_key("a")  # type: ignore[arg-type]
        assert "unsupported value" in sink.messages[0]

    def test_non_mapping_expect(self, sink: ListSink) -> None:
        """Non-mapping arguments are reported."""
        that_map(sink, {"a": 1}).is_subset_of([("a", 1)])  # type: ignore[arg-type]
        assert "unsupported expect value" in sink.messages[0]

    def test_unhashable_key(self, sink: ListSink) -> None:
        """A list can never be a key; each check records one failure."""
        m = {"a": 1}
        that_map(sink, m).contains_key(["a"]).not_contains_key(["a"])  # type: ignore[arg-type]
        that_map(sink, m).contains_key_value({"a": 1}, 1)
        assert len(sink) == 3
        assert sink.messages[0].splitlines() == [
            "Assertion failed: unsupported expect value",
            "expected: (list) ['a']",
        ]
        assert "expected: (dict) {'a': 1}" in sink.messages[2]

    def test_non_sequence_keys_and_values(self, sink: ListSink) -> None:
        """Key and value lists must be sequences."""
        m = {"a": 1}
        that_map(sink, m).contains_keys(5).not_contains_keys(None)  # type: ignore[arg-type]
        that_map(sink, m).contains_values(1).not_contains_values("a")  # type: ignore[arg-type]
        assert len(sink) == 4
        assert all("unsupported expect value" in text for text in sink.messages)
        assert "expected: (int) 5" in sink.messages[0]
        assert "expected: (str) 'a'" in sink.messages[3]

    def test_unhashable_in_key_list(self, sink: ListSink) -> None:
        """Key lists holding unhashable items are reported whole."""
        that_map(sink, {"a": 1}).contains_keys(["a", ["b"]])
        assert "expected: (list) ['a', ['b']]" in sink.messages[0]

    def test_unhashable_values_are_fine(self, sink: ListSink) -> None:
        """Values are compared by deep equality, so lists are allowed."""
        that_map(sink, {"a": [1]}).contains_values([[1]]).not_contains_values([[2]])
        assert len(sink) == 0
