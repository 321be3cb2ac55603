"""Generic assertions on arbitrary values.

`AnyAssertion` is what `that()` returns. It compares values with
`deep_equal` and can delegate membership checks to the wrapped object
through the `HasPredicate` / `ContainsPredicate` capability protocols.
"""

from __future__ import annotations

from abc import ABCMeta
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, Self, runtime_checkable

from assertly.core.assertion import Assertion
from assertly.core.equality import deep_equal, is_zero_value
from assertly.core.ordering import contains_element, contains_value
from assertly.core.render import type_name


@runtime_checkable
class HasPredicate(Protocol):
    """Capability used by `AnyAssertion.has`."""

    def has(self, key: Any) -> bool: ...


@runtime_checkable
class ContainsPredicate(Protocol):
    """Capability used by `AnyAssertion.contains`."""

    def contains(self, key: Any) -> bool: ...


def _is_interface(target: Any) -> bool:
    if getattr(target, "_is_runtime_protocol", False):
        return True
    return isinstance(target, ABCMeta)


class AnyAssertion(Assertion[Any]):
    """Assertions on a value of any type."""

    def _typed(self, value: Any) -> str:
        return f"({type_name(value)}) {self.render(value)}"

    def is_true(self, *msg: str) -> Self:
        if self._value is not True:
            self._fail("expected value to be true, but it is false", msg=msg)
        return self

    def is_false(self, *msg: str) -> Self:
        if self._value is not False:
            self._fail("expected value to be false, but it is true", msg=msg)
        return self

    def is_nil(self, *msg: str) -> Self:
        if self._value is not None:
            self._fail(
                "expected value to be nil, but it is not",
                ("actual", self._typed(self._value)),
                msg=msg,
            )
        return self

    def is_not_nil(self, *msg: str) -> Self:
        if self._value is None:
            self._fail("expected value to be non-nil, but it is nil", msg=msg)
        return self

    is_none = is_nil
    is_not_none = is_not_nil

    def equal(self, expect: Any, *msg: str) -> Self:
        if not deep_equal(self._value, expect):
            self._fail(
                "expected values to be equal, but they are different",
                ("actual", self._typed(self._value)),
                ("expected", self._typed(expect)),
                msg=msg,
            )
        return self

    def not_equal(self, expect: Any, *msg: str) -> Self:
        if deep_equal(self._value, expect):
            self._fail(
                "expected values to be different, but they are equal",
                ("actual", self._typed(self._value)),
                msg=msg,
            )
        return self

    def same(self, expect: Any, *msg: str) -> Self:
        """Identity check (``is``)."""
        if self._value is not expect:
            self._fail(
                "expected values to be same, but they are different",
                ("actual", self._typed(self._value)),
                ("expected", self._typed(expect)),
                msg=msg,
            )
        return self

    def not_same(self, expect: Any, *msg: str) -> Self:
        if self._value is expect:
            self._fail(
                "expected values to be different, but they are same",
                ("actual", self._typed(self._value)),
                msg=msg,
            )
        return self

    def is_instance_of(self, expect: type | tuple[type, ...], *msg: str) -> Self:
        targets = expect if isinstance(expect, tuple) else (expect,)
        if not all(isinstance(t, type) for t in targets):
            self._fail(
                "unsupported expect value",
                ("expected", self._typed(expect)),
                msg=msg,
            )
            return self
        if not isinstance(self._value, expect):
            self._fail(
                "expected type to be assignable to target, but it does not",
                ("actual", type_name(self._value)),
                ("expected", " | ".join(type_name(t) for t in targets)),
                msg=msg,
            )
        return self

    def implements(self, expect: type, *msg: str) -> Self:
        """Check the value against a runtime-checkable Protocol or an ABC."""
        if not _is_interface(expect):
            self._fail("expected target to implement should be interface", msg=msg)
            return self
        if not isinstance(self._value, expect):
            self._fail(
                "expected type to implement target interface, but it does not",
                ("actual", type_name(self._value)),
                ("expected", type_name(expect)),
                msg=msg,
            )
        return self

    def has(self, expect: Any, *msg: str) -> Self:
        """Call ``value.has(expect)`` and require it to return True."""
        self._delegate("has", HasPredicate, expect, msg)
        return self

    def contains(self, expect: Any, *msg: str) -> Self:
        """Call ``value.contains(expect)`` and require it to return True."""
        self._delegate("contains", ContainsPredicate, expect, msg)
        return self

    def _delegate(self, name: str, capability: type, param: Any, msg: tuple[str, ...]) -> None:
        t = type_name(self._value)
        if not isinstance(self._value, capability) or not callable(getattr(self._value, name)):
            self._fail(f"method '{name}' not found on type {t}", msg=msg)
            return
        ret = getattr(self._value, name)(param)
        if not isinstance(ret, bool):
            self._fail(
                f"method '{name}' on type {t} should return only a bool, but it does not",
                msg=msg,
            )
            return
        if not ret:
            self._fail(
                f"method '{name}' on type {t} should return true when using param "
                f"{self.render(param)}, but it does not",
                msg=msg,
            )

    def in_sequence(self, expect: Sequence[Any], *msg: str) -> Self:
        if not _is_sequence(expect):
            self._fail("unsupported expect value", ("expected", self._typed(expect)), msg=msg)
            return self
        if not contains_element(expect, self._value):
            self._fail(
                "expected value to be in the sequence, but it is not",
                ("actual", self._typed(self._value)),
                ("expected", self._typed(expect)),
                msg=msg,
            )
        return self

    def not_in_sequence(self, expect: Sequence[Any], *msg: str) -> Self:
        if not _is_sequence(expect):
            self._fail("unsupported expect value", ("expected", self._typed(expect)), msg=msg)
            return self
        if contains_element(expect, self._value):
            self._fail(
                "expected value not to be in the sequence, but it is",
                ("actual", self._typed(self._value)),
                ("expected", self._typed(expect)),
                msg=msg,
            )
        return self

    def in_map_keys(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        if not isinstance(expect, Mapping):
            self._fail("unsupported expect value", ("expected", self._typed(expect)), msg=msg)
            return self
        if not contains_element(list(expect.keys()), self._value):
            self._fail(
                "expected value to be one of the map keys, but it is not",
                ("actual", self._typed(self._value)),
                ("expected", self._typed(expect)),
                msg=msg,
            )
        return self

    def in_map_values(self, expect: Mapping[Any, Any], *msg: str) -> Self:
        if not isinstance(expect, Mapping):
            self._fail("unsupported expect value", ("expected", self._typed(expect)), msg=msg)
            return self
        if not contains_value(expect, self._value):
            self._fail(
                "expected value to be one of the map values, but it is not",
                ("actual", self._typed(self._value)),
                ("expected", self._typed(expect)),
                msg=msg,
            )
        return self

    def is_zero(self, *msg: str) -> Self:
        if not is_zero_value(self._value):
            self._fail(
                "expected value to be zero, but it is not",
                ("actual", self._typed(self._value)),
                msg=msg,
            )
        return self

    def is_not_zero(self, *msg: str) -> Self:
        if is_zero_value(self._value):
            self._fail(
                "expected value not to be zero, but it is",
                ("actual", self._typed(self._value)),
                msg=msg,
            )
        return self


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
