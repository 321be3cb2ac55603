"""Fluent assertions that report to a pluggable sink.

Usage:
    from assertly import ListSink, that_number, that_slice

    sink = ListSink()
    that_number(sink, 5).is_positive().is_between(1, 10)
    that_slice(sink, [1, 2, 3]).require().contains_slice([2, 3])
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from assertly.assertions import (
    AnyAssertion,
    BoolAssertion,
    ErrorAssertion,
    MapAssertion,
    NumberAssertion,
    RaisesAssertion,
    SliceAssertion,
    StringAssertion,
)
from assertly.assertions.raises import raises, that_callable
from assertly.core.render import AssertionOption, output_value_as_json
from assertly.errors import AssertionAborted, AssertlyError
from assertly.expect import Expect
from assertly.sinks import FailureRecord, ListSink, NullSink, ReportingSink
from assertly.types import AssertionMode, Number


def that(sink: ReportingSink, value: Any, *options: AssertionOption) -> AnyAssertion:
    return AnyAssertion(sink, value, *options)


def that_bool(sink: ReportingSink, value: bool, *options: AssertionOption) -> BoolAssertion:
    return BoolAssertion(sink, value, *options)


def that_number(sink: ReportingSink, value: Number, *options: AssertionOption) -> NumberAssertion:
    return NumberAssertion(sink, value, *options)


def that_string(sink: ReportingSink, value: str, *options: AssertionOption) -> StringAssertion:
    return StringAssertion(sink, value, *options)


def that_slice(
    sink: ReportingSink, value: Sequence[Any] | None, *options: AssertionOption
) -> SliceAssertion:
    return SliceAssertion(sink, value, *options)


def that_map(
    sink: ReportingSink, value: Mapping[Any, Any] | None, *options: AssertionOption
) -> MapAssertion:
    return MapAssertion(sink, value, *options)


def that_error(
    sink: ReportingSink, value: BaseException | None, *options: AssertionOption
) -> ErrorAssertion:
    return ErrorAssertion(sink, value, *options)


__all__ = [
    "that",
    "that_bool",
    "that_number",
    "that_string",
    "that_slice",
    "that_map",
    "that_error",
    "that_callable",
    "raises",
    "Expect",
    "output_value_as_json",
    "AssertionMode",
    "AssertionAborted",
    "AssertlyError",
    "ReportingSink",
    "ListSink",
    "NullSink",
    "FailureRecord",
    "AnyAssertion",
    "BoolAssertion",
    "NumberAssertion",
    "StringAssertion",
    "SliceAssertion",
    "MapAssertion",
    "ErrorAssertion",
    "RaisesAssertion",
]
