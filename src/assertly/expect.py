"""Factories bound to a sink and a set of default options."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable

from assertly.assertions.boolean import BoolAssertion
from assertly.assertions.error import ErrorAssertion
from assertly.assertions.map import MapAssertion
from assertly.assertions.number import NumberAssertion
from assertly.assertions.raises import RaisesAssertion
from assertly.assertions.raises import raises as _raises
from assertly.assertions.slice import SliceAssertion
from assertly.assertions.string import StringAssertion
from assertly.assertions.value import AnyAssertion
from assertly.core.render import AssertionOption, RenderConfig, build_config
from assertly.sinks.sink import ReportingSink
from assertly.types import Number


class Expect:
    """Bundle a sink with default rendering options.

    Options passed to a factory method are applied on top of the defaults.

    Example:
        expect = Expect(sink, output_value_as_json())
        expect.that_map({"a": 1}).contains_key("a")
    """

    def __init__(self, sink: ReportingSink, *options: AssertionOption):
        self.sink = sink
        self.config: RenderConfig = build_config(options)

    def _config(self, options: tuple[AssertionOption, ...]) -> RenderConfig:
        return build_config(options, base=self.config)

    def that(self, value: Any, *options: AssertionOption) -> AnyAssertion:
        return AnyAssertion(self.sink, value, config=self._config(options))

    def that_bool(self, value: bool, *options: AssertionOption) -> BoolAssertion:
        return BoolAssertion(self.sink, value, config=self._config(options))

    def that_number(self, value: Number, *options: AssertionOption) -> NumberAssertion:
        return NumberAssertion(self.sink, value, config=self._config(options))

    def that_string(self, value: str, *options: AssertionOption) -> StringAssertion:
        return StringAssertion(self.sink, value, config=self._config(options))

    def that_slice(self, value: Sequence[Any] | None, *options: AssertionOption) -> SliceAssertion:
        return SliceAssertion(self.sink, value, config=self._config(options))

    def that_map(self, value: Mapping[Any, Any] | None, *options: AssertionOption) -> MapAssertion:
        return MapAssertion(self.sink, value, config=self._config(options))

    def that_error(self, value: BaseException | None, *options: AssertionOption) -> ErrorAssertion:
        return ErrorAssertion(self.sink, value, config=self._config(options))

    def that_callable(self, fn: Callable[[], Any], *options: AssertionOption) -> RaisesAssertion:
        return RaisesAssertion(self.sink, fn, config=self._config(options))

    def raises(self, fn: Callable[[], Any], pattern: str = "", *msg: str) -> Exception | None:
        return _raises(self.sink, fn, pattern, *msg)
