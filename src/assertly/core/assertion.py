"""Base class shared by all assertion wrappers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, Self, TypeVar

from assertly.core.message import Field, format_failure
from assertly.core.render import AssertionOption, RenderConfig, build_config
from assertly.errors import AssertionAborted
from assertly.sinks.sink import ReportingSink
from assertly.types import AssertionMode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Assertion(Generic[T]):
    """A value paired with the sink its failures are reported to.

    Wrappers start in RECORD mode, where a failing predicate records the
    failure and returns so the chain can continue. ``require()`` returns a
    wrapper in ABORT mode, where a failing predicate stops the test.

    Usage:
        that_number(sink, 5).is_positive().is_between(1, 10)
        that_number(sink, 5).require().is_positive("index is 0")
    """

    def __init__(
        self,
        sink: ReportingSink,
        value: T,
        *options: AssertionOption,
        mode: AssertionMode = AssertionMode.RECORD,
        config: RenderConfig | None = None,
    ):
        self._sink = sink
        self._value = value
        self._mode = mode
        self._config = build_config(options, base=config)

    @property
    def value(self) -> T:
        return self._value

    @property
    def mode(self) -> AssertionMode:
        return self._mode

    @property
    def config(self) -> RenderConfig:
        return self._config

    def require(self) -> Self:
        """Return this assertion in abort mode.

        Every later failure on the returned chain stops the test
        immediately. There is no way back to record mode.
        """
        if self._mode is AssertionMode.ABORT:
            return self
        return type(self)(
            self._sink, self._value, mode=AssertionMode.ABORT, config=self._config
        )

    must = require

    def render(self, value: Any) -> str:
        return self._config.render(value)

    def _fail(self, summary: str, *fields: Field, msg: Sequence[str] = ()) -> None:
        """Deliver exactly one failure to the sink."""
        __tracebackhide__ = True
        self._sink.mark_step_boundary()
        message = format_failure(summary, fields, msg)
        logger.debug("assertion failed (%s): %s", self._mode.value, summary)
        if self._mode is AssertionMode.ABORT:
            self._sink.abort_now(message)
            # abort_now must not return; refuse to continue the chain if it does.
            raise AssertionAborted(message)
        self._sink.record_failure(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render(self._value)}, mode={self._mode.value})"
