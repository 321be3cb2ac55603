"""Pytest plugin for assertly.

Provides:
- Fixture: assert_sink (a PytestSink checked at teardown)
- Fixture: expect (an Expect bound to assert_sink)
- Ini option: assertly_json_output
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import NoReturn

import pytest

from assertly.core.render import output_value_as_json
from assertly.expect import Expect
from assertly.sinks.types import FailureRecord
from assertly.types import FailureKind

logger = logging.getLogger(__name__)

JSON_OUTPUT_INI = "assertly_json_output"


class PytestSink:
    """Sink that reports to the running pytest test.

    Recorded failures are collected and reported together by `check()`;
    fatal failures fail the test immediately.
    """

    def __init__(self) -> None:
        self.failures: list[FailureRecord] = []

    def mark_step_boundary(self) -> None:
        # pytest trims frames marked with __tracebackhide__; nothing to do here.
        pass

    def record_failure(self, message: str) -> None:
        self.failures.append(FailureRecord(kind=FailureKind.ERROR, message=message))

    def abort_now(self, message: str) -> NoReturn:
        pytest.fail(message, pytrace=False)

    def check(self) -> None:
        """Fail the current test if any failure was recorded."""
        __tracebackhide__ = True
        if not self.failures:
            return
        count = len(self.failures)
        body = "\n\n".join(f.message for f in self.failures)
        pytest.fail(f"{count} assertion(s) failed:\n\n{body}", pytrace=False)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options for assertly."""
    parser.addini(
        JSON_OUTPUT_INI,
        type="bool",
        default=False,
        help="Render values as JSON in failures from the expect fixture (default: false)",
    )


@pytest.fixture
def assert_sink(request: pytest.FixtureRequest) -> Iterator[PytestSink]:
    """Provide a PytestSink; recorded failures fail the test at teardown."""
    sink = PytestSink()
    yield sink
    logger.debug("checking %d recorded failure(s) for %s", len(sink.failures), request.node.nodeid)
    sink.check()


@pytest.fixture
def expect(request: pytest.FixtureRequest, assert_sink: PytestSink) -> Expect:
    """Provide an Expect bound to assert_sink, honoring assertly_json_output."""
    if request.config.getini(JSON_OUTPUT_INI):
        return Expect(assert_sink, output_value_as_json())
    return Expect(assert_sink)
