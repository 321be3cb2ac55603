"""Reporting sink protocol and implementations for assertly.

A ReportingSink is the only thing an assertion needs from its host test
framework: a way to record a failure and keep going, and a way to stop the
current test right now.
"""

from __future__ import annotations

from typing import NoReturn, Protocol, runtime_checkable

from assertly.errors import AssertionAborted
from assertly.sinks.types import FailureRecord
from assertly.types import FailureKind


@runtime_checkable
class ReportingSink(Protocol):
    """Protocol for reporting sinks.

    Any class implementing this protocol can receive assertion failures.
    Examples include the pytest sink, in-memory collectors, or test mocks.
    """

    def mark_step_boundary(self) -> None:
        """Hook called before a failure is delivered.

        Hosts can use it to attribute the failure to the caller's frame.
        A no-op implementation is valid.
        """
        ...

    def record_failure(self, message: str) -> None:
        """Record a non-fatal failure.

        Must return normally; the assertion chain continues and the host is
        expected to fail the test later.
        """
        ...

    def abort_now(self, message: str) -> NoReturn:
        """Deliver a fatal failure and unwind the current test.

        Must not return.
        """
        ...


class ListSink:
    """A sink that collects failures into a list.

    Fatal failures are recorded too, then AssertionAborted is raised.

    Example:
        sink = ListSink()
        that_number(sink, 0).is_between(1, 10)
        assert len(sink) == 1
    """

    def __init__(self) -> None:
        self.failures: list[FailureRecord] = []
        self.boundaries = 0

    def mark_step_boundary(self) -> None:
        self.boundaries += 1

    def record_failure(self, message: str) -> None:
        """Append a non-fatal failure."""
        self.failures.append(FailureRecord(kind=FailureKind.ERROR, message=message))

    def abort_now(self, message: str) -> NoReturn:
        """Append a fatal failure and raise AssertionAborted."""
        self.failures.append(FailureRecord(kind=FailureKind.FATAL, message=message))
        raise AssertionAborted(message)

    @property
    def messages(self) -> list[str]:
        return [f.message for f in self.failures]

    def render(self) -> str:
        """All failures as ``error# ...`` / ``fatal# ...`` lines."""
        return "\n".join(f.render() for f in self.failures)

    def clear(self) -> None:
        """Clear all collected failures."""
        self.failures.clear()
        self.boundaries = 0

    def __len__(self) -> int:
        """Return the number of collected failures."""
        return len(self.failures)


class NullSink:
    """A sink that discards non-fatal failures.

    Fatal failures still raise, since abort_now must never return.
    """

    def mark_step_boundary(self) -> None:
        pass

    def record_failure(self, message: str) -> None:
        """Discard the failure."""
        pass

    def abort_now(self, message: str) -> NoReturn:
        raise AssertionAborted(message)
