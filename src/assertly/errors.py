"""Exceptions raised by assertly.

Assertion failures are never raised by the wrappers themselves; they are
handed to a reporting sink. The only exception that escapes a predicate is
the one a sink uses to stop the current test in abort mode.
"""

from __future__ import annotations


class AssertlyError(Exception):
    """Base class for all assertly exceptions."""


class AssertionAborted(AssertlyError, AssertionError):
    """Raised to unwind the current test after a fatal assertion failure.

    Subclasses AssertionError so that test runners report it as a regular
    test failure rather than an error.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
