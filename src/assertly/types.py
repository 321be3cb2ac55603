"""Core type definitions for assertly.

This module contains enums and type aliases used across the codebase.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Union


class AssertionMode(str, Enum):
    """How a failing predicate is delivered to the sink."""

    RECORD = "record"  # record_failure -> chain continues
    ABORT = "abort"  # abort_now -> test stops immediately


class Ordering(int, Enum):
    """Result of comparing two numbers."""

    LT = -1
    EQ = 0
    GT = 1


class FailureKind(str, Enum):
    """Kind of a delivered failure, mirrors AssertionMode."""

    ERROR = "error"
    FATAL = "fatal"


# Numbers accepted by the number wrapper (bool is rejected at runtime)
Number = Union[int, float]

# Element predicate used by all_matches / any_matches / none_matches
ElementPredicate = Callable[[Any], bool]

# Key function used by all_unique_by
KeyFunction = Callable[[Any], Any]
