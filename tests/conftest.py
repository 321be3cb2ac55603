"""Shared test fixtures for assertly tests."""

from __future__ import annotations

import pytest

from assertly.sinks.sink import ListSink, NullSink


# =============================================================================
# Sink Fixtures
# =============================================================================


@pytest.fixture
def sink() -> ListSink:
    """Fresh ListSink with no failures."""
    return ListSink()


@pytest.fixture
def null_sink() -> NullSink:
    """NullSink that drops recorded failures."""
    return NullSink()


# =============================================================================
# Value Fixtures
# =============================================================================


@pytest.fixture
def nested() -> dict:
    """Nested structure used by equality and rendering tests."""
    return {"name": "a", "tags": ["x", "y"], "pos": (1, 2), "meta": {"n": 1.5}}
