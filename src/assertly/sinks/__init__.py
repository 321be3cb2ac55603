"""Reporting sinks for assertly.

The pytest sink lives in `assertly.sinks.pytest_plugin` and is loaded by
pytest through the plugin entry point.
"""

from assertly.sinks.sink import ListSink, NullSink, ReportingSink
from assertly.sinks.types import FailureRecord

__all__ = ["ReportingSink", "ListSink", "NullSink", "FailureRecord"]
