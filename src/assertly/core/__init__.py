"""Comparison engine, rendering and the assertion base class."""

from assertly.core.assertion import Assertion
from assertly.core.equality import Multiset, deep_equal
from assertly.core.message import format_failure
from assertly.core.render import RenderConfig, output_value_as_json

__all__ = [
    "Assertion",
    "Multiset",
    "deep_equal",
    "format_failure",
    "RenderConfig",
    "output_value_as_json",
]
