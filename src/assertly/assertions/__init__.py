"""Typed assertion wrappers."""

from assertly.assertions.boolean import BoolAssertion
from assertly.assertions.error import ErrorAssertion
from assertly.assertions.map import MapAssertion
from assertly.assertions.number import NumberAssertion
from assertly.assertions.raises import RaisesAssertion
from assertly.assertions.slice import SliceAssertion
from assertly.assertions.string import StringAssertion
from assertly.assertions.value import AnyAssertion, ContainsPredicate, HasPredicate

__all__ = [
    "AnyAssertion",
    "BoolAssertion",
    "NumberAssertion",
    "StringAssertion",
    "SliceAssertion",
    "MapAssertion",
    "ErrorAssertion",
    "RaisesAssertion",
    "HasPredicate",
    "ContainsPredicate",
]
