"""Assertions on strings.

String values are always shown quoted in messages, regardless of the
chain's render mode, so leading and trailing whitespace stays visible.
"""

from __future__ import annotations

import base64
import binascii
import ipaddress
import json
import re
from typing import Any, Self
from urllib.parse import urlparse

from assertly.core.assertion import Assertion
from assertly.core.equality import deep_equal
from assertly.core.render import quote, type_name

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}")
_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


def _parse_json(s: str) -> Any:
    # Numbers are compared as floats, so 1 and 1.0 are JSON-equal.
    return json.loads(s, parse_int=float)


def _is_url(s: str) -> bool:
    try:
        parsed = urlparse(s)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def _is_ip(s: str) -> bool:
    try:
        ipaddress.ip_address(s)
    except ValueError:
        return False
    return True


def _is_base64(s: str) -> bool:
    try:
        base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


class StringAssertion(Assertion[str]):
    """Assertions on a string."""

    @property
    def _actual(self) -> tuple[str, str]:
        return ("actual", quote(self._value))

    def _checked(self, msg: tuple[str, ...], *expect: Any) -> bool:
        if not isinstance(self._value, str):
            self._fail(
                "unsupported value",
                ("actual", f"({type_name(self._value)}) {self.render(self._value)}"),
                msg=msg,
            )
            return False
        for e in expect:
            if not isinstance(e, str):
                self._fail(
                    "unsupported expect value",
                    ("expected", f"({type_name(e)}) {self.render(e)}"),
                    msg=msg,
                )
                return False
        return True

    def length(self, length: int, *msg: str) -> Self:
        if self._checked(msg) and len(self._value) != length:
            self._fail(
                f"expected string to have length {length}, but it has length {len(self._value)}",
                self._actual,
                msg=msg,
            )
        return self

    def equal(self, expect: str, *msg: str) -> Self:
        if self._checked(msg, expect) and self._value != expect:
            self._fail(
                "expected strings to be equal, but they are not",
                self._actual,
                ("expected", quote(expect)),
                msg=msg,
            )
        return self

    def not_equal(self, expect: str, *msg: str) -> Self:
        if self._checked(msg, expect) and self._value == expect:
            self._fail(
                "expected strings to be different, but they are equal",
                self._actual,
                ("expected", quote(expect)),
                msg=msg,
            )
        return self

    def equal_fold(self, expect: str, *msg: str) -> Self:
        """Case-insensitive equality."""
        if self._checked(msg, expect) and self._value.casefold() != expect.casefold():
            self._fail(
                "expected strings to be equal (case-insensitive), but they are not",
                self._actual,
                ("expected", quote(expect)),
                msg=msg,
            )
        return self

    def json_equal(self, expect: str, *msg: str) -> Self:
        """Parse both sides as JSON and compare the parsed structures.

        A parse failure is reported on its own and no comparison is made.
        """
        if not self._checked(msg, expect):
            return self
        try:
            got = _parse_json(self._value)
        except ValueError as e:
            self._fail(
                "expected strings to be JSON-equal, but failed to unmarshal actual value",
                self._actual,
                ("error", quote(str(e))),
                msg=msg,
            )
            return self
        try:
            want = _parse_json(expect)
        except ValueError as e:
            self._fail(
                "expected strings to be JSON-equal, but failed to unmarshal expected value",
                ("expected", quote(expect)),
                ("error", quote(str(e))),
                msg=msg,
            )
            return self
        if not deep_equal(got, want):
            self._fail(
                "expected strings to be JSON-equal, but they are not",
                self._actual,
                ("expected", quote(expect)),
                msg=msg,
            )
        return self

    def matches(self, pattern: str, *msg: str) -> Self:
        """Search the string for `pattern` (not anchored)."""
        if not self._checked(msg, pattern):
            return self
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            self._fail(
                "expected string to match the pattern, but the pattern is invalid",
                self._actual,
                ("pattern", quote(pattern)),
                ("error", quote(str(e))),
                msg=msg,
            )
            return self
        if compiled.search(self._value) is None:
            self._fail(
                "expected string to match the pattern, but it does not",
                self._actual,
                ("pattern", quote(pattern)),
                msg=msg,
            )
        return self

    def has_prefix(self, prefix: str, *msg: str) -> Self:
        if self._checked(msg, prefix) and not self._value.startswith(prefix):
            self._fail(
                "expected string to start with the specified prefix, but it does not",
                self._actual,
                ("prefix", quote(prefix)),
                msg=msg,
            )
        return self

    def has_suffix(self, suffix: str, *msg: str) -> Self:
        if self._checked(msg, suffix) and not self._value.endswith(suffix):
            self._fail(
                "expected string to end with the specified suffix, but it does not",
                self._actual,
                ("suffix", quote(suffix)),
                msg=msg,
            )
        return self

    def contains(self, substr: str, *msg: str) -> Self:
        if self._checked(msg, substr) and substr not in self._value:
            self._fail(
                "expected string to contain the specified substring, but it does not",
                self._actual,
                ("substr", quote(substr)),
                msg=msg,
            )
        return self

    def is_empty(self, *msg: str) -> Self:
        if self._checked(msg) and self._value != "":
            self._fail("expected string to be empty, but it is not", self._actual, msg=msg)
        return self

    def is_not_empty(self, *msg: str) -> Self:
        if self._checked(msg) and self._value == "":
            self._fail("expected string to be non-empty, but it is empty", self._actual, msg=msg)
        return self

    def is_blank(self, *msg: str) -> Self:
        """Empty or whitespace only."""
        if self._checked(msg) and self._value.strip() != "":
            self._fail(
                "expected string to contain only whitespace, but it does not",
                self._actual,
                msg=msg,
            )
        return self

    def is_not_blank(self, *msg: str) -> Self:
        if self._checked(msg) and self._value.strip() == "":
            self._fail("expected string to be non-blank, but it is blank", self._actual, msg=msg)
        return self

    def is_lower_case(self, *msg: str) -> Self:
        if self._checked(msg) and self._value.lower() != self._value:
            self._fail("expected string to be all lowercase, but it is not", self._actual, msg=msg)
        return self

    def is_upper_case(self, *msg: str) -> Self:
        if self._checked(msg) and self._value.upper() != self._value:
            self._fail("expected string to be all uppercase, but it is not", self._actual, msg=msg)
        return self

    def is_numeric(self, *msg: str) -> Self:
        if self._checked(msg) and not self._value.isdecimal():
            self._fail(
                "expected string to contain only digits, but it does not", self._actual, msg=msg
            )
        return self

    def is_alpha(self, *msg: str) -> Self:
        if self._checked(msg) and not self._value.isalpha():
            self._fail(
                "expected string to contain only letters, but it does not", self._actual, msg=msg
            )
        return self

    def is_alpha_numeric(self, *msg: str) -> Self:
        if self._checked(msg) and not self._value.isalnum():
            self._fail(
                "expected string to contain only letters and digits, but it does not",
                self._actual,
                msg=msg,
            )
        return self

    def is_email(self, *msg: str) -> Self:
        if self._checked(msg) and _EMAIL_RE.fullmatch(self._value) is None:
            self._fail("expected string to be a valid email, but it is not", self._actual, msg=msg)
        return self

    def is_url(self, *msg: str) -> Self:
        if self._checked(msg) and not _is_url(self._value):
            self._fail("expected string to be a valid URL, but it is not", self._actual, msg=msg)
        return self

    def is_ip(self, *msg: str) -> Self:
        """IPv4 or IPv6 address."""
        if self._checked(msg) and not _is_ip(self._value):
            self._fail("expected string to be a valid IP, but it is not", self._actual, msg=msg)
        return self

    def is_hex(self, *msg: str) -> Self:
        if self._checked(msg) and _HEX_RE.fullmatch(self._value) is None:
            self._fail(
                "expected string to be a valid hexadecimal, but it is not", self._actual, msg=msg
            )
        return self

    def is_base64(self, *msg: str) -> Self:
        if self._checked(msg) and not _is_base64(self._value):
            self._fail("expected string to be a valid Base64, but it is not", self._actual, msg=msg)
        return self
