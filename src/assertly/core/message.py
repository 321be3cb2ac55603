"""Failure message formatting.

Every failure block has the same layout::

    Assertion failed: expected slice to contain sub-slice, but it is not
      actual: [1, 2, 3, 4]
         sub: [2, 4]
     message: "index is 0"

Labels are right-aligned so that the colons line up.
"""

from __future__ import annotations

from collections.abc import Sequence

from assertly.core.render import quote

PREFIX = "Assertion failed: "
LABEL_WIDTH = 8

# (label, rendered value)
Field = tuple[str, str]


def format_field(label: str, value: str) -> str:
    return f"{label:>{LABEL_WIDTH}}: {value}"


def format_annotations(annotations: Sequence[str]) -> str:
    return quote(", ".join(annotations))


def format_failure(
    summary: str,
    fields: Sequence[Field] = (),
    annotations: Sequence[str] = (),
) -> str:
    """Build the complete failure text.

    Args:
        summary: One-line description of what was expected.
        fields: Labelled values, e.g. ``("actual", "[1, 2]")``, in display order.
        annotations: Caller-supplied strings; joined with ", " into a trailing
            ``message`` line when present.
    """
    lines = [PREFIX + summary]
    lines.extend(format_field(label, value) for label, value in fields)
    if annotations:
        lines.append(format_field("message", format_annotations(annotations)))
    return "\n".join(lines)
