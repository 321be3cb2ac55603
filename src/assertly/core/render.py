"""Value rendering for failure messages.

Two modes are supported per assertion chain:

- structural (default): Python ``repr`` with non-finite floats shown as
  ``+Inf``, ``-Inf`` and ``NaN``.
- JSON: compact JSON produced by pydantic-core, which understands
  dataclasses, pydantic models, sets and datetimes. Values that cannot be
  serialized render as the serialization error text.

Rendering never raises.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from typing import Any, Callable

from pydantic_core import PydanticSerializationError, to_json


@dataclass(frozen=True)
class RenderConfig:
    """Per-chain rendering configuration."""

    output_value_as_json: bool = False

    def render(self, value: Any) -> str:
        """Render `value` according to the configured mode."""
        if self.output_value_as_json:
            return render_json(value)
        return render_structural(value)


AssertionOption = Callable[[RenderConfig], RenderConfig]


def output_value_as_json(enable: bool = True) -> AssertionOption:
    """Option: render values as JSON instead of ``repr``."""

    def apply(config: RenderConfig) -> RenderConfig:
        return replace(config, output_value_as_json=enable)

    return apply


def build_config(options: tuple[AssertionOption, ...], base: RenderConfig | None = None) -> RenderConfig:
    config = base or RenderConfig()
    for option in options:
        config = option(config)
    return config


def format_number(v: Any) -> str:
    """Render a number; floats keep their repr, non-finite floats use tokens."""
    if isinstance(v, float):
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "+Inf" if v > 0 else "-Inf"
        return repr(v)
    return str(v)


def quote(s: str) -> str:
    """Double-quoted string literal with JSON escaping."""
    return json.dumps(s, ensure_ascii=False)


def render_structural(value: Any, _seen: frozenset[int] = frozenset()) -> str:
    if isinstance(value, float):
        return format_number(value)
    if type(value) in (list, tuple, dict):
        if id(value) in _seen:
            # Self-reference; same tokens repr() uses.
            return {list: "[...]", tuple: "(...)", dict: "{...}"}[type(value)]
        _seen = _seen | {id(value)}
    if type(value) is list:
        return "[" + ", ".join(render_structural(v, _seen) for v in value) + "]"
    if type(value) is tuple:
        if len(value) == 1:
            return "(" + render_structural(value[0], _seen) + ",)"
        return "(" + ", ".join(render_structural(v, _seen) for v in value) + ")"
    if type(value) is dict:
        items = (
            f"{render_structural(k, _seen)}: {render_structural(v, _seen)}"
            for k, v in value.items()
        )
        return "{" + ", ".join(items) + "}"
    try:
        return repr(value)
    except Exception as e:
        # A broken __repr__ must not break failure reporting.
        return f"<unrepresentable {type(value).__name__}: {e}>"


def render_json(value: Any) -> str:
    try:
        return to_json(_json_safe(value)).decode()
    except (PydanticSerializationError, ValueError, RecursionError) as e:
        return str(e)


def _json_safe(value: Any, _seen: frozenset[int] = frozenset()) -> Any:
    # JSON has no literal for NaN/Inf; use the structural tokens as strings.
    if isinstance(value, float) and not math.isfinite(value):
        return format_number(value)
    if isinstance(value, (list, tuple, dict)):
        if id(value) in _seen:
            return "{...}" if isinstance(value, dict) else "[...]"
        _seen = _seen | {id(value)}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v, _seen) for v in value]
    if isinstance(value, dict):
        return {k: _json_safe(v, _seen) for k, v in value.items()}
    return value


def typed(value: Any, config: RenderConfig | None = None) -> str:
    """``(typename) value`` form used by the generic wrapper."""
    config = config or RenderConfig()
    return f"({type_name(value)}) {config.render(value)}"


def type_name(value_or_type: Any) -> str:
    t = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    if t.__module__ in ("builtins", "__main__"):
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"
