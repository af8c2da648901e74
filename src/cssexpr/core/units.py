"""cssexpr.core.units

Lexical unit handling: split the trailing suffix off an expression and
format numbers back into text that re-evaluates to the same value.
"""

from __future__ import annotations

import re
from decimal import Decimal

# Trailing run of letters or '%', e.g. "px", "REM", "%".
_UNIT_RE = re.compile(r"([a-z%]+)$", re.IGNORECASE | re.ASCII)

NO_UNIT = "none"


def split_unit(expression: str) -> tuple[str, str]:
    """Return ``(math_part, unit)`` for a raw expression.

    The expression is trimmed first; ``unit`` is lower-cased, or ``"none"``
    when there is no suffix.
    """
    expr = expression.strip()
    m = _UNIT_RE.search(expr)
    if m is None:
        return expr, NO_UNIT
    return expr[: m.start()], m.group(1).lower()


def format_number(value: float) -> str:
    """Shortest positional decimal for *value* (no exponent notation).

    ``float(format_number(v)) == v`` for every finite float.
    """
    if value == 0:
        return "0"
    s = format(Decimal(repr(float(value))), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def format_css(value: float, unit: str) -> str:
    """Render a number and unit as CSS text (no suffix when unitless)."""
    number = format_number(value)
    if not unit or unit == NO_UNIT:
        return number
    return number + unit


def format_value(value_with_unit) -> str:
    """Render a ``ValueWithUnit`` as CSS text, e.g. ``"-7.5px"``.

    ``evaluate(format_value(v)).value == v.value`` for any evaluated ``v``.
    """
    return format_css(value_with_unit.value, value_with_unit.unit)
