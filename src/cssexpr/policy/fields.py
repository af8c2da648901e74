"""Numeric field policy — single source of truth for input fields.

A field evaluates its text on every keystroke to show validity, and again
on blur/enter to commit.  A commit that fails, or lands outside
``[min_value, max_value]``, reverts to the last committed value.  A bare
number keeps the field's active unit instead of clearing it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from cssexpr.core.evaluator import evaluate
from cssexpr.errors import InvalidExpression
from cssexpr.model import Unit, UNITLESS
from cssexpr.model.value import CommitResult, ValueWithUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Range and unit constraints for one numeric input."""

    name: str
    min_value: float = -math.inf
    max_value: float = math.inf
    allowed_units: tuple[str, ...] = (Unit.PX.value,)
    default_unit: str = Unit.PX.value

    def __post_init__(self) -> None:
        if self.min_value > self.max_value:
            raise ValueError(
                f"{self.name}: min_value must be <= max_value, "
                f"got [{self.min_value}, {self.max_value}]"
            )
        if self.default_unit not in self.allowed_units:
            raise ValueError(
                f"{self.name}: default_unit {self.default_unit!r} "
                f"not in allowed_units {self.allowed_units}"
            )

    def in_range(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "min_value": self.min_value,
            "max_value": self.max_value,
            "allowed_units": list(self.allowed_units),
            "default_unit": self.default_unit,
        }


# ── presets ─────────────────────────────────────────────────────────

FONT_SIZE = FieldSpec(
    name="font-size",
    min_value=1,
    max_value=1000,
    allowed_units=(Unit.PX.value,),
    default_unit=Unit.PX.value,
)

LINE_HEIGHT = FieldSpec(
    name="line-height",
    min_value=0,
    max_value=10,
    allowed_units=(UNITLESS, Unit.PX.value, Unit.EM.value, Unit.REM.value, Unit.PERCENT.value),
    default_unit=UNITLESS,
)

LETTER_SPACING = FieldSpec(
    name="letter-spacing",
    min_value=-50,
    max_value=50,
    allowed_units=(
        Unit.PX.value,
        Unit.EM.value,
        Unit.REM.value,
        Unit.PERCENT.value,
        Unit.CH.value,
    ),
    default_unit=Unit.PX.value,
)

FIELDS: dict[str, FieldSpec] = {
    f.name: f for f in (FONT_SIZE, LINE_HEIGHT, LETTER_SPACING)
}


def get_field(name: str) -> FieldSpec:
    """Look up a preset by name (``font-size``, ``line-height``, ...)."""
    try:
        return FIELDS[name]
    except KeyError:
        known = ", ".join(sorted(FIELDS))
        raise KeyError(f"unknown field {name!r} (known: {known})") from None


# ── operations ──────────────────────────────────────────────────────


def check(expression: str, field: FieldSpec) -> bool:
    """Keystroke validity: evaluates and is within the field's range."""
    try:
        result = evaluate(expression)
    except InvalidExpression:
        return False
    return field.in_range(result.value)


def commit(
    expression: str,
    current: ValueWithUnit,
    field: FieldSpec,
) -> CommitResult:
    """Commit *expression* to a field currently holding *current*.

    Returns the new value on success.  An invalid expression, a value out of
    range or a unit outside ``allowed_units`` returns *current* instead, with
    ``reverted=True`` and the reason in ``error``.
    """
    try:
        result = evaluate(expression)
    except InvalidExpression as e:
        logger.debug(f"{field.name}: reverting to {current} ({e.reason})")
        return CommitResult(value=current, valid=False, reverted=True, error=str(e))

    if not field.in_range(result.value):
        error = (
            f"{result.value} is outside [{field.min_value}, {field.max_value}]"
        )
        logger.debug(f"{field.name}: reverting to {current} ({error})")
        return CommitResult(value=current, valid=False, reverted=True, error=error)

    if not result.is_unitless and result.unit not in field.allowed_units:
        error = f"unit {result.unit!r} not in allowed_units {field.allowed_units}"
        logger.debug(f"{field.name}: reverting to {current} ({error})")
        return CommitResult(value=current, valid=False, reverted=True, error=error)

    unit = current.unit if result.is_unitless else result.unit
    committed = ValueWithUnit(result.value, unit)
    logger.debug(f"{field.name}: committed {committed}")
    return CommitResult(value=committed, valid=True)


def switch_unit(
    current: ValueWithUnit,
    unit: str,
    field: FieldSpec,
    *,
    pending_expression: Optional[str] = None,
) -> ValueWithUnit:
    """Apply a unit picked from the field's unit selector.

    If *pending_expression* (uncommitted text) is valid, its value is taken;
    otherwise the current value is kept.  Either way the new unit applies.

    Raises
    ------
    ValueError
        If *unit* is not one of the field's ``allowed_units``.
    """
    if unit not in field.allowed_units:
        raise ValueError(
            f"{field.name}: unit {unit!r} not in allowed_units {field.allowed_units}"
        )
    if pending_expression is not None and check(pending_expression, field):
        return ValueWithUnit(evaluate(pending_expression).value, unit)
    return current.with_unit(unit)
