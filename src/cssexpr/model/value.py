"""ValueWithUnit — a finite number plus the CSS unit it was written with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cssexpr.core.units import format_value


@dataclass(frozen=True, slots=True)
class ValueWithUnit:
    """Immutable evaluation result.

    ``unit`` is the lower-cased suffix or ``"none"`` for unitless values.
    """

    value: float
    unit: str = "none"

    @property
    def is_unitless(self) -> bool:
        return self.unit == "none"

    @property
    def css(self) -> str:
        return format_value(self)

    def with_unit(self, unit: str) -> "ValueWithUnit":
        return ValueWithUnit(self.value, unit)

    def __str__(self) -> str:
        return self.css

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {"value": self.value, "unit": self.unit, "css": self.css}


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Outcome of committing a field's text.

    On failure ``value`` is the previously committed value and ``reverted``
    is set.
    """

    value: ValueWithUnit
    valid: bool
    reverted: bool = False
    error: Optional[str] = None

    def to_dict(self) -> dict:
        d: dict = {
            "value": self.value.to_dict(),
            "valid": self.valid,
            "reverted": self.reverted,
        }
        if self.error:
            d["error"] = self.error
        return d
