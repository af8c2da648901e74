"""Enums shared across the evaluator, field policy and outer surfaces."""

from __future__ import annotations

from enum import Enum


class Unit(str, Enum):
    """Known CSS length/percentage suffixes.

    The evaluator extracts suffixes lexically and does not restrict them to
    this set; field presets use it to declare what they accept.
    """

    PX = "px"
    EM = "em"
    REM = "rem"
    PERCENT = "%"
    VW = "vw"
    VH = "vh"
    CH = "ch"
    NONE = "none"


UNITLESS = Unit.NONE.value

from cssexpr.model.value import CommitResult, ValueWithUnit  # noqa: E402

__all__ = ["Unit", "UNITLESS", "ValueWithUnit", "CommitResult"]
