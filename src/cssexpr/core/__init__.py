"""Core evaluator: tokens, unit extraction, shunting-yard evaluation."""

from __future__ import annotations

__all__ = [
    "tokens",
    "units",
    "evaluator",
]
