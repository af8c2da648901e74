"""Error kinds raised by the evaluator."""

from __future__ import annotations


class InvalidExpression(ValueError):
    """The input could not be evaluated to a finite value.

    Covers unparseable tokens, unbalanced parentheses, division by zero,
    non-finite results and operand/operator underflow.  No partial result
    is ever attached.
    """

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid expression: {reason}")
