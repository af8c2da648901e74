"""cssexpr.core.evaluator

Two-pass evaluation of CSS-value expressions such as ``"-1.5 * (2 + 3)px"``:

1. strip the trailing unit, drop whitespace, tokenize, fold unary minus;
2. shunting-yard conversion to postfix;
3. postfix evaluation on a numeric stack.

Pure and stateless: every call allocates its own token list and stacks.
Failures raise ``InvalidExpression``; nothing here logs.
"""

from __future__ import annotations

import math
import re

from cssexpr.core.tokens import Token, TokenKind, fold_unary, tokenize
from cssexpr.core.units import split_unit
from cssexpr.errors import InvalidExpression
from cssexpr.model.value import ValueWithUnit

_WHITESPACE_RE = re.compile(r"\s+")

PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}
NEGATE_PRECEDENCE = 3


def _precedence(tok: Token) -> int:
    if tok.kind is TokenKind.NEGATE:
        return NEGATE_PRECEDENCE
    return PRECEDENCE[tok.symbol]


# ── infix → postfix ─────────────────────────────────────────────────


def to_postfix(tokens: list[Token], expression: str = "") -> list[Token]:
    """Shunting-yard conversion.

    Tracks whether an operand or an operator is expected next, so sequences
    such as ``2 +``, ``* 3``, ``()`` or ``(2)(3)`` are rejected instead of
    being coerced.
    """
    if not tokens:
        raise InvalidExpression(expression, "empty expression")

    output: list[Token] = []
    stack: list[Token] = []
    expect_operand = True

    for tok in tokens:
        if tok.kind is TokenKind.NUMBER:
            if not expect_operand:
                raise InvalidExpression(expression, "missing operator before number")
            output.append(tok)
            expect_operand = False
        elif tok.kind is TokenKind.NEGATE:
            # Prefix operator: its operand has not been seen yet, so it
            # never pops anything.
            stack.append(tok)
        elif tok.kind is TokenKind.LPAREN:
            if not expect_operand:
                raise InvalidExpression(expression, "missing operator before '('")
            stack.append(tok)
        elif tok.kind is TokenKind.RPAREN:
            if expect_operand:
                raise InvalidExpression(expression, "expected operand before ')'")
            while stack and stack[-1].kind is not TokenKind.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise InvalidExpression(expression, "unbalanced ')'")
            stack.pop()
        else:
            if expect_operand:
                raise InvalidExpression(
                    expression, f"operator {tok.symbol!r} where an operand is expected"
                )
            incoming = PRECEDENCE[tok.symbol]
            while (
                stack
                and stack[-1].kind is not TokenKind.LPAREN
                and _precedence(stack[-1]) >= incoming
            ):
                output.append(stack.pop())
            stack.append(tok)
            expect_operand = True

    if expect_operand:
        raise InvalidExpression(expression, "expression ends where an operand is expected")

    while stack:
        tok = stack.pop()
        if tok.kind is TokenKind.LPAREN:
            raise InvalidExpression(expression, "unbalanced '('")
        output.append(tok)
    return output


# ── postfix evaluation ──────────────────────────────────────────────


def _apply(symbol: str, a: float, b: float, expression: str) -> float:
    if symbol == "+":
        return a + b
    if symbol == "-":
        return a - b
    if symbol == "*":
        return a * b
    if b == 0:
        raise InvalidExpression(expression, "division by zero")
    return a / b


def evaluate_postfix(postfix: list[Token], expression: str = "") -> float:
    """Evaluate a postfix token sequence; the result is always finite."""
    stack: list[float] = []
    for tok in postfix:
        if tok.kind is TokenKind.NUMBER:
            stack.append(tok.value)
        elif tok.kind is TokenKind.NEGATE:
            if not stack:
                raise InvalidExpression(expression, "missing operand for unary '-'")
            stack.append(-stack.pop())
        else:
            if len(stack) < 2:
                raise InvalidExpression(
                    expression, f"missing operand for {tok.symbol!r}"
                )
            b = stack.pop()
            a = stack.pop()
            stack.append(_apply(tok.symbol, a, b, expression))

    if len(stack) != 1:
        raise InvalidExpression(expression, "malformed expression")
    result = stack[0]
    if not math.isfinite(result):
        raise InvalidExpression(expression, "result is not finite")
    return result


# ── public entrypoints ──────────────────────────────────────────────


def evaluate_math(text: str, expression: str | None = None) -> float:
    """Evaluate a unitless arithmetic string."""
    source = text if expression is None else expression
    compact = _WHITESPACE_RE.sub("", text)
    tokens = fold_unary(tokenize(compact, source))
    return evaluate_postfix(to_postfix(tokens, source), source)


def evaluate(expression: str) -> ValueWithUnit:
    """Evaluate *expression* into a ``ValueWithUnit``.

    The trailing unit (letters or ``%``) is split off before the math is
    parsed; a bare number yields the ``"none"`` unit.

    Raises
    ------
    InvalidExpression
        On any tokenizing, structural or arithmetic failure.
    """
    if not isinstance(expression, str):
        raise TypeError(f"expression must be str, got {type(expression).__name__}")
    math_part, unit = split_unit(expression)
    value = evaluate_math(math_part, expression)
    return ValueWithUnit(value=value, unit=unit)
