"""cssexpr.core.tokens

Lexing for the math portion of an expression.

Tokens are tagged values, not strings: a number carries its float, an
operator carries its symbol.  ``fold_unary`` resolves every ``-`` into
either a binary operator, a negative literal, or a prefix negation.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cssexpr.errors import InvalidExpression

_NUMBER_GROUP = r"(?P<number>\d+(?:\.\d*)?|\.\d+)"
_SYMBOL_GROUP = r"(?P<symbol>[()+\-*/])"
_TOKEN_RE = re.compile(f"{_NUMBER_GROUP}|{_SYMBOL_GROUP}", re.ASCII)


class TokenKind(str, Enum):
    NUMBER = "number"
    OP = "op"
    NEGATE = "negate"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: float = 0.0
    symbol: str = ""

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenKind.NUMBER, value=value)

    @classmethod
    def op(cls, symbol: str) -> "Token":
        return cls(TokenKind.OP, symbol=symbol)

    def __repr__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"Token({self.value!r})"
        if self.kind is TokenKind.OP:
            return f"Token({self.symbol!r})"
        return f"Token({self.kind.name})"


LPAREN = Token(TokenKind.LPAREN, symbol="(")
RPAREN = Token(TokenKind.RPAREN, symbol=")")
NEGATE = Token(TokenKind.NEGATE, symbol="-")


def tokenize(text: str, expression: Optional[str] = None) -> list[Token]:
    """Split whitespace-free math *text* into tokens.

    Every character must belong to a token; anything else raises
    ``InvalidExpression``.  *expression* is the original input, used only
    for error reporting.
    """
    source = text if expression is None else expression
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise InvalidExpression(
                source, f"unexpected character {text[pos]!r} at position {pos}"
            )
        literal = m.group("number")
        if literal is not None:
            value = float(literal)
            if not math.isfinite(value):
                raise InvalidExpression(source, f"number out of range: {literal}")
            tokens.append(Token.number(value))
        else:
            symbol = m.group("symbol")
            if symbol == "(":
                tokens.append(LPAREN)
            elif symbol == ")":
                tokens.append(RPAREN)
            else:
                tokens.append(Token.op(symbol))
        pos = m.end()
    return tokens


def _starts_operand(previous: Optional[Token]) -> bool:
    """True when the next token must begin an operand (so '-' is unary)."""
    if previous is None:
        return True
    return previous.kind in (TokenKind.LPAREN, TokenKind.OP, TokenKind.NEGATE)


def fold_unary(tokens: list[Token]) -> list[Token]:
    """Resolve unary minus.

    A unary ``-`` directly followed by a number merges into one negative
    literal.  Any other unary ``-`` (before ``(`` or another ``-``) becomes
    a ``NEGATE`` prefix operator, so chains like ``- -3`` are supported.
    """
    folded: list[Token] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        is_minus = tok.kind is TokenKind.OP and tok.symbol == "-"
        if is_minus and _starts_operand(folded[-1] if folded else None):
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None
            if nxt is not None and nxt.kind is TokenKind.NUMBER:
                folded.append(Token.number(-nxt.value))
                i += 2
                continue
            folded.append(NEGATE)
        else:
            folded.append(tok)
        i += 1
    return folded
