"""
Tokenizer for parsemath expressions.

Lazily converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import IntEnum, StrEnum, auto

from parsemath.core.errors import InvalidOperator, UnableToParse, make_error


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # Operators
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    CARET = auto()

    # Punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()

    # Literals
    NUM = auto()

    # End of input
    EOF = auto()


class OperatorPrecedence(IntEnum):
    """Binding strength of operators, weakest first."""

    DEFAULT_ZERO = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3
    NEGATIVE = 4


_PRECEDENCE: dict[TokenKind, OperatorPrecedence] = {
    TokenKind.ADD: OperatorPrecedence.ADD_SUB,
    TokenKind.SUBTRACT: OperatorPrecedence.ADD_SUB,
    TokenKind.MULTIPLY: OperatorPrecedence.MUL_DIV,
    TokenKind.DIVIDE: OperatorPrecedence.MUL_DIV,
    TokenKind.CARET: OperatorPrecedence.POWER,
}

# Display names used in error messages
_DISPLAY_NAMES: dict[TokenKind, str] = {
    TokenKind.ADD: "Add",
    TokenKind.SUBTRACT: "Subtract",
    TokenKind.MULTIPLY: "Multiply",
    TokenKind.DIVIDE: "Divide",
    TokenKind.CARET: "Caret",
    TokenKind.LEFT_PAREN: "LeftParen",
    TokenKind.RIGHT_PAREN: "RightParen",
    TokenKind.NUM: "Num",
    TokenKind.EOF: "EOF",
}


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: float | None = None, pos: int = 0) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    @property
    def precedence(self) -> OperatorPrecedence:
        """Precedence of this token when it appears as a binary operator."""
        return _PRECEDENCE.get(self.kind, OperatorPrecedence.DEFAULT_ZERO)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        name = _DISPLAY_NAMES[self.kind]
        if self.kind == TokenKind.NUM:
            return f"{name}({self.value!r})"
        return name

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUBTRACT,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "^": TokenKind.CARET,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

# Number: a digit followed by the maximal run of digits and decimal points
_NUMBER_RE = re.compile(r"[0-9][0-9.]*")


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize an expression string.

    The sequence ends when the input is exhausted; no EOF token is
    yielded. Whitespace is skipped.

    Raises:
        InvalidOperator: On a character outside the token vocabulary.
        UnableToParse: On a digit run that is not a valid float literal.
    """
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in " \t\n\r":
            i += 1
            continue

        if c in _SINGLE_CHAR:
            yield Token(_SINGLE_CHAR[c], None, i)
            i += 1
            continue

        if c in "0123456789":
            m = _NUMBER_RE.match(source, i)
            assert m is not None
            literal = m.group(0)
            if literal.count(".") > 1:
                raise make_error(
                    UnableToParse, f"Invalid number literal: {literal!r}", source, i
                )
            yield Token(TokenKind.NUM, float(literal), i)
            i = m.end()
            continue

        raise make_error(InvalidOperator, f"Unexpected character: {c!r}", source, i)
