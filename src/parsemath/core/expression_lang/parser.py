"""
Precedence-climbing parser for parsemath expressions.

Grammar (precedence low to high):
    expr      → primary (binop expr)*     folded while binop binds tighter
                                          than the caller's threshold
    binop     → "+" | "-"                 ADD_SUB
              | "*" | "/"                 MUL_DIV
              | "^"                       POWER
    primary   → "-" expr                  operand parsed at NEGATIVE
              | NUM
              | "(" expr ")" ("(" expr ")")?   adjacent groups multiply

Every operator, ``^`` included, folds left to right: ``2^3^2`` is
``(2^3)^2``. Unary minus binds tighter than ``^``: ``-2^2`` is ``(-2)^2``.
"""

from __future__ import annotations

import logging

from parsemath.core.errors import InvalidOperator, ParseError, UnableToParse, make_error
from parsemath.core.expression_lang.tokenizer import (
    OperatorPrecedence,
    Token,
    TokenKind,
    tokenize,
)
from parsemath.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Negative, Num

logger = logging.getLogger(__name__)

_BINARY_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.ADD: BinaryOp.ADD,
    TokenKind.SUBTRACT: BinaryOp.SUBTRACT,
    TokenKind.MULTIPLY: BinaryOp.MULTIPLY,
    TokenKind.DIVIDE: BinaryOp.DIVIDE,
    TokenKind.CARET: BinaryOp.CARET,
}


class Parser:
    """Recursive descent parser holding one token of lookahead."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._tokens = tokenize(source)
        first = next(self._tokens, None)
        if first is None:
            raise InvalidOperator("Empty expression")
        self.current: Token = first

    def parse(self) -> Expr:
        """Parse the whole input into an AST.

        The input must be consumed completely. A valid prefix followed by
        leftover tokens, as in ``2)``, ``(2)3`` or ``2(3)``, raises
        ``InvalidOperator`` rather than evaluating the prefix.
        """
        expr = self.generate_ast(OperatorPrecedence.DEFAULT_ZERO)

        # Ensure all tokens consumed
        if self.current.kind != TokenKind.EOF:
            raise self._error(
                InvalidOperator, f"Unexpected token after expression: {self.current}"
            )

        logger.debug("Parsed %r into %s", self.source, expr)
        return expr

    def advance(self) -> None:
        """Replace the lookahead with the next token, or EOF when exhausted."""
        if self.current.kind == TokenKind.EOF:
            raise self._error(InvalidOperator, "No more tokens")
        token = next(self._tokens, None)
        if token is None:
            token = Token(TokenKind.EOF, None, len(self.source))
        self.current = token

    def expect(self, kind: TokenKind) -> None:
        if self.current.kind != kind:
            raise self._error(
                InvalidOperator, f"Expected {Token(kind)}, got {self.current}"
            )
        self.advance()

    # -- Grammar rules --

    def generate_ast(self, min_prec: OperatorPrecedence) -> Expr:
        """Parse a primary, then fold operators binding tighter than ``min_prec``."""
        left = self.parse_number()

        while min_prec < self.current.precedence:
            if self.current.kind == TokenKind.EOF:
                break
            left = self._convert_token_to_node(left)
        return left

    def parse_number(self) -> Expr:
        """'-' expr | NUM | '(' expr ')' ['(' expr ')']"""
        tok = self.current

        if tok.kind == TokenKind.SUBTRACT:
            self.advance()
            operand = self.generate_ast(OperatorPrecedence.NEGATIVE)
            return Negative(operand=operand)

        if tok.kind == TokenKind.NUM:
            self.advance()
            assert tok.value is not None
            return Num(value=tok.value)

        if tok.kind == TokenKind.LEFT_PAREN:
            self.advance()
            expr = self.generate_ast(OperatorPrecedence.DEFAULT_ZERO)
            self.expect(TokenKind.RIGHT_PAREN)
            # Implicit multiplication: (a)(b)
            if self.current.kind == TokenKind.LEFT_PAREN:
                right = self.generate_ast(OperatorPrecedence.MUL_DIV)
                return BinaryExpr(op=BinaryOp.MULTIPLY, left=expr, right=right)
            return expr

        if tok.kind == TokenKind.EOF:
            raise self._error(UnableToParse, "Unexpected end of input")

        raise self._error(InvalidOperator, f"Unexpected {tok} where an operand was expected")

    def _convert_token_to_node(self, left: Expr) -> Expr:
        """Consume the binary operator at the lookahead and parse its right side."""
        tok = self.current
        op = _BINARY_OPS.get(tok.kind)
        if op is None:
            raise self._error(InvalidOperator, f"Please enter valid operator {tok}")
        self.advance()
        right = self.generate_ast(tok.precedence)
        return BinaryExpr(op=op, left=left, right=right)

    def _error(self, kind: type[ParseError], message: str) -> ParseError:
        return make_error(kind, message, self.source, self.current.pos)


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2*3+(4-5)+2^3/4")

    Returns:
        Parsed expression AST.

    Raises:
        InvalidOperator: If a token is not a valid continuation.
        UnableToParse: If a sub-expression cannot be started or completed.
    """
    return Parser(source).parse()
