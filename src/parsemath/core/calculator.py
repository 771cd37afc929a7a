"""
Single-line calculator entry point.

Strips whitespace from a line, parses it, evaluates the AST and returns
the float result or raises the first ``ParseError`` encountered.
"""

from __future__ import annotations

import logging

from parsemath.core.errors import ParseError, UnableToParse
from parsemath.core.expression_lang.evaluator import ExpressionEvalError, evaluate_node
from parsemath.core.expression_lang.parser import Parser
from parsemath.core.ir.expressions import Expr

logger = logging.getLogger(__name__)


def strip_whitespace(line: str) -> str:
    """Remove every whitespace character, not just the surrounding ones."""
    return "".join(line.split())


def evaluate_with_ast(line: str) -> tuple[Expr, float]:
    """Evaluate a line, returning the generated AST alongside the result.

    Raises:
        InvalidOperator: If a token is not a valid continuation.
        UnableToParse: If a sub-expression cannot be started or completed,
            or evaluation failed.
    """
    expr_text = strip_whitespace(line)
    try:
        ast = Parser(expr_text).parse()
    except ParseError as e:
        logger.debug("Rejected %r: %s", expr_text, e.message)
        raise
    except RecursionError as e:
        # Brackets and unary minus recurse; flat chains parse in a loop
        logger.debug("Expression %r is nested too deeply", expr_text)
        raise UnableToParse("Expression is nested too deeply") from e

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Generated AST of depth %d", ast.depth)
    try:
        result = evaluate_node(ast)
    except ExpressionEvalError as e:
        logger.debug("Evaluation of %r failed: %s", expr_text, e)
        raise UnableToParse("Unable to parse") from e

    logger.debug("%r evaluated to %r", expr_text, result)
    return ast, result


def evaluate(line: str) -> float:
    """Evaluate an arithmetic expression.

    Args:
        line: Expression text, e.g. "2*3 + (4-5) + 2^3/4". Whitespace
            anywhere in the line is ignored.

    Returns:
        The numeric result. Division by zero yields ``inf`` or ``nan``.

    Raises:
        InvalidOperator: If a token is not a valid continuation.
        UnableToParse: If a sub-expression cannot be started or completed.
    """
    _, result = evaluate_with_ast(line)
    return result
