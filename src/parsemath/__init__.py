"""
parsemath - arithmetic expression evaluator.

Tokenizes, parses and evaluates single-line arithmetic expressions
(``+ - * / ^``, unary minus, parentheses and implicit multiplication
between adjacent parenthesized groups).

Usage:
    import parsemath

    parsemath.evaluate("2*3+(4-5)+2^3/4")
    # 7.0
"""

from __future__ import annotations

from ._version import get_version as _get_version
from .core.calculator import evaluate
from .core.errors import InvalidOperator, ParseError, ParsemathError, UnableToParse
from .core.expression_lang import parse_expr

__version__ = _get_version()

__all__ = [
    "__version__",
    "evaluate",
    "parse_expr",
    "ParsemathError",
    "ParseError",
    "InvalidOperator",
    "UnableToParse",
]
