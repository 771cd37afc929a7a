"""
parsemath expression language.

Tokenizer, parser and evaluator for single-line arithmetic expressions.

Usage:
    from parsemath.core.expression_lang import parse_expr, evaluate_node

    expr = parse_expr("(2+3)*4")
    result = evaluate_node(expr)
    # result == 20.0
"""

from parsemath.core.expression_lang.evaluator import evaluate_node
from parsemath.core.expression_lang.parser import Parser, parse_expr
from parsemath.core.expression_lang.tokenizer import tokenize

__all__ = ["Parser", "evaluate_node", "parse_expr", "tokenize"]
