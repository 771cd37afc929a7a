"""Intermediate representation (AST) for parsed expressions."""

from parsemath.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Negative, Num

__all__ = ["BinaryExpr", "BinaryOp", "Expr", "Negative", "Num"]
