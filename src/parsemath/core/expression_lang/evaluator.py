"""
Expression evaluator for parsemath.

Reduces an expression AST to a single float. Pure evaluation: no I/O,
no side effects, no domain checking. Results follow IEEE-754 semantics,
so division by zero gives an infinity or NaN rather than an error.
"""

from __future__ import annotations

import math

from parsemath.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Negative, Num


class ExpressionEvalError(Exception):
    """Error during expression evaluation."""


def evaluate_node(expr: Expr) -> float:
    """Evaluate an expression AST.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value. May be ``inf``, ``-inf`` or ``nan``.

    Raises:
        ExpressionEvalError: If the tree holds a node of unknown type.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> float:
    """Walk the tree in post-order with explicit stacks.

    Left-folded chains such as ``1+1+...+1`` are as deep as they are long,
    so the walk never recurses.
    """
    values: list[float] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, children_done = pending.pop()

        if isinstance(node, Num):
            values.append(node.value)
        elif isinstance(node, BinaryExpr):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply_binary(node.op, left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        elif isinstance(node, Negative):
            if children_done:
                values.append(-values.pop())
            else:
                pending.append((node, True))
                pending.append((node.operand, False))
        else:
            raise ExpressionEvalError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply_binary(op: BinaryOp, left: float, right: float) -> float:
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUBTRACT:
        return left - right
    if op == BinaryOp.MULTIPLY:
        return left * right
    if op == BinaryOp.DIVIDE:
        return _divide(left, right)
    if op == BinaryOp.CARET:
        return _power(left, right)

    raise ExpressionEvalError(f"Unknown binary op: {op}")


def _divide(left: float, right: float) -> float:
    """Float division; a zero divisor yields a signed infinity or NaN."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _power(base: float, exponent: float) -> float:
    """Real-valued exponentiation with C ``pow`` results on overflow and domain errors."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        # Negative base with a non-integer exponent
        return math.nan
