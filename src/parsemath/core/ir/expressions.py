"""
Expression AST for parsemath.

Supports:
- Number literals: 2, 3.5
- Binary arithmetic: +, -, *, /, ^
- Unary negation: -x

Nodes are immutable and form a strict tree: each child is owned by
exactly one parent.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    CARET = "^"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Num(BaseModel):
    """A floating-point leaf value."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)

    @property
    def depth(self) -> int:
        return 1


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)

    @property
    def depth(self) -> int:
        return tree_depth(self)


class Negative(BaseModel):
    """Arithmetic negation of a single operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)

    @property
    def depth(self) -> int:
        return tree_depth(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Num | BinaryExpr | Negative

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
Negative.model_rebuild()


# ---------------------------------------------------------------------------
# Tree walks
# ---------------------------------------------------------------------------
# A chain like 1+1+...+1 folds into a tree as deep as it is long, so these
# walks keep their own stacks instead of recursing.


def render(expr: Expr) -> str:
    """Render an expression fully parenthesized, e.g. ``(1.0 + (2.0 * 3.0))``.

    A negated operand that already starts with a minus sign is wrapped,
    so double negation reads ``-(-2.0)``.
    """
    parts: list[str] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, children_done = pending.pop()

        if isinstance(node, BinaryExpr):
            if children_done:
                right = parts.pop()
                left = parts.pop()
                parts.append(f"({left} {node.op.value} {right})")
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        elif isinstance(node, Negative):
            if children_done:
                operand = parts.pop()
                parts.append(f"-({operand})" if operand.startswith("-") else f"-{operand}")
            else:
                pending.append((node, True))
                pending.append((node.operand, False))
        else:
            parts.append(str(node))

    return parts.pop()


def tree_depth(expr: Expr) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    deepest = 0
    pending: list[tuple[Expr, int]] = [(expr, 1)]

    while pending:
        node, level = pending.pop()
        deepest = max(deepest, level)
        if isinstance(node, BinaryExpr):
            pending.append((node.left, level + 1))
            pending.append((node.right, level + 1))
        elif isinstance(node, Negative):
            pending.append((node.operand, level + 1))

    return deepest
