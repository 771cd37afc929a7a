"""
Error types for parsemath tokenizing, parsing and evaluation.

Every failure surfaces through one channel, ``ParseError``, in one of two
kinds:

- ``InvalidOperator``: an operator, parenthesis or token sequence is
  syntactically unexpected, including premature end of input.
- ``UnableToParse``: a token sequence cannot start or complete a valid
  sub-expression, or an evaluation step could not be reconciled.
"""

from __future__ import annotations

from dataclasses import dataclass


class ParsemathError(Exception):
    """Base exception for all parsemath errors."""

    prefix = ""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        text = f"{self.prefix}{self.message}"
        if self.context:
            return f"{text}\n{self.context.format()}"
        return text


class ParseError(ParsemathError):
    """
    Raised when an expression cannot be tokenized, parsed or evaluated.

    Only the two subclasses below are ever raised.
    """

    pass


class InvalidOperator(ParseError):
    """
    Raised when a token is not a valid continuation.

    Examples:
    - Empty input
    - An operator where an operand was expected (``+``)
    - Missing closing parenthesis (``(2+3``)
    - A character outside the token vocabulary (``2 % 3``)
    """

    prefix = "Invalid operator: "


class UnableToParse(ParseError):
    """
    Raised when a sub-expression cannot be started or completed.

    Examples:
    - End of input where an operand was expected (``2+``)
    - A malformed number literal (``1.2.3``)
    - An evaluation failure wrapped from the evaluator
    """

    prefix = "Error in evaluating: "


@dataclass
class ErrorContext:
    """
    Location of an error inside the expression being parsed.

    Attributes:
        expression: The text handed to the tokenizer
        column: Offending position (0-indexed)
    """

    expression: str
    column: int

    def format(self) -> str:
        """
        Format the expression with a marker under the error column.

        Returns:
            Two lines, e.g.::

                  (2+3
                      ^
        """
        column = max(0, min(self.column, len(self.expression)))
        prefix = "  "
        return f"{prefix}{self.expression}\n{' ' * (len(prefix) + column)}^"


def make_error(
    kind: type[ParseError],
    message: str,
    expression: str | None = None,
    column: int | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with optional context.

    Args:
        kind: ``InvalidOperator`` or ``UnableToParse``
        message: Error description
        expression: Optional source text
        column: Optional 0-indexed position inside ``expression``

    Returns:
        The error, with context attached when a location was provided
    """
    if expression is not None and column is not None:
        return kind(message, ErrorContext(expression=expression, column=column))
    return kind(message)
