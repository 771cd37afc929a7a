"""
parsemath calculator commands.

- repl: interactive shell, one expression per line
- eval: evaluate a single expression and exit
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.style import Style
from rich.text import Text

from parsemath.core.calculator import evaluate_with_ast
from parsemath.core.environment import should_show_ast
from parsemath.core.errors import ParseError

from .utils import configure_logging

console = Console()

BANNER = """Hello. Welcome to Arithmetic expression evaluator.
You can calculate value for expressions such as 2*3+(4-5)+2^3/4.
Allowed numbers: positive, negative and decimals.
Supported operations: Add, Subtract, Multiply, Divide, PowerOf(^).
Enter your arithmetic expression below:"""

PROMPT = "calc> "
EXIT_WORDS = {"exit", "quit"}

STYLES = {
    "banner": Style(color="bright_cyan", bold=True),
    "ast": Style(color="bright_black"),
    "result": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
}


def format_result(value: float) -> str:
    """Render a result; infinities and NaN print as ``inf``, ``-inf``, ``nan``."""
    return repr(value)


def _print(text: str, style: str) -> None:
    console.print(Text(text, style=STYLES[style]), soft_wrap=True)


def _run_line(line: str, show_ast: bool) -> bool:
    """Evaluate one line and print the outcome. Returns False on error."""
    try:
        ast, result = evaluate_with_ast(line)
    except ParseError as e:
        _print(f"Error: {e}", "error")
        return False

    if show_ast:
        _print(f"The generated AST is: {ast}", "ast")
    _print(f"Result: {format_result(result)}", "result")
    return True


def repl_command(
    show_ast: bool | None = typer.Option(
        None,
        "--show-ast/--no-show-ast",
        help="Print the generated AST before each result (default: from PARSEMATH_SHOW_AST/PARSEMATH_ENV)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: from PARSEMATH_LOG_LEVEL, else WARNING)",
    ),
) -> None:
    """
    Start the interactive calculator.

    Reads one expression per line until EOF, printing each result or
    error. A bad expression never ends the session; type 'exit' or
    'quit' (or send EOF) to leave.
    """
    configure_logging(log_level)
    show = should_show_ast(show_ast)

    _print(BANNER, "banner")
    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line.strip():
            continue
        if line.strip().lower() in EXIT_WORDS:
            break
        _run_line(line, show)


def eval_command(
    expression: str = typer.Argument(
        ...,
        help="Expression to evaluate, e.g. '2*3+(4-5)'. Use '--' before expressions starting with '-'.",
    ),
    show_ast: bool | None = typer.Option(
        None,
        "--show-ast/--no-show-ast",
        help="Print the generated AST before the result (default: from PARSEMATH_SHOW_AST/PARSEMATH_ENV)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: from PARSEMATH_LOG_LEVEL, else WARNING)",
    ),
) -> None:
    """
    Evaluate a single expression and print the result.

    Exits with status 1 and prints the error on stderr when the
    expression is invalid.
    """
    configure_logging(log_level)

    try:
        ast, result = evaluate_with_ast(expression)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if should_show_ast(show_ast):
        typer.echo(f"The generated AST is: {ast}")
    typer.echo(format_result(result))
