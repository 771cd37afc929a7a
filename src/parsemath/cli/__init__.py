"""
parsemath CLI Package.

- calc.py: repl and eval commands
- utils.py: version display and logging setup
"""

import sys

import typer

from parsemath.cli.calc import eval_command, repl_command
from parsemath.cli.utils import version_callback

app = typer.Typer(
    help="""parsemath – arithmetic expression evaluator

Commands:
  • repl: interactive shell, one expression per line
  • eval: evaluate a single expression
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """parsemath CLI main callback for global options."""
    pass


app.command(name="repl")(repl_command)
app.command(name="eval")(eval_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]

if __name__ == "__main__":
    main(sys.argv[1:])
