"""
parsemath CLI utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
import sys

import typer

from parsemath._version import get_version
from parsemath.core.environment import get_environment_info, get_log_level

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"parsemath {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")

        info = get_environment_info()
        typer.echo(f"Environment: {info['env']}")
        typer.echo(f"Show AST:    {'on' if info['show_ast_default'] else 'off'}")
        typer.echo(f"Log level:   {info['log_level']}")

        raise typer.Exit()


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr at the resolved level."""
    resolved = get_log_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("parsemath").setLevel(resolved)
