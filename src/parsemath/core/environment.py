"""
Environment configuration for parsemath.

This module provides a standard way to determine the runtime environment
and the defaults that depend on it.

Environment variables:
    - PARSEMATH_ENV: development (default), test or production
    - PARSEMATH_SHOW_AST: force printing of the generated AST on or off
    - PARSEMATH_LOG_LEVEL: logging level name (default WARNING)

Usage:
    from parsemath.core.environment import get_parsemath_env, should_show_ast

    env = get_parsemath_env()  # Returns "development", "test", or "production"

    # Check with command-line override
    if should_show_ast(show_ast_flag):
        print(ast)
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

logger = logging.getLogger(__name__)


class ParsemathEnv(StrEnum):
    """Runtime environment values."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


# Default environment
_DEFAULT_ENV = ParsemathEnv.DEVELOPMENT
_DEFAULT_LOG_LEVEL = "WARNING"

PARSEMATH_ENV_VAR = "PARSEMATH_ENV"
PARSEMATH_SHOW_AST_VAR = "PARSEMATH_SHOW_AST"
PARSEMATH_LOG_LEVEL_VAR = "PARSEMATH_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_parsemath_env() -> ParsemathEnv:
    """Get the current environment from PARSEMATH_ENV.

    Returns:
        ParsemathEnv: The current environment (development, test, or production).
        Defaults to development if PARSEMATH_ENV is not set or invalid.

    Examples:
        >>> import os
        >>> os.environ["PARSEMATH_ENV"] = "production"
        >>> get_parsemath_env()
        <ParsemathEnv.PRODUCTION: 'production'>
    """
    env_value = os.environ.get(PARSEMATH_ENV_VAR, "").lower().strip()

    if env_value == "production" or env_value == "prod":
        return ParsemathEnv.PRODUCTION
    elif env_value == "test" or env_value == "testing":
        return ParsemathEnv.TEST
    elif env_value == "development" or env_value == "dev" or env_value == "":
        return ParsemathEnv.DEVELOPMENT
    else:
        logger.warning(
            "Unknown PARSEMATH_ENV value '%s'. "
            "Valid values: development, test, production. Defaulting to development.",
            env_value,
        )
        return _DEFAULT_ENV


def _get_bool_var(name: str) -> bool | None:
    """Read a boolean environment variable; None when unset or unrecognized."""
    raw = os.environ.get(name, "").lower().strip()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    if raw:
        logger.warning("Ignoring unrecognized %s value '%s'", name, raw)
    return None


def should_show_ast(cli_override: bool | None = None) -> bool:
    """Determine if the generated AST should be printed before each result.

    Resolution order:
    1. If cli_override is explicitly set (True/False), use it
    2. If PARSEMATH_SHOW_AST is set to a boolean value, use it
    3. Otherwise, use environment defaults:
       - development: True
       - test: False
       - production: False

    Args:
        cli_override: Explicit setting from ``--show-ast/--no-show-ast``.
            None means "use environment default".

    Returns:
        bool: Whether to print the AST.
    """
    if cli_override is not None:
        return cli_override

    env_override = _get_bool_var(PARSEMATH_SHOW_AST_VAR)
    if env_override is not None:
        return env_override

    return get_parsemath_env() == ParsemathEnv.DEVELOPMENT


def get_log_level(cli_override: str | None = None) -> str:
    """Resolve the logging level name.

    An explicit ``--log-level`` wins over PARSEMATH_LOG_LEVEL; unknown
    names fall back to WARNING.
    """
    level = (cli_override or os.environ.get(PARSEMATH_LOG_LEVEL_VAR, "")).upper().strip()
    if not level:
        return _DEFAULT_LOG_LEVEL
    if level not in _LOG_LEVELS:
        logger.warning("Unknown log level '%s'. Defaulting to %s.", level, _DEFAULT_LOG_LEVEL)
        return _DEFAULT_LOG_LEVEL
    return level


def get_environment_info() -> dict[str, str | bool]:
    """Get a summary of the current environment configuration.

    Useful for debugging and startup logging.

    Returns:
        dict: Environment information including:
            - env: Current PARSEMATH_ENV value
            - show_ast_default: Default AST display setting
            - log_level: Resolved logging level
    """
    env = get_parsemath_env()
    return {
        "env": env.value,
        "show_ast_default": should_show_ast(None),
        "log_level": get_log_level(None),
    }
