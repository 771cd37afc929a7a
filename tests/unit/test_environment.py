"""Tests for environment-variable configuration."""

from __future__ import annotations

import logging

import pytest

from parsemath.core.environment import (
    ParsemathEnv,
    get_environment_info,
    get_log_level,
    get_parsemath_env,
    should_show_ast,
)


class TestGetParsemathEnv:
    def test_default_is_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PARSEMATH_ENV", raising=False)
        assert get_parsemath_env() == ParsemathEnv.DEVELOPMENT

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("production", ParsemathEnv.PRODUCTION),
            ("PROD", ParsemathEnv.PRODUCTION),
            ("test", ParsemathEnv.TEST),
            ("testing", ParsemathEnv.TEST),
            (" dev ", ParsemathEnv.DEVELOPMENT),
        ],
    )
    def test_aliases(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: ParsemathEnv) -> None:
        monkeypatch.setenv("PARSEMATH_ENV", value)
        assert get_parsemath_env() == expected

    def test_unknown_value_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="parsemath.core.environment")
        monkeypatch.setenv("PARSEMATH_ENV", "staging")
        assert get_parsemath_env() == ParsemathEnv.DEVELOPMENT
        assert "Unknown PARSEMATH_ENV value 'staging'" in caplog.text


class TestShouldShowAst:
    def test_cli_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSEMATH_SHOW_AST", "1")
        assert should_show_ast(False) is False
        monkeypatch.setenv("PARSEMATH_SHOW_AST", "0")
        assert should_show_ast(True) is True

    def test_env_var_beats_environment_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSEMATH_ENV", "production")
        monkeypatch.setenv("PARSEMATH_SHOW_AST", "yes")
        assert should_show_ast(None) is True

    def test_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PARSEMATH_SHOW_AST", raising=False)
        monkeypatch.setenv("PARSEMATH_ENV", "development")
        assert should_show_ast(None) is True
        monkeypatch.setenv("PARSEMATH_ENV", "test")
        assert should_show_ast(None) is False
        monkeypatch.setenv("PARSEMATH_ENV", "production")
        assert should_show_ast(None) is False

    def test_unrecognized_flag_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSEMATH_ENV", "test")
        monkeypatch.setenv("PARSEMATH_SHOW_AST", "maybe")
        assert should_show_ast(None) is False


class TestGetLogLevel:
    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PARSEMATH_LOG_LEVEL", raising=False)
        assert get_log_level() == "WARNING"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSEMATH_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_cli_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSEMATH_LOG_LEVEL", "debug")
        assert get_log_level("error") == "ERROR"

    def test_unknown_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PARSEMATH_LOG_LEVEL", raising=False)
        assert get_log_level("loud") == "WARNING"


def test_environment_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PARSEMATH_ENV", "test")
    monkeypatch.delenv("PARSEMATH_SHOW_AST", raising=False)
    monkeypatch.delenv("PARSEMATH_LOG_LEVEL", raising=False)
    assert get_environment_info() == {
        "env": "test",
        "show_ast_default": False,
        "log_level": "WARNING",
    }
