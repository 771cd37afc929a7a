"""Tests for CLI commands."""

import pytest
from typer.testing import CliRunner

from parsemath.cli import app
from parsemath.cli.calc import format_result


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestReplCommand:
    def test_prints_banner(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="")
        assert result.exit_code == 0
        assert "Welcome to Arithmetic expression evaluator" in result.output

    def test_evaluates_each_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="2+3\n2*3+(4-5)+2^3/4\n")
        assert result.exit_code == 0
        assert "Result: 5.0" in result.output
        assert "Result: 7.0" in result.output

    def test_bad_expression_does_not_end_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="(2+3\n1+1\n")
        assert result.exit_code == 0
        assert "Error: Invalid operator: Expected RightParen, got EOF" in result.output
        assert "Result: 2.0" in result.output

    def test_blank_lines_are_skipped(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="\n   \n4\n")
        assert result.exit_code == 0
        assert "Error" not in result.output
        assert "Result: 4.0" in result.output

    def test_exit_word_ends_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="quit\n2+2\n")
        assert result.exit_code == 0
        assert "Result: 4.0" not in result.output

    def test_infinity_is_a_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1/0\n")
        assert "Result: inf" in result.output

    def test_show_ast_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--show-ast"], input="1+2\n")
        assert "The generated AST is: (1.0 + 2.0)" in result.output

    def test_ast_hidden_in_test_environment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1+2\n")
        assert "The generated AST is" not in result.output

    def test_show_ast_from_environment(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PARSEMATH_SHOW_AST", "on")
        result = cli_runner.invoke(app, ["repl"], input="-2^2\n")
        assert "The generated AST is: (-2.0 ^ 2.0)" in result.output
        assert "Result: 4.0" in result.output


class TestEvalCommand:
    def test_prints_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "(2+3)*4"])
        assert result.exit_code == 0
        assert result.output.strip() == "20.0"

    def test_expression_starting_with_minus(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "-2^2"])
        assert result.exit_code == 0
        assert result.output.strip() == "4.0"

    def test_error_exit_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "2+"])
        assert result.exit_code == 1
        assert "Error in evaluating" in result.output

    def test_show_ast(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--show-ast", "(2)(3)"])
        assert result.exit_code == 0
        assert "The generated AST is: (2.0 * 3.0)" in result.output
        assert result.output.strip().endswith("6.0")

    def test_show_ast_for_long_chain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--show-ast", "+".join(["1"] * 2000)])
        assert result.exit_code == 0
        assert "The generated AST is: ((((" in result.output
        assert result.output.strip().endswith("2000.0")

    def test_debug_logging(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--log-level", "DEBUG", "1+1"])
        assert result.exit_code == 0
        assert "2.0" in result.output


class TestVersion:
    def test_version_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "parsemath" in result.output
        assert "Environment: test" in result.output


def test_format_result() -> None:
    assert format_result(5.0) == "5.0"
    assert format_result(float("inf")) == "inf"
    assert format_result(float("-inf")) == "-inf"
    assert format_result(float("nan")) == "nan"
