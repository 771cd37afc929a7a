"""Shared pytest fixtures for parsemath tests."""

import pytest


@pytest.fixture(autouse=True)
def _test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test under PARSEMATH_ENV=test with no other overrides."""
    monkeypatch.setenv("PARSEMATH_ENV", "test")
    monkeypatch.delenv("PARSEMATH_SHOW_AST", raising=False)
    monkeypatch.delenv("PARSEMATH_LOG_LEVEL", raising=False)
