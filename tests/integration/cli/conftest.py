"""Shared fixtures for CLI integration tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep configuration variables from the host out of CLI runs."""
    monkeypatch.delenv("GLOBALOPTS_VERBOSITY", raising=False)
    monkeypatch.delenv("GLOBALOPTS_HELP_INDENT", raising=False)
    yield
