"""Shared fixtures for CLI tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def mock_context() -> typer.Context:
    """Create a mock Typer context with default options."""
    ctx = MagicMock(spec=typer.Context)
    ctx.obj = {"config": None}
    return ctx
