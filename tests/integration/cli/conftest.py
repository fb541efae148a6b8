"""Shared fixtures for CLI integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def base_args(config_path: Path) -> list[str]:
    """Global options pointing at an isolated config file."""
    return ["--config", str(config_path)]
