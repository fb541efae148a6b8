"""Shared fixtures for date_slider tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Generator
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# Register Hypothesis profiles for different environments
settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)

settings.register_profile(
    "ci",
    max_examples=200,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
    derandomize=True,  # Reproducible in CI
)

settings.register_profile(
    "dev",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target, Phase.shrink],
)

# Load profile from HYPOTHESIS_PROFILE env var, default to "default"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))

if TYPE_CHECKING:
    from date_slider._internal.config import ConfigManager
    from date_slider.engine import RangeEngine
    from date_slider.picker import DatePicker

# Fixed "today" used throughout the scenario tests
TODAY = date(2024, 3, 10)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DSLIDE_* variables from the developer's shell out of tests."""
    for name in (
        "DSLIDE_CONFIG_PATH",
        "DSLIDE_SEQUENCE_LENGTH",
        "DSLIDE_PAGE_SIZE",
        "DSLIDE_TODAY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def today() -> date:
    """The fixed current day (2024-03-10)."""
    return TODAY


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir: Path) -> Path:
    """Return path for a temporary config file."""
    return temp_dir / "config.toml"


@pytest.fixture
def config_manager(config_path: Path) -> ConfigManager:
    """Create a ConfigManager with a temporary config file."""
    from date_slider._internal.config import ConfigManager

    return ConfigManager(config_path=config_path)


@pytest.fixture
def engine(today: date) -> RangeEngine:
    """RangeEngine with the default bound and a fixed today."""
    from date_slider.engine import RangeEngine

    return RangeEngine(today=today)


@pytest.fixture
def picker(today: date) -> DatePicker:
    """Empty DatePicker with default settings and a fixed today."""
    from date_slider.picker import DatePicker

    return DatePicker(today=today)
