"""CLI package for date_slider.

This module provides the `dslide` command-line interface. All commands
delegate to the DatePicker facade or ConfigManager, adding only I/O
formatting.
"""

from date_slider.cli.main import app

__all__ = ["app"]
