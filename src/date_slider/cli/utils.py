"""CLI utility functions and error handling.

This module provides shared utilities for the CLI:
- ExitCode enum for standardized exit codes
- handle_errors decorator for exception-to-exit-code mapping
- Console instances for stdout/stderr separation
- Logging setup for --verbose
- Lazy config and picker construction helpers
"""

from __future__ import annotations

import functools
import logging
import os
from collections.abc import Callable
from datetime import date
from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from date_slider.exceptions import (
    ConfigError,
    DateSliderError,
    InvalidDateError,
    OptionNotFoundError,
)

if TYPE_CHECKING:
    from date_slider._internal.config import ConfigManager
    from date_slider.picker import DatePicker
    from date_slider.types import ValidationResult

# Console instances for stdout/stderr separation
# Data output goes to stdout; progress/errors go to stderr
console = Console()
err_console = Console(stderr=True, no_color=bool(os.environ.get("NO_COLOR")))


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands.

    Exit codes follow Unix conventions:
    - 0: Success
    - 1-4: Application-specific errors
    - 130: Interrupted by SIGINT (Ctrl+C)
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGS = 3
    NOT_FOUND = 4
    INTERRUPTED = 130


F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Decorator to convert library exceptions to CLI exit codes.

    Maps DateSliderError subclasses to appropriate exit codes and
    displays formatted error messages to stderr.

    Usage:
        @handle_errors
        def my_command(ctx: typer.Context):
            picker = build_picker(ctx)
            output_result(ctx, picker.view().to_dict())
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except InvalidDateError as e:
            err_console.print(f"[red]Invalid date:[/red] {escape(repr(e.value))}")
            err_console.print("Dates must be in YYYY-MM-DD format.")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None
        except OptionNotFoundError as e:
            err_console.print(f"[red]Option not found:[/red] {escape(e.message)}")
            raise typer.Exit(ExitCode.NOT_FOUND) from None
        except ConfigError as e:
            err_console.print(f"[red]Configuration error:[/red] {escape(e.message)}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        except DateSliderError as e:
            err_console.print(f"[red]Error:[/red] {escape(e.message)}")
            raise typer.Exit(ExitCode.GENERAL_ERROR) from None
        except ValueError as e:
            err_console.print(f"[red]Invalid argument:[/red] {escape(str(e))}")
            raise typer.Exit(ExitCode.INVALID_ARGS) from None

    return wrapper  # type: ignore[return-value]


def configure_logging(verbose: bool) -> None:
    """Route date_slider debug logs to stderr when --verbose is set.

    Safe to call more than once; only one handler is installed.
    """
    if not verbose:
        return
    logger = logging.getLogger("date_slider")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)


def get_config(ctx: typer.Context) -> ConfigManager:
    """Get or create ConfigManager from context.

    Lazily initializes a ConfigManager instance, respecting the --config
    global option. The instance is cached in the context for reuse.

    Args:
        ctx: Typer context with global options in obj dict.

    Returns:
        ConfigManager instance.
    """
    from date_slider._internal.config import ConfigManager

    if "config" not in ctx.obj or ctx.obj["config"] is None:
        ctx.obj["config"] = ConfigManager(config_path=ctx.obj.get("config_path"))
    config: ConfigManager = ctx.obj["config"]
    return config


def build_picker(
    ctx: typer.Context,
    today: date | None = None,
    page_size: int | None = None,
) -> DatePicker:
    """Create a DatePicker with settings resolved from config and env.

    Args:
        ctx: Typer context with global options in obj dict.
        today: Fixed current day (from --today). Default: local date.
        page_size: Override for the configured page size.

    Returns:
        An empty DatePicker.

    Raises:
        ConfigError: If configuration is invalid.
        ValueError: If page_size is less than 1.
    """
    from date_slider._internal.config import PickerSettings
    from date_slider.picker import DatePicker

    settings = get_config(ctx).resolve_settings()
    if page_size is not None:
        if page_size < 1:
            raise ValueError(f"--page-size must be >= 1, got {page_size}")
        settings = PickerSettings(
            sequence_length=settings.sequence_length, page_size=page_size
        )
    return DatePicker(settings=settings, today=today)


def print_validation_errors(validation: ValidationResult) -> None:
    """Print each validation error to stderr."""
    if validation.start_error:
        err_console.print(f"[red]From:[/red] {validation.start_error}")
    if validation.end_error:
        err_console.print(f"[red]To:[/red] {validation.end_error}")


def output_result(
    ctx: typer.Context,
    data: dict[str, Any] | list[dict[str, Any]],
    columns: list[str] | None = None,
    *,
    format: str | None = None,
) -> None:
    """Output data in the requested format.

    Routes data to the appropriate formatter based on the --format
    option. Supports json, jsonl, table, csv, and plain formats.

    Args:
        ctx: Typer context with global options in obj dict.
        data: Option rows or a single result dict.
        columns: Column names for table format (auto-detected if None).
        format: Output format. If None, falls back to ctx.obj["format"] or "json".
    """
    from date_slider.cli.formatters import (
        format_csv,
        format_json,
        format_jsonl,
        format_plain,
        format_table,
    )

    # Priority: explicit format param > ctx.obj > default
    fmt = format if format is not None else ctx.obj.get("format", "json")

    if fmt == "jsonl":
        console.print(format_jsonl(data), highlight=False, soft_wrap=True)
    elif fmt == "table":
        console.print(format_table(data, columns))
    elif fmt == "csv":
        console.print(format_csv(data), highlight=False, end="", soft_wrap=True)
    elif fmt == "plain":
        console.print(format_plain(data), highlight=False, soft_wrap=True)
    else:
        console.print(format_json(data), highlight=False, soft_wrap=True)
