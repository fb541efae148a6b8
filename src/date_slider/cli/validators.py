"""CLI parameter validators.

Validates string inputs from Typer before passing them to the library,
providing early error feedback.
"""

from __future__ import annotations

from datetime import date
from typing import Any, cast, get_args

import typer
from rich.markup import escape

from date_slider._internal.date_utils import parse_iso_date
from date_slider._literal_types import SettingKey
from date_slider.cli.utils import ExitCode, err_console
from date_slider.exceptions import InvalidDateError


def validate_literal(value: str, literal_type: Any, param_name: str) -> Any:
    """Validate a CLI string against a Literal type.

    Args:
        value: String value from CLI.
        literal_type: The Literal type to validate against.
        param_name: Parameter name for error message.

    Returns:
        The validated value, cast to the Literal type.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if invalid.
    """
    valid_values = get_args(literal_type)
    if value not in valid_values:
        err_console.print(
            f"[red]Error:[/red] Invalid value for {param_name}: '{escape(value)}'"
        )
        err_console.print(f"Valid options: {', '.join(valid_values)}")
        raise typer.Exit(ExitCode.INVALID_ARGS)
    return value


def validate_setting_key(value: str, param_name: str = "KEY") -> SettingKey:
    """Validate a config setting name.

    Args:
        value: String value from CLI (sequence_length or page_size).
        param_name: Parameter name for error message. Default: "KEY".

    Returns:
        Validated value as SettingKey literal type.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is invalid.
    """
    validate_literal(value, SettingKey, param_name)
    return cast(SettingKey, value)


def validate_today(value: str | None, param_name: str = "--today") -> date | None:
    """Parse the --today option.

    Unlike --from/--to, which are user input reported as validation
    errors, a malformed --today is an invocation error.

    Args:
        value: String value from CLI, or None for the local date.
        param_name: Parameter name for error message. Default: "--today".

    Returns:
        The parsed date, or None.

    Raises:
        typer.Exit: With code 3 (INVALID_ARGS) if value is not YYYY-MM-DD.
    """
    if value is None or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except InvalidDateError:
        err_console.print(
            f"[red]Error:[/red] Invalid value for {param_name}: '{escape(value)}'"
        )
        err_console.print("Expected a date in YYYY-MM-DD format.")
        raise typer.Exit(ExitCode.INVALID_ARGS) from None
