"""Configuration commands.

This module provides commands for the picker settings file:
- show: Show resolved settings (file + environment + defaults)
- set: Store a setting in the config file
- unset: Remove a setting from the config file
- path: Print the config file location
"""

from __future__ import annotations

from typing import Annotated

import typer

from date_slider.cli.options import FormatOption
from date_slider.cli.utils import (
    console,
    err_console,
    get_config,
    handle_errors,
    output_result,
)
from date_slider.cli.validators import validate_setting_key

config_app = typer.Typer(
    name="config",
    help="Manage picker settings.",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)


@config_app.command("show")
@handle_errors
def config_show(
    ctx: typer.Context,
    format: FormatOption = "json",
) -> None:
    """Show the settings in effect.

    Environment variables (DSLIDE_SEQUENCE_LENGTH, DSLIDE_PAGE_SIZE)
    override the config file. A sequence_length of 0 means unbounded.
    """
    config = get_config(ctx)
    settings = config.resolve_settings()
    output_result(
        ctx,
        {**settings.to_dict(), "config_path": str(config.config_path)},
        format=format,
    )


@config_app.command("set")
@handle_errors
def config_set(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="sequence_length or page_size.")],
    value: Annotated[int, typer.Argument(help="New value (0 = unbounded length).")],
) -> None:
    """Store a setting in the config file.

    Examples:

        dslide config set page_size 7
        dslide config set sequence_length 0
    """
    setting = validate_setting_key(key)
    get_config(ctx).set_value(setting, value)
    if not ctx.obj.get("quiet", False):
        err_console.print(f"[green]Set[/green] {setting} = {value}")


@config_app.command("unset")
@handle_errors
def config_unset(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="sequence_length or page_size.")],
) -> None:
    """Remove a setting from the config file, restoring its default."""
    setting = validate_setting_key(key)
    get_config(ctx).unset_value(setting)
    if not ctx.obj.get("quiet", False):
        err_console.print(f"[green]Unset[/green] {setting}")


@config_app.command("path")
def config_path(ctx: typer.Context) -> None:
    """Print the config file location."""
    console.print(str(get_config(ctx).config_path), highlight=False, soft_wrap=True)
