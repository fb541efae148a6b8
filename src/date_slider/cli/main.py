"""CLI entry point for date_slider.

This module provides the `dslide` command-line interface. It defines
global options and registers commands.

Usage:
    dslide [OPTIONS] COMMAND [ARGS]...

Examples:
    dslide --help
    dslide options --from 2025-06-01 --to 2025-06-03
    dslide browse --from 2025-06-01
    dslide config set page_size 7
"""

from __future__ import annotations

import signal
import sys
from pathlib import Path
from typing import Annotated

import typer

import date_slider
from date_slider.cli.utils import ExitCode, configure_logging, err_console

# Create main application
app = typer.Typer(
    name="dslide",
    help="Sliding date range picker - browse date ranges one day at a time.",
    epilog="""[dim]Workflow:[/dim] dslide validate → dslide options → dslide browse""",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        print(f"dslide version {date_slider.__version__}")
        raise typer.Exit()


def _handle_interrupt(_signum: int, _frame: object) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    err_console.print("\n[yellow]Interrupted[/yellow]")
    sys.exit(ExitCode.INTERRUPTED)


# Set up signal handler for Ctrl+C
signal.signal(signal.SIGINT, _handle_interrupt)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use (overrides default location).",
            envvar="DSLIDE_CONFIG_PATH",
        ),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress confirmation output.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug output.",
        ),
    ] = False,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Sliding date range picker - browse date ranges one day at a time.

    Pick a From date (and optionally a To date); each option shifts the
    range forward by one day while keeping its length.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["quiet"] = quiet
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = None


# Import and register commands
# These imports are done here to avoid circular imports
def _register_commands() -> None:
    """Register all commands and command groups with the main app."""
    from date_slider.cli.commands.config import config_app
    from date_slider.cli.commands.picker import (
        browse_command,
        options_command,
        validate_command,
    )

    app.command("options")(options_command)
    app.command("validate")(validate_command)
    app.command("browse")(browse_command)
    app.add_typer(config_app, name="config", help="Manage picker settings.")


# Register commands when module is imported
_register_commands()


if __name__ == "__main__":
    app()
