"""Date range picker commands.

This module provides the picker commands:
- options: Print a window (or all) of the sliding options for a range
- validate: Check a range against the validation rules
- browse: Interactive picker with paging and option selection

--from/--to are user input: bad values are reported as validation
errors (exit code 3), never as tracebacks.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape

from date_slider.cli.formatters import format_table, option_rows
from date_slider.cli.options import (
    FormatOption,
    FromOption,
    PageSizeOption,
    TodayOption,
    ToOption,
)
from date_slider.cli.utils import (
    ExitCode,
    build_picker,
    console,
    err_console,
    handle_errors,
    output_result,
    print_validation_errors,
)
from date_slider.cli.validators import validate_today
from date_slider.exceptions import OptionNotFoundError
from date_slider.picker import DatePicker
from date_slider.types import PickerView

OPTION_COLUMNS = ["id", "label", "start", "end", "selected"]

BROWSE_HELP = """Commands:
  n, next        show the next option
  p, prev        show the previous option
  <id>           select option <id> as the new range
  from DATE      set the From date (YYYY-MM-DD); 'from' alone clears it
  to DATE        set the To date (YYYY-MM-DD); 'to' alone clears it
  reset          clear the selection
  ?, help        show this help
  q, quit        exit"""


@handle_errors
def options_command(
    ctx: typer.Context,
    from_date: FromOption = "",
    to_date: ToOption = "",
    offset: Annotated[
        int,
        typer.Option("--offset", "-o", help="Index of the first option shown.", min=0),
    ] = 0,
    show_all: Annotated[
        bool,
        typer.Option("--all", help="Print the whole sequence (bounded only)."),
    ] = False,
    page_size: PageSizeOption = None,
    today: TodayOption = None,
    format: FormatOption = "json",
) -> None:
    """List sliding date range options for a range.

    Option k starts k-1 days after --from and keeps the --from/--to
    duration. Without --to every option is a single day.

    --offset is clamped to the last full page.

    Examples:

        dslide options --from 2025-06-01
        dslide options --from 2025-06-01 --to 2025-06-03 --offset 10
        dslide options --from 2025-06-01 --to 2025-06-07 --all --format csv
    """
    if not from_date:
        err_console.print("[red]Error:[/red] --from is required")
        raise typer.Exit(ExitCode.INVALID_ARGS)

    picker = build_picker(ctx, validate_today(today), page_size)
    view = picker.set_range(from_date, to_date or None)

    if view.state != "valid":
        print_validation_errors(view.validation)
        raise typer.Exit(ExitCode.INVALID_ARGS)

    if show_all:
        if not picker.sequence.is_bounded:
            err_console.print(
                "[red]Error:[/red] --all needs a bounded sequence "
                "(sequence_length is 0)"
            )
            raise typer.Exit(ExitCode.INVALID_ARGS)
        options = list(picker.sequence)
    else:
        picker.seek(offset)
        options = picker.visible_options()

    output_result(
        ctx,
        option_rows(options, view.selected_option_id),
        OPTION_COLUMNS,
        format=format,
    )


@handle_errors
def validate_command(
    ctx: typer.Context,
    from_date: FromOption = "",
    to_date: ToOption = "",
    today: TodayOption = None,
    format: FormatOption = "json",
) -> None:
    """Check a date range against the picker rules.

    The From date must not be in the past, and the To date must not be
    before the From date (same-day ranges are allowed).

    Exits with code 3 when the range is invalid.

    Examples:

        dslide validate --from 2025-06-01 --to 2025-06-03
        dslide validate --from 2025-06-01 --today 2025-06-02
    """
    picker = build_picker(ctx, validate_today(today))
    view = picker.set_range(from_date or None, to_date or None)

    result = {
        **view.validation.to_dict(),
        "state": view.state,
        "selection": view.selection.to_dict(),
        "min_start": view.min_start.isoformat(),
        "min_end": view.min_end.isoformat(),
    }
    output_result(ctx, result, format=format)

    if not view.validation.is_valid:
        raise typer.Exit(ExitCode.INVALID_ARGS)


def _render(view: PickerView) -> None:
    """Print the picker state for the interactive browser."""
    if not view.validation.is_valid:
        for message in view.validation.errors:
            console.print(f"[red]Error:[/red] {message}", highlight=False)
        console.print("Fix the dates above to see date range options.")
        return

    if view.state == "empty":
        console.print(
            'Select a "From" date to see date options. The "To" date is '
            "optional - without it, single day options are shown.",
            highlight=False,
        )
        return

    if view.summary:
        console.print(view.summary, highlight=False)
    console.print(
        format_table(option_rows(view.options, view.selected_option_id), OPTION_COLUMNS)
    )
    left = "<" if view.can_retreat else " "
    right = ">" if view.can_advance else " "
    console.print(f"{left} {view.status} {right}", highlight=False)


def _apply(picker: DatePicker, command: str) -> bool:
    """Apply one browse command; return False to stop browsing."""
    verb, _, argument = command.strip().partition(" ")
    verb = verb.lower()
    argument = argument.strip()

    if verb in ("q", "quit", "exit"):
        return False
    if verb in ("?", "help"):
        console.print(BROWSE_HELP, highlight=False)
        return True

    if verb in ("n", "next", ">"):
        if not picker.next_page():
            console.print("No later options.", highlight=False)
    elif verb in ("p", "prev", "previous", "<"):
        if not picker.previous_page():
            console.print("No earlier options.", highlight=False)
    elif verb == "from":
        picker.set_start(argument or None)
    elif verb == "to":
        if picker.selection.start is None:
            console.print("Select a From date first.", highlight=False)
            return True
        picker.set_end(argument or None)
    elif verb == "reset":
        picker.reset()
    elif verb.isdigit():
        try:
            picker.select(int(verb))
        except OptionNotFoundError as e:
            console.print(f"[red]Error:[/red] {escape(e.message)}", highlight=False)
            return True
    elif verb:
        console.print(
            f"Unknown command: {escape(repr(command.strip()))}. Type ? for help.",
            highlight=False,
        )
        return True

    _render(picker.view())
    return True


@handle_errors
def browse_command(
    ctx: typer.Context,
    from_date: FromOption = "",
    to_date: ToOption = "",
    page_size: PageSizeOption = None,
    today: TodayOption = None,
) -> None:
    """Browse sliding date range options interactively.

    Page with n/p, pick an option by id, or edit the dates with
    'from DATE' and 'to DATE'. Type ? for all commands, q to quit.

    Examples:

        dslide browse
        dslide browse --from 2025-06-01 --to 2025-06-03
    """
    picker = build_picker(ctx, validate_today(today), page_size)
    if from_date:
        picker.set_range(from_date, to_date or None)
    _render(picker.view())

    while True:
        try:
            command = typer.prompt(
                "dslide", default="", show_default=False, prompt_suffix="> "
            )
        except typer.Abort:
            break
        if not _apply(picker, command):
            break
