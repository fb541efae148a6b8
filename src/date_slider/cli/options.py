"""Shared CLI option definitions.

Provides reusable Annotated type aliases for common CLI options
to avoid duplication across commands.
"""

from __future__ import annotations

from typing import Annotated, Literal

import typer

# Output format type for formatting command output
OutputFormat = Literal["json", "jsonl", "table", "csv", "plain"]

# Reusable Annotated type for --format option
FormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format: json, jsonl, table, csv, plain.",
    ),
]

FromOption = Annotated[
    str,
    typer.Option("--from", help="Start date (YYYY-MM-DD).", show_default=False),
]

ToOption = Annotated[
    str,
    typer.Option(
        "--to",
        help="End date (YYYY-MM-DD). Omit for single-day options.",
        show_default=False,
    ),
]

# --today pins the current day; validation is relative to it
TodayOption = Annotated[
    str | None,
    typer.Option(
        "--today",
        help="Treat this date (YYYY-MM-DD) as today.",
        envvar="DSLIDE_TODAY",
        show_default=False,
    ),
]

PageSizeOption = Annotated[
    int | None,
    typer.Option(
        "--page-size",
        "-n",
        help="Options per page (overrides config).",
        show_default=False,
    ),
]
