"""Output formatters for CLI commands.

Commands emit one of two shapes: a list of option rows (``options``) or
a single result dict (``validate``, ``config show``). Each formatter
accepts both:
- JSON: Pretty-printed JSON
- JSONL: One JSON object per option row
- Table: Rich table, with the selected option highlighted
- CSV: Header row plus one row per option
- Plain: Option labels one per line, or key=value for a result dict
"""

from __future__ import annotations

import csv
import io
import json
from datetime import date
from typing import Any

from rich.table import Table

from date_slider.types import DateOption

Rows = dict[str, Any] | list[dict[str, Any]]


def option_rows(
    options: list[DateOption], selected_option_id: int | None = None
) -> list[dict[str, Any]]:
    """Convert options to output rows with a ``selected`` flag."""
    return [
        {**option.to_dict(), "selected": option.id == selected_option_id}
        for option in options
    ]


def _as_rows(data: Rows) -> list[dict[str, Any]]:
    return [data] if isinstance(data, dict) else data


def _iso_default(obj: Any) -> str:
    if isinstance(obj, date):
        return obj.isoformat()
    return str(obj)


def _text(value: Any, *, for_csv: bool = False) -> str:
    """Render a field value as a table, CSV or plain-text cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        if for_csv:
            return "true" if value else "false"
        return "Yes" if value else "No"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def format_json(data: Rows) -> str:
    """Format data as JSON with 2-space indentation."""
    return json.dumps(data, indent=2, default=_iso_default, ensure_ascii=False)


def format_jsonl(data: Rows) -> str:
    """Format data as one compact JSON object per line."""
    return "\n".join(
        json.dumps(row, default=_iso_default, ensure_ascii=False)
        for row in _as_rows(data)
    )


def format_table(
    data: Rows,
    columns: list[str] | None = None,
    title: str | None = None,
) -> Table:
    """Format rows as a Rich table.

    Rows whose ``selected`` field is true are rendered bold green.

    Args:
        data: Option rows or a single result dict.
        columns: Fields to show, in order. Default: keys of the first row.
        title: Optional table title.

    Returns:
        Rich Table object ready for printing.
    """
    table = Table(show_header=True, header_style="bold", title=title)
    rows = _as_rows(data)
    if not rows:
        return table

    fields = columns or list(rows[0])
    for col in fields:
        table.add_column(col.upper().replace("_", " "))
    for row in rows:
        table.add_row(
            *(_text(row.get(col)) for col in fields),
            style="bold green" if row.get("selected") else None,
        )
    return table


def format_csv(data: Rows) -> str:
    """Format rows as CSV with a header row; booleans are lowercase."""
    rows = _as_rows(data)
    if not rows:
        return ""

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=list(rows[0]), extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow({k: _text(v, for_csv=True) for k, v in row.items()})
    return output.getvalue()


def format_plain(data: Rows) -> str:
    """Format data as minimal plain text.

    Option rows print their labels, one per line. A result dict prints
    key=value pairs.
    """
    if isinstance(data, dict):
        return "\n".join(f"{k}={_text(v, for_csv=True)}" for k, v in data.items())
    return "\n".join(str(row.get("label", row.get("id", ""))) for row in data)
