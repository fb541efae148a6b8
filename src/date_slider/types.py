"""Value and result types for date_slider.

All types are immutable frozen dataclasses with:
- JSON serialization via the `to_dict()` method (dates as ISO strings)
- Full type hints for IDE/mypy support

Immutability: a new Selection, option window or PickerView is built on
every input change. Nothing here is patched in place.

DataFrame caching: PickerView's `.df` property computes a DataFrame of the
visible options on first access and caches it internally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pandas as pd

from date_slider._internal.date_utils import as_day
from date_slider._literal_types import SelectionState


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


# =============================================================================
# Input Types
# =============================================================================


@dataclass(frozen=True)
class Selection:
    """The user's chosen start date and optional end date.

    An end date without a start date is not produced by DatePicker, but
    the engine accepts it and treats it like an empty selection.

    Example:
        ```python
        Selection(start=date(2024, 3, 10), end=date(2024, 3, 12))
        ```
    """

    start: date | None = None
    """Range start, or None when nothing is selected."""

    end: date | None = None
    """Range end, or None for an open (single-day) selection."""

    def __post_init__(self) -> None:
        # Only the calendar day counts; datetimes are truncated
        if self.start is not None:
            object.__setattr__(self, "start", as_day(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", as_day(self.end))

    @property
    def is_empty(self) -> bool:
        """True when no start date is set."""
        return self.start is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize selection for JSON output.

        Returns:
            Dictionary with ISO date strings (or None) for start and end.
        """
        return {"start": _iso(self.start), "end": _iso(self.end)}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a Selection.

    Presence of either error means the selection is invalid and no
    options are generated.
    """

    start_error: str | None = None
    """Message for the start date field, if it is rejected."""

    end_error: str | None = None
    """Message for the end date field, if it is rejected."""

    @property
    def is_valid(self) -> bool:
        """True when neither field has an error."""
        return self.start_error is None and self.end_error is None

    @property
    def errors(self) -> list[str]:
        """All error messages, start first."""
        return [e for e in (self.start_error, self.end_error) if e is not None]

    def to_dict(self) -> dict[str, Any]:
        """Serialize result for JSON output."""
        return {
            "valid": self.is_valid,
            "start_error": self.start_error,
            "end_error": self.end_error,
        }


# =============================================================================
# Generated Types
# =============================================================================


@dataclass(frozen=True)
class DateOption:
    """One generated candidate range in the sliding sequence.

    Option k (1-based) starts k-1 days after the selection start and
    shares the selection's duration.
    """

    id: int
    """1-based position in the sequence."""

    start: date
    """First day of the candidate range."""

    end: date
    """Last day of the candidate range (equal to start for same-day ranges)."""

    label: str
    """Display text, e.g. "10/3" or "10/3-12/3"."""

    @property
    def duration(self) -> int:
        """Whole days between start and end."""
        return (self.end - self.start).days

    def to_dict(self) -> dict[str, Any]:
        """Serialize option for JSON output."""
        return {
            "id": self.id,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "label": self.label,
        }


@dataclass(frozen=True)
class ViewWindow:
    """Offset and page size of the visible slice of the option sequence."""

    offset: int = 0
    """Index (0-based) of the first visible option."""

    page_size: int = 5
    """Number of options shown at once."""

    def to_dict(self) -> dict[str, Any]:
        """Serialize window for JSON output."""
        return {"offset": self.offset, "page_size": self.page_size}


# =============================================================================
# Render Output
# =============================================================================


@dataclass(frozen=True)
class PickerView:
    """Everything a display layer needs to render the picker.

    Built by DatePicker.view() after each recomputation. Validation errors
    and options are mutually exclusive: when `validation` carries an error,
    `options` is empty.

    Example:
        ```python
        picker = DatePicker(today=date(2024, 3, 10))
        picker.set_start("2024-03-10")
        view = picker.view()
        print([o.label for o in view.options])  # ['10/3', '11/3', ...]
        print(view.status)  # 'Showing options 1-5 of 100+'
        ```
    """

    selection: Selection
    """Current selection."""

    validation: ValidationResult
    """Validation outcome for the selection."""

    state: SelectionState
    """empty, invalid or valid."""

    options: list[DateOption]
    """Options in the current window."""

    window: ViewWindow
    """Current offset and page size."""

    sequence_length: int | None
    """Total options in the sequence (None when unbounded, 0 when none)."""

    can_advance: bool
    """Whether the window can move forward."""

    can_retreat: bool
    """Whether the window can move back."""

    selected_option_id: int | None
    """Id of the option matching the selection, if any."""

    min_start: date
    """Earliest allowed start date (today)."""

    min_end: date
    """Earliest allowed end date (the start date, or today without one)."""

    summary: str | None = None
    """Description of the selection, or None when empty or invalid."""

    status: str | None = None
    """Navigation info line, or None when no options exist."""

    _df_cache: pd.DataFrame | None = field(default=None, repr=False, compare=False)

    @property
    def offset(self) -> int:
        """Index (0-based) of the first visible option."""
        return self.window.offset

    @property
    def page_size(self) -> int:
        """Number of options shown at once."""
        return self.window.page_size

    @property
    def df(self) -> pd.DataFrame:
        """Visible options as a DataFrame.

        Conversion is lazy - computed on first access and cached.

        Returns:
            DataFrame with columns: id, start, end, label, selected.
        """
        if self._df_cache is not None:
            return self._df_cache

        rows = [
            {**o.to_dict(), "selected": o.id == self.selected_option_id}
            for o in self.options
        ]
        result_df = (
            pd.DataFrame(rows)
            if rows
            else pd.DataFrame(columns=["id", "start", "end", "label", "selected"])
        )

        # Cache using object.__setattr__ for frozen dataclass
        object.__setattr__(self, "_df_cache", result_df)
        return result_df

    def to_dict(self) -> dict[str, Any]:
        """Serialize view for JSON output.

        Returns:
            Dictionary with all fields; dates as ISO strings and options
            as a list of dicts.
        """
        return {
            "selection": self.selection.to_dict(),
            "validation": self.validation.to_dict(),
            "state": self.state,
            "options": [o.to_dict() for o in self.options],
            "offset": self.window.offset,
            "page_size": self.window.page_size,
            "sequence_length": self.sequence_length,
            "can_advance": self.can_advance,
            "can_retreat": self.can_retreat,
            "selected_option_id": self.selected_option_id,
            "min_start": self.min_start.isoformat(),
            "min_end": self.min_end.isoformat(),
            "summary": self.summary,
            "status": self.status,
        }
