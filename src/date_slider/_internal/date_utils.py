"""Date utilities for option generation.

Provides ISO date parsing, the compact ``day/month`` label format used
for options, and whole-day span arithmetic.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta

from date_slider.exceptions import InvalidDateError

ONE_DAY = timedelta(days=1)

TodayProvider = Callable[[], date]
"""Zero-argument callable returning the current calendar day."""


def parse_iso_date(value: str) -> date:
    """Parse a strict ISO calendar date.

    Args:
        value: Date in YYYY-MM-DD format.

    Returns:
        The parsed date.

    Raises:
        InvalidDateError: If value is not a valid YYYY-MM-DD date.

    Example:
        ```python
        parse_iso_date("2024-03-10")  # date(2024, 3, 10)
        parse_iso_date("10/03/2024")  # raises InvalidDateError
        ```
    """
    # date.fromisoformat accepts "20240310" and week dates on 3.11+
    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise InvalidDateError(value)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(value) from e


def parse_optional_date(value: str | None) -> date | None:
    """Parse an optional date string; empty or None yields None.

    Raises:
        InvalidDateError: If a non-empty value is not YYYY-MM-DD.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return parse_iso_date(value)


def format_day_month(value: date) -> str:
    """Format a date as ``day/month`` without leading zeros or year.

    Example:
        ```python
        format_day_month(date(2024, 11, 3))  # "3/11"
        ```
    """
    return f"{value.day}/{value.month}"


def shift_days(value: date, days: int) -> date:
    """Return value moved by a whole number of days."""
    return value + timedelta(days=days)


def day_span(start: date | datetime, end: date | datetime) -> int:
    """Whole-day span from start to end, rounded up.

    The elapsed time is divided by one day with ceiling semantics, so any
    sub-day remainder counts as a full day. For plain dates the result is
    the exact day difference.

    Args:
        start: Range start.
        end: Range end.

    Returns:
        Number of days (negative if end is before start).
    """
    elapsed = end - start
    return -(-elapsed // ONE_DAY)


def as_day(value: date) -> date:
    """Drop the time of day from a datetime; plain dates pass through."""
    return value.date() if isinstance(value, datetime) else value


def resolve_today(today: date | TodayProvider | None) -> date:
    """Resolve an injected "today" into a concrete date.

    Args:
        today: A fixed date, a provider callable, or None for the local
            calendar day.

    Returns:
        The calendar day to validate against.
    """
    if today is None:
        return date.today()
    if isinstance(today, date):
        return as_day(today)
    return as_day(today())
