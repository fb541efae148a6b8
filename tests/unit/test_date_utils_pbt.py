"""Property-based tests for date_utils module.

Uses Hypothesis to verify invariants of parsing, formatting and
day arithmetic.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from hypothesis import given
from hypothesis import strategies as st

from date_slider._internal.date_utils import (
    day_span,
    format_day_month,
    parse_iso_date,
    shift_days,
)

dates = st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 12, 31))


class TestDateUtilsProperties:
    """Property-based tests for date utilities."""

    @given(d=dates)
    def test_parse_accepts_isoformat(self, d: date) -> None:
        """Property: every isoformat() string parses back to the same date."""
        assert parse_iso_date(d.isoformat()) == d

    @given(d=dates, days=st.integers(min_value=0, max_value=1000))
    def test_span_of_shift_is_shift(self, d: date, days: int) -> None:
        """Property: day_span(d, shift_days(d, n)) == n."""
        assert day_span(d, shift_days(d, days)) == days

    @given(
        d=dates,
        days=st.integers(min_value=0, max_value=365),
        seconds=st.integers(min_value=1, max_value=86399),
    )
    def test_partial_days_round_up(self, d: date, days: int, seconds: int) -> None:
        """Property: any sub-day remainder adds exactly one day."""
        start = datetime(d.year, d.month, d.day)
        end = start + timedelta(days=days, seconds=seconds)
        assert day_span(start, end) == days + 1

    @given(d=dates)
    def test_label_has_no_padding_or_year(self, d: date) -> None:
        """Property: label is exactly "<day>/<month>"."""
        label = format_day_month(d)
        day, month = label.split("/")

        assert int(day) == d.day
        assert int(month) == d.month
        assert not day.startswith("0")
        assert not month.startswith("0")
