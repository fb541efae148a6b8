"""Property-based tests for RangeEngine.

Uses Hypothesis to verify the generation invariants: sequence length,
day-by-day sliding, duration preservation, validation rules, and
determinism.
"""

from __future__ import annotations

from datetime import date, timedelta

from hypothesis import given
from hypothesis import strategies as st

from date_slider.engine import RangeEngine
from date_slider.tracker import SelectionTracker
from date_slider.types import Selection

TODAY = date(2024, 3, 10)

future_dates = st.dates(min_value=TODAY, max_value=date(2030, 12, 31))
past_dates = st.dates(min_value=date(2000, 1, 1), max_value=TODAY - timedelta(days=1))
durations = st.integers(min_value=0, max_value=400)


@st.composite
def valid_range(draw: st.DrawFn) -> Selection:
    """Generate a valid (start, end) selection with end >= start >= today."""
    start = draw(future_dates)
    return Selection(start, start + timedelta(days=draw(durations)))


engine = RangeEngine(today=TODAY)


class TestGenerateProperties:
    """Property-based tests for generate."""

    @given(start=future_dates)
    def test_single_day_options(self, start: date) -> None:
        """Property: no end -> 100 single-day options, option k at start + k-1."""
        options = list(engine.generate(Selection(start=start)))

        assert len(options) == 100
        for k, option in enumerate(options, start=1):
            assert option.id == k
            assert option.start == start + timedelta(days=k - 1)
            assert option.end == option.start

    @given(selection=valid_range())
    def test_duration_preserved(self, selection: Selection) -> None:
        """Property: every option spans the selection's duration."""
        assert selection.start is not None and selection.end is not None
        span = selection.end - selection.start

        for option in engine.generate(selection):
            assert option.end - option.start == span

    @given(selection=valid_range())
    def test_consecutive_options_slide_one_day(self, selection: Selection) -> None:
        """Property: each option starts one day after the previous one."""
        options = list(engine.generate(selection))

        for previous, current in zip(options, options[1:]):
            assert current.start - previous.start == timedelta(days=1)

    @given(selection=valid_range())
    def test_idempotent(self, selection: Selection) -> None:
        """Property: generating twice gives identical ids, dates and labels."""
        first = [o.to_dict() for o in engine.generate(selection)]
        second = [o.to_dict() for o in engine.generate(selection)]

        assert first == second

    @given(selection=valid_range())
    def test_labels_distinguish_ranges(self, selection: Selection) -> None:
        """Property: multi-day labels contain a dash, same-day labels do not."""
        options = engine.generate(selection)
        same_day = selection.start == selection.end

        assert all(("-" in o.label) != same_day for o in options)

    @given(selection=valid_range(), k=st.integers(min_value=1, max_value=100))
    def test_exactly_one_match(self, selection: Selection, k: int) -> None:
        """Property: a selection equal to option k matches only option k."""
        options = list(engine.generate(selection))
        chosen = SelectionTracker.select_option(options[k - 1])

        matching = [o.id for o in options if SelectionTracker.matches(chosen, o)]

        assert matching == [k]


class TestValidateProperties:
    """Property-based tests for validate."""

    @given(start=past_dates, end=st.none() | future_dates)
    def test_past_start_always_flagged(self, start: date, end: date | None) -> None:
        """Property: start < today is flagged regardless of end."""
        selection = Selection(start, end)

        assert engine.validate(selection).start_error is not None
        assert engine.generate(selection).is_empty

    @given(start=future_dates, back=st.integers(min_value=1, max_value=400))
    def test_end_before_start_flagged(self, start: date, back: int) -> None:
        """Property: end < start is flagged and suppresses options."""
        selection = Selection(start, start - timedelta(days=back))

        result = engine.validate(selection)

        assert result.end_error is not None
        assert result.start_error is None
        assert engine.generate(selection).is_empty

    @given(end=st.none() | st.dates())
    def test_no_start_no_errors(self, end: date | None) -> None:
        """Property: without a start, no errors and no options."""
        selection = Selection(end=end)

        assert engine.validate(selection).is_valid
        assert engine.generate(selection).is_empty
