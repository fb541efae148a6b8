"""Property-based tests for Paginator bounds."""

from __future__ import annotations

from datetime import date

from hypothesis import given
from hypothesis import strategies as st

from date_slider.engine import OptionSequence
from date_slider.paginator import Paginator

page_sizes = st.integers(min_value=1, max_value=20)
lengths = st.integers(min_value=0, max_value=500)


class TestPaginatorProperties:
    """Property-based tests for advance/retreat."""

    @given(
        page_size=page_sizes,
        length=lengths,
        steps=st.integers(min_value=0, max_value=600),
    )
    def test_advance_stays_in_bounds(
        self, page_size: int, length: int, steps: int
    ) -> None:
        """Property: repeated advance never shows past the end or goes negative."""
        pager = Paginator(page_size=page_size)
        offset = 0
        for _ in range(steps):
            offset = pager.advance(offset, length)

        assert offset >= 0
        if length >= page_size:
            assert offset + page_size <= length
        else:
            assert offset == 0

    @given(offset=st.integers(min_value=0, max_value=1000), steps=st.integers(0, 1200))
    def test_retreat_never_negative(self, offset: int, steps: int) -> None:
        """Property: repeated retreat stops at 0."""
        pager = Paginator()
        for _ in range(steps):
            offset = pager.retreat(offset)

        assert offset >= 0

    @given(page_size=page_sizes, length=lengths, offset=st.integers(0, 500))
    def test_can_advance_iff_advance_moves(
        self, page_size: int, length: int, offset: int
    ) -> None:
        """Property: from a reachable offset, can_advance iff advance changes it."""
        pager = Paginator(page_size=page_size)
        offset = pager.seek(offset, length)

        moved = pager.advance(offset, length) != offset

        assert pager.can_advance(offset, length) == moved

    @given(page_size=page_sizes, length=lengths, offset=st.integers(0, 500))
    def test_window_size(self, page_size: int, length: int, offset: int) -> None:
        """Property: a window never holds more than page_size options."""
        pager = Paginator(page_size=page_size)
        sequence = OptionSequence(date(2024, 3, 10), 0, length)

        window = pager.window(sequence, pager.seek(offset, length))

        assert len(window) == min(page_size, length)
