"""Window navigation over an option sequence.

The paginator is stateless: it maps an offset and sequence length to a
new offset. The caller owns the current ViewWindow and replaces it with
reset() whenever the sequence is regenerated.

A length of None means the sequence is unbounded; forward navigation is
then always possible.
"""

from __future__ import annotations

from collections.abc import Sequence

from date_slider.engine import OptionSequence
from date_slider.types import DateOption, ViewWindow

DEFAULT_PAGE_SIZE = 5


class Paginator:
    """Fixed-size window navigation, one option per step.

    Example:
        ```python
        pager = Paginator(page_size=5)
        pager.advance(0, 100)  # 1
        pager.advance(95, 100)  # 95 (last full window)
        pager.retreat(0)  # 0
        ```
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Initialize Paginator.

        Args:
            page_size: Options per window. Default: 5.

        Raises:
            ValueError: If page_size is less than 1.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        """Options per window."""
        return self._page_size

    def reset(self) -> ViewWindow:
        """Window at the start of a freshly generated sequence."""
        return ViewWindow(offset=0, page_size=self._page_size)

    def window(
        self,
        sequence: OptionSequence | Sequence[DateOption],
        offset: int,
    ) -> list[DateOption]:
        """Return ``sequence[offset:offset + page_size]``, clipped.

        Never raises for out-of-range offsets; negative offsets are
        treated as 0.
        """
        if isinstance(sequence, OptionSequence):
            return sequence.window(offset, self._page_size)
        offset = max(offset, 0)
        return list(sequence[offset : offset + self._page_size])

    def last_offset(self, length: int | None) -> int | None:
        """Offset of the last full window (None when unbounded)."""
        if length is None:
            return None
        return max(length - self._page_size, 0)

    def advance(self, offset: int, length: int | None) -> int:
        """Move forward one option, stopping at the last full window."""
        last = self.last_offset(length)
        if last is None:
            return offset + 1
        return max(min(offset + 1, last), 0)

    def retreat(self, offset: int) -> int:
        """Move back one option, stopping at 0."""
        return max(0, offset - 1)

    def can_advance(self, offset: int, length: int | None) -> bool:
        """True while a later window exists."""
        if length is None:
            return True
        return offset < length - self._page_size

    def can_retreat(self, offset: int) -> bool:
        """True while an earlier window exists."""
        return offset > 0

    def seek(self, offset: int, length: int | None) -> int:
        """Clamp an arbitrary offset into the navigable range.

        Equivalent to advancing from 0 ``offset`` times.
        """
        last = self.last_offset(length)
        offset = max(offset, 0)
        return offset if last is None else min(offset, last)
