"""Selection tracking: which option, if any, is the current selection."""

from __future__ import annotations

from collections.abc import Iterable

from date_slider.types import DateOption, Selection


class SelectionTracker:
    """Compares the selection with generated options.

    Both methods are pure. At most one option of a sequence can match a
    selection, since options of one sequence have pairwise distinct starts.
    """

    @staticmethod
    def matches(selection: Selection, option: DateOption) -> bool:
        """True iff both selection endpoints are set and equal the option's."""
        if selection.start is None or selection.end is None:
            return False
        return selection.start == option.start and selection.end == option.end

    @staticmethod
    def select_option(option: DateOption) -> Selection:
        """Selection that replaces the current one when an option is picked."""
        return Selection(start=option.start, end=option.end)

    @classmethod
    def selected_option(
        cls, selection: Selection, options: Iterable[DateOption]
    ) -> DateOption | None:
        """First option in options matching the selection, or None.

        Stops at the first match; do not pass an unbounded sequence unless
        a match is known to exist.
        """
        for option in options:
            if cls.matches(selection, option):
                return option
        return None
