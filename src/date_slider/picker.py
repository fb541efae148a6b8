"""DatePicker - stateful facade over the range engine.

The DatePicker class is the input layer of the picker. It accepts raw
date strings, owns the current Selection, and after every edit rebuilds
all derived state in one pass:

    raw input -> parse -> validate -> generate -> reset window -> view

Nothing derived is patched in place. Each PickerView is a fresh
immutable snapshot.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from date_slider._internal.config import ConfigManager, PickerSettings
from date_slider._internal.date_utils import (
    TodayProvider,
    format_day_month,
    parse_optional_date,
    resolve_today,
)
from date_slider._literal_types import SelectionState
from date_slider.engine import OptionSequence, RangeEngine
from date_slider.exceptions import InvalidDateError, OptionNotFoundError
from date_slider.paginator import Paginator
from date_slider.tracker import SelectionTracker
from date_slider.types import (
    DateOption,
    PickerView,
    Selection,
    ValidationResult,
    ViewWindow,
)

_logger = logging.getLogger(__name__)

INVALID_START_MESSAGE = "From date is not a valid date"
INVALID_END_MESSAGE = "To date is not a valid date"


class DatePicker:
    """Interactive date range picker.

    Examples:
        Single-day options from a start date:

        ```python
        picker = DatePicker(today=date(2024, 3, 10))
        picker.set_start("2024-03-10")
        [o.label for o in picker.view().options]
        # ['10/3', '11/3', '12/3', '13/3', '14/3']
        ```

        A two-day range, then picking a later option:

        ```python
        picker.set_end("2024-03-12")
        picker.next_page()
        picker.select(3)
        picker.selection  # Selection(start=date(2024, 3, 12), end=date(2024, 3, 14))
        ```

        Settings from the config file and environment:

        ```python
        picker = DatePicker.from_config()
        ```
    """

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    def __init__(
        self,
        settings: PickerSettings | None = None,
        today: date | TodayProvider | None = None,
        # Dependency injection for testing
        _engine: RangeEngine | None = None,
        _paginator: Paginator | None = None,
    ) -> None:
        """Create an empty picker.

        Args:
            settings: Sequence length and page size. Default: 100 and 5.
            today: Fixed date or provider for the current calendar day.
                Default: the local date, read on every recomputation.
            _engine: Injected RangeEngine for testing.
            _paginator: Injected Paginator for testing.
        """
        self._settings = settings or PickerSettings()
        self._today = today
        self._engine = _engine or RangeEngine(
            sequence_length=self._settings.sequence_length, today=today
        )
        self._paginator = _paginator or Paginator(page_size=self._settings.page_size)
        self._tracker = SelectionTracker()

        self._selection = Selection()
        self._start_parse_error: str | None = None
        self._end_parse_error: str | None = None

        # Derived state, replaced wholesale by _recompute()
        self._current_day = resolve_today(today)
        self._validation = ValidationResult()
        self._sequence = OptionSequence.empty()
        self._window = self._paginator.reset()

    @classmethod
    def from_config(
        cls,
        config_path: Path | None = None,
        today: date | TodayProvider | None = None,
    ) -> DatePicker:
        """Create a picker with settings resolved by ConfigManager.

        Raises:
            ConfigError: If the configuration is invalid.
        """
        settings = ConfigManager(config_path=config_path).resolve_settings()
        return cls(settings=settings, today=today)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def settings(self) -> PickerSettings:
        """Sequence length and page size in use."""
        return self._settings

    @property
    def selection(self) -> Selection:
        """Current selection."""
        return self._selection

    @property
    def validation(self) -> ValidationResult:
        """Validation outcome of the current selection."""
        return self._validation

    @property
    def sequence(self) -> OptionSequence:
        """Full option sequence (empty unless the state is valid)."""
        return self._sequence

    @property
    def window(self) -> ViewWindow:
        """Current offset and page size."""
        return self._window

    @property
    def state(self) -> SelectionState:
        """empty, invalid or valid."""
        if not self._validation.is_valid:
            return "invalid"
        if self._selection.start is None:
            return "empty"
        return "valid"

    # =========================================================================
    # INPUT
    # =========================================================================

    def set_start(self, raw: str | None) -> PickerView:
        """Set the start date from a YYYY-MM-DD string.

        An empty string or None clears the start and the end. A start
        after the current end clears the end. A malformed string clears
        the start and is reported as a start error.

        Returns:
            View after recomputation.
        """
        try:
            start = parse_optional_date(raw)
        except InvalidDateError as e:
            _logger.debug("Rejected start input: %s", e)
            self._selection = Selection()
            self._start_parse_error = INVALID_START_MESSAGE
            self._end_parse_error = None
            return self._recompute()

        self._start_parse_error = None
        if start is None:
            self._selection = Selection()
            self._end_parse_error = None
            return self._recompute()

        end = self._selection.end
        if end is not None and start > end:
            _logger.debug("Start %s is after end %s, clearing end", start, end)
            end = None
        self._selection = Selection(start=start, end=end)
        return self._recompute()

    def set_end(self, raw: str | None) -> PickerView:
        """Set the end date from a YYYY-MM-DD string.

        Ignored while no start date is set. An empty string or None clears
        the end. A malformed string clears the end and is reported as an
        end error.

        Returns:
            View after recomputation.
        """
        if self._selection.start is None:
            _logger.debug("Ignoring end input %r without a start date", raw)
            return self.view()

        try:
            end = parse_optional_date(raw)
        except InvalidDateError as e:
            _logger.debug("Rejected end input: %s", e)
            self._selection = Selection(start=self._selection.start)
            self._end_parse_error = INVALID_END_MESSAGE
            return self._recompute()

        self._end_parse_error = None
        self._selection = Selection(start=self._selection.start, end=end)
        return self._recompute()

    def set_range(self, start: str | None, end: str | None = None) -> PickerView:
        """Replace both dates at once (end is applied after start)."""
        self._selection = Selection()
        self._start_parse_error = None
        self._end_parse_error = None
        self.set_start(start)
        return self.set_end(end)

    def select(self, option_id: int) -> PickerView:
        """Make the option with this id the new selection.

        Selecting an option feeds its dates back as input, so the sequence
        is regenerated from the option's start date and the chosen option
        becomes option 1.

        Args:
            option_id: 1-based id from the current sequence.

        Returns:
            View after recomputation.

        Raises:
            OptionNotFoundError: If no option has this id.
        """
        option = self.get_option(option_id)
        self._selection = self._tracker.select_option(option)
        self._start_parse_error = None
        self._end_parse_error = None
        _logger.debug("Selected option %d: %s", option.id, option.label)
        return self._recompute()

    def reset(self) -> PickerView:
        """Clear the selection."""
        self._selection = Selection()
        self._start_parse_error = None
        self._end_parse_error = None
        return self._recompute()

    # =========================================================================
    # NAVIGATION
    # =========================================================================

    def next_page(self) -> bool:
        """Move the window forward by one option.

        Returns:
            True if the offset changed.
        """
        offset = self._paginator.advance(self._window.offset, self._sequence.length)
        return self._move_to(offset)

    def previous_page(self) -> bool:
        """Move the window back by one option.

        Returns:
            True if the offset changed.
        """
        return self._move_to(self._paginator.retreat(self._window.offset))

    def seek(self, offset: int) -> bool:
        """Jump to an offset, clamped to the navigable range.

        Returns:
            True if the offset changed.
        """
        return self._move_to(self._paginator.seek(offset, self._sequence.length))

    def _move_to(self, offset: int) -> bool:
        if self._sequence.is_empty or offset == self._window.offset:
            return False
        self._window = ViewWindow(offset=offset, page_size=self._window.page_size)
        return True

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def get_option(self, option_id: int) -> DateOption:
        """Look up an option of the current sequence by id.

        Raises:
            OptionNotFoundError: If no option has this id.
        """
        if self._sequence.is_empty:
            raise OptionNotFoundError(option_id)
        length = self._sequence.length
        available = (1, length if length is not None else -1)
        if option_id < 1 or (length is not None and option_id > length):
            raise OptionNotFoundError(option_id, available)
        return self._sequence[option_id - 1]

    def visible_options(self) -> list[DateOption]:
        """Options in the current window."""
        return self._paginator.window(self._sequence, self._window.offset)

    def selected_option(self) -> DateOption | None:
        """Option of the sequence matching the selection, if any."""
        return self._sequence.find(self._selection)

    def summary(self) -> str | None:
        """Describe the selection, or None when empty or invalid.

        Example:
            ```python
            picker.set_range("2024-03-10", "2024-03-12")
            picker.summary()  # 'Selected range: 10/3 to 12/3 (2 days)'
            ```
        """
        start, end = self._selection.start, self._selection.end
        if self.state != "valid" or start is None:
            return None
        if end is None:
            return (
                f"Selected start date: {format_day_month(start)} "
                "(showing single day options)"
            )
        if start == end:
            return f"Selected date: {format_day_month(start)} (single day)"
        days = self._engine.duration(self._selection)
        return (
            f"Selected range: {format_day_month(start)} to "
            f"{format_day_month(end)} ({days} days)"
        )

    def status(self) -> str | None:
        """Navigation info line, or None when there are no options.

        Example: ``"Showing options 1-5 of 100+ - Option 1 selected"``.
        """
        if self._sequence.is_empty:
            return None
        length = self._sequence.length
        first = self._window.offset + 1
        last = self._window.offset + self._window.page_size
        if length is not None:
            last = min(last, length)
            text = f"Showing options {first}-{last} of {length}+"
        else:
            text = f"Showing options {first}-{last} of many"
        selected = self.selected_option()
        if selected is not None:
            text += f" - Option {selected.id} selected"
        return text

    def view(self) -> PickerView:
        """Snapshot of everything the display layer renders."""
        selected = self.selected_option()
        sequence_length = self._sequence.length
        return PickerView(
            selection=self._selection,
            validation=self._validation,
            state=self.state,
            options=self.visible_options(),
            window=self._window,
            sequence_length=sequence_length,
            can_advance=(
                not self._sequence.is_empty
                and self._paginator.can_advance(self._window.offset, sequence_length)
            ),
            can_retreat=self._paginator.can_retreat(self._window.offset),
            selected_option_id=selected.id if selected is not None else None,
            min_start=self._engine.min_start(self._current_day),
            min_end=self._engine.min_end(self._selection, self._current_day),
            summary=self.summary(),
            status=self.status(),
        )

    # =========================================================================
    # RECOMPUTATION
    # =========================================================================

    def _recompute(self) -> PickerView:
        """Rebuild validation, sequence and window from the selection."""
        self._current_day = resolve_today(self._today)
        validation = self._engine.validate(self._selection, self._current_day)

        if self._start_parse_error or self._end_parse_error:
            validation = ValidationResult(
                start_error=self._start_parse_error or validation.start_error,
                end_error=self._end_parse_error or validation.end_error,
            )
            sequence = OptionSequence.empty()
        elif validation.is_valid:
            sequence = self._engine.generate(self._selection, self._current_day)
        else:
            sequence = OptionSequence.empty()

        self._validation = validation
        self._sequence = sequence
        self._window = self._paginator.reset()
        _logger.debug(
            "Recomputed: selection=%s state=%s sequence=%r",
            self._selection.to_dict(),
            self.state,
            sequence,
        )
        return self.view()
