"""Range engine: validation and sliding option generation.

The engine turns a Selection into a sequence of candidate ranges. Option
k (1-based) starts k-1 days after the selection start and keeps the
selection's whole-day duration:

    start = 2024-03-10, end = 2024-03-12  ->  10/3-12/3, 11/3-13/3, ...

Generation is lazy: an OptionSequence stores only (start, duration,
length) and computes options when they are indexed or iterated, so a
window into an unbounded sequence costs only the options it shows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from typing import overload

from date_slider._internal.date_utils import (
    TodayProvider,
    as_day,
    day_span,
    format_day_month,
    resolve_today,
    shift_days,
)
from date_slider.types import DateOption, Selection, ValidationResult

_logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE_LENGTH = 100

START_IN_PAST_MESSAGE = "From date cannot be in the past"
END_BEFORE_START_MESSAGE = "To date must be after or equal to From date"


def build_option(start: date, duration: int, k: int) -> DateOption:
    """Compute option k of the sequence anchored at start.

    Args:
        start: Start date of the selection (option 1's start).
        duration: Whole-day span shared by every option.
        k: 1-based option index.

    Returns:
        The option with id k.

    Raises:
        ValueError: If k is less than 1 or duration is negative.
    """
    if k < 1:
        raise ValueError(f"Option index must be >= 1, got {k}")
    if duration < 0:
        raise ValueError(f"Duration must be non-negative, got {duration}")

    option_start = shift_days(as_day(start), k - 1)
    option_end = shift_days(option_start, duration)
    if duration == 0:
        label = format_day_month(option_start)
    else:
        label = f"{format_day_month(option_start)}-{format_day_month(option_end)}"
    return DateOption(id=k, start=option_start, end=option_end, label=label)


class OptionSequence:
    """Lazy, restartable, indexable sequence of DateOption.

    Indexing is 0-based (``seq[0]`` is option id 1), matching ordinary
    Python sequences. Options are computed on access and never stored.

    A sequence with ``length=None`` is unbounded: ``len()`` raises
    TypeError, iteration never ends, and negative indexes are rejected.
    """

    __slots__ = ("_start", "_duration", "_length")

    def __init__(self, start: date | None, duration: int, length: int | None) -> None:
        """Initialize sequence.

        Args:
            start: Anchor date, or None for an empty sequence.
            duration: Whole-day span of every option.
            length: Number of options, or None for unbounded.
        """
        if length is not None and length < 0:
            raise ValueError(f"Sequence length must be non-negative, got {length}")
        self._start = as_day(start) if start is not None else None
        self._duration = duration
        self._length = 0 if start is None else length

    @classmethod
    def empty(cls) -> OptionSequence:
        """Return a sequence with no options."""
        return cls(None, 0, 0)

    @property
    def start(self) -> date | None:
        """Anchor date (option 1's start), or None when empty."""
        return self._start

    @property
    def duration(self) -> int:
        """Whole-day span shared by all options."""
        return self._duration

    @property
    def length(self) -> int | None:
        """Number of options, or None when unbounded."""
        return self._length

    @property
    def is_bounded(self) -> bool:
        """True when the sequence has a finite length."""
        return self._length is not None

    @property
    def is_empty(self) -> bool:
        """True when the sequence has no options."""
        return self._length == 0

    def __len__(self) -> int:
        if self._length is None:
            raise TypeError("Unbounded OptionSequence has no len()")
        return self._length

    def __bool__(self) -> bool:
        return not self.is_empty

    def _option(self, index: int) -> DateOption:
        if self._start is None:
            raise IndexError("Empty OptionSequence has no options")
        return build_option(self._start, self._duration, index + 1)

    @overload
    def __getitem__(self, index: int) -> DateOption: ...

    @overload
    def __getitem__(self, index: slice) -> list[DateOption]: ...

    def __getitem__(self, index: int | slice) -> DateOption | list[DateOption]:
        if isinstance(index, slice):
            return self._slice(index)

        if index < 0:
            if self._length is None:
                raise IndexError("Negative index on unbounded OptionSequence")
            index += self._length
        if index < 0 or (self._length is not None and index >= self._length):
            raise IndexError("OptionSequence index out of range")
        return self._option(index)

    def _slice(self, index: slice) -> list[DateOption]:
        if self._length is not None:
            return [self._option(i) for i in range(*index.indices(self._length))]

        # Unbounded: only forward slices with an explicit stop are finite
        start = 0 if index.start is None else index.start
        step = 1 if index.step is None else index.step
        if index.stop is None or start < 0 or index.stop < 0 or step <= 0:
            raise ValueError(
                "Slices of an unbounded OptionSequence need non-negative "
                "start/stop and a positive step"
            )
        return [self._option(i) for i in range(start, index.stop, step)]

    def __iter__(self) -> Iterator[DateOption]:
        index = 0
        while self._length is None or index < self._length:
            yield self._option(index)
            index += 1

    def window(self, offset: int, size: int) -> list[DateOption]:
        """Return up to size options starting at a 0-based offset.

        Out-of-range offsets are clipped rather than raising; a negative
        offset is treated as 0.
        """
        offset = max(offset, 0)
        size = max(size, 0)
        if self._length is not None:
            stop = min(offset + size, self._length)
        else:
            stop = offset + size
        return [self._option(i) for i in range(offset, stop)]

    def find(self, selection: Selection) -> DateOption | None:
        """Return the option whose endpoints equal the selection's, if any.

        Computed directly from the dates rather than by scanning, so it is
        constant-time even for unbounded sequences.
        """
        if self._start is None or selection.start is None or selection.end is None:
            return None
        if day_span(selection.start, selection.end) != self._duration:
            return None
        index = (selection.start - self._start).days
        if index < 0 or (self._length is not None and index >= self._length):
            return None
        return self._option(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionSequence):
            return NotImplemented
        return (self._start, self._duration, self._length) == (
            other._start,
            other._duration,
            other._length,
        )

    def __hash__(self) -> int:
        return hash((self._start, self._duration, self._length))

    def __repr__(self) -> str:
        return (
            f"OptionSequence(start={self._start!r}, duration={self._duration!r}, "
            f"length={self._length!r})"
        )


class RangeEngine:
    """Validates selections and generates sliding option sequences.

    The engine is stateless per call: every method is a pure function of
    its arguments plus the injected "today", which is read only by
    validate().

    Example:
        ```python
        engine = RangeEngine(today=date(2024, 3, 10))
        selection = Selection(date(2024, 3, 10), date(2024, 3, 12))
        options = engine.generate(selection)
        options[0].label  # "10/3-12/3"
        options[49].start  # date(2024, 4, 28)
        ```
    """

    def __init__(
        self,
        sequence_length: int | None = DEFAULT_SEQUENCE_LENGTH,
        today: date | TodayProvider | None = None,
    ) -> None:
        """Initialize RangeEngine.

        Args:
            sequence_length: Number of options to generate, or None for an
                unbounded sequence. Default: 100.
            today: Fixed date or provider for the current calendar day.
                Default: the local date at each validation.

        Raises:
            ValueError: If sequence_length is less than 1.
        """
        if sequence_length is not None and sequence_length < 1:
            raise ValueError(
                f"sequence_length must be >= 1 or None, got {sequence_length}"
            )
        self._sequence_length = sequence_length
        self._today = today

    @property
    def sequence_length(self) -> int | None:
        """Configured number of options per sequence (None when unbounded)."""
        return self._sequence_length

    def today(self) -> date:
        """Return the calendar day used for validation."""
        return resolve_today(self._today)

    def validate(
        self, selection: Selection, today: date | None = None
    ) -> ValidationResult:
        """Check a selection against the two validation rules.

        - The start date must not be before today.
        - The end date must not be before the start date (equal is allowed).

        A selection without a start date has no errors, whatever its end.

        Args:
            selection: Selection to check.
            today: Override for the current day. Default: engine's today.

        Returns:
            ValidationResult; never raises.
        """
        if selection.start is None:
            return ValidationResult()

        current_day = as_day(today) if today is not None else self.today()
        start_error = None
        end_error = None

        if selection.start < current_day:
            start_error = START_IN_PAST_MESSAGE
        if selection.end is not None and selection.end < selection.start:
            end_error = END_BEFORE_START_MESSAGE

        return ValidationResult(start_error=start_error, end_error=end_error)

    @staticmethod
    def duration(selection: Selection) -> int:
        """Whole-day duration of a selection (0 without an end date).

        Returns 0 when the start is absent. A reversed range gives a
        negative number; generate() never reaches that case because
        validation rejects it first.
        """
        if selection.start is None or selection.end is None:
            return 0
        return day_span(selection.start, selection.end)

    def generate(
        self, selection: Selection, today: date | None = None
    ) -> OptionSequence:
        """Generate the sliding option sequence for a selection.

        Args:
            selection: Selection to generate from.
            today: Override for the current day. Default: engine's today.

        Returns:
            Lazy OptionSequence; empty when the start is absent or the
            selection fails validation.
        """
        if selection.start is None:
            return OptionSequence.empty()

        validation = self.validate(selection, today)
        if not validation.is_valid:
            _logger.debug(
                "Selection %s invalid, no options: %s",
                selection.to_dict(),
                "; ".join(validation.errors),
            )
            return OptionSequence.empty()

        duration = self.duration(selection)
        _logger.debug(
            "Generating options from %s, duration %d, length %s",
            selection.start.isoformat(),
            duration,
            self._sequence_length,
        )
        return OptionSequence(selection.start, duration, self._sequence_length)

    def option_at(self, start: date, duration: int, k: int) -> DateOption:
        """Evaluate option k (1-based) for an anchor date and duration.

        Works for any k >= 1, independent of the configured bound.
        """
        return build_option(start, duration, k)

    def min_start(self, today: date | None = None) -> date:
        """Earliest allowed start date: today."""
        return as_day(today) if today is not None else self.today()

    def min_end(self, selection: Selection, today: date | None = None) -> date:
        """Earliest allowed end date: the start date (same-day ranges allowed).

        Falls back to today when no start is set.
        """
        if selection.start is not None:
            return selection.start
        return self.min_start(today)
