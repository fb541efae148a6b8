"""
date_slider - sliding date range options for date pickers.

Pick a start date (and optionally an end date) and browse a sequence of
candidate ranges that slide forward one day at a time, keeping the
selected duration.
"""

from date_slider._internal.config import ConfigManager, PickerSettings
from date_slider._literal_types import SelectionState, SettingKey
from date_slider.engine import OptionSequence, RangeEngine
from date_slider.exceptions import (
    ConfigError,
    DateSliderError,
    InvalidDateError,
    OptionNotFoundError,
)
from date_slider.paginator import Paginator
from date_slider.picker import DatePicker
from date_slider.tracker import SelectionTracker
from date_slider.types import (
    DateOption,
    PickerView,
    Selection,
    ValidationResult,
    ViewWindow,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "DatePicker",
    "RangeEngine",
    "OptionSequence",
    "Paginator",
    "SelectionTracker",
    # Configuration
    "ConfigManager",
    "PickerSettings",
    # Type aliases
    "SelectionState",
    "SettingKey",
    # Exceptions
    "DateSliderError",
    "ConfigError",
    "InvalidDateError",
    "OptionNotFoundError",
    # Types
    "DateOption",
    "PickerView",
    "Selection",
    "ValidationResult",
    "ViewWindow",
]
