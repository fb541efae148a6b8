"""Shared Literal type aliases.

These types are exported from the public API and can be used by
library consumers for their own type hints.

Example:
    from date_slider import DatePicker, SelectionState

    def is_browsable(state: SelectionState) -> bool:
        return state == "valid"
"""

from __future__ import annotations

from typing import Literal

# Validity of the current selection: no start / start fails validation / options exist
SelectionState = Literal["empty", "invalid", "valid"]

# Keys accepted by ConfigManager.set_value and `dslide config set`
SettingKey = Literal["sequence_length", "page_size"]

__all__ = ["SelectionState", "SettingKey"]
