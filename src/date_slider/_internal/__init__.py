"""Internal implementation modules. Not part of the public API."""

from date_slider._internal.config import ConfigManager, PickerSettings

__all__ = ["ConfigManager", "PickerSettings"]
