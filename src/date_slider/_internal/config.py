"""Configuration management for date_slider.

Holds the picker settings: how many options a sequence has and how many
are shown at once. Configuration is stored in TOML format at
~/.dslide/config.toml by default:

    [picker]
    sequence_length = 100  # 0 = unbounded
    page_size = 5
"""

from __future__ import annotations

import logging
import os
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from pathlib import Path
from typing import Any, get_args

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from date_slider._literal_types import SettingKey
from date_slider.exceptions import ConfigError

_logger = logging.getLogger(__name__)

DEFAULT_SEQUENCE_LENGTH = 100
DEFAULT_PAGE_SIZE = 5

# Environment variable names, highest priority
ENV_CONFIG_PATH = "DSLIDE_CONFIG_PATH"
ENV_SEQUENCE_LENGTH = "DSLIDE_SEQUENCE_LENGTH"
ENV_PAGE_SIZE = "DSLIDE_PAGE_SIZE"

_ENV_BY_KEY: dict[str, str] = {
    "sequence_length": ENV_SEQUENCE_LENGTH,
    "page_size": ENV_PAGE_SIZE,
}


class PickerSettings(BaseModel):
    """Immutable picker settings.

    This is a frozen Pydantic model; all fields are validated on
    construction and the object cannot be modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    sequence_length: int | None = DEFAULT_SEQUENCE_LENGTH
    """Options per generated sequence; None (or 0 on input) for unbounded."""

    page_size: int = DEFAULT_PAGE_SIZE
    """Options visible in one window."""

    @field_validator("sequence_length", mode="before")
    @classmethod
    def validate_sequence_length(cls, v: Any) -> Any:
        """Map 0 to unbounded and reject negative lengths."""
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"sequence_length must be an integer. Got: {v!r}")
        if v < 0:
            raise ValueError(f"sequence_length must be >= 0. Got: {v}")
        return None if v == 0 else v

    @field_validator("page_size", mode="before")
    @classmethod
    def validate_page_size(cls, v: Any) -> Any:
        """Validate page size is a positive integer."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"page_size must be an integer. Got: {v!r}")
        if v < 1:
            raise ValueError(f"page_size must be >= 1. Got: {v}")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Serialize settings for JSON output (0 for unbounded)."""
        return {
            "sequence_length": self.sequence_length or 0,
            "page_size": self.page_size,
        }


class ConfigManager:
    """Manages picker settings.

    Handles:
    - Reading and writing the [picker] table of the config file
    - Resolving settings from environment variables or config file

    Config file location (in priority order):
    1. Explicit config_path parameter
    2. DSLIDE_CONFIG_PATH environment variable
    3. Default: ~/.dslide/config.toml
    """

    DEFAULT_CONFIG_PATH = Path.home() / ".dslide" / "config.toml"

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize ConfigManager.

        Args:
            config_path: Override config file location.
                         Default: ~/.dslide/config.toml
        """
        if config_path is not None:
            self._config_path = config_path
        elif ENV_CONFIG_PATH in os.environ:
            self._config_path = Path(os.environ[ENV_CONFIG_PATH])
        else:
            self._config_path = self.DEFAULT_CONFIG_PATH

    @property
    def config_path(self) -> Path:
        """Return the config file path."""
        return self._config_path

    def _read_config(self) -> dict[str, Any]:
        """Read and parse the config file.

        Returns:
            Parsed config dictionary, or empty dict if file doesn't exist.
        """
        if not self._config_path.exists():
            return {}

        try:
            with self._config_path.open("rb") as f:
                return dict(tomllib.load(f))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"Invalid TOML in config file: {e}",
                details={"path": str(self._config_path)},
            ) from e

    def _write_config(self, config: dict[str, Any]) -> None:
        """Write config to file, creating directory if needed.

        Args:
            config: Configuration dictionary to write.
        """
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with self._config_path.open("wb") as f:
            tomli_w.dump(config, f)

    def _build(self, values: dict[str, Any], source: str) -> PickerSettings:
        try:
            return PickerSettings(**values)
        except ValidationError as e:
            first = e.errors()[0]
            raise ConfigError(
                f"Invalid setting from {source}: {first['msg']}",
                details={"source": source, "values": values},
            ) from e

    def _picker_table(self, config: dict[str, Any]) -> dict[str, Any]:
        """Return the [picker] table of a parsed config, adding it if absent."""
        picker = config.setdefault("picker", {})
        if not isinstance(picker, dict):
            raise ConfigError(
                "Config [picker] must be a table",
                details={"path": str(self._config_path)},
            )
        return picker

    def _file_values(self) -> dict[str, Any]:
        picker = self._picker_table(self._read_config())
        return {k: v for k, v in picker.items() if k in _ENV_BY_KEY}

    def _env_values(self) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for key, env_name in _ENV_BY_KEY.items():
            raw = os.environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                values[key] = int(raw)
            except ValueError as e:
                raise ConfigError(
                    f"Invalid {env_name}: '{raw}'. Must be an integer.",
                    details={"env": env_name, "value": raw},
                ) from e
        return values

    def resolve_settings(self) -> PickerSettings:
        """Resolve settings using priority order.

        Resolution order (per key):
        1. Environment variables (DSLIDE_SEQUENCE_LENGTH, DSLIDE_PAGE_SIZE)
        2. [picker] table of the config file
        3. Built-in defaults (100 options, 5 per page)

        Returns:
            Immutable PickerSettings object.

        Raises:
            ConfigError: If the file is unreadable or a value is invalid.
        """
        file_values = self._file_values()
        env_values = self._env_values()
        # Validate file on its own so errors name the right source
        self._build(file_values, str(self._config_path))
        settings = self._build({**file_values, **env_values}, "environment")
        _logger.debug(
            "Resolved settings %s (file keys: %s, env keys: %s)",
            settings.to_dict(),
            sorted(file_values),
            sorted(env_values),
        )
        return settings

    def set_value(self, key: SettingKey, value: int) -> PickerSettings:
        """Store a setting in the config file.

        Args:
            key: sequence_length or page_size.
            value: New value (0 means unbounded for sequence_length).

        Returns:
            Settings as stored in the file after the change.

        Raises:
            ConfigError: If the key is unknown or the value is invalid.
        """
        if key not in get_args(SettingKey):
            valid = ", ".join(get_args(SettingKey))
            raise ConfigError(
                f"Unknown setting '{key}'. Valid settings: {valid}",
                details={"key": key},
            )

        config = self._read_config()
        picker = self._picker_table(config)
        updated = {**picker, key: value}
        settings = self._build(
            {k: v for k, v in updated.items() if k in _ENV_BY_KEY},
            str(self._config_path),
        )

        picker[key] = value
        self._write_config(config)
        _logger.debug("Set %s=%s in %s", key, value, self._config_path)
        return settings

    def unset_value(self, key: SettingKey) -> None:
        """Remove a setting from the config file, restoring its default.

        Missing keys are ignored.
        """
        config = self._read_config()
        picker = self._picker_table(config)
        if key in picker:
            del picker[key]
            if not picker:
                config.pop("picker", None)
            self._write_config(config)
