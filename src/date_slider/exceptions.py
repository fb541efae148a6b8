"""Exception hierarchy for date_slider.

All library exceptions inherit from DateSliderError, enabling callers to
catch all library errors with a single except clause while still allowing
fine-grained exception handling when needed.

Note that invalid user input (a start date in the past, an end date before
the start, a malformed date string) is never raised. It is reported as a
populated ValidationResult instead. The exceptions here cover programming
and configuration errors only.
"""

from __future__ import annotations

from typing import Any


class DateSliderError(Exception):
    """Base exception for all date_slider errors.

    All library exceptions inherit from this class, allowing callers to:
    - Catch all library errors: except DateSliderError
    - Handle specific errors: except OptionNotFoundError
    - Serialize errors: error.to_dict()
    """

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code for programmatic handling.
            details: Additional structured data about the error.
        """
        super().__init__(message)
        self._message = message
        self._code = code
        self._details = details or {}

    @property
    def code(self) -> str:
        """Machine-readable error code."""
        return self._code

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return self._message

    @property
    def details(self) -> dict[str, Any]:
        """Additional structured error data."""
        return self._details

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/JSON output.

        Returns:
            Dictionary with keys: code, message, details.
            All values are JSON-serializable.
        """
        return {
            "code": self._code,
            "message": self._message,
            "details": self._details,
        }

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self._message

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return (
            f"{self.__class__.__name__}(message={self._message!r}, code={self._code!r})"
        )


class ConfigError(DateSliderError):
    """Invalid or unreadable configuration.

    Raised when the config file cannot be parsed, or when a setting from
    the file or the environment is out of range.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ConfigError.

        Args:
            message: Human-readable error message.
            details: Additional structured data (e.g. config path, key).
        """
        super().__init__(message, code="CONFIG_ERROR", details=details)


class InvalidDateError(DateSliderError):
    """A date string is not a valid ISO calendar date (YYYY-MM-DD).

    Raised by the strict parser only. DatePicker converts it into a
    validation message so raw user input never escapes as an exception.
    """

    def __init__(self, value: str) -> None:
        """Initialize InvalidDateError.

        Args:
            value: The offending input string.
        """
        self._value = value
        super().__init__(
            f"Invalid date: {value!r}. Expected YYYY-MM-DD.",
            code="INVALID_DATE",
            details={"value": value},
        )

    @property
    def value(self) -> str:
        """The input string that failed to parse."""
        return self._value


class OptionNotFoundError(DateSliderError):
    """An option id does not exist in the current option sequence.

    Provides the valid id range (if any) so callers can recover.
    """

    def __init__(
        self,
        option_id: int,
        available_range: tuple[int, int] | None = None,
    ) -> None:
        """Initialize OptionNotFoundError.

        Args:
            option_id: The id that was requested.
            available_range: Inclusive (first, last) ids of the current
                sequence, or None when no options exist. Unbounded
                sequences report a last id of -1.
        """
        self._option_id = option_id
        self._available_range = available_range

        if available_range is None:
            message = f"Option {option_id} not found: no options are available"
        elif available_range[1] < 0:
            message = f"Option {option_id} not found. Option ids start at 1"
        else:
            first, last = available_range
            message = (
                f"Option {option_id} not found. Available options: {first}-{last}"
            )

        super().__init__(
            message,
            code="OPTION_NOT_FOUND",
            details={
                "option_id": option_id,
                "available_range": list(available_range) if available_range else None,
            },
        )

    @property
    def option_id(self) -> int:
        """The option id that was requested."""
        return self._option_id

    @property
    def available_range(self) -> tuple[int, int] | None:
        """Inclusive (first, last) id range, or None when there are no options."""
        return self._available_range
