"""Unit tests for CLI utilities."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import typer
from rich.logging import RichHandler

from date_slider._internal.config import ConfigManager
from date_slider.cli.utils import (
    ExitCode,
    build_picker,
    configure_logging,
    get_config,
    handle_errors,
    output_result,
)
from date_slider.exceptions import (
    ConfigError,
    DateSliderError,
    InvalidDateError,
    OptionNotFoundError,
)


class TestExitCode:
    """Tests for ExitCode enum."""

    @pytest.mark.parametrize(
        ("code", "value"),
        [
            (ExitCode.SUCCESS, 0),
            (ExitCode.GENERAL_ERROR, 1),
            (ExitCode.INVALID_ARGS, 3),
            (ExitCode.NOT_FOUND, 4),
            (ExitCode.INTERRUPTED, 130),
        ],
    )
    def test_values(self, code: ExitCode, value: int) -> None:
        """Exit codes have their documented values."""
        assert code.value == value


class TestHandleErrors:
    """Tests for handle_errors decorator."""

    def test_passes_through_result(self) -> None:
        """Return values are passed through."""

        @handle_errors
        def ok() -> str:
            return "done"

        assert ok() == "done"

    @pytest.mark.parametrize(
        ("error", "exit_code", "text"),
        [
            (InvalidDateError("bad"), ExitCode.INVALID_ARGS, "Invalid date"),
            (OptionNotFoundError(9, (1, 5)), ExitCode.NOT_FOUND, "Option not found"),
            (ConfigError("broken"), ExitCode.GENERAL_ERROR, "Configuration error"),
            (DateSliderError("oops"), ExitCode.GENERAL_ERROR, "Error"),
            (ValueError("nope"), ExitCode.INVALID_ARGS, "Invalid argument"),
        ],
    )
    def test_maps_exceptions(
        self,
        error: Exception,
        exit_code: ExitCode,
        text: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Each exception maps to its exit code with a message on stderr."""

        @handle_errors
        def failing() -> None:
            raise error

        with pytest.raises(typer.Exit) as exc_info:
            failing()

        assert exc_info.value.exit_code == exit_code
        assert text in capsys.readouterr().err

    def test_brackets_in_message_printed_literally(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Messages are not parsed as Rich markup."""

        @handle_errors
        def failing() -> None:
            raise ConfigError("Config [picker] must be a table")

        with pytest.raises(typer.Exit):
            failing()

        assert "Config [picker] must be a table" in capsys.readouterr().err

    def test_other_exceptions_propagate(self) -> None:
        """Unexpected exceptions are not swallowed."""

        @handle_errors
        def failing() -> None:
            raise RuntimeError("unexpected")

        with pytest.raises(RuntimeError):
            failing()


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture
    def package_logger(self) -> Iterator[logging.Logger]:
        """Restore the package logger after each test."""
        logger = logging.getLogger("date_slider")
        handlers = list(logger.handlers)
        level = logger.level
        yield logger
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_quiet_by_default(self, package_logger: logging.Logger) -> None:
        """Without --verbose nothing is installed."""
        before = list(package_logger.handlers)

        configure_logging(False)

        assert package_logger.handlers == before

    def test_verbose_installs_one_handler(
        self, package_logger: logging.Logger
    ) -> None:
        """--verbose sets DEBUG and installs a single RichHandler."""
        configure_logging(True)
        configure_logging(True)

        rich_handlers = [
            h for h in package_logger.handlers if isinstance(h, RichHandler)
        ]
        assert len(rich_handlers) == 1
        assert package_logger.level == logging.DEBUG


class TestGetConfig:
    """Tests for get_config."""

    def test_creates_and_caches(
        self, mock_context: typer.Context, config_path: Path
    ) -> None:
        """The manager uses --config and is cached on the context."""
        mock_context.obj["config_path"] = config_path

        config = get_config(mock_context)

        assert isinstance(config, ConfigManager)
        assert config.config_path == config_path
        assert get_config(mock_context) is config


class TestBuildPicker:
    """Tests for build_picker."""

    def test_uses_config(
        self, mock_context: typer.Context, config_path: Path, today: date
    ) -> None:
        """Settings come from the config file."""
        config_path.write_text("[picker]\nsequence_length = 10\npage_size = 2\n")
        mock_context.obj["config_path"] = config_path

        picker = build_picker(mock_context, today)

        assert picker.settings.sequence_length == 10
        assert picker.settings.page_size == 2
        assert picker.view().min_start == today

    def test_page_size_override(
        self, mock_context: typer.Context, config_path: Path
    ) -> None:
        """--page-size overrides the configured page size only."""
        config_path.write_text("[picker]\nsequence_length = 10\n")
        mock_context.obj["config_path"] = config_path

        picker = build_picker(mock_context, page_size=7)

        assert picker.settings.page_size == 7
        assert picker.settings.sequence_length == 10

    def test_page_size_must_be_positive(
        self, mock_context: typer.Context, config_path: Path
    ) -> None:
        """A page size below 1 is a ValueError."""
        mock_context.obj["config_path"] = config_path

        with pytest.raises(ValueError, match="--page-size"):
            build_picker(mock_context, page_size=0)


class TestOutputResult:
    """Tests for output_result."""

    @pytest.mark.parametrize(
        ("fmt", "formatter"),
        [
            ("json", "format_json"),
            ("jsonl", "format_jsonl"),
            ("csv", "format_csv"),
            ("plain", "format_plain"),
            ("table", "format_table"),
        ],
    )
    def test_routes_to_formatter(
        self, mock_context: typer.Context, fmt: str, formatter: str
    ) -> None:
        """Each format uses its formatter."""
        with (
            patch(f"date_slider.cli.formatters.{formatter}") as mock_formatter,
            patch("date_slider.cli.utils.console") as mock_console,
        ):
            mock_formatter.return_value = "out"
            output_result(mock_context, [{"id": 1}], format=fmt)

        mock_formatter.assert_called_once()
        mock_console.print.assert_called_once()

    def test_defaults_to_json(self, mock_context: typer.Context) -> None:
        """Without a format, JSON is used."""
        with patch("date_slider.cli.utils.console") as mock_console:
            output_result(mock_context, {"a": 1})

        printed = mock_console.print.call_args[0][0]
        assert '"a": 1' in printed

    def test_context_format(self) -> None:
        """The context format is used when none is passed."""
        ctx = MagicMock(spec=typer.Context)
        ctx.obj = {"format": "plain"}
        with patch("date_slider.cli.utils.console") as mock_console:
            output_result(ctx, [{"id": 1, "label": "x"}])

        assert mock_console.print.call_args[0][0] == "x"
