from __future__ import annotations

import io
import os
import sys
import logging
from typing import Generator
from unittest.mock import MagicMock, patch

import pytest

from semvermatch.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    is_logging_configured,
    level_for_verbosity,
    setup_logging,
)


@pytest.fixture
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the semvermatch logger and configuration flag around a test."""
    root_logger = logging.getLogger("semvermatch")
    saved_handlers = list(root_logger.handlers)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)

    import semvermatch.utils.logger as logger_module

    logger_module._logging_configured = False

    yield

    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False


@pytest.fixture
def captured_stream() -> io.StringIO:
    """Provide a StringIO stream for capturing log output."""
    return io.StringIO()


def _record(level: int = logging.INFO, msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_init_default_values(self) -> None:
        """Test ColoredFormatter uses color by default."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        assert formatter.use_color is True
        assert formatter._fmt == "%(levelname)s: %(message)s"

    def test_format_with_color_enabled(self) -> None:
        """Test the level name is wrapped in ANSI codes when enabled."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=True)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            result = formatter.format(_record(msg="Test message"))

        assert result == f"{ColoredFormatter.COLORS['INFO']}INFO{ColoredFormatter.RESET}: Test message"

    def test_format_with_color_disabled(self) -> None:
        """Test no ANSI codes are added when use_color is False."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        result = formatter.format(_record(logging.WARNING, "Warning message"))

        assert result == "WARNING: Warning message"

    def test_format_restores_record_levelname(self) -> None:
        """Test formatting does not leak color codes into the shared record."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=True)
        record = _record(logging.ERROR)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "ERROR"

    def test_should_use_color_no_color_env(self) -> None:
        """Test NO_COLOR disables colors."""
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            assert ColoredFormatter._should_use_color() is False

    def test_should_use_color_ci_env(self) -> None:
        """Test CI environments disable colors."""
        with patch.dict(os.environ, {"CI": "true"}, clear=True):
            assert ColoredFormatter._should_use_color() is False

    def test_should_use_color_tty(self) -> None:
        """Test colors are enabled for TTY stderr."""
        with patch.dict(os.environ, {}, clear=True):
            with patch.object(sys.stderr, "isatty", return_value=True):
                assert ColoredFormatter._should_use_color() is True

    def test_should_use_color_no_isatty_attribute(self) -> None:
        """Test streams without isatty() disable colors."""
        with patch.dict(os.environ, {}, clear=True):
            mock_stderr = MagicMock()
            del mock_stderr.isatty

            with patch("sys.stderr", mock_stderr):
                assert ColoredFormatter._should_use_color() is False


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging configuration function."""

    def test_setup_default_config(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test one StreamHandler at INFO with propagation disabled."""
        setup_logging(stream=captured_stream)

        logger = logging.getLogger("semvermatch")
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.propagate is False
        assert is_logging_configured() is True

    def test_setup_clears_previous_handlers(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test repeated calls do not accumulate handlers."""
        setup_logging(stream=captured_stream)
        setup_logging(stream=captured_stream)

        assert len(logging.getLogger("semvermatch").handlers) == 1

    def test_child_loggers_write_to_stream(
        self,
        clean_logger_state: None,
        captured_stream: io.StringIO,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test module loggers emit through the configured handler."""
        monkeypatch.setenv("NO_COLOR", "1")
        setup_logging(level=logging.DEBUG, stream=captured_stream)

        get_logger("core.parser").debug("Rejected version %r", "01.0.0")

        assert "DEBUG: Rejected version '01.0.0'" in captured_stream.getvalue()

    def test_parser_rejections_are_logged(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test the version parser logs why an input was rejected."""
        from semvermatch import try_parse

        setup_logging(level=logging.DEBUG, stream=captured_stream)
        try_parse("01.0.0")

        assert "leading zero in major" in captured_stream.getvalue()

    def test_disable_logging(
        self, clean_logger_state: None, captured_stream: io.StringIO
    ) -> None:
        """Test disable_logging removes output and resets the flag."""
        setup_logging(stream=captured_stream)
        disable_logging()

        get_logger("cli").warning("hidden")

        assert captured_stream.getvalue() == ""
        assert is_logging_configured() is False


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            (None, "semvermatch"),
            ("semvermatch", "semvermatch"),
            ("cli", "semvermatch.cli"),
            ("semvermatch.core.lexer", "semvermatch.core.lexer"),
        ],
    )
    def test_names(self, name: str, expected: str) -> None:
        """Test names are placed under the semvermatch hierarchy."""
        assert get_logger(name).name == expected


@pytest.mark.unit
class TestLevelForVerbosity:
    """Tests for level_for_verbosity."""

    @pytest.mark.parametrize(
        "verbose,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_levels(self, verbose: int, level: int) -> None:
        """Test -v counts map to logging levels."""
        assert level_for_verbosity(verbose) == level
