"""
Logging for semvermatch.

Library modules obtain loggers with :func:`get_logger` and only ever emit
``DEBUG`` records (why a version or requirement was rejected, which
deprecated operator was seen). Nothing is printed unless the host
application configures logging, or the CLI calls :func:`setup_logging`
according to its ``-v`` count.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Dict, Optional

from semvermatch.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "semvermatch"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that paints the level name with an ANSI color.

    Colors are only emitted when ``use_color`` is set and stderr is a
    terminal outside CI with ``NO_COLOR`` unset.
    """

    COLORS: Dict[str, str] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None or not (self.use_color and self._should_use_color()):
            return super().format(record)

        # The record is shared with other handlers; put the plain name back
        plain = record.levelname
        record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain

    @staticmethod
    def _should_use_color() -> bool:
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a logging level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbose <= 0:
        return logging.WARNING
    return logging.INFO if verbose == 1 else logging.DEBUG


def _make_handler(level: int, verbose: bool, stream: Optional[IO[str]]) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(
            LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            use_color=not os.environ.get("NO_COLOR"),
        )
    )
    return handler


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Send ``semvermatch`` log records to ``stream``.

    Replaces any handler installed by an earlier call, so invoking the CLI
    group repeatedly in one process does not duplicate output.

    Args:
        level: Minimum level to emit.
        verbose: Use the timestamped format that includes logger names.
        stream: Destination; defaults to ``sys.stderr`` at call time.
    """
    global _logging_configured

    with _lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.handlers.clear()
        root.setLevel(level)
        root.addHandler(_make_handler(level, verbose, stream))
        root.propagate = False
        _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``semvermatch`` or one of its children.

    ``get_logger("core.lexer")`` and ``get_logger("semvermatch.core.lexer")``
    return the same logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        qualified = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        qualified = name
    else:
        qualified = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(qualified)
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def is_logging_configured() -> bool:
    """Return True once :func:`setup_logging` has run."""
    return _logging_configured


def disable_logging() -> None:
    """Silence the ``semvermatch`` hierarchy and forget earlier setup."""
    global _logging_configured

    with _lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.handlers[:] = [logging.NullHandler()]
        root.setLevel(logging.NOTSET)
        _logging_configured = False
