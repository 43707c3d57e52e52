"""
Centralized constants for semvermatch.

This module defines immutable configuration values used across semvermatch,
including configuration discovery, CLI defaults, and logging formats.
All values are intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Configuration discovery
# ---------------------------------------------------------------------------

#: Dedicated configuration file name, settings under ``[semvermatch]``.
CONFIG_FILE_NAME: Final[str] = "semvermatch.toml"

#: Shared project file name, settings under ``[tool.semvermatch]``.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Table name used in both configuration formats.
CONFIG_SECTION: Final[str] = "semvermatch"

#: Environment variable holding an explicit configuration path.
CONFIG_ENV_VAR: Final[str] = "SEMVERMATCH_CONFIG"

# ---------------------------------------------------------------------------
# Matching defaults
# ---------------------------------------------------------------------------

#: Whether pre-release versions may satisfy ``>``, ``>=`` and ``~>``.
DEFAULT_ALLOW_PRE: Final[bool] = True

#: Output formats understood by the CLI commands.
OUTPUT_FORMATS: Final[Sequence[str]] = ("table", "simple", "json")

#: Default CLI output format.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

#: Default output format of the ``compare`` command, which prints a bare ordering.
DEFAULT_COMPARE_FORMAT: Final[str] = "simple"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
