"""Configuration file loader for semvermatch.

The configuration only supplies CLI defaults: the pre-release policy for
``match`` and the output format. It is read from one of:

- ``semvermatch.toml``: settings under ``[semvermatch]`` table
- ``pyproject.toml``: settings under ``[tool.semvermatch]`` table

Discovery order:

1. Explicit path from ``--config`` or ``SEMVERMATCH_CONFIG``
2. ``semvermatch.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.semvermatch]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``semvermatch.toml``)::

    [semvermatch]
    allow_pre = false
    output_format = "json"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from dataclasses import dataclass, field

from semvermatch.exceptions import ConfigError
from semvermatch.utils.logger import get_logger
from semvermatch.constants import (
    CONFIG_FILE_NAME,
    CONFIG_SECTION,
    DEFAULT_ALLOW_PRE,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
    PYPROJECT_FILE_NAME,
)

logger = get_logger("config")


@dataclass
class SemverMatchConfig:
    """Parsed and validated semvermatch configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        allow_pre: Default pre-release policy for the ``match`` command.
        output_format: Output format for every CLI command, or ``None`` to
            let each command use its own default.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    allow_pre: bool = DEFAULT_ALLOW_PRE
    output_format: Optional[str] = None

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration options as a dictionary for debug logging."""
        return {
            "allow_pre": self.allow_pre,
            "output_format": self.output_format,
        }

    def resolve_output_format(
        self,
        requested: Optional[str],
        default: str = DEFAULT_OUTPUT_FORMAT,
    ) -> str:
        """Pick a command's output format: CLI flag, then config, then ``default``."""
        return (requested or self.output_format or default).lower()


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_section(pyproject):
        logger.debug("Found [tool.%s] in %s", CONFIG_SECTION, pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.semvermatch]`` section.

    Parse errors count as "no section" so a broken pyproject.toml that
    belongs to another tool does not block the CLI.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    tool = raw.get("tool")
    return isinstance(tool, dict) and CONFIG_SECTION in tool


def load_config(config_path: Optional[Path] = None) -> SemverMatchConfig:
    """Load and validate semvermatch configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`SemverMatchConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return SemverMatchConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    section = _select_section(raw, resolved)
    if not section:
        logger.debug("Config file found but no %s section, using defaults", CONFIG_SECTION)
        return SemverMatchConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _select_section(raw: Dict[str, Any], path: Path) -> Dict[str, Any]:
    """Return the semvermatch table of a parsed file, or ``{}`` if absent.

    Raises:
        ConfigError: The table, or ``tool`` in pyproject.toml, is not a table.
    """
    if path.name == PYPROJECT_FILE_NAME:
        tool = raw.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(
                f"tool must be a table, got {type(tool).__name__}",
                config_path=str(path),
                option="tool",
            )
        section = tool.get(CONFIG_SECTION, {})
    else:
        section = raw.get(CONFIG_SECTION, {})

    if not isinstance(section, dict):
        raise ConfigError(
            f"{CONFIG_SECTION} must be a table, got {type(section).__name__}",
            config_path=str(path),
            option=CONFIG_SECTION,
        )
    return section


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _check_allow_pre(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"allow_pre must be a boolean, got {type(value).__name__}")
    return value


def _check_output_format(value: Any) -> str:
    if not isinstance(value, str) or value.lower() not in OUTPUT_FORMATS:
        raise ValueError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {value!r}"
        )
    return value.lower()


# Option name -> validator returning the normalized value
_OPTIONS: Dict[str, Callable[[Any], Any]] = {
    "allow_pre": _check_allow_pre,
    "output_format": _check_output_format,
}


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> SemverMatchConfig:
    """Validate a ``[semvermatch]`` table and build the config from it.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    unknown = sorted(set(section) - set(_OPTIONS))
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            config_path=config_path,
        )

    values: Dict[str, Any] = {}
    for option, value in section.items():
        try:
            values[option] = _OPTIONS[option](value)
        except ValueError as exc:
            raise ConfigError(str(exc), config_path=config_path, option=option) from None

    return SemverMatchConfig(**values)
