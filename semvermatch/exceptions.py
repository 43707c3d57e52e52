"""
Custom exception hierarchy for semvermatch.

This module defines structured exception types used across semvermatch.
All exceptions inherit from :class:`SemverMatchError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class SemverMatchError(Exception):
    """Base exception for all semvermatch errors.

    All semvermatch-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class InvalidVersionError(SemverMatchError):
    """Raised when a string is not a valid semantic version.

    Args:
        version: The raw string that failed to parse.
    """

    __slots__ = ("version",)

    def __init__(self, version: str) -> None:
        super().__init__("Invalid version", {"version": repr(_truncate(version))})
        self.version = version


class InvalidRequirementError(SemverMatchError):
    """Raised when a string is not a valid version requirement.

    Args:
        requirement: The raw string that failed to parse.
    """

    __slots__ = ("requirement",)

    def __init__(self, requirement: str) -> None:
        super().__init__(
            "Invalid requirement",
            {"requirement": repr(_truncate(requirement))},
        )
        self.requirement = requirement


class ConfigError(SemverMatchError):
    """Raised when a configuration file cannot be loaded or validated.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
