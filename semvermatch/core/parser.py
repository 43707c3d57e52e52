"""Semantic version parser.

Turns ``major.minor.patch[-pre][+build]`` strings into validated
components, following SemVer 2.0:

- ``major``, ``minor`` and ``patch`` are ASCII digits without leading
  zeros (``"0"`` itself is fine).
- Pre-release and build identifiers are non-empty runs of
  ``[0-9A-Za-z-]`` separated by dots.
- All-digit pre-release identifiers become integers and must not have
  leading zeros; build identifiers always stay strings.

In approximate mode, used for ``~>`` requirement operands, the patch
component may be omitted entirely (``"2.1"``), and is reported as ``None``.

Typical usage::

    from semvermatch.core.parser import parse_version, parse_version_parts

    version = parse_version("1.0.0-rc.1+build.5")
    major, minor, patch, pre, build = parse_version_parts("2.1", approximate=True)
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional, Tuple

from semvermatch.models.version import PreIdentifier, PreRelease, Version
from semvermatch.exceptions import InvalidVersionError
from semvermatch.utils.logger import get_logger

logger = get_logger("core.parser")

_DIGITS = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")


class VersionParts(NamedTuple):
    """Raw parse result shared by versions and requirement operands."""

    major: int
    minor: int
    patch: Optional[int]
    pre: PreRelease
    build: Tuple[str, ...]


class _Rejected(ValueError):
    """Internal signal carrying the reason a version string was rejected."""


def _leading_zero(segment: str) -> bool:
    return len(segment) > 1 and segment[0] == "0"


def _parse_digits(segment: str) -> Optional[int]:
    if _DIGITS.fullmatch(segment) is None:
        return None
    return int(segment)


def _require_digits(segment: Optional[str], field: str) -> int:
    if segment is None:
        raise _Rejected(f"missing {field}")
    if _leading_zero(segment):
        raise _Rejected(f"leading zero in {field}")
    value = _parse_digits(segment)
    if value is None:
        raise _Rejected(f"{field} is not numeric")
    return value


def _dot_separated(string: Optional[str], field: str) -> List[str]:
    if string is None:
        return []
    parts = string.split(".")
    for part in parts:
        if _IDENTIFIER.fullmatch(part) is None:
            raise _Rejected(f"invalid {field} identifier {part!r}")
    return parts


def _convert_pre(parts: List[str]) -> PreRelease:
    converted: List[PreIdentifier] = []
    for part in parts:
        number = _parse_digits(part)
        if number is None:
            converted.append(part)
        elif _leading_zero(part):
            raise _Rejected(f"leading zero in numeric pre-release {part!r}")
        else:
            converted.append(number)
    return tuple(converted)


def _split_once(string: str, separator: str) -> Tuple[str, Optional[str]]:
    head, found, tail = string.partition(separator)
    return head, (tail if found else None)


def parse_version_parts(string: str, approximate: bool = False) -> VersionParts:
    """Split and validate a version string.

    Args:
        string: Raw version text.
        approximate: Allow the patch component to be omitted.

    Returns:
        The validated :class:`VersionParts`. ``patch`` is ``None`` only in
        approximate mode when the input has no patch component.

    Raises:
        InvalidVersionError: ``string`` does not follow the grammar.
    """
    if not isinstance(string, str):
        raise TypeError(f"expected str, got {type(string).__name__}")

    version_with_pre, build = _split_once(string, "+")
    core, pre = _split_once(version_with_pre, "-")
    segments = core.split(".")
    # Pad so that missing trailing segments read as None
    major, minor, patch, excess = (segments + [None] * 4)[:4]  # type: ignore[list-item]

    try:
        if excess is not None:
            raise _Rejected("more than three numeric components")
        parsed_major = _require_digits(major, "major")
        parsed_minor = _require_digits(minor, "minor")
        if patch is None and approximate:
            parsed_patch: Optional[int] = None
        else:
            parsed_patch = _require_digits(patch, "patch")
        pre_parts = _convert_pre(_dot_separated(pre, "pre-release"))
        build_parts = tuple(_dot_separated(build, "build"))
    except _Rejected as exc:
        logger.debug("Rejected version %r: %s", string, exc)
        raise InvalidVersionError(string) from None

    return VersionParts(parsed_major, parsed_minor, parsed_patch, pre_parts, build_parts)


def parse_version(string: str) -> Version:
    """Parse a complete ``major.minor.patch`` version into a :class:`Version`.

    Raises:
        InvalidVersionError: ``string`` is not a valid version.
    """
    parts = parse_version_parts(string)
    build = ".".join(parts.build) if parts.build else None
    return Version(
        major=parts.major,
        minor=parts.minor,
        patch=parts.patch,  # type: ignore[arg-type]
        pre=parts.pre,
        build=build,
    )
