"""
Public entry points for semvermatch.

Parsing comes in two flavours: :func:`parse` and :func:`parse_requirement`
raise on invalid input, while :func:`try_parse` and
:func:`try_parse_requirement` return ``None`` instead. :func:`compare` and
:func:`match` accept parsed records or raw strings.

Example::

    >>> import semvermatch
    >>> semvermatch.match("2.1.6-dev", "~> 2.1.2")
    True
    >>> semvermatch.match("2.1.6-dev", "~> 2.1.2", allow_pre=False)
    False
    >>> semvermatch.compare("1.0.0-alpha", "1.0.0")
    <Ordering.LT: 'lt'>
"""

from __future__ import annotations

import warnings
from typing import List, Optional, Union

from semvermatch.core import (
    Ordering,
    compare_parts,
    deprecation_message,
    lex_requirement,
    match_requirement,
    parse_version,
)
from semvermatch.exceptions import InvalidRequirementError, InvalidVersionError
from semvermatch.models import Matchable, Requirement, Version

VersionLike = Union[Version, str]
RequirementLike = Union[Requirement, str]


def parse(string: str) -> Version:
    """Parse a version string.

    Raises:
        InvalidVersionError: ``string`` is not a valid version.
    """
    return parse_version(string)


def try_parse(string: str) -> Optional[Version]:
    """Parse a version string, returning ``None`` if it is invalid."""
    try:
        return parse_version(string)
    except InvalidVersionError:
        return None


def parse_requirement(string: str) -> Requirement:
    """Parse a requirement string.

    Raises:
        InvalidRequirementError: ``string`` is not a valid requirement.
    """
    return _build_requirement(string, stacklevel=2)


def try_parse_requirement(string: str) -> Optional[Requirement]:
    """Parse a requirement string, returning ``None`` if it is invalid."""
    try:
        return _build_requirement(string, stacklevel=2)
    except InvalidRequirementError:
        return None


def _build_requirement(string: str, stacklevel: int) -> Requirement:
    """Parse a requirement and warn about deprecated operators.

    ``stacklevel`` is counted from the function calling this one, so the
    warning is attributed to the code that called the public entry point.
    """
    deprecated: List[str] = []
    requirement = Requirement(source=string, lexed=lex_requirement(string, deprecated))
    for text in deprecated:
        warnings.warn(deprecation_message(text), DeprecationWarning, stacklevel=stacklevel + 1)
    return requirement


def compile_requirement(requirement: Requirement) -> Requirement:
    """Return ``requirement`` ready for repeated matching.

    Parsing already produces the evaluated form, so this is the identity.
    It exists for callers that compile once and match many times.
    """
    if not isinstance(requirement, Requirement):
        raise TypeError(f"expected Requirement, got {type(requirement).__name__}")
    return requirement


def _to_version(value: VersionLike) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse_version(value)
    raise TypeError(f"expected Version or str, got {type(value).__name__}")


def _to_requirement(value: RequirementLike, stacklevel: int) -> Requirement:
    if isinstance(value, Requirement):
        return value
    if isinstance(value, str):
        return _build_requirement(value, stacklevel=stacklevel + 1)
    raise TypeError(f"expected Requirement or str, got {type(value).__name__}")


def to_matchable(version: VersionLike, allow_pre: bool = True) -> Matchable:
    """Return the comparison-ready fields of ``version`` with ``allow_pre``."""
    return _to_version(version).to_matchable(allow_pre)


def compare(left: VersionLike, right: VersionLike) -> Ordering:
    """Compare two versions, ignoring build metadata.

    Raises:
        InvalidVersionError: A string argument is not a valid version.
    """
    return compare_parts(to_matchable(left), to_matchable(right))


def match(
    version: VersionLike,
    requirement: RequirementLike,
    *,
    allow_pre: bool = True,
) -> bool:
    """Check whether ``version`` satisfies ``requirement``.

    Args:
        version: A :class:`Version` or version string.
        requirement: A :class:`Requirement` or requirement string.
        allow_pre: When ``False``, ``>``, ``>=`` and ``~>`` reject
            pre-release versions unless their operand is a pre-release.

    Raises:
        InvalidRequirementError: ``requirement`` is an invalid string.
        InvalidVersionError: ``version`` is an invalid string.
    """
    parsed_requirement = _to_requirement(requirement, stacklevel=2)
    return match_requirement(parsed_requirement, to_matchable(version, allow_pre))


def to_string(value: Union[Version, Requirement]) -> str:
    """Render a version canonically, or a requirement as its source text."""
    if isinstance(value, (Version, Requirement)):
        return value.to_string()
    raise TypeError(f"expected Version or Requirement, got {type(value).__name__}")
