"""
Version data model for semvermatch.

This module defines the immutable :class:`Version` record produced by the
version parser, and the :class:`Matchable` tuple the matcher evaluates
requirements against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from semvermatch.core.comparator import Ordering, PreIdentifier, compare_parts

PreRelease = Tuple[PreIdentifier, ...]


class Matchable(NamedTuple):
    """Comparison-ready version fields plus the caller's pre-release policy."""

    major: int
    minor: int
    patch: int
    pre: PreRelease
    allow_pre: bool


def pre_to_string(pre: PreRelease) -> str:
    """Render pre-release identifiers as ``-a.1`` (empty string if none)."""
    if not pre:
        return ""
    return "-" + ".".join(str(part) for part in pre)


@dataclass(frozen=True, eq=False)
class Version:
    """
    A parsed semantic version.

    Construct instances with :func:`semvermatch.parse`; the parser is what
    guarantees the field invariants.

    Equality, hashing and ordering ignore ``build``, so
    ``parse("1.2.3+a") == parse("1.2.3+b")`` and versions sort by
    precedence with :func:`sorted` or :func:`max`.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        pre: Pre-release identifiers; integers for numeric identifiers.
        build: Build metadata without the leading ``+``, or ``None``.
    """

    major: int
    minor: int
    patch: int
    pre: PreRelease = ()
    build: Optional[str] = None

    @property
    def is_prerelease(self) -> bool:
        """Return ``True`` if the version carries pre-release identifiers."""
        return bool(self.pre)

    def to_matchable(self, allow_pre: bool = True) -> Matchable:
        """Return the fields the matcher compares, with ``allow_pre`` attached."""
        return Matchable(self.major, self.minor, self.patch, self.pre, allow_pre)

    def to_string(self) -> str:
        """
        Render the canonical form ``major.minor.patch[-pre][+build]``.

        Returns:
            Version string that parses back to an identical record.
        """
        build = f"+{self.build}" if self.build is not None else ""
        return f"{self.major}.{self.minor}.{self.patch}{pre_to_string(self.pre)}{build}"

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def _compare(self, other: Version) -> Ordering:
        return compare_parts(self.to_matchable(), other.to_matchable())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is Ordering.EQ

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.pre))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is Ordering.LT

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is not Ordering.GT

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is Ordering.GT

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) is not Ordering.LT

    def __str__(self) -> str:
        """Return the canonical version string."""
        return self.to_string()
