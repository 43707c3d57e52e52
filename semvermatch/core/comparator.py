"""Total ordering over semantic version components.

Versions are compared field by field, first difference wins: ``major``,
``minor``, ``patch``, then the pre-release identifiers. A release (empty
pre-release) outranks any pre-release of the same ``major.minor.patch``.

Pre-release identifiers may mix integers and strings. They are ordered
with a tagged key so the order is total:

- numeric identifiers sort before alphanumeric ones,
- numeric identifiers compare numerically,
- alphanumeric identifiers compare by ASCII code point,
- when one list is a prefix of the other, the shorter one sorts first.

Build metadata never takes part in the comparison.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence, Tuple, Union

PreIdentifier = Union[int, str]


class Ordering(str, Enum):
    """Three-way comparison result."""

    LT = "lt"
    EQ = "eq"
    GT = "gt"

    def __str__(self) -> str:
        return self.value


def pre_release_key(pre: Sequence[PreIdentifier]) -> Tuple[Tuple[int, Any], ...]:
    """Return a sort key for a non-empty pre-release identifier list."""
    return tuple((0, part) if isinstance(part, int) else (1, part) for part in pre)


def _cmp(left: Any, right: Any) -> Ordering:
    if left > right:
        return Ordering.GT
    if left < right:
        return Ordering.LT
    return Ordering.EQ


def compare_parts(left: Sequence[Any], right: Sequence[Any]) -> Ordering:
    """Compare two ``(major, minor, patch, pre, ...)`` sequences.

    Only the first four positions are read, so versions, matchables and
    requirement operands can be compared with each other directly.

    Args:
        left: Left-hand components.
        right: Right-hand components.

    Returns:
        :attr:`Ordering.LT`, :attr:`Ordering.EQ` or :attr:`Ordering.GT`.
    """
    for index in range(3):
        result = _cmp(left[index], right[index])
        if result is not Ordering.EQ:
            return result

    left_pre, right_pre = left[3], right[3]
    if not left_pre and right_pre:
        return Ordering.GT
    if left_pre and not right_pre:
        return Ordering.LT
    return _cmp(pre_release_key(left_pre), pre_release_key(right_pre))
