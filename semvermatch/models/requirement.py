"""
Requirement data model for semvermatch.

This module defines the token types of a requirement expression and the
immutable :class:`Requirement` record produced by the requirement parser.
"""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union

from semvermatch.models.version import PreRelease, pre_to_string


class Operator(str, Enum):
    """Comparison operator applied to a single operand."""

    EQ = "=="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    PESSIMISTIC = "~>"

    def __str__(self) -> str:
        return self.value


class Combinator(str, Enum):
    """Boolean connective between two clauses."""

    AND = "and"
    OR = "or"

    def __str__(self) -> str:
        return self.value


class Operand(NamedTuple):
    """
    A validated requirement operand.

    ``patch`` is ``None`` only for ``~>`` operands written as
    ``major.minor``; every other operator requires a full version.
    """

    major: int
    minor: int
    patch: Optional[int]
    pre: PreRelease
    build: Tuple[str, ...]

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}"
        if self.patch is not None:
            core += f".{self.patch}"
        build = "+" + ".".join(self.build) if self.build else ""
        return f"{core}{pre_to_string(self.pre)}{build}"


Token = Union[Operator, Combinator, Operand]


@dataclass(frozen=True)
class Requirement:
    """
    A parsed version requirement.

    Construct instances with :func:`semvermatch.parse_requirement`.
    ``lexed`` always has the shape
    ``[operator, operand, (combinator, operator, operand)*]``.

    Attributes:
        source: The requirement string exactly as given.
        lexed: Validated token sequence evaluated by the matcher.
    """

    source: str
    lexed: Tuple[Token, ...]

    @property
    def clauses(self) -> Tuple[Tuple[Optional[Combinator], Operator, Operand], ...]:
        """Group ``lexed`` into ``(combinator, operator, operand)`` triples.

        The first clause has no combinator and is reported with ``None``.
        """
        tokens = (None,) + self.lexed
        return tuple(
            (tokens[i], tokens[i + 1], tokens[i + 2])  # type: ignore[misc]
            for i in range(0, len(tokens), 3)
        )

    def to_string(self) -> str:
        """Return the original source string."""
        return self.source

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        return f"Requirement({self.source!r})"
