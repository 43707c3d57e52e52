"""
Unified data model exports for semvermatch.

This module re-exports the core data models to provide a stable and
convenient public API.

Example:
    >>> from semvermatch.models import Version, Requirement, Operator
"""

from __future__ import annotations

from semvermatch.models.version import Matchable, PreRelease, Version
from semvermatch.models.requirement import (
    Combinator,
    Operand,
    Operator,
    Requirement,
    Token,
)

__all__ = [
    "Version",
    "Matchable",
    "PreRelease",
    "Requirement",
    "Operator",
    "Combinator",
    "Operand",
    "Token",
]
