"""
Core functionality exports for semvermatch.

The engine is a pipeline of four pure components: the version parser,
the comparator, the requirement lexer/parser and the matcher. Importing
from here keeps internal imports short and stable:

    from semvermatch.core import compare_parts, lex_requirement
"""

from __future__ import annotations

# The comparator has no package dependencies and must load before the models
from semvermatch.core.comparator import Ordering, compare_parts, pre_release_key
from semvermatch.core.parser import VersionParts, parse_version, parse_version_parts
from semvermatch.core.lexer import (
    deprecation_message,
    lex_requirement,
    parse_tokens,
    tokenize,
)
from semvermatch.core.matcher import match_clause, match_requirement, pessimistic_bounds

__all__ = [
    "Ordering",
    "compare_parts",
    "pre_release_key",
    "VersionParts",
    "parse_version",
    "parse_version_parts",
    "tokenize",
    "deprecation_message",
    "parse_tokens",
    "lex_requirement",
    "match_clause",
    "match_requirement",
    "pessimistic_bounds",
]
