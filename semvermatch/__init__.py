"""
semvermatch: semantic version parsing and requirement matching.

semvermatch parses SemVer 2.0 version strings, parses requirement
expressions such as ``">= 2.0.0 and < 2.1.0"`` or ``"~> 2.1"``, and
decides whether a version satisfies a requirement.

Example::

    >>> import semvermatch
    >>> semvermatch.match("2.0.5", "~> 2.0.0")
    True
    >>> str(semvermatch.parse("1.14.0-rc.0+build0"))
    '1.14.0-rc.0+build0'

All operations are pure and all records immutable, so parsed requirements
can be shared freely between threads.
"""

from __future__ import annotations

from semvermatch.__version__ import __version__

# The API module loads the core before the models; keep it first
from semvermatch.api import (
    compare,
    compile_requirement,
    match,
    parse,
    parse_requirement,
    to_matchable,
    to_string,
    try_parse,
    try_parse_requirement,
)
from semvermatch.core import Ordering
from semvermatch.models import Operator, Combinator, Requirement, Version
from semvermatch.exceptions import (
    InvalidRequirementError,
    InvalidVersionError,
    SemverMatchError,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Semantic version parsing and requirement matching."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Parsing
    "parse",
    "try_parse",
    "parse_requirement",
    "try_parse_requirement",
    "compile_requirement",
    # Evaluation
    "compare",
    "match",
    "to_matchable",
    "to_string",
    # Models
    "Version",
    "Requirement",
    "Operator",
    "Combinator",
    "Ordering",
    # Errors
    "SemverMatchError",
    "InvalidVersionError",
    "InvalidRequirementError",
]
