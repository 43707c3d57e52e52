"""Requirement evaluation.

The matcher walks a requirement's clauses left to right. ``and`` extends
the running conjunction; ``or`` closes it and starts a new one, so
``a or b and c`` reads as ``a or (b and c)``. The result is the
disjunction of all conjunctions.

Pre-release policy: when ``allow_pre`` is false, ``>``, ``>=`` and ``~>``
only admit a pre-release version if their own operand is a pre-release.
``~>`` never admits pre-releases of its exclusive upper bound, whatever
the policy, because the bound itself is ``X.Y.0-0``.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from semvermatch.core.comparator import Ordering, compare_parts
from semvermatch.models.requirement import Combinator, Operand, Operator, Requirement
from semvermatch.models.version import Matchable

_AT_LEAST = (Ordering.GT, Ordering.EQ)
_AT_MOST = (Ordering.LT, Ordering.EQ)


def _pre_allowed(operand: Operand, version: Matchable) -> bool:
    return version.allow_pre or bool(operand.pre) or not version.pre


def _match_eq(operand: Operand, version: Matchable) -> bool:
    return compare_parts(version, operand) is Ordering.EQ


def _match_ne(operand: Operand, version: Matchable) -> bool:
    return compare_parts(version, operand) is not Ordering.EQ


def _match_gt(operand: Operand, version: Matchable) -> bool:
    return compare_parts(version, operand) is Ordering.GT and _pre_allowed(operand, version)


def _match_ge(operand: Operand, version: Matchable) -> bool:
    return compare_parts(version, operand) in _AT_LEAST and _pre_allowed(operand, version)


def _match_lt(operand: Operand, version: Matchable) -> bool:
    return compare_parts(version, operand) is Ordering.LT


def _match_le(operand: Operand, version: Matchable) -> bool:
    return compare_parts(version, operand) in _AT_MOST


def pessimistic_bounds(operand: Operand) -> Tuple[Operand, Operand]:
    """Return the inclusive lower and exclusive upper bound of ``~> operand``.

    ``~> 2.1`` spans ``[2.1.0, 3.0.0-0)``; ``~> 2.1.2`` spans
    ``[2.1.2, 2.2.0-0)``.
    """
    if operand.patch is None:
        lower = operand._replace(patch=0)
        upper = Operand(operand.major + 1, 0, 0, (0,), ())
    else:
        lower = operand
        upper = Operand(operand.major, operand.minor + 1, 0, (0,), ())
    return lower, upper


def _match_pessimistic(operand: Operand, version: Matchable) -> bool:
    lower, upper = pessimistic_bounds(operand)
    return (
        compare_parts(version, lower) in _AT_LEAST
        and compare_parts(version, upper) is Ordering.LT
        and _pre_allowed(operand, version)
    )


PREDICATES: Dict[Operator, Callable[[Operand, Matchable], bool]] = {
    Operator.EQ: _match_eq,
    Operator.NE: _match_ne,
    Operator.GT: _match_gt,
    Operator.GE: _match_ge,
    Operator.LT: _match_lt,
    Operator.LE: _match_le,
    Operator.PESSIMISTIC: _match_pessimistic,
}


def match_clause(operator: Operator, operand: Operand, version: Matchable) -> bool:
    """Evaluate a single ``operator operand`` clause against ``version``."""
    return PREDICATES[operator](operand, version)


def match_requirement(requirement: Requirement, version: Matchable) -> bool:
    """Evaluate a parsed requirement against a matchable version.

    Args:
        requirement: A requirement produced by the requirement parser.
        version: The version fields plus the pre-release policy.

    Returns:
        ``True`` if the version satisfies the requirement.
    """
    satisfied = False
    conjunction = True

    for combinator, operator, operand in requirement.clauses:
        if combinator is Combinator.OR:
            satisfied = satisfied or conjunction
            conjunction = True
        conjunction = conjunction and match_clause(operator, operand, version)

    return satisfied or conjunction
