"""Requirement lexer and parser.

A requirement is a sequence of clauses joined by ``and``/``or``::

    ">= 2.0.0 and < 2.1.0"
    "~> 2.1 or == 3.0.0-rc.1"
    "1.0.0"                      # bare operand, same as "== 1.0.0"

Lexing scans left to right, trying the operator table longest-match-first
at every position. Any other character belongs to an operand, which ends
at a space, an operator or the end of input. An operand that is not
preceded by an operator gets an implicit ``==``.

The deprecated ``!=`` and ``!`` spellings are still accepted and produce
:attr:`Operator.NE`. The lexer only records which spellings it saw; the
public parsing functions turn them into a :class:`DeprecationWarning`
pointing at their caller.

Parsing then validates the token stream against
``operator operand (combinator operator operand)*``. Operands are parsed
in approximate mode so that ``~>`` may omit the patch version; any other
operator with a partial operand is rejected.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from semvermatch.core.parser import parse_version_parts
from semvermatch.exceptions import InvalidRequirementError, InvalidVersionError
from semvermatch.models.requirement import Combinator, Operand, Operator, Token
from semvermatch.utils.logger import get_logger

logger = get_logger("core.lexer")

# ---------------------------------------------------------------------------
# Token table, longest match first
# ---------------------------------------------------------------------------

OPERATOR_TOKENS: Tuple[Tuple[str, Union[Operator, Combinator]], ...] = (
    (">=", Operator.GE),
    ("<=", Operator.LE),
    ("~>", Operator.PESSIMISTIC),
    (">", Operator.GT),
    ("<", Operator.LT),
    ("==", Operator.EQ),
    (" or ", Combinator.OR),
    (" and ", Combinator.AND),
)

DEPRECATED_TOKENS: Tuple[str, ...] = ("!=", "!")

# Operator and Combinator are str enums; plain str tokens are operand text
RawToken = Union[Operator, Combinator, str]


def deprecation_message(text: str) -> str:
    """Return the advisory for a deprecated operator spelling."""
    return f"{text} inside version requirements is deprecated, use ~> or >= instead"


def _flush(operand: str, tokens: List[RawToken]) -> None:
    if not operand:
        return
    if not tokens or not isinstance(tokens[-1], Operator):
        tokens.append(Operator.EQ)
    tokens.append(operand)


def _token_at(source: str, position: int) -> Optional[Tuple[str, RawToken]]:
    for text, token in OPERATOR_TOKENS:
        if source.startswith(text, position):
            return text, token
    for text in DEPRECATED_TOKENS:
        if source.startswith(text, position):
            return text, Operator.NE
    return None


def tokenize(source: str, deprecated: Optional[List[str]] = None) -> List[RawToken]:
    """Split a requirement string into operators, combinators and operand text.

    Args:
        source: Raw requirement string.
        deprecated: If given, every deprecated operator spelling found
            (``"!="`` or ``"!"``) is appended to it, in source order.

    Returns:
        Tokens in source order. Operands are still unparsed strings.
    """
    tokens: List[RawToken] = []
    start = 0  # first character of the pending operand
    position = 0
    length = len(source)

    while position < length:
        found = _token_at(source, position)
        if found is None:
            if source[position] == " ":
                _flush(source[start:position], tokens)
                start = position + 1
            position += 1
            continue

        text, token = found
        if text in DEPRECATED_TOKENS:
            logger.debug("Deprecated operator %r in %r", text, source)
            if deprecated is not None:
                deprecated.append(text)
        _flush(source[start:position], tokens)
        tokens.append(token)
        position += len(text)
        start = position

    _flush(source[start:], tokens)
    return tokens


def _validate_operand(operator: Operator, text: str) -> Operand:
    parts = parse_version_parts(text, approximate=True)
    if parts.patch is None and operator is not Operator.PESSIMISTIC:
        raise InvalidVersionError(text)
    return Operand(*parts)


def parse_tokens(source: str, tokens: Sequence[RawToken]) -> Tuple[Token, ...]:
    """Validate a token stream and parse its operands.

    Args:
        source: Original requirement string, used for error reporting.
        tokens: Output of :func:`tokenize`.

    Returns:
        ``(operator, operand, (combinator, operator, operand)*)``.

    Raises:
        InvalidRequirementError: The stream is empty, out of shape, or
            contains an operand that is not a valid version.
    """
    lexed: List[Token] = []
    position = 0
    expect_combinator = False

    while position < len(tokens) or not lexed:
        if expect_combinator:
            combinator = tokens[position]
            if not isinstance(combinator, Combinator):
                raise InvalidRequirementError(source)
            lexed.append(combinator)
            position += 1

        window = tokens[position:position + 2]
        if len(window) != 2:
            raise InvalidRequirementError(source)
        operator, text = window
        if not isinstance(operator, Operator) or isinstance(text, (Operator, Combinator)):
            raise InvalidRequirementError(source)

        try:
            operand = _validate_operand(operator, text)
        except InvalidVersionError:
            raise InvalidRequirementError(source) from None

        lexed.extend((operator, operand))
        position += 2
        expect_combinator = True

    return tuple(lexed)


def lex_requirement(
    source: str,
    deprecated: Optional[List[str]] = None,
) -> Tuple[Token, ...]:
    """Tokenize and validate a requirement string in one step.

    Args:
        source: Raw requirement string.
        deprecated: Collector for deprecated operator spellings, see
            :func:`tokenize`.

    Raises:
        InvalidRequirementError: ``source`` is not a valid requirement.
    """
    if not isinstance(source, str):
        raise TypeError(f"expected str, got {type(source).__name__}")

    try:
        return parse_tokens(source, tokenize(source, deprecated))
    except InvalidRequirementError:
        logger.debug("Rejected requirement %r", source)
        raise
