"""Top-level evaluation entry point.

evaluate() validates the text, runs the expression parser from position 0
with a fresh Cursor and returns the integer result. Any failure raises an
EvaluationError subclass; nothing here prints or exits.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from intcalc.errors import EmptyExpression, MalformedGrouping, NestingTooDeep, UnexpectedCharacter
from intcalc.models import Cursor, EvalOptions
from intcalc.parser import parse_expression
from intcalc.validator import validate

logger = logging.getLogger(__name__)


def _resolve_options(
    options: Optional[EvalOptions],
    strict: Optional[bool],
    check_grouping: Optional[bool],
) -> EvalOptions:
    base = options if options is not None else EvalOptions.from_env()
    return base.override(strict=strict, check_grouping=check_grouping)


def _check_trailing(cursor: Cursor, options: EvalOptions) -> None:
    """Handle text left over after a complete expression.

    The permissive default ignores it, so '(1)(2)' evaluates to 1.
    """
    if cursor.at_end:
        return
    if cursor.current == ")" and options.check_grouping:
        raise MalformedGrouping("Unmatched ')'", cursor.position)
    if options.strict:
        raise UnexpectedCharacter(cursor.current, cursor.position)
    logger.debug("ignoring trailing text %r at %d", cursor.remaining, cursor.position)


def evaluate(
    text: str,
    strict: Optional[bool] = None,
    check_grouping: Optional[bool] = None,
    options: Optional[EvalOptions] = None,
) -> int:
    """Evaluate an integer arithmetic expression.

    Args:
        text: Expression such as '(1+3*(-4))/2'. No whitespace allowed.
        strict: Reject factors with no digits and trailing text.
        check_grouping: Reject unbalanced parentheses.
        options: Base options; INTCALC_* environment variables when omitted.
            Explicit strict/check_grouping arguments override it.

    Returns:
        The integer value. Division truncates toward zero. Results are
        unbounded Python ints: there is no machine-width wrap-around, so
        overflow past 64 bits is not detected or emulated.

    Raises:
        EmptyExpression: text is empty.
        InvalidCharacter: text contains anything but digits and + - * / ( ).
        DivisionByZero: a '/' has a right operand of 0.
        MalformedGrouping: unbalanced parentheses, with check_grouping.
        UnexpectedCharacter, UnexpectedEnd: malformed factors, with strict.
        NestingTooDeep: parentheses nest past the interpreter recursion limit.
    """
    if not text:
        raise EmptyExpression()
    opts = _resolve_options(options, strict, check_grouping)

    validate(text)

    cursor = Cursor(text)
    try:
        result = parse_expression(cursor, opts)
    except RecursionError:
        logger.debug("recursion limit hit at %d in %d-char text", cursor.position, len(text))
        raise NestingTooDeep() from None
    _check_trailing(cursor, opts)

    logger.debug("evaluated %r = %d", text, result)
    return result


def evaluate_many(
    texts: Iterable[str],
    strict: Optional[bool] = None,
    check_grouping: Optional[bool] = None,
) -> list[int]:
    """Evaluate each text independently; the first failure propagates."""
    opts = _resolve_options(None, strict, check_grouping)
    return [evaluate(t, options=opts) for t in texts]
