"""Recursive-descent parser that evaluates while it parses.

Grammar (no tree is built, each level returns an int):

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := ['-'] ( '(' expression ')' | digit* )

All three levels share one Cursor and advance it as they consume input.
Values are unbounded Python ints and never wrap at machine width.
"""

from __future__ import annotations

import logging

from intcalc.errors import DivisionByZero, MalformedGrouping, UnexpectedCharacter, UnexpectedEnd
from intcalc.models import DIGITS, Cursor, EvalOptions

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = EvalOptions()


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def parse_factor(cursor: Cursor, options: EvalOptions = _DEFAULT_OPTIONS) -> int:
    """Parse a signed literal or a parenthesized sub-expression.

    Only one leading '-' is recognised. A factor with no digits evaluates to
    0 and consumes nothing, unless options.strict is set.
    """
    sign = 1
    if cursor.current == "-":
        sign = -1
        cursor.advance()

    if cursor.current == "(":
        open_pos = cursor.position
        cursor.advance()
        value = parse_expression(cursor, options)
        if options.check_grouping and cursor.current != ")":
            raise MalformedGrouping("Missing ')' for '(' opened", open_pos)
        # Closing ')' is consumed unchecked; a no-op at end of input.
        cursor.advance()
        return sign * value

    start = cursor.position
    value = 0
    while cursor.current and cursor.current in DIGITS:
        value = value * 10 + int(cursor.advance())

    if options.strict and cursor.position == start:
        if cursor.at_end:
            raise UnexpectedEnd(cursor.position)
        raise UnexpectedCharacter(cursor.current, cursor.position)
    return sign * value


def parse_term(cursor: Cursor, options: EvalOptions = _DEFAULT_OPTIONS) -> int:
    """Parse factors joined by '*' or '/', left-associative."""
    result = parse_factor(cursor, options)

    while cursor.current in ("*", "/"):
        op_pos = cursor.position
        op = cursor.advance()
        operand = parse_factor(cursor, options)
        if op == "*":
            result *= operand
        else:
            if operand == 0:
                logger.debug("division by zero at %d in %r", op_pos, cursor.text)
                raise DivisionByZero(op_pos)
            result = _truncating_div(result, operand)
    return result


def parse_expression(cursor: Cursor, options: EvalOptions = _DEFAULT_OPTIONS) -> int:
    """Parse terms joined by '+' or '-', left-associative.

    Stops at end of input or at the first character that is not '+'/'-'
    after a term (usually the ')' handled by parse_factor).
    """
    result = parse_term(cursor, options)

    while cursor.current in ("+", "-"):
        op = cursor.advance()
        operand = parse_term(cursor, options)
        if op == "+":
            result += operand
        else:
            result -= operand
    return result
