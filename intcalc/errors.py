"""Exception taxonomy for expression evaluation.

Every failure is terminal for the evaluation that raised it: no partial
result is produced. All errors derive from EvaluationError so callers can
catch them in one place.
"""

from __future__ import annotations

from typing import Optional


class EvaluationError(Exception):
    """Base class for all evaluation failures."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class EmptyExpression(EvaluationError, ValueError):
    """The expression text is empty."""

    def __init__(self):
        super().__init__("Empty expression")


class InvalidCharacter(EvaluationError, ValueError):
    """A character outside the allowed set was found by the validator."""

    def __init__(self, char: str, position: int):
        self.char = char
        super().__init__(f"Wrong character in the expression: {char!r}", position)


class DivisionByZero(EvaluationError, ZeroDivisionError):
    """The right operand of '/' evaluated to 0."""

    def __init__(self, position: Optional[int] = None):
        super().__init__("Division by zero", position)


class MalformedGrouping(EvaluationError, ValueError):
    """Unbalanced parentheses (only detected when grouping checks are on)."""


class UnexpectedCharacter(EvaluationError, ValueError):
    """Strict mode: a character that cannot start a factor or trails the expression."""

    def __init__(self, char: str, position: int):
        self.char = char
        super().__init__(f"Unexpected character {char!r}", position)


class UnexpectedEnd(EvaluationError, ValueError):
    """Strict mode: input ended where a factor was expected."""

    def __init__(self, position: int):
        super().__init__("Unexpected end of expression", position)


class NestingTooDeep(EvaluationError, ValueError):
    """Parentheses nest deeper than the interpreter's recursion limit allows."""

    def __init__(self):
        super().__init__("Expression nested too deeply")
