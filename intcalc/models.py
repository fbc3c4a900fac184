"""Data models for the intcalc evaluation engine.

CharClass enum, Cursor, EvalOptions: the small typed structures that flow
through validator → parser → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from intcalc.config import env_flag

DIGITS = "0123456789"


class CharClass(str, Enum):
    """Grammar classification of a single input character."""

    DIGIT = "digit"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    INVALID = "invalid"


_OPERATOR_CLASSES = {
    "+": CharClass.PLUS,
    "-": CharClass.MINUS,
    "*": CharClass.STAR,
    "/": CharClass.SLASH,
    "(": CharClass.LPAREN,
    ")": CharClass.RPAREN,
}


def classify(ch: str) -> CharClass:
    """Classify one character. Only ASCII 0-9 count as digits."""
    if ch and ch in DIGITS:
        return CharClass.DIGIT
    return _OPERATOR_CLASSES.get(ch, CharClass.INVALID)


@dataclass
class Cursor:
    """Scan position into one expression text.

    Shared by reference across the grammar levels of a single evaluation and
    advanced as characters are consumed. Invariant: 0 <= position <= len(text).
    """

    text: str
    position: int = 0

    @property
    def current(self) -> str:
        """Character under the cursor, or '' at end of input."""
        if self.position < len(self.text):
            return self.text[self.position]
        return ""

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    def advance(self) -> str:
        """Consume the current character and return it.

        At end of input nothing is consumed and '' is returned.
        """
        ch = self.current
        if ch:
            self.position += 1
        return ch


@dataclass(frozen=True)
class EvalOptions:
    """Strictness switches for one evaluation.

    The defaults reproduce the permissive reference grammar: a factor with no
    digits evaluates to 0, a missing ')' is tolerated and trailing text after
    a complete expression is ignored.
    """

    strict: bool = False
    check_grouping: bool = False

    @classmethod
    def from_env(cls) -> EvalOptions:
        """Build options from INTCALC_* environment variables."""
        return cls(
            strict=env_flag("INTCALC_STRICT"),
            check_grouping=env_flag("INTCALC_CHECK_GROUPING"),
        )

    def override(
        self,
        strict: Optional[bool] = None,
        check_grouping: Optional[bool] = None,
    ) -> EvalOptions:
        """Return a copy with any explicitly given flag replaced."""
        return EvalOptions(
            strict=self.strict if strict is None else strict,
            check_grouping=self.check_grouping if check_grouping is None else check_grouping,
        )
