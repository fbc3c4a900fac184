"""Character pre-scan run before any parsing."""

from __future__ import annotations

import logging
from typing import Optional

from intcalc.errors import InvalidCharacter
from intcalc.models import CharClass, classify

logger = logging.getLogger(__name__)


def find_invalid(text: str) -> Optional[int]:
    """Position of the first character outside the allowed set, or None."""
    for i, ch in enumerate(text):
        if classify(ch) is CharClass.INVALID:
            return i
    return None


def validate(text: str) -> None:
    """Reject text containing anything but digits, + - * / ( ).

    Every character is checked, the last one included. Scanning stops at the
    first offender.

    Raises:
        InvalidCharacter: with the offending character and its position.
    """
    pos = find_invalid(text)
    if pos is not None:
        logger.debug("rejected %r: invalid character %r at %d", text, text[pos], pos)
        raise InvalidCharacter(text[pos], pos)
