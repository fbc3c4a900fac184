"""Environment configuration for intcalc.

All knobs are INTCALC_* environment variables read at call time, so a
changed environment takes effect on the next evaluation.
"""

from __future__ import annotations

import os

# The reference console read lines into a 100-byte buffer (99 chars + NUL).
DEFAULT_MAX_LINE = 99

_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def max_line_length() -> int:
    """Maximum characters accepted per prompt line (INTCALC_MAX_LINE)."""
    raw = os.environ.get("INTCALC_MAX_LINE", "")
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_MAX_LINE
    return value if value > 0 else DEFAULT_MAX_LINE
