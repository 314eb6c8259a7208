"""
Aspect-ratio arithmetic for display resolutions.

All functions are pure — no side effects, no state.
"""

from __future__ import annotations

import re

# Declared ratios are "INT:INT". Either side may be empty (":" and "5:" pass),
# $ also matches before a trailing newline, and \d accepts any Unicode digit.
# That looseness is long-standing catalog behavior and is kept as-is.
ASPECT_RATIO_PATTERN = re.compile(r"^\d*:\d*$")


def is_aspect_ratio(value: object) -> bool:
    """Return True if *value* is a string in declared "INT:INT" form."""
    return isinstance(value, str) and ASPECT_RATIO_PATTERN.search(value) is not None


def greatest_common_divisor(a: int, b: int) -> int:
    """Euclidean algorithm. Returns *a* unchanged when *b* is 0."""
    while b != 0:
        a, b = b, a % b
    return a


def reduce_ratio(width: int, height: int) -> str:
    """Format width:height in lowest terms, e.g. (1920, 1080) -> "16:9"."""
    divisor = greatest_common_divisor(width, height)
    return f"{width // divisor}:{height // divisor}"


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp *value* into [lower, upper]."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value
