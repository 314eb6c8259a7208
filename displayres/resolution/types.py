"""
The Resolution value type and its comparison rules.

A Resolution is a width/height pair with an optional designation (the
catalog name) and an optional declared aspect ratio. Instances are frozen
after construction and safe to share across threads.

──────────────────────────────────────────────────────────────────────────────
Equality vs. ordering
──────────────────────────────────────────────────────────────────────────────
Equality compares width and height. Ordering compares pixel count only, so
two resolutions with the same area but a different shape are neither less
nor greater than each other:

    Resolution(1920, 1080) <= Resolution(1080, 1920)   # True
    Resolution(1920, 1080) >= Resolution(1080, 1920)   # True
    Resolution(1920, 1080) == Resolution(1080, 1920)   # False
    compare(Resolution(1920, 1080), Resolution(1080, 1920))  # 0

This is a known limitation of ordering by area and is kept deliberately.
It is also why every rich comparison is spelled out below instead of being
derived with functools.total_ordering.

None stands for an absent resolution. It sorts before every present
resolution and is equal only to itself.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property, cmp_to_key
from typing import Optional

from .aspect import clamp, is_aspect_ratio, reduce_ratio

MAX_DIMENSION: int = 2**31 - 1


def _dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return clamp(value, 1, MAX_DIMENSION)


@dataclass(frozen=True, eq=False)
class Resolution:
    """
    A display resolution.

    width and height are clamped to [1, MAX_DIMENSION]; a declared aspect
    ratio that is not in "INT:INT" form is dropped and the ratio is computed
    from the dimensions instead. Construction never rejects a value.
    """

    width: int
    height: int
    designation: str = ""
    declared_aspect_ratio: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _dimension("width", self.width))
        object.__setattr__(self, "height", _dimension("height", self.height))
        if not is_aspect_ratio(self.declared_aspect_ratio):
            object.__setattr__(self, "declared_aspect_ratio", None)

    @property
    def pixels(self) -> int:
        return self.width * self.height

    @cached_property
    def aspect_ratio(self) -> str:
        """The declared ratio if one was given, else the reduced width:height."""
        if self.declared_aspect_ratio:
            return self.declared_aspect_ratio
        return self.computed_aspect_ratio

    @property
    def computed_aspect_ratio(self) -> str:
        return reduce_ratio(self.width, self.height)

    # ── Comparison ─────────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return not self == other

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __lt__(self, other: Optional[Resolution]) -> bool:
        if other is not None and not isinstance(other, Resolution):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Optional[Resolution]) -> bool:
        if other is not None and not isinstance(other, Resolution):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Optional[Resolution]) -> bool:
        if other is not None and not isinstance(other, Resolution):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Optional[Resolution]) -> bool:
        if other is not None and not isinstance(other, Resolution):
            return NotImplemented
        return compare(self, other) >= 0

    def __str__(self) -> str:
        size = f"{self.width}x{self.height}"
        return f"{self.designation} ({size})" if self.designation else size


def compare(first: Optional[Resolution], second: Optional[Resolution]) -> int:
    """
    Three-way compare by pixel count.

    Returns -1, 0 or 1. Either argument may be None: two absent values are
    equal, and an absent value is less than any present one.
    """
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    if first.pixels < second.pixels:
        return -1
    if first.pixels > second.pixels:
        return 1
    return 0


# For sorted()/min()/max() over sequences that may contain None.
sort_key = cmp_to_key(compare)
