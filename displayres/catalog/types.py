"""
Type definitions for the resolution catalog.

Family is the canonical vocabulary of resolution lineages; CatalogEntry is
one row of the YAML table. Entries are frozen after load and never written
to at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from displayres.resolution import Resolution

# ── Enums ──────────────────────────────────────────────────────────────────────


class Family(str, Enum):
    """
    Resolution families, by standard lineage.

    Declaration order is catalog order: the aggregate catalog lists each
    family's entries in this order.
    """

    COMMON_INTERMEDIATE_FORMAT = "COMMON_INTERMEDIATE_FORMAT"
    HIGH_DEFINITION = "HIGH_DEFINITION"
    VIDEO_GRAPHICS_ARRAY = "VIDEO_GRAPHICS_ARRAY"
    EXTENDED_GRAPHICS_ARRAY = "EXTENDED_GRAPHICS_ARRAY"
    QUAD_EXTENDED_GRAPHICS_ARRAY = "QUAD_EXTENDED_GRAPHICS_ARRAY"
    HYPER_EXTENDED_GRAPHICS_ARRAY = "HYPER_EXTENDED_GRAPHICS_ARRAY"
    ULTRA_WIDE_CINEMA = "ULTRA_WIDE_CINEMA"
    ULTRA_WIDE_SCREEN = "ULTRA_WIDE_SCREEN"


# ── Table rows (frozen, loaded from YAML) ─────────────────────────────────────


@dataclass(frozen=True)
class CatalogEntry:
    designation: str
    width: int
    height: int
    aspect_ratio: str  # literal from the table; may not survive Resolution's check
    family: Optional[Family] = None  # None for standalone entries (WPAL, Infinity)
    notes: str = ""

    def resolution(self) -> Resolution:
        return Resolution(self.width, self.height, self.designation, self.aspect_ratio)
