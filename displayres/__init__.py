"""
Reference catalog of standard display resolutions.

Provides the Resolution value type (pixel count, aspect ratio, ordering by
area) and a static catalog of named industry resolutions grouped into
families.
"""

from .catalog import (
    CatalogEntry,
    CatalogRegistry,
    Family,
    ResolutionView,
    family,
    get_registry,
    resolutions,
)
from .resolution import MAX_DIMENSION, Resolution, compare, sort_key

__all__ = [
    # Value type
    "Resolution",
    "MAX_DIMENSION",
    "compare",
    "sort_key",
    # Catalog
    "Family",
    "CatalogEntry",
    "CatalogRegistry",
    "ResolutionView",
    "get_registry",
    "resolutions",
    "family",
]
