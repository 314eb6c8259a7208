from .registry import (
    CatalogRegistry,
    ResolutionView,
    family,
    get_registry,
    resolutions,
)
from .types import CatalogEntry, Family

__all__ = [
    # Enums
    "Family",
    # Table rows (frozen, loaded from YAML)
    "CatalogEntry",
    # Registry
    "CatalogRegistry",
    "ResolutionView",
    "get_registry",
    "resolutions",
    "family",
]
