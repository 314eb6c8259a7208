"""
Catalog registry: loads the resolution table from YAML at startup, validates
it, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to
the registry after startup.

──────────────────────────────────────────────────────────────────────────────
Views
──────────────────────────────────────────────────────────────────────────────
Every family, the standalone entries, and the aggregate catalog are exposed
as a ResolutionView over one shared table. A view is an immutable ordered
tuple of Resolution instances; list() and dictionary() hand out fresh
containers on every call, so callers may mutate what they receive without
affecting the registry or any other caller.

The aggregate view lists each family's entries in Family declaration order,
then the entries that belong to no family, in table order.

Each view builds its designation map once, walking the tuple in order and
assigning by designation, so if two entries share a designation the later
one wins.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, Union, cast

import yaml

from displayres.resolution import Resolution

from .types import CatalogEntry, Family

logger = logging.getLogger(__name__)

_DATA_PATH = Path(__file__).parent / "data" / "resolutions.yaml"

_REQUIRED_KEYS = ("designation", "width", "height", "aspect_ratio")


class ResolutionView:
    """Read-only, restartable view over an ordered run of resolutions."""

    def __init__(self, name: str, resolutions: tuple[Resolution, ...]) -> None:
        self._name = name
        self._resolutions = resolutions

        by_designation: dict[str, Resolution] = {}
        for resolution in resolutions:
            by_designation[resolution.designation] = resolution
        self._by_designation = MappingProxyType(by_designation)

    @property
    def name(self) -> str:
        return self._name

    def list(self) -> list[Resolution]:
        """Return the resolutions in declaration order, as a new list."""
        return list(self._resolutions)

    def array(self) -> tuple[Resolution, ...]:
        return self._resolutions

    def dictionary(self) -> dict[str, Resolution]:
        """Return a new designation -> Resolution mapping. Later entries win."""
        return dict(self._by_designation)

    def get(self, designation: str) -> Resolution:
        """
        Return the resolution named *designation*.

        Raises
        ------
        KeyError
            If no resolution in this view has that designation.
        """
        found = self._by_designation.get(designation)
        if found is None:
            raise KeyError(f"Unknown designation in {self._name}: {designation!r}")
        return found

    def __getattr__(self, designation: str) -> Resolution:
        # Only reached for names that are not real attributes.
        if designation.startswith("_"):
            raise AttributeError(designation)
        try:
            return self.get(designation)
        except KeyError:
            raise AttributeError(
                f"{self._name} has no resolution named {designation!r}"
            ) from None

    def __iter__(self) -> Iterator[Resolution]:
        return iter(self._resolutions)

    def __len__(self) -> int:
        return len(self._resolutions)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_designation
        return item in self._resolutions

    def __repr__(self) -> str:
        return f"ResolutionView({self._name!r}, {len(self._resolutions)} resolutions)"


class CatalogRegistry:
    """
    Read-only registry of every catalogued resolution.

    Instantiate directly to load a custom table (e.g. in tests); otherwise
    use get_registry() for the module singleton.
    """

    def __init__(self, data_path: Path = _DATA_PATH) -> None:
        self._data_path = data_path

        # Type annotations only; actual assignment happens in _load / _build_views
        self.entries: tuple[CatalogEntry, ...]
        self.all: ResolutionView
        self.standalone: ResolutionView
        self._families: MappingProxyType[Family, ResolutionView]
        self._family_of: MappingProxyType[str, Optional[Family]]

        self._load()
        self._build_views()
        logger.debug(
            "Resolution catalog loaded: %s (%d entries)", self._data_path, len(self.entries)
        )

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self) -> dict[str, Any]:
        path = self._data_path
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Resolution catalog file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse resolution catalog file {path}: {exc}") from exc

    def _load(self) -> None:
        """
        Parse and validate the table. Raises ValueError listing all problems
        found if any row is malformed.
        """
        data = self._load_yaml()
        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            raise ValueError(
                f"Resolution catalog file {self._data_path} has no 'entries' list"
            )

        errors: list[str] = []
        entries: list[CatalogEntry] = []
        for index, row in enumerate(data["entries"]):
            entry = self._parse_entry(index, row, errors)
            if entry is not None:
                entries.append(entry)

        if errors:
            raise ValueError(
                "Resolution catalog validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )
        self.entries = tuple(entries)

    def _parse_entry(
        self, index: int, row: Any, errors: list[str]
    ) -> Optional[CatalogEntry]:
        if not isinstance(row, dict):
            errors.append(f"entry {index} is not a mapping")
            return None

        missing = [key for key in _REQUIRED_KEYS if key not in row]
        if missing:
            errors.append(f"entry {index} is missing {', '.join(missing)}")
            return None

        label = f"entry {index} ({row['designation']!r})"
        problems_before = len(errors)

        if not isinstance(row["designation"], str) or not row["designation"]:
            errors.append(f"{label} designation must be a non-empty string")
        for key in ("width", "height"):
            value = row[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                errors.append(f"{label} {key} must be a positive integer, got {value!r}")
        if not isinstance(row["aspect_ratio"], str):
            # An unquoted 16:9 arrives here as the integer 969.
            errors.append(
                f"{label} aspect_ratio must be a quoted string, got {row['aspect_ratio']!r}"
            )
        notes = row.get("notes")
        if notes is not None and not isinstance(notes, str):
            errors.append(f"{label} notes must be a string, got {notes!r}")

        family: Optional[Family] = None
        if row.get("family") is not None:
            try:
                family = Family(row["family"])
            except ValueError:
                errors.append(f"{label} references unknown family: {row['family']!r}")

        if len(errors) > problems_before:
            return None
        return CatalogEntry(
            designation=row["designation"],
            width=row["width"],
            height=row["height"],
            aspect_ratio=row["aspect_ratio"],
            family=family,
            notes=(notes or "").strip(),
        )

    def _build_views(self) -> None:
        by_family: dict[Family, list[Resolution]] = {f: [] for f in Family}
        standalone: list[Resolution] = []
        family_of: dict[str, Optional[Family]] = {}

        for entry in self.entries:
            resolution = entry.resolution()
            if resolution.declared_aspect_ratio is None:
                logger.debug(
                    "Declared aspect ratio %r of %s is not INT:INT; using computed %s",
                    entry.aspect_ratio,
                    entry.designation,
                    resolution.aspect_ratio,
                )
            if entry.family is None:
                standalone.append(resolution)
            else:
                by_family[entry.family].append(resolution)
            family_of[entry.designation] = entry.family

        self._families = MappingProxyType(
            {f: ResolutionView(f.value, tuple(rs)) for f, rs in by_family.items()}
        )
        self.standalone = ResolutionView("STANDALONE", tuple(standalone))
        self.all = ResolutionView(
            "ALL",
            tuple(r for f in Family for r in self._families[f]) + tuple(standalone),
        )
        self._family_of = MappingProxyType(family_of)

    # ── Query API ──────────────────────────────────────────────────────────────

    def families(self) -> tuple[Family, ...]:
        """Return every family, in catalog order."""
        return tuple(Family)

    def family(self, family: Union[Family, str]) -> ResolutionView:
        """
        Return the view for *family* (a Family or its string value).

        Raises
        ------
        KeyError
            If *family* does not name a known family.
        """
        try:
            return self._families[Family(family)]
        except ValueError:
            raise KeyError(f"Unknown family: {family!r}") from None

    def get(self, designation: str) -> Resolution:
        return self.all.get(designation)

    def family_of(self, designation: str) -> Optional[Family]:
        """Return the family of *designation*, or None for standalone entries."""
        if designation not in self._family_of:
            raise KeyError(f"Unknown designation: {designation!r}")
        return self._family_of[designation]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time so there is no lazy-init race condition
# in concurrent contexts. The registry is read-only after construction, so
# sharing it across threads is safe.

_registry: CatalogRegistry = CatalogRegistry()


def get_registry() -> CatalogRegistry:
    """Return the module-level registry singleton."""
    return _registry


def resolutions() -> ResolutionView:
    """Return the aggregate view over the whole catalog."""
    return _registry.all


def family(name: Union[Family, str]) -> ResolutionView:
    """Return the view for one family of the module singleton."""
    return _registry.family(name)
