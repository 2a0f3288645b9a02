"""Canonical region/province reference table.

The table is a JSON list of regions in presentation order. Each entry has a
`name`, an optional `page` (link target when it differs from the name), an
optional `designation` (e.g. "Region I") and the list of member
`provinces`. A region's position in the list is its stable index.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Sequence

from .errors import ConfigurationError


DEFAULT_REGIONS_FILE = Path(__file__).resolve().parent / "data" / "wp-regions.json"


@dataclass(frozen=True)
class Region:
    index: int
    name: str
    page: str | None
    designation: str | None
    provinces: frozenset[str]

    def contains(self, province: str) -> bool:
        return province in self.provinces

    @classmethod
    def from_dict(cls, index: int, data: Mapping[str, Any]) -> "Region":
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Region #{index} has no name")
        provinces = data.get("provinces") or []
        if not isinstance(provinces, list):
            raise ConfigurationError(f"Region {name!r}: 'provinces' must be a list")
        return cls(
            index=index,
            name=name,
            page=data.get("page") or None,
            designation=data.get("designation") or None,
            provinces=frozenset(provinces),
        )


def regions_from_list(entries: Sequence[Mapping[str, Any]]) -> tuple[Region, ...]:
    return tuple(Region.from_dict(i, entry) for i, entry in enumerate(entries))


@lru_cache(maxsize=None)
def _load_regions_file(path: Path) -> tuple[Region, ...]:
    try:
        with path.open("r", encoding="utf-8") as f:
            entries = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot load region table {path}: {e}") from e

    if not isinstance(entries, list):
        raise ConfigurationError(f"Region table {path} must contain a JSON list")
    return regions_from_list(entries)


def load_regions(path: Path | None = None) -> tuple[Region, ...]:
    """Load the region table, defaulting to the one shipped with the package."""
    return _load_regions_file((path or DEFAULT_REGIONS_FILE).resolve())
