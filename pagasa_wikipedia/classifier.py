"""Grouping of affected areas into canonical regions.

Bulletins list areas per landmass group (Luzon, Visayas, Mindanao). The
warnings table lists them per administrative region instead, so every area
is assigned to the first region whose province set names it. Areas that no
region claims are kept in an unclassified bucket and rendered first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .context import RunContext
from .models import SIGNAL_LEVELS, AffectedArea, Bulletin, SignalAreas


_ISLAND_RE = re.compile(r"Islands?$")


def is_island_name(province: str) -> bool:
    """True for names like "Babuyan Islands" that are not provinces."""
    return bool(_ISLAND_RE.search(province))


@dataclass
class ClassifiedAreas:
    """Areas of one signal level grouped by region.

    `by_region` is keyed by region index; `unclassified` holds the areas no
    region matched. Both keep the input order of their areas.
    """
    unclassified: list[AffectedArea] = field(default_factory=list)
    by_region: dict[int, list[AffectedArea]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.unclassified) + sum(len(areas) for areas in self.by_region.values())

    def regions_in_order(self) -> list[tuple[int, list[AffectedArea]]]:
        return sorted(self.by_region.items())


def _has_extras(extras) -> bool:
    if extras is None:
        return False
    if isinstance(extras, (dict, list, tuple, str)):
        return len(extras) > 0
    return True


def classify_signal_areas(signal: SignalAreas, context: RunContext) -> ClassifiedAreas:
    """Group the areas of one signal level by region."""
    if _has_extras(signal.extras):
        context.issue("Extras detected.", entry=signal.extras)
    for entry in signal.malformed:
        context.issue("Malformed affected area.", entry=entry)

    classified = ClassifiedAreas()
    for area in signal.all_areas():
        for note in area.notes:
            context.issue(note, entry=area.to_dict())

        region = next((r for r in context.regions if r.contains(area.province)), None)
        if region is not None:
            classified.by_region.setdefault(region.index, []).append(area)
            continue

        if not is_island_name(area.province):
            context.issue(f"Region for {area.province} not found.", entry=area.to_dict())
        classified.unclassified.append(area)

    return classified


def classify_signals(bulletin: Bulletin, context: RunContext) -> dict[int, ClassifiedAreas | None]:
    """Classify every signal level; levels without warnings map to None."""
    return {
        level: (
            classify_signal_areas(bulletin.storm_signals[level], context)
            if level in bulletin.storm_signals
            else None
        )
        for level in SIGNAL_LEVELS
    }
