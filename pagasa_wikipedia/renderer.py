"""Wikitext generation for the {{TyphoonWarningsTable}} template.

Everything here is pure string formatting over classified areas; the only
side effect is recording issues on the run context.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Mapping

from .classifier import ClassifiedAreas, is_island_name
from .context import RunContext
from .errors import BulletinError
from .models import SIGNAL_LEVELS, AffectedArea
from .normalizer import municipality_link
from .regions import Region


PHILIPPINE_OFFSET = timedelta(hours=8)
NO_TYPHOON_TEMPLATE = "''No active typhoon warning signals.''"
NO_TYPHOON_ISSUE = "There is no active typhoon bulletin."

# Linked as-is even when absent from the provinces category.
_ALWAYS_LINKED = frozenset({"Metro Manila"})


def region_header(region: Region | None) -> str:
    if region is None:
        return "\n"
    page = f"{region.page}|" if region.page else ""
    header = f"* '''[[{page}{region.name}]]''' "
    if region.designation is not None:
        return header + f"{{{{small|({region.designation})}}}}\n"
    return header + "\n"


def province_link(province: str, context: RunContext) -> str:
    """Link a province to its article, falling back to plain text."""
    if context.page_exists(province) or province in _ALWAYS_LINKED or is_island_name(province):
        return f"[[{province}]]"

    disambiguated = f"{province} (province)"
    if context.page_exists(disambiguated):
        return f"[[{disambiguated}|{province}]]"

    context.issue(f"Page not found for province: {province}", province=province)
    return province


def municipalities_wikitext(area: AffectedArea) -> str:
    municipalities = area.includes.municipalities if area.includes else None
    if not municipalities:
        return ""
    links = ", ".join(municipality_link(m, area.province) for m in municipalities)
    return f" {{{{small|({links})}}}}"


def area_bullet(area: AffectedArea, context: RunContext, bullet: str = "**") -> str:
    link = province_link(area.province, context)

    if not area.has_sub_area:
        return f"{bullet} {link}\n"

    includes = area.includes
    term = includes.term.lower()
    if term == "mainland":
        return f"{bullet} Mainland {link}\n"
    if term == "rest":
        return f"{bullet} rest of {link}\n"
    phrase = " ".join(word for word in (includes.part, includes.term) if word)
    return f"{bullet} {phrase} of {link}{municipalities_wikitext(area)}\n"


def region_wikitext(region: Region | None, areas: list[AffectedArea], context: RunContext) -> str:
    # Region headers add one level of nesting to the bullets below them.
    bullet = "**" if region is not None else "*"
    out = region_header(region)
    for area in areas:
        out += area_bullet(area, context, bullet)
    return out


def signal_wikitext(classified: ClassifiedAreas | None, context: RunContext) -> str:
    if classified is None:
        return ""

    out = "\n"
    if classified.unclassified:
        out += region_wikitext(None, classified.unclassified, context)

    for index, areas in classified.regions_in_order():
        region = context.region(index)
        if region is None:
            context.issue(f"Region #{index} does not exist.", region=index)
        out += region_wikitext(region, areas, context)
    return out


def signals_wikitext(
    classified: Mapping[int, ClassifiedAreas | None], context: RunContext
) -> dict[int, str]:
    return {level: signal_wikitext(classified.get(level), context) for level in SIGNAL_LEVELS}


def parse_issued_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp into UTC; naive values are taken as UTC."""
    try:
        issued = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError) as e:
        raise BulletinError(f"Invalid issued timestamp: {value!r}") from e
    if issued.tzinfo is None:
        return issued.replace(tzinfo=timezone.utc)
    return issued.astimezone(timezone.utc)


def format_issued_time(value: str) -> str:
    utc_time = parse_issued_timestamp(value)
    local_time = utc_time + PHILIPPINE_OFFSET
    return (
        f"{utc_time:%H:%M} UTC "
        f"({local_time:%H:%M} [[Philippine Standard Time|PHT]])"
    )


def warnings_table(issued_timestamp: str, signals: Mapping[int, str], source_url: str) -> str:
    lines = [
        "{{TyphoonWarningsTable",
        f"| PHtime = {format_issued_time(issued_timestamp)}",
    ]
    for level in reversed(SIGNAL_LEVELS):
        lines.append(f"| PH{level} = {signals.get(level, '').strip()}")
    lines.append(f"| PHsource = [{source_url} PAGASA]")
    lines.append("}}")
    return "\n".join(lines)
