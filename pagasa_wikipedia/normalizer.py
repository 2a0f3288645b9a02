"""Municipality name normalization.

Bulletins spell municipalities the way PAGASA writes them, which does not
always match the Wikipedia article title. A name is turned into a link target
by an ordered pipeline of rewrites, after which the alias table of known
mismatches gets the final word. The displayed text is always the raw name.
"""

from __future__ import annotations

import re
from typing import Callable


# Known PAGASA spellings that differ from the article title.
MUNICIPALITY_ALIASES: dict[str, str] = {
    "Albuena": "Albuera",
    "San Jose Del Monte": "San Jose del Monte",
    "Dinapugue": "Dinapigue",
    "Macallelon": "Macalelon",
    "Tagkayawan": "Tagkawayan",
}

_DIRECTIONAL_PREFIX_RE = re.compile(r"^(?:[Ee]ast|[Nn]orth|[Ss]outh|[Ww]est)ern\s+")


def expand_santa(name: str) -> str:
    return name.replace("Sta.", "Santa")


def expand_santo(name: str) -> str:
    return name.replace("Sto.", "Santo")


def strip_directional_prefix(name: str) -> str:
    """Drop a leading "Northern "/"Eastern "/... qualifier."""
    return _DIRECTIONAL_PREFIX_RE.sub("", name, count=1)


# Order matters: abbreviations are expanded before the prefix is stripped.
REWRITE_STEPS: tuple[Callable[[str], str], ...] = (
    expand_santa,
    expand_santo,
    strip_directional_prefix,
)


def municipality_target(name: str) -> str:
    """Return the article name for a municipality as spelled by PAGASA."""
    target = name
    for step in REWRITE_STEPS:
        target = step(target)
    return MUNICIPALITY_ALIASES.get(name, target)


def municipality_pipe(name: str) -> str:
    """`TARGET|DISPLAY` form for a municipality name."""
    return f"{municipality_target(name)}|{name}"


def municipality_link(name: str, province: str) -> str:
    """Wikilink to a municipality, disambiguated by its province."""
    return f"[[{municipality_target(name)}, {province}|{name}]]"
