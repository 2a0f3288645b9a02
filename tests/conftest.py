"""Pytest configuration for converter tests."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).parent.parent.resolve()
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Keep per-run log files out of the package directory during tests.
os.environ.setdefault("PAGASA_WIKI_LOG_DIR", tempfile.mkdtemp(prefix="pagasa-wiki-logs-"))

from pagasa_wikipedia.context import RunContext  # noqa: E402
from pagasa_wikipedia.regions import regions_from_list  # noqa: E402


REGION_ENTRIES = [
    {
        "name": "Ilocos Region",
        "designation": "Region I",
        "provinces": ["Ilocos Norte", "Ilocos Sur", "La Union", "Pangasinan"],
    },
    {
        "name": "Cagayan Valley",
        "designation": "Region II",
        "provinces": ["Batanes", "Cagayan", "Isabela"],
    },
    {
        "name": "Metro Manila",
        "provinces": ["Metro Manila"],
    },
    {
        "name": "Eastern Visayas",
        "page": "Eastern Visayas (region)",
        "designation": "Region VIII",
        "provinces": ["Leyte", "Northern Samar", "Samar"],
    },
    {
        "name": "Soccsksargen",
        "designation": "Region XII",
        "provinces": ["Cotabato", "Sarangani"],
    },
    {
        "name": "Northern Mindanao",
        "designation": "Region X",
        "provinces": ["Bukidnon", "Camiguin"],
    },
]


@pytest.fixture
def regions():
    return regions_from_list(REGION_ENTRIES)


@pytest.fixture
def provinces():
    return frozenset(
        {
            "Ilocos Norte",
            "Batanes",
            "Cagayan",
            "Isabela",
            "Leyte",
            "Samar (province)",
            "Northern Samar",
            "Bukidnon",
        }
    )


@pytest.fixture
def context(regions, provinces):
    return RunContext.create(regions, provinces)


def area(province, part=False, term=None, sub_part=None, municipalities=None):
    entry = {"province": province, "part": part}
    if term is not None:
        includes = {"term": term}
        if sub_part is not None:
            includes["part"] = sub_part
        if municipalities is not None:
            includes["municipalities"] = municipalities
        entry["includes"] = includes
    return entry


def make_bulletin(signals=None, active=True, issued="2020-11-01T06:00:00Z"):
    """Build a bulletin dict shaped like the scraper output.

    `signals` maps a signal level to a dict of landmass -> area list.
    """
    storm_signals = {}
    for level, landmasses in (signals or {}).items():
        affected = {"luzon": None, "visayas": None, "mindanao": None, "extras": {}}
        affected.update(landmasses)
        storm_signals[str(level)] = {"affected_areas": affected}
    return {
        "typhoon": {"name": "Rolly", "international_name": "Goni"} if active else None,
        "bulletin": {"issued_timestamp": issued},
        "storm_signals": storm_signals,
    }
