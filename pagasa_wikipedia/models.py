from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .errors import BulletinError


SIGNAL_LEVELS = (1, 2, 3, 4, 5)
LANDMASSES = ("luzon", "visayas", "mindanao")


@dataclass(frozen=True)
class AreaIncludes:
    """Sub-area phrasing of an affected area.

    `term` is the descriptive word used by the bulletin ("mainland", "rest",
    "portion", ...). `part` is the qualifier preceding it ("northern",
    "eastern", ...). `municipalities` lists the towns named for the sub-area,
    in bulletin order.
    """
    term: str
    part: str | None = None
    municipalities: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AreaIncludes":
        municipalities = data.get("municipalities")
        # A malformed list is dropped here; AffectedArea notes it.
        if isinstance(municipalities, (list, tuple)):
            municipalities = tuple(str(m) for m in municipalities)
        else:
            municipalities = None
        return cls(
            term=str(data.get("term") or ""),
            part=data.get("part"),
            municipalities=municipalities,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"term": self.term}
        if self.part is not None:
            data["part"] = self.part
        if self.municipalities is not None:
            data["municipalities"] = list(self.municipalities)
        return data


@dataclass(frozen=True)
class AffectedArea:
    """One line item of a bulletin for a given signal level and landmass."""
    province: str
    part: bool = False
    includes: AreaIncludes | None = None
    raw: Mapping[str, Any] | None = field(default=None, repr=False, compare=False)
    # Data-quality problems found while decoding; reported as issues.
    notes: tuple[str, ...] = field(default=(), compare=False)

    @property
    def has_sub_area(self) -> bool:
        return bool(self.part) and self.includes is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AffectedArea":
        if not isinstance(data, Mapping):
            raise BulletinError(f"Affected area must be an object, got {type(data).__name__}")
        province = data.get("province")
        if not isinstance(province, str) or not province:
            raise BulletinError(f"Affected area is missing a province: {dict(data)!r}")

        includes = data.get("includes")
        notes: list[str] = []
        if isinstance(includes, Mapping):
            municipalities = includes.get("municipalities")
            if municipalities is not None and not isinstance(municipalities, (list, tuple)):
                notes.append("Malformed municipalities list.")
        return cls(
            province=province,
            part=bool(data.get("part")),
            includes=AreaIncludes.from_dict(includes) if isinstance(includes, Mapping) else None,
            raw=data,
            notes=tuple(notes),
        )

    def to_dict(self) -> dict[str, Any]:
        if self.raw is not None:
            return dict(self.raw)
        data: dict[str, Any] = {"province": self.province, "part": self.part}
        if self.includes is not None:
            data["includes"] = self.includes.to_dict()
        return data


@dataclass(frozen=True)
class SignalAreas:
    """Affected areas of one signal level, split by landmass group."""
    luzon: tuple[AffectedArea, ...] = ()
    visayas: tuple[AffectedArea, ...] = ()
    mindanao: tuple[AffectedArea, ...] = ()
    extras: Any = None
    # Entries that could not be read as an affected area, kept verbatim.
    malformed: tuple[Any, ...] = ()

    def all_areas(self) -> list[AffectedArea]:
        """Areas in landmass order: luzon, then visayas, then mindanao."""
        return [*self.luzon, *self.visayas, *self.mindanao]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SignalAreas":
        data = data or {}
        if not isinstance(data, Mapping):
            raise BulletinError(f"'affected_areas' must be an object, got {type(data).__name__}")

        landmasses: dict[str, tuple[AffectedArea, ...]] = {}
        malformed: list[Any] = []
        for name in LANDMASSES:
            entries = data.get(name) or []
            if not isinstance(entries, (list, tuple)):
                malformed.append(entries)
                entries = []
            areas = []
            for entry in entries:
                try:
                    areas.append(AffectedArea.from_dict(entry))
                except BulletinError:
                    malformed.append(entry)
            landmasses[name] = tuple(areas)
        return cls(extras=data.get("extras"), malformed=tuple(malformed), **landmasses)


@dataclass(frozen=True)
class Bulletin:
    """A severe weather bulletin as produced by the bulletin scraper.

    Only the fields the converter reads are kept. `storm_signals` maps the
    signal level (1-5) to its affected areas; levels without warnings are
    absent.
    """
    typhoon: Mapping[str, Any] | None
    issued_timestamp: str | None
    storm_signals: Mapping[int, SignalAreas] = field(default_factory=dict)

    @property
    def has_active_typhoon(self) -> bool:
        return self.typhoon is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Bulletin":
        if not isinstance(data, Mapping):
            raise BulletinError(f"Bulletin must be an object, got {type(data).__name__}")

        # Only an explicit null means there is no active typhoon.
        typhoon = data["typhoon"] if "typhoon" in data else {}
        issued = (data.get("bulletin") or {}).get("issued_timestamp")
        if typhoon is not None and not issued:
            raise BulletinError("Bulletin is missing 'bulletin.issued_timestamp'")

        raw_signals = data.get("storm_signals") or {}
        storm_signals: dict[int, SignalAreas] = {}
        for level in SIGNAL_LEVELS:
            signal = raw_signals.get(str(level), raw_signals.get(level))
            if not signal:
                continue
            if not isinstance(signal, Mapping):
                raise BulletinError(
                    f"Signal #{level} must be an object, got {type(signal).__name__}"
                )
            storm_signals[level] = SignalAreas.from_dict(signal.get("affected_areas"))

        return cls(typhoon=typhoon, issued_timestamp=issued, storm_signals=storm_signals)


@dataclass(frozen=True)
class Issue:
    """A non-fatal diagnostic recorded during a conversion run."""
    message: str
    context: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any] | str:
        if not self.context:
            return self.message
        return {"message": self.message, **self.context}


@dataclass(frozen=True)
class RenderResult:
    issues: tuple[Issue, ...]
    template: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "issues": [issue.to_dict() for issue in self.issues] if self.issues else False,
            "template": self.template,
        }


@dataclass(frozen=True)
class PreviewResult:
    template: RenderResult
    parsed: str

    def to_dict(self) -> dict[str, Any]:
        return {"template": self.template.to_dict(), "parsed": self.parsed}
