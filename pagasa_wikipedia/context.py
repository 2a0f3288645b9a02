from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .common import log_info
from .models import Issue
from .regions import Region


@dataclass
class RunContext:
    """State scoped to a single conversion run.

    Created once per `get_warning_signals_template` call and passed to the
    classifier and renderer. Nothing here is shared between runs.
    """
    regions: tuple[Region, ...]
    provinces: frozenset[str] = frozenset()
    issues: list[Issue] = field(default_factory=list)

    @classmethod
    def create(cls, regions: Iterable[Region], provinces: Iterable[str] = ()) -> "RunContext":
        return cls(regions=tuple(regions), provinces=frozenset(provinces))

    def issue(self, message: str, **context: Any) -> Issue:
        entry = Issue(message=message, context=context)
        self.issues.append(entry)
        log_info(f"ISSUE {message}")
        return entry

    def region(self, index: int) -> Region | None:
        if 0 <= index < len(self.regions):
            return self.regions[index]
        return None

    def page_exists(self, title: str) -> bool:
        return title in self.provinces
