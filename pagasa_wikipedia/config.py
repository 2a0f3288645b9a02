"""Configuration loading for the PAGASA to Wikipedia converter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError


_DEFAULT_WIKIPEDIA_API = "https://en.wikipedia.org/w/api.php"
_DEFAULT_USER_AGENT = "PagasaToWikipedia/1.0 (https://localhost; admin@example.com) requests"
# Category:Provinces of the Philippines
_DEFAULT_PROVINCES_CATEGORY_ID = 722637
_DEFAULT_TIMEOUT_SECONDS = 30
_DEFAULT_SOURCE_URL = "http://bagong.pagasa.dost.gov.ph/tropical-cyclone/severe-weather-bulletin/2"


@dataclass(frozen=True)
class ConverterConfig:
    wikipedia_api: str = _DEFAULT_WIKIPEDIA_API
    user_agent: str = _DEFAULT_USER_AGENT
    provinces_category_id: int = _DEFAULT_PROVINCES_CATEGORY_ID
    timeout_seconds: int = _DEFAULT_TIMEOUT_SECONDS
    bulletin_url: str | None = None
    source_url: str = _DEFAULT_SOURCE_URL
    regions_file: Path | None = None

    def request_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


def _parse_int(name: str, value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from e
    if parsed <= 0:
        raise ConfigurationError(f"{name} must be positive, got {parsed}")
    return parsed


def load_config() -> ConverterConfig:
    """Load converter configuration from environment variables."""
    regions_file = os.getenv("PAGASA_REGIONS_FILE", "").strip()

    return ConverterConfig(
        wikipedia_api=os.getenv("WIKIPEDIA_API", "").strip() or _DEFAULT_WIKIPEDIA_API,
        user_agent=os.getenv("WIKIPEDIA_USER_AGENT", "").strip() or _DEFAULT_USER_AGENT,
        provinces_category_id=_parse_int(
            "WIKIPEDIA_PROVINCES_CATEGORY_ID",
            os.getenv("WIKIPEDIA_PROVINCES_CATEGORY_ID"),
            _DEFAULT_PROVINCES_CATEGORY_ID,
        ),
        timeout_seconds=_parse_int(
            "WIKIPEDIA_TIMEOUT_SECONDS",
            os.getenv("WIKIPEDIA_TIMEOUT_SECONDS"),
            _DEFAULT_TIMEOUT_SECONDS,
        ),
        bulletin_url=os.getenv("PAGASA_BULLETIN_URL", "").strip() or None,
        source_url=os.getenv("PAGASA_SOURCE_URL", "").strip() or _DEFAULT_SOURCE_URL,
        regions_file=Path(regions_file) if regions_file else None,
    )
