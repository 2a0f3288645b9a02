"""Bulletin input handling.

Bulletins are produced by an external PAGASA scraper. The converter either
receives one directly (as a mapping or a JSON string) or fetches the JSON
from a configured URL.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Union

from .common import _get_json, log_info
from .config import ConverterConfig
from .errors import BulletinError, ConfigurationError
from .models import Bulletin


BulletinInput = Union[Bulletin, Mapping[str, Any], str, bytes]


def load_bulletin(value: BulletinInput) -> Bulletin:
    if isinstance(value, Bulletin):
        return value
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError as e:
            raise BulletinError(f"Bulletin is not valid JSON: {e}") from e
    return Bulletin.from_dict(value)


def fetch_bulletin(config: ConverterConfig) -> Bulletin:
    """Download the latest bulletin from the configured scraper endpoint."""
    if not config.bulletin_url:
        raise ConfigurationError("PAGASA_BULLETIN_URL must be set to fetch a bulletin")

    data = _get_json(
        config.bulletin_url,
        timeout=config.timeout_seconds,
        headers=config.request_headers(),
        context="bulletin",
        error_cls=BulletinError,
    )
    log_info(f"Fetched bulletin from {config.bulletin_url}")
    return Bulletin.from_dict(data)
