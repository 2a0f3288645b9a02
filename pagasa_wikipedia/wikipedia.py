"""MediaWiki API calls used by the converter.

Two calls only: listing the articles in the provinces category (used to
decide how provinces are linked) and rendering wikitext to HTML for a
preview.
"""

from __future__ import annotations

from .common import _get_json, _post_json, log_info
from .config import ConverterConfig
from .errors import WikipediaResponseError


def fetch_category_titles(config: ConverterConfig, category_pageid: int) -> frozenset[str]:
    """Titles of all main-namespace members of a category."""
    params = {
        "action": "query",
        "format": "json",
        "list": "categorymembers",
        "cmpageid": category_pageid,
        "cmprop": "title",
        "cmnamespace": 0,
        "cmlimit": "max",
    }

    titles: set[str] = set()
    while True:
        data = _get_json(
            config.wikipedia_api,
            params=params,
            timeout=config.timeout_seconds,
            headers=config.request_headers(),
            context=f"cmpageid={category_pageid}",
        )
        members = (data.get("query") or {}).get("categorymembers")
        if not isinstance(members, list):
            raise WikipediaResponseError(
                f"Response from Wikipedia has no category members (cmpageid={category_pageid})."
            )
        titles.update(member["title"] for member in members if "title" in member)

        continuation = data.get("continue")
        if not continuation:
            break
        params = {**params, **continuation}

    log_info(f"Fetched {len(titles)} titles from category pageid={category_pageid}")
    return frozenset(titles)


def fetch_province_titles(config: ConverterConfig) -> frozenset[str]:
    return fetch_category_titles(config, config.provinces_category_id)


def parse_wikitext(config: ConverterConfig, wikitext: str) -> str:
    """Render wikitext to HTML through `action=parse`."""
    data = _post_json(
        config.wikipedia_api,
        data={
            "action": "parse",
            "format": "json",
            "text": wikitext,
            "contentmodel": "wikitext",
        },
        timeout=config.timeout_seconds,
        headers=config.request_headers(),
        context="parse",
    )

    parsed = ((data.get("parse") or {}).get("text") or {}).get("*")
    if parsed is None:
        raise WikipediaResponseError("Response from Wikipedia cannot be processed.")
    return parsed
