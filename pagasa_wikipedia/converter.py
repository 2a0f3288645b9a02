"""PAGASA severe weather bulletin to Wikipedia warning-signals table.

Flow for one run:
1. Obtain the bulletin (supplied by the caller, or fetched).
2. Short-circuit when no typhoon is active.
3. Fetch the provinces category from Wikipedia (link validity only).
4. Classify the affected areas of each signal level by region.
5. Render each signal level and assemble the template.

Issues found along the way are returned with the template rather than
raised.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .bulletin_source import BulletinInput, fetch_bulletin, load_bulletin
from .classifier import classify_signals
from .common import log_info
from .config import _DEFAULT_SOURCE_URL, ConverterConfig, load_config
from .context import RunContext
from .models import Bulletin, Issue, PreviewResult, RenderResult
from .regions import Region, load_regions
from .renderer import NO_TYPHOON_ISSUE, NO_TYPHOON_TEMPLATE, signals_wikitext, warnings_table
from .wikipedia import fetch_province_titles, parse_wikitext


def no_active_typhoon_result() -> RenderResult:
    return RenderResult(issues=(Issue(NO_TYPHOON_ISSUE),), template=NO_TYPHOON_TEMPLATE)


def render_warning_signals(
    bulletin: Bulletin,
    regions: Sequence[Region],
    provinces: Iterable[str],
    *,
    source_url: str = _DEFAULT_SOURCE_URL,
) -> RenderResult:
    """Render a bulletin without any remote calls."""
    if not bulletin.has_active_typhoon:
        return no_active_typhoon_result()

    context = RunContext.create(regions, provinces)
    classified = classify_signals(bulletin, context)
    signals = signals_wikitext(classified, context)
    template = warnings_table(bulletin.issued_timestamp, signals, source_url)
    return RenderResult(issues=tuple(context.issues), template=template)


class PagasaToWikipedia:
    """Converts PAGASA bulletins into {{TyphoonWarningsTable}} wikitext.

    The instance only holds configuration and the region table; every call
    builds its own run context.
    """

    def __init__(self, config: ConverterConfig | None = None, regions: Sequence[Region] | None = None):
        self.config = config or load_config()
        self.regions = tuple(regions) if regions is not None else load_regions(self.config.regions_file)

    def get_warning_signals_template(
        self,
        bulletin: BulletinInput | None = None,
        provinces: Iterable[str] | None = None,
    ) -> RenderResult:
        """Build the warnings table for a bulletin.

        Args:
            bulletin: Bulletin mapping, JSON string or `Bulletin`. Fetched
                from the configured bulletin URL when omitted.
            provinces: Province article titles. Fetched from Wikipedia when
                omitted.
        """
        bulletin = fetch_bulletin(self.config) if bulletin is None else load_bulletin(bulletin)

        if not bulletin.has_active_typhoon:
            log_info("No active typhoon bulletin.")
            return no_active_typhoon_result()

        if provinces is None:
            provinces = fetch_province_titles(self.config)

        result = render_warning_signals(
            bulletin, self.regions, provinces, source_url=self.config.source_url
        )
        log_info(f"Rendered warning signals table with {len(result.issues)} issue(s)")
        return result

    def get_parsed_warning_signals_template(
        self,
        bulletin: BulletinInput | None = None,
        provinces: Iterable[str] | None = None,
    ) -> PreviewResult:
        """Build the warnings table and render it through Wikipedia."""
        template = self.get_warning_signals_template(bulletin, provinces)
        return PreviewResult(template=template, parsed=parse_wikitext(self.config, template.template))
