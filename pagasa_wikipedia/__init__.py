"""
PAGASA to Wikipedia

Converts PAGASA severe weather bulletins into the {{TyphoonWarningsTable}}
wikitext used on Wikipedia tropical cyclone articles:
- place-name resolution against a canonical region table
- grouped, bulleted wikitext per tropical cyclone wind signal
- optional preview rendering through the MediaWiki API
"""

from pagasa_wikipedia.converter import (
    PagasaToWikipedia,
    render_warning_signals,
)
from pagasa_wikipedia.models import Bulletin, Issue, PreviewResult, RenderResult

__all__ = [
    "Bulletin",
    "Issue",
    "PagasaToWikipedia",
    "PreviewResult",
    "RenderResult",
    "render_warning_signals",
]
