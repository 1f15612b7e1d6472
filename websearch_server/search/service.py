"""
Purpose:
- The "service" orchestrates clamp -> fetch -> extract for one search call.
- FetchError / ParseError propagate unchanged; the dispatcher maps them.
"""

from __future__ import annotations
from typing import List, Optional, Union
from ..core.settings import settings
from .extractor import extract
from .fetcher import fetch_page
from .schema import SearchResult

def effective_limit(requested: Optional[Union[int, float]] = None) -> int:
    # Out-of-range values are clamped to [1, max_limit], never rejected.
    if requested is None:
        return settings.default_limit
    return max(1, min(int(requested), settings.max_limit))

async def search(query: str, limit: Optional[Union[int, float]] = None) -> List[SearchResult]:
    n = effective_limit(limit)
    html = await fetch_page(query)
    return extract(html, n)
