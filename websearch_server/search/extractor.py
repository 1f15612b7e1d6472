"""
Purpose:
- Turn a search-results page into an ordered list of SearchResult records.
- Selectors come from settings so a markup change upstream touches only config.

Notes:
- Blocks are visited in document order and the per-block work stops once `limit` records are accepted.
  The selector match itself runs over the whole document (lexbor returns the match list in one pass).
- A block is accepted only with a non-empty heading and an anchor whose href is an absolute http(s) URL;
  otherwise it is dropped whole (no placeholder titles or URLs).
"""

from __future__ import annotations
from typing import List, Optional
from urllib.parse import urlparse
from selectolax.lexbor import LexborHTMLParser, LexborNode
from ..core.errors import ParseError
from ..core.settings import settings
from .schema import SearchResult

def _clean_text(node: LexborNode) -> str:
    # Collapse whitespace runs; text nodes are joined as-is so inline tags do not split words.
    return " ".join(node.text().split())

def _is_http_url(href: str) -> bool:
    try:
        parsed = urlparse(href)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)

def _block_to_result(block: LexborNode) -> Optional[SearchResult]:
    heading = block.css_first(settings.result_title_selector)
    anchor = block.css_first(settings.result_link_selector)
    if heading is None or anchor is None:
        return None

    title = _clean_text(heading)
    href = (anchor.attributes.get("href") or "").strip()
    if not title or not _is_http_url(href):
        return None

    snippet = block.css_first(settings.result_snippet_selector)
    description = _clean_text(snippet) if snippet is not None else ""
    return SearchResult(title=title, url=href, description=description)

def extract(html: str, limit: int) -> List[SearchResult]:
    """
    Extract at most `limit` results from `html`.
    Raises ParseError only when the input is not text or the parser itself fails.
    """
    if not isinstance(html, str):
        raise ParseError(f"expected markup text, got {type(html).__name__}")
    if limit <= 0 or not html.strip():
        return []

    try:
        tree = LexborHTMLParser(html)
        blocks = tree.css(settings.result_container_selector)
    except Exception as e:
        raise ParseError(f"could not parse results page: {e}") from e

    results: List[SearchResult] = []
    for block in blocks:
        res = _block_to_result(block)
        if res is not None:
            results.append(res)
            if len(results) >= limit:
                break
    return results
