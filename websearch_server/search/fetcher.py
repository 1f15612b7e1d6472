"""
Purpose:
- Fetch the upstream results page for a query as raw HTML text.
- Sends a desktop browser User-Agent so the page is served as normal markup.

Notes:
- One attempt per call; no retries, no caching.
- The client lives inside `async with`, so the connection closes on success, error and cancel.
"""

from __future__ import annotations
import httpx
from loguru import logger
from ..core.errors import FetchError
from ..core.settings import settings

async def fetch_page(query: str) -> str:
    """
    GET the configured search endpoint with ?q=<query>.
    Raises FetchError on network failure, timeout or a non-2xx status.
    """
    headers = {"User-Agent": settings.user_agent}
    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            resp = await client.get(
                settings.search_endpoint,
                params={"q": query},
                headers=headers,
                timeout=settings.fetch_timeout,
            )
            resp.raise_for_status()
            return resp.text
    except httpx.TimeoutException as e:
        logger.warning("Upstream fetch timed out after {}s", settings.fetch_timeout)
        raise FetchError(f"upstream timed out: {e}") from e
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning("Upstream answered HTTP {}", status)
        raise FetchError(f"upstream returned HTTP {status}", {"status": status}) from e
    except httpx.HTTPError as e:
        logger.warning("Upstream fetch failed: {!r}", e)
        raise FetchError(f"upstream request failed: {e}") from e
