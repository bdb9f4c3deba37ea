"""Brave Search API client.

Implements `covenant.search.SearchClient` on top of `urllib.request`. Requests
are issued one at a time with the configured socket timeout and are never
retried.
"""

from __future__ import annotations

import json
import logging
import urllib.parse
import urllib.request
from typing import Any

from covenant.search import DEFAULT_RESULT_COUNT, SearchError, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.search.brave.com/res/v1/web/search"
USER_AGENT = "atlasPortal (covenant looking glass)"


class BraveSearchAPI:
    """Thin client for the Brave web search endpoint.

    Args:
        api_key: Subscription token. When empty, `search` logs a warning and
            returns no results instead of calling the API.
        endpoint: Web search endpoint URL.
        timeout: Socket timeout in seconds.
    """

    def __init__(self, api_key: str | None = None, *, endpoint: str = DEFAULT_ENDPOINT, timeout: float = 30) -> None:
        self.api_key = api_key or ""
        self.endpoint = endpoint
        self.timeout = timeout

    def search(self, query: str, *, count: int = DEFAULT_RESULT_COUNT) -> list[SearchResult]:
        """Run a web search.

        Args:
            query: Keyword query.
            count: Maximum number of results to request.

        Returns:
            Results in provider order.

        Raises:
            SearchError: When the request fails or the payload is not JSON.
        """

        if not self.api_key:
            logger.warning("BRAVE_SEARCH_API_KEY is not set; returning no results for %r", query)
            return []

        url = f"{self.endpoint}?{urllib.parse.urlencode({'q': query, 'count': count})}"
        request = urllib.request.Request(
            url,
            headers={
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
                "X-Subscription-Token": self.api_key,
            },
        )
        logger.info("Brave search query=%r count=%d", query, count)
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                payload = json.loads(response.read().decode("utf-8"))
        except (OSError, ValueError) as exc:
            raise SearchError(f"Brave search failed for query {query!r}") from exc

        results = parse_results(payload)
        logger.info("Brave search query=%r returned %d result(s)", query, len(results))
        return results


def parse_results(payload: Any) -> list[SearchResult]:
    """Extract web results from a Brave response payload.

    Rows without a URL are skipped; a payload without a `web` section has no
    results.
    """

    if not isinstance(payload, dict):
        raise SearchError("Brave search returned a non-object payload.")
    web = payload.get("web") or {}
    if not isinstance(web, dict):
        raise SearchError("Brave search returned a malformed web section.")
    rows = web.get("results") or []
    if not isinstance(rows, list):
        raise SearchError("Brave search returned malformed web results.")

    results: list[SearchResult] = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        url = str(row.get("url") or "").strip()
        if not url:
            continue
        results.append(
            SearchResult(
                title=str(row.get("title") or "").strip(),
                url=url,
                description=str(row.get("description") or "").strip(),
            )
        )
    return results
