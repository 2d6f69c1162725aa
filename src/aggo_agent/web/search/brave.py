"""Brave Web Search backend."""

from typing import Any

from ...protocols import SearchSession
from ...types import ResultPage
from .base import HttpSearchProvider, make_result

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"

# Brave rejects offsets above 9.
BRAVE_MAX_OFFSET = 9


class BraveSearchProvider(HttpSearchProvider):
    display_name = "Brave"
    max_page_size = 20

    def __init__(self, api_key: str, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    async def _fetch(self, session: SearchSession) -> dict[str, Any]:
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self.api_key,
        }
        params = {
            "q": session.query,
            "count": str(session.page_size),
            "offset": str(session.page_index),
            "search_lang": "en",
            "country": "US",
            "safesearch": "moderate",
        }
        return await self._request_json(
            "GET", BRAVE_SEARCH_URL, headers=headers, params=params
        )

    def _parse(self, data: dict[str, Any], session: SearchSession) -> ResultPage:
        web = data.get("web") or {}
        results = []
        for item in web.get("results", []):
            result = make_result(
                item.get("url"), item.get("title"), item.get("description")
            )
            if result is not None:
                results.append(result)

        more = bool((data.get("query") or {}).get("more_results_available", False))
        has_more = more and session.page_index < BRAVE_MAX_OFFSET
        return ResultPage(results=tuple(results), has_more=has_more)
