"""Tavily search backend. Tavily answers in a single page."""

from typing import Any

from ...protocols import SearchSession
from ...types import ResultPage
from .base import HttpSearchProvider, make_result

TAVILY_SEARCH_URL = "https://api.tavily.com/search"


class TavilySearchProvider(HttpSearchProvider):
    display_name = "Tavily"
    max_page_size = 20

    def __init__(self, api_key: str, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    async def _fetch(self, session: SearchSession) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        payload = {
            "query": session.query,
            "max_results": session.page_size,
            "search_depth": "basic",
            "include_answer": False,
        }
        return await self._request_json(
            "POST", TAVILY_SEARCH_URL, headers=headers, json=payload
        )

    def _parse(self, data: dict[str, Any], session: SearchSession) -> ResultPage:
        results = []
        for item in data.get("results", []):
            result = make_result(item.get("url"), item.get("title"), item.get("content"))
            if result is not None:
                results.append(result)
        return ResultPage(results=tuple(results), has_more=False)
