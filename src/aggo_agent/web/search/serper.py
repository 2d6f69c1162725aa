"""Serper (Google SERP API) backend."""

from typing import Any

from ...protocols import SearchSession
from ...types import ResultPage
from .base import HttpSearchProvider, make_result

SERPER_SEARCH_URL = "https://google.serper.dev/search"


class SerperSearchProvider(HttpSearchProvider):
    display_name = "Serper"
    max_page_size = 20

    def __init__(self, api_key: str, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key

    async def _fetch(self, session: SearchSession) -> dict[str, Any]:
        headers = {"X-API-KEY": self.api_key, "Content-Type": "application/json"}
        payload = {
            "q": session.query,
            "num": session.page_size,
            "page": session.page_index + 1,
            "hl": "en",
        }
        return await self._request_json(
            "POST", SERPER_SEARCH_URL, headers=headers, json=payload
        )

    def _parse(self, data: dict[str, Any], session: SearchSession) -> ResultPage:
        organic = data.get("organic", [])
        results = []
        for item in organic:
            result = make_result(item.get("link"), item.get("title"), item.get("snippet"))
            if result is not None:
                results.append(result)
        # Serper has no explicit end marker; an empty organic list ends the session.
        return ResultPage(results=tuple(results), has_more=bool(organic))
