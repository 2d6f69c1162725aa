"""Google Programmable Search (Custom Search JSON API) backend."""

from typing import Any

from ...protocols import SearchSession
from ...types import ResultPage
from .base import HttpSearchProvider, make_result

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"

# The API never serves results past the 100th.
GOOGLE_MAX_RESULTS = 100


class GoogleSearchProvider(HttpSearchProvider):
    display_name = "Google"
    max_page_size = 10

    def __init__(self, api_key: str, search_engine_id: str, **kwargs):
        super().__init__(**kwargs)
        self.api_key = api_key
        self.search_engine_id = search_engine_id

    def _start_index(self, session: SearchSession) -> int:
        return session.page_index * session.page_size + 1

    async def _fetch(self, session: SearchSession) -> dict[str, Any]:
        params = {
            "key": self.api_key,
            "cx": self.search_engine_id,
            "q": session.query,
            "num": str(session.page_size),
            "start": str(self._start_index(session)),
            "lr": "lang_en",
            "safe": "off",
        }
        return await self._request_json("GET", GOOGLE_SEARCH_URL, params=params)

    def _parse(self, data: dict[str, Any], session: SearchSession) -> ResultPage:
        results = []
        for item in data.get("items", []):
            result = make_result(item.get("link"), item.get("title"), item.get("snippet"))
            if result is not None:
                results.append(result)

        next_start = self._start_index(session) + session.page_size
        has_more = (
            "nextPage" in (data.get("queries") or {})
            and next_start + session.page_size - 1 <= GOOGLE_MAX_RESULTS
        )
        return ResultPage(results=tuple(results), has_more=has_more)
