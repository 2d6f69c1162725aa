"""
Shared plumbing for JSON web search backends.
"""

from typing import Any

import httpx

from ...exceptions import ProviderError
from ...protocols import SearchSession
from ...types import ResultPage, SearchResult

NO_TITLE = "(no title)"


def truncate_for_log(text: str, max_len: int = 2000) -> str:
    if len(text) <= max_len:
        return text
    return f"{text[:max_len]}…<truncated>"


def make_result(url: str | None, title: str | None, snippet: str | None):
    """Build a SearchResult, or None when the backend gave no usable URL.

    Raises:
        TypeError: If a field present in the response is not a string
    """
    for name, value in (("url", url), ("title", title), ("snippet", snippet)):
        if value is not None and not isinstance(value, str):
            raise TypeError(f"result {name} is {type(value).__name__}, not str")
    if not url or not url.strip():
        return None
    return SearchResult(
        url=url.strip(), title=title or NO_TITLE, snippet=snippet or ""
    )


class HttpSearchProvider:
    """Shared HTTP plumbing for JSON web search APIs."""

    display_name = "HTTP"
    max_page_size = 20

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.transport = transport

    def start_search(self, query: str, page_size: int = 10) -> SearchSession:
        if not query.strip():
            raise ProviderError(f"{self.display_name} search requires a query")
        return SearchSession(query=query, page_size=min(page_size, self.max_page_size))

    async def next_page(self, session: SearchSession) -> ResultPage:
        if session.exhausted:
            return ResultPage(results=(), has_more=False)
        data = await self._fetch(session)
        try:
            page = self._parse(data, session)
        except (TypeError, AttributeError, KeyError) as e:
            raise ProviderError(
                f"Unexpected {self.display_name} response: {e}"
            ) from e
        session.page_index += 1
        if not page.has_more:
            session.exhausted = True
        return page

    async def _fetch(self, session: SearchSession) -> dict[str, Any]:
        raise NotImplementedError

    def _parse(self, data: dict[str, Any], session: SearchSession) -> ResultPage:
        raise NotImplementedError

    async def _request_json(self, method: str, url: str, **kwargs) -> dict[str, Any]:
        """Issue one request and decode its JSON body; never retries."""
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.request(method, url, **kwargs)
            except httpx.TimeoutException as e:
                raise ProviderError(
                    f"{self.display_name} search request timed out"
                ) from e
            except httpx.HTTPError as e:
                raise ProviderError(
                    f"{self.display_name} HTTP request failed: {e}"
                ) from e

        if response.is_error:
            raise ProviderError(
                f"{self.display_name} HTTP error status={response.status_code} "
                f"body={truncate_for_log(response.text)}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                f"Failed to parse {self.display_name} JSON: {e} "
                f"body={truncate_for_log(response.text)}"
            ) from e
        if not isinstance(data, dict):
            raise ProviderError(
                f"Unexpected {self.display_name} response: {truncate_for_log(response.text)}"
            )
        return data
