"""
Search result aggregation.

Drives a search session page by page, deduplicating results by URL and
capping the collection. Pages are always requested sequentially because the
backend's pagination cursor lives in the session.
"""

import logging

from ..cancellation import CancellationScope
from ..exceptions import EmptyResults, ProviderError, SearchFailure
from ..protocols import SearchProvider
from ..types import AggregatedResults, SearchResult

logger = logging.getLogger(__name__)


class ResultAggregator:
    """Collects a bounded, duplicate-free set of results for one topic."""

    def __init__(self, provider: SearchProvider, result_cap: int):
        """
        Initialize the aggregator.

        Args:
            provider: Search backend to page through
            result_cap: Maximum number of unique results to keep (K)
        """
        if result_cap <= 0:
            raise ValueError("result_cap must be positive")
        self.provider = provider
        self.result_cap = result_cap

    async def collect(
        self,
        topic: str,
        max_pages: int,
        page_size: int,
        cancellation: CancellationScope | None = None,
    ) -> AggregatedResults:
        """
        Page through search results for a topic.

        The loop ends on whichever comes first: max_pages pages fetched, a
        page reporting no more results, or the result cap being reached.

        Args:
            topic: Search query
            max_pages: Maximum number of pages to request (N)
            page_size: Results requested per page
            cancellation: Optional scope checked before each page request

        Returns:
            AggregatedResults in first-seen rank order

        Raises:
            SearchFailure: If the session cannot be opened or the first page fails
            EmptyResults: If no unique results were found
            ResearchCancelled: If cancellation is observed before a page request
        """
        cancellation = cancellation or CancellationScope()

        try:
            session = self.provider.start_search(topic, page_size=page_size)
        except ProviderError as e:
            raise SearchFailure(
                f"Failed to start web search for {topic!r}: {e}"
            ) from e

        results: list[SearchResult] = []
        seen_urls: set[str] = set()
        pages_fetched = 0
        degraded = False

        while pages_fetched < max_pages:
            stage = f"search page {pages_fetched + 1}/{max_pages}"
            cancellation.check(stage)
            try:
                page = await cancellation.guard(
                    self.provider.next_page(session), stage
                )
            except ProviderError as e:
                if pages_fetched == 0:
                    raise SearchFailure(
                        f"Failed to retrieve web search {stage} for {topic!r}: {e}"
                    ) from e
                logger.warning(
                    "Search degraded for %r: %s failed, keeping %d results: %s",
                    topic,
                    stage,
                    len(results),
                    e,
                )
                degraded = True
                break

            pages_fetched += 1
            self._merge(page.results, results, seen_urls)

            if not page.has_more:
                break
            if len(results) >= self.result_cap:
                break

        if not results:
            raise EmptyResults(f"Web search returned no results for {topic!r}")

        return AggregatedResults(
            results=tuple(results), pages_fetched=pages_fetched, degraded=degraded
        )

    def _merge(
        self,
        page_results: tuple[SearchResult, ...],
        results: list[SearchResult],
        seen_urls: set[str],
    ) -> None:
        for result in page_results:
            if len(results) >= self.result_cap:
                return
            url = result.url.strip()
            if not url or url in seen_urls:
                continue
            seen_urls.add(url)
            results.append(result._replace(url=url))
