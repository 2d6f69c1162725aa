"""
Shared fixtures and recording test doubles for the research pipeline.
"""

from unittest.mock import Mock

import pytest

from aggo_agent.exceptions import ProviderError
from aggo_agent.orchestrator import ResearchOrchestrator
from aggo_agent.protocols import SearchSession
from aggo_agent.settings import Settings
from aggo_agent.types import ResultPage, SearchResult


def make_results(*urls: str) -> tuple[SearchResult, ...]:
    return tuple(
        SearchResult(url=url, title=f"Title {url}", snippet=f"Snippet for {url}")
        for url in urls
    )


class FakeSearchProvider:
    """
    Serves scripted pages in order and records every call.

    Each scripted entry is a ResultPage or an exception to raise.
    """

    display_name = "Fake"

    def __init__(self, pages, start_error: Exception | None = None):
        self.pages = list(pages)
        self.start_error = start_error
        self.calls: list[tuple[str, int]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def start_search(self, query: str, page_size: int = 10) -> SearchSession:
        self.calls.append(("start_search", page_size))
        if self.start_error is not None:
            raise self.start_error
        return SearchSession(query=query, page_size=page_size)

    async def next_page(self, session: SearchSession) -> ResultPage:
        self.calls.append(("next_page", session.page_index))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if session.page_index >= len(self.pages):
                return ResultPage(results=(), has_more=False)
            entry = self.pages[session.page_index]
            if isinstance(entry, Exception):
                raise entry
            session.page_index += 1
            return entry
        finally:
            self.in_flight -= 1

    @property
    def page_requests(self) -> int:
        return sum(1 for name, _ in self.calls if name == "next_page")


class FakeLLMProvider:
    """Returns a fixed reply (or raises) and records each prompt sent."""

    def __init__(self, reply: str = "Durable agents combine...", error=None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def send(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings(tmp_path):
    return Settings(
        max_pages=2,
        page_size=5,
        result_cap=10,
        prompt_budget=12000,
        best_links_count=3,
        research_timeout_seconds=None,
        log_dir=str(tmp_path / "logs"),
        _env_file=None,
    )


@pytest.fixture
def provider_error():
    return ProviderError("backend unavailable")


@pytest.fixture
def make_orchestrator(settings):
    """Build an orchestrator around the given doubles with a mock logger."""

    def _make(search_provider, llm_provider=None, **overrides):
        active = settings.model_copy(update=overrides) if overrides else settings
        return ResearchOrchestrator(
            search_provider,
            llm_provider or FakeLLMProvider(),
            active,
            research_logger=Mock(),
        )

    return _make
