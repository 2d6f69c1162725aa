"""
Collaborator contracts for the research pipeline.

Search backends are stateful: a session carries the pagination cursor, so
pages must be requested one after another. Both next_page and send may be
re-issued by a durable-execution host replaying an invocation.
"""

from dataclasses import dataclass
from typing import Protocol

from .types import ResultPage


@dataclass
class SearchSession:
    """Pagination cursor for one query against one backend."""

    query: str
    page_size: int
    page_index: int = 0
    exhausted: bool = False


class SearchProvider(Protocol):
    display_name: str

    def start_search(self, query: str, page_size: int = 10) -> SearchSession: ...

    async def next_page(self, session: SearchSession) -> ResultPage: ...


class LLMProvider(Protocol):
    async def send(self, prompt: str) -> str: ...
