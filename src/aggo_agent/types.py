"""
Common type definitions for the research agent.

Immutable records passed between the pipeline stages.
"""

from enum import Enum
from typing import NamedTuple

from .exceptions import ResearchError


class SearchResult(NamedTuple):
    """Individual search result from a web search backend."""

    url: str
    title: str
    snippet: str


class ResultPage(NamedTuple):
    """One page of results plus whether the backend has more."""

    results: tuple[SearchResult, ...]
    has_more: bool


class AggregatedResults(NamedTuple):
    """Unique results in first-seen rank order for one invocation."""

    results: tuple[SearchResult, ...]
    pages_fetched: int
    degraded: bool = False


class ResearchState(str, Enum):
    START = "start"
    SEARCHING = "searching"
    SYNTHESIZING = "synthesizing"
    FORMATTING = "formatting"
    DONE = "done"
    FAILED = "failed"


class ResearchOutcome(NamedTuple):
    """Terminal state of a research invocation."""

    topic: str
    state: ResearchState
    response: str | None = None
    error: ResearchError | None = None
    states: tuple[ResearchState, ...] = ()
    pages_fetched: int = 0
    degraded: bool = False

    @property
    def ok(self) -> bool:
        return self.state is ResearchState.DONE

    def unwrap(self) -> str:
        """Return the response text, raising the recorded error on failure."""
        if self.error is not None:
            raise self.error
        if self.response is None:
            raise RuntimeError(f"Research outcome for {self.topic!r} has no response")
        return self.response
