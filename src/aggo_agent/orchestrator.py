"""
Research Orchestration Logic

One sequential pipeline per request: search, synthesize, format. Every
external call is issued in a fixed order and never retried here, so a
durable-execution host can replay an invocation call for call.
"""

import asyncio
import logging
import time
import uuid

from .cancellation import CancellationScope
from .exceptions import ResearchError
from .logger import setup_logging
from .models import create_llm_provider
from .processing import PromptBuilder, ResultAggregator
from .protocols import LLMProvider, SearchProvider
from .reports import ResponseFormatter, Synthesizer
from .settings import Settings, get_settings
from .types import AggregatedResults, ResearchOutcome, ResearchState
from .web.search import create_search_provider


class ResearchOrchestrator:
    """
    Entry point for `research(topic)`.

    Holds only configuration and injected providers; everything produced
    during an invocation is local to that invocation.
    """

    def __init__(
        self,
        search_provider: SearchProvider,
        llm_provider: LLMProvider,
        settings: Settings | None = None,
        *,
        research_logger: logging.Logger | None = None,
    ):
        self.settings = settings or get_settings()
        self.aggregator = ResultAggregator(search_provider, self.settings.result_cap)
        self.prompt_builder = PromptBuilder()
        self.synthesizer = Synthesizer(llm_provider)
        self.response_formatter = ResponseFormatter()
        self.research_logger = research_logger or setup_logging(self.settings.log_dir)

    async def run(
        self, topic: str, cancel_event: asyncio.Event | None = None
    ) -> ResearchOutcome:
        """
        Execute one research invocation and report its terminal state.

        Research failures are captured in the returned outcome rather than raised.

        Args:
            topic: Non-empty research topic
            cancel_event: Optional event the host sets to stop the invocation

        Raises:
            ValueError: If the topic is blank
        """
        if not topic or not topic.strip():
            raise ValueError("Research topic must not be empty")
        topic = topic.strip()

        run_id = uuid.uuid4().hex[:8]
        run_start = time.time()
        states = [ResearchState.START]
        aggregated: AggregatedResults | None = None
        cancellation = CancellationScope.with_timeout(
            self.settings.research_timeout_seconds, cancel_event
        )

        def transition(state: ResearchState) -> None:
            states.append(state)
            self.research_logger.info(
                f"🔁 [{run_id}] {states[-2].value} -> {state.value} "
                f"({time.time() - run_start:.2f}s)"
            )

        self.research_logger.info(f"🚀 [{run_id}] Starting research for: {topic}")

        try:
            transition(ResearchState.SEARCHING)
            aggregated = await self.aggregator.collect(
                topic,
                max_pages=self.settings.max_pages,
                page_size=self.settings.page_size,
                cancellation=cancellation,
            )
            self.research_logger.info(
                f"🔎 [{run_id}] Collected {len(aggregated.results)} unique results "
                f"from {aggregated.pages_fetched} page(s)"
                + (" (degraded)" if aggregated.degraded else "")
            )

            transition(ResearchState.SYNTHESIZING)
            prompt = self.prompt_builder.build(
                topic, aggregated.results, self.settings.prompt_budget
            )
            overview = await self.synthesizer.synthesize(prompt, cancellation)

            transition(ResearchState.FORMATTING)
            best_links = self.response_formatter.select_best_links(
                aggregated.results, self.settings.best_links_count
            )
            response = self.response_formatter.format(overview, best_links)

        except ResearchError as e:
            transition(ResearchState.FAILED)
            self.research_logger.error(
                f"❌ [{run_id}] Research failed for '{topic}' after "
                f"{time.time() - run_start:.2f} seconds ({e.kind}): {e}"
            )
            return ResearchOutcome(
                topic=topic,
                state=ResearchState.FAILED,
                error=e,
                states=tuple(states),
                pages_fetched=aggregated.pages_fetched if aggregated else 0,
                degraded=aggregated.degraded if aggregated else False,
            )

        transition(ResearchState.DONE)
        self.research_logger.info(
            f"✨ [{run_id}] Research finished for '{topic}' in "
            f"{time.time() - run_start:.2f} seconds"
        )
        return ResearchOutcome(
            topic=topic,
            state=ResearchState.DONE,
            response=response,
            states=tuple(states),
            pages_fetched=aggregated.pages_fetched,
            degraded=aggregated.degraded,
        )

    async def research(
        self, topic: str, cancel_event: asyncio.Event | None = None
    ) -> str:
        """
        Research a topic and return the plain-text response.

        Raises:
            ResearchError: The subclass matching the failure kind
        """
        outcome = await self.run(topic, cancel_event)
        return outcome.unwrap()


def create_orchestrator(settings: Settings | None = None) -> ResearchOrchestrator:
    """Resolve the configured providers once and build the orchestrator."""
    settings = settings or get_settings()
    return ResearchOrchestrator(
        search_provider=create_search_provider(settings),
        llm_provider=create_llm_provider(settings),
        settings=settings,
    )
