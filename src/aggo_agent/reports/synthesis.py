"""
Overview Synthesis

Sends the built prompt to the LLM provider exactly once and validates the reply.
"""

from ..cancellation import CancellationScope
from ..exceptions import ProviderError, SynthesisFailure
from ..protocols import LLMProvider


class Synthesizer:
    """Turns a prompt into a non-empty overview."""

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    async def synthesize(
        self, prompt: str, cancellation: CancellationScope | None = None
    ) -> str:
        """
        Generate the overview for a prompt.

        The call is never retried here; retry belongs to the host wrapping the
        invocation, and retrying twice could duplicate provider side effects.

        Raises:
            SynthesisFailure: If the provider fails or returns only whitespace
            ResearchCancelled: If cancellation is observed before the call
        """
        cancellation = cancellation or CancellationScope()
        cancellation.check("synthesis")
        try:
            text = await cancellation.guard(self.llm.send(prompt), "synthesis")
        except ProviderError as e:
            raise SynthesisFailure(f"LLM call failed: {e}") from e

        overview = (text or "").strip()
        if not overview:
            raise SynthesisFailure("LLM returned an empty response")
        return overview
