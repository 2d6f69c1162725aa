"""
Model Provider Abstractions and Factory

Builds the strands model for the configured backend and wraps it as the
single-prompt LLM provider used by the synthesizer.
"""

from botocore.config import Config as BotocoreConfig
from strands import Agent
from strands.models.bedrock import BedrockModel
from strands.models.model import Model
from strands.models.ollama import OllamaModel
from strands.types.content import ContentBlock

from .exceptions import ProviderError
from .settings import Settings

SYNTHESIS_SYSTEM_PROMPT = (
    "You are a research assistant. You write short, objective overviews of a "
    "topic for someone about to study it in depth."
)


def extract_content_text(c: ContentBlock) -> str:
    """Extract text content from a content block, handling reasoning content."""
    if "text" in c:
        return c["text"]
    elif "reasoningContent" in c:
        reasoning = c["reasoningContent"]
        if "reasoningText" in reasoning and "text" in reasoning["reasoningText"]:
            return reasoning["reasoningText"]["text"]
    return ""


class ModelFactory:
    """Factory for creating model instances based on configuration."""

    @staticmethod
    def create_model(settings: Settings, max_tokens: int | None = None) -> Model:
        """
        Create a model instance based on configuration.

        Args:
            settings: Application settings selecting the backend and model id
            max_tokens: Maximum tokens for generation

        Returns:
            Configured model instance
        """
        if settings.model_type == "ollama":
            return ModelFactory._create_ollama_model(settings)
        return ModelFactory._create_bedrock_model(settings, max_tokens)

    @staticmethod
    def _create_ollama_model(settings: Settings) -> OllamaModel:
        """Create an Ollama model instance."""
        return OllamaModel(
            host=settings.ollama_host,
            model_id=settings.resolved_model_id,
            temperature=settings.model_temperature,
        )

    @staticmethod
    def _create_bedrock_model(
        settings: Settings, max_tokens: int | None = None
    ) -> BedrockModel:
        """Create a Bedrock model instance with client-side retries disabled."""
        model_id = settings.resolved_model_id

        # Claude 3.5 Sonnet has 8192 output token limit
        if max_tokens is None:
            max_tokens = 8000 if "claude-3-5-sonnet" in model_id else 10000

        # Retries belong to the host wrapping the whole invocation
        boto_config = BotocoreConfig(
            retries={"total_max_attempts": 1, "mode": "standard"},
            connect_timeout=30,
            read_timeout=120,
        )

        return BedrockModel(
            model_id=model_id,
            temperature=settings.model_temperature,
            max_tokens=max_tokens,
            streaming="claude" in model_id,
            boto_client_config=boto_config,
        )


class StrandsLLMProvider:
    """Sends one prompt to a strands model and returns the generated text."""

    def __init__(
        self,
        model: Model,
        model_id: str = "unknown",
        system_prompt: str = SYNTHESIS_SYSTEM_PROMPT,
    ):
        self.model = model
        self.model_id = model_id
        self.system_prompt = system_prompt

    async def send(self, prompt: str) -> str:
        # A fresh agent per call keeps every invocation free of prior messages
        agent = Agent(
            model=self.model,
            system_prompt=self.system_prompt,
            tools=[],
            callback_handler=None,
        )
        try:
            response = await agent.invoke_async(prompt)
        except Exception as e:
            raise ProviderError(f"LLM call failed (model: {self.model_id}): {e}") from e

        return "".join(map(extract_content_text, response.message["content"]))


def create_llm_provider(settings: Settings) -> StrandsLLMProvider:
    """Convenience function to build the LLM provider from settings."""
    return StrandsLLMProvider(
        ModelFactory.create_model(settings), model_id=settings.resolved_model_id
    )
