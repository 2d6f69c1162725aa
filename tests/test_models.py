"""
Tests for the model factory and the strands-backed LLM provider.
"""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from aggo_agent.exceptions import ProviderError
from aggo_agent.models import (
    ModelFactory,
    StrandsLLMProvider,
    create_llm_provider,
    extract_content_text,
)
from aggo_agent.settings import Settings


class TestExtractContentText:
    """Test cases for the extract_content_text utility function."""

    def test_extract_simple_text_content(self):
        assert extract_content_text({"text": "Simple text content"}) == "Simple text content"

    def test_extract_reasoning_content(self):
        content_block = {
            "reasoningContent": {"reasoningText": {"text": "Reasoning text content"}}
        }
        assert extract_content_text(content_block) == "Reasoning text content"

    def test_extract_empty_content(self):
        assert extract_content_text({}) == ""


class TestModelFactory:
    """Test cases for backend selection."""

    def test_creates_bedrock_model(self):
        settings = Settings(model_type="bedrock", llm_model="my-model", _env_file=None)

        with patch("aggo_agent.models.BedrockModel") as mock_bedrock:
            ModelFactory.create_model(settings)

        kwargs = mock_bedrock.call_args.kwargs
        assert kwargs["model_id"] == "my-model"
        assert kwargs["max_tokens"] == 10000
        assert kwargs["boto_client_config"].retries["total_max_attempts"] == 1

    def test_creates_ollama_model(self):
        settings = Settings(
            model_type="ollama",
            ollama_host="http://ollama:11434",
            ollama_model="llama3",
            _env_file=None,
        )

        settings = settings.model_copy(update={"llm_model": None})

        with patch("aggo_agent.models.OllamaModel") as mock_ollama:
            ModelFactory.create_model(settings)

        mock_ollama.assert_called_once_with(
            host="http://ollama:11434", model_id="llama3", temperature=0.0
        )

    def test_create_llm_provider_records_model_id(self):
        settings = Settings(llm_model="my-model", _env_file=None)

        with patch("aggo_agent.models.BedrockModel"):
            provider = create_llm_provider(settings)

        assert provider.model_id == "my-model"


class TestStrandsLLMProvider:
    """Test cases for StrandsLLMProvider."""

    @pytest.mark.asyncio
    async def test_send_returns_joined_text(self):
        agent = Mock()
        agent.invoke_async = AsyncMock(
            return_value=Mock(
                message={"content": [{"text": "Part one. "}, {"text": "Part two."}]}
            )
        )

        with patch("aggo_agent.models.Agent", return_value=agent) as mock_agent_cls:
            provider = StrandsLLMProvider(Mock(), model_id="m")
            text = await provider.send("the prompt")

        assert text == "Part one. Part two."
        agent.invoke_async.assert_awaited_once_with("the prompt")
        assert mock_agent_cls.call_args.kwargs["tools"] == []

    @pytest.mark.asyncio
    async def test_fresh_agent_per_call(self):
        agent = Mock()
        agent.invoke_async = AsyncMock(
            return_value=Mock(message={"content": [{"text": "ok"}]})
        )

        with patch("aggo_agent.models.Agent", return_value=agent) as mock_agent_cls:
            provider = StrandsLLMProvider(Mock())
            await provider.send("one")
            await provider.send("two")

        assert mock_agent_cls.call_count == 2

    @pytest.mark.asyncio
    async def test_backend_exception_becomes_provider_error(self):
        agent = Mock()
        agent.invoke_async = AsyncMock(side_effect=RuntimeError("model not found"))

        with patch("aggo_agent.models.Agent", return_value=agent):
            provider = StrandsLLMProvider(Mock(), model_id="llama3")
            with pytest.raises(ProviderError, match="llama3"):
                await provider.send("prompt")
