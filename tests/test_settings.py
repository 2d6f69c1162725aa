"""
Tests for Settings validation and environment loading.
"""

import pytest
from pydantic import ValidationError

from aggo_agent.settings import Settings, is_configured


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        for var in ("MAX_PAGES", "PAGE_SIZE", "RESULT_CAP", "PROMPT_BUDGET",
                    "BEST_LINKS_COUNT", "WEB_SEARCH_PROVIDER", "MODEL_TYPE",
                    "AGGO_LLM_MODEL", "LLM_MODEL"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.max_pages == 3
        assert settings.page_size == 10
        assert settings.result_cap == 20
        assert settings.best_links_count == 5
        assert settings.web_search_provider == "brave"
        assert settings.resolved_model_id == settings.bedrock_model

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_PAGES", "5")
        monkeypatch.setenv("WEB_SEARCH_PROVIDER", "SERPER")
        monkeypatch.setenv("PROMPT_BUDGET", "4000")

        settings = Settings(_env_file=None)

        assert settings.max_pages == 5
        assert settings.web_search_provider == "serper"
        assert settings.prompt_budget == 4000

    def test_component_model_variable_wins(self, monkeypatch):
        monkeypatch.setenv("AGGO_LLM_MODEL", "component-model")
        monkeypatch.setenv("LLM_MODEL", "generic-model")

        assert Settings(_env_file=None).resolved_model_id == "component-model"

    def test_generic_model_variable_is_fallback(self, monkeypatch):
        monkeypatch.delenv("AGGO_LLM_MODEL", raising=False)
        monkeypatch.setenv("LLM_MODEL", "generic-model")

        assert Settings(_env_file=None).resolved_model_id == "generic-model"

    def test_ollama_model_used_without_override(self, monkeypatch):
        monkeypatch.delenv("AGGO_LLM_MODEL", raising=False)
        monkeypatch.delenv("LLM_MODEL", raising=False)

        settings = Settings(model_type="ollama", ollama_model="llama3", _env_file=None)

        assert settings.resolved_model_id == "llama3"

    @pytest.mark.parametrize("value", ["changeme", "   "])
    def test_placeholder_model_is_rejected(self, value):
        with pytest.raises(ValidationError):
            Settings(llm_model=value, _env_file=None)

    def test_unknown_provider_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(web_search_provider="bing", _env_file=None)

    def test_best_links_cannot_exceed_cap(self):
        with pytest.raises(ValidationError):
            Settings(result_cap=3, best_links_count=4, _env_file=None)

    @pytest.mark.parametrize("field", ["max_pages", "result_cap", "prompt_budget"])
    def test_limits_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0}, _env_file=None)

    def test_page_size_is_capped(self):
        with pytest.raises(ValidationError):
            Settings(page_size=21, _env_file=None)


@pytest.mark.parametrize(
    "value, expected",
    [(None, False), ("", False), ("  ", False), ("changeme", False), ("key", True)],
)
def test_is_configured(value, expected):
    assert is_configured(value) is expected
