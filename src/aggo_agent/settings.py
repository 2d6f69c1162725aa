"""
Application Settings

Centralized configuration using Pydantic Settings for type safety and validation.
Values are resolved once at process start and injected into the orchestrator.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_VALUE = "changeme"


def is_configured(value: str | None) -> bool:
    """A credential counts as configured when it is non-blank and not the placeholder."""
    return bool(value and value.strip() and value.strip() != PLACEHOLDER_VALUE)


class Settings(BaseSettings):
    """Application settings with validation and type safety."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )

    # Research pipeline limits
    max_pages: int = Field(default=3, gt=0)
    page_size: int = Field(default=10, gt=0, le=20)
    result_cap: int = Field(default=20, gt=0)
    prompt_budget: int = Field(default=12000, gt=0)
    best_links_count: int = Field(default=5, ge=0)
    research_timeout_seconds: float | None = Field(default=300.0, gt=0)
    search_timeout_seconds: float = Field(default=30.0, gt=0)

    # Web search provider
    web_search_provider: Literal["brave", "google", "serper", "tavily"] = "brave"
    brave_api_key: str | None = None
    google_api_key: str | None = None
    google_search_engine_id: str | None = None
    serper_api_key: str | None = None
    tavily_api_key: str | None = None

    # Model settings
    model_type: Literal["ollama", "bedrock"] = "bedrock"
    model_temperature: float = 0.0
    llm_model: str | None = Field(
        default=None, validation_alias=AliasChoices("aggo_llm_model", "llm_model")
    )

    # Bedrock settings
    bedrock_model: str = "us.anthropic.claude-sonnet-4-20250514-v1:0"

    # Ollama settings
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "gpt-oss:20b"

    # Server settings
    server_host: str = "127.0.0.1"
    server_port: int = 8000
    server_transport: Literal["stdio", "sse", "streamable-http"] = "streamable-http"
    log_dir: str = "logs"

    @field_validator("web_search_provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("llm_model")
    @classmethod
    def _reject_placeholder_model(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if not is_configured(value):
            raise ValueError(
                "LLM model is not configured. Set AGGO_LLM_MODEL or LLM_MODEL "
                "to a real model id."
            )
        return value.strip()

    @model_validator(mode="after")
    def _check_link_count(self) -> "Settings":
        if self.best_links_count > self.result_cap:
            raise ValueError(
                f"best_links_count ({self.best_links_count}) must not exceed "
                f"result_cap ({self.result_cap})"
            )
        return self

    @property
    def resolved_model_id(self) -> str:
        """The model id for the selected backend, honoring the override."""
        if self.llm_model:
            return self.llm_model
        if self.model_type == "ollama":
            return self.ollama_model
        return self.bedrock_model


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
