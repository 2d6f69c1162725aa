"""
Search provider registry.

Maps the configured provider name to a constructed backend. Resolved once at
process start; the orchestrator never re-reads configuration per call.
"""

from collections.abc import Callable
from enum import Enum

from ...exceptions import ConfigurationError
from ...protocols import SearchProvider
from ...settings import Settings, is_configured
from .brave import BraveSearchProvider
from .google import GoogleSearchProvider
from .serper import SerperSearchProvider
from .tavily import TavilySearchProvider


class SearchProviderKind(str, Enum):
    BRAVE = "brave"
    GOOGLE = "google"
    SERPER = "serper"
    TAVILY = "tavily"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def required_env_vars(self) -> tuple[str, ...]:
        return REQUIRED_ENV_VARS[self]


REQUIRED_ENV_VARS: dict[SearchProviderKind, tuple[str, ...]] = {
    SearchProviderKind.BRAVE: ("BRAVE_API_KEY",),
    SearchProviderKind.GOOGLE: ("GOOGLE_API_KEY", "GOOGLE_SEARCH_ENGINE_ID"),
    SearchProviderKind.SERPER: ("SERPER_API_KEY",),
    SearchProviderKind.TAVILY: ("TAVILY_API_KEY",),
}

SEARCH_PROVIDERS: dict[SearchProviderKind, Callable[[Settings], SearchProvider]] = {
    SearchProviderKind.BRAVE: lambda s: BraveSearchProvider(
        s.brave_api_key, timeout=s.search_timeout_seconds
    ),
    SearchProviderKind.GOOGLE: lambda s: GoogleSearchProvider(
        s.google_api_key,
        s.google_search_engine_id,
        timeout=s.search_timeout_seconds,
    ),
    SearchProviderKind.SERPER: lambda s: SerperSearchProvider(
        s.serper_api_key, timeout=s.search_timeout_seconds
    ),
    SearchProviderKind.TAVILY: lambda s: TavilySearchProvider(
        s.tavily_api_key, timeout=s.search_timeout_seconds
    ),
}


def create_search_provider(settings: Settings) -> SearchProvider:
    """
    Build the configured search backend.

    Raises:
        ConfigurationError: If the provider is unknown or a credential is missing
    """
    try:
        kind = SearchProviderKind(settings.web_search_provider)
    except ValueError as e:
        supported = "|".join(k.value for k in SearchProviderKind)
        raise ConfigurationError(
            f"Unsupported WEB_SEARCH_PROVIDER={settings.web_search_provider}. "
            f"Supported: {supported}"
        ) from e

    for env_var in kind.required_env_vars:
        if not is_configured(getattr(settings, env_var.lower())):
            raise ConfigurationError(
                f"{env_var} env var not configured (required for "
                f"{kind.display_name} web search)."
            )

    return SEARCH_PROVIDERS[kind](settings)
