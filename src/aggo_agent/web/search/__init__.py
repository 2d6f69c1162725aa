"""
Web Search Package

Paginated web search backends and the registry that selects one of them.
"""

from ...protocols import LLMProvider, SearchProvider, SearchSession
from .registry import SearchProviderKind, create_search_provider

__all__ = [
    "LLMProvider",
    "SearchProvider",
    "SearchProviderKind",
    "SearchSession",
    "create_search_provider",
]
