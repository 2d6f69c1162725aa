"""Custom exceptions for the aggo research agent."""


class AggoAgentError(Exception):
    """Base exception for aggo agent errors."""

    pass


class ConfigurationError(AggoAgentError):
    """Raised when the process configuration is invalid or incomplete."""

    pass


class ProviderError(AggoAgentError):
    """Raised by a search or LLM backend when a call fails."""

    pass


class ResearchError(AggoAgentError):
    """Terminal failure of a single research invocation."""

    kind = "research_error"
    http_status = 500


class SearchFailure(ResearchError):
    """The search provider failed before any page was obtained."""

    kind = "search_failure"
    http_status = 502


class EmptyResults(ResearchError):
    """Search succeeded but produced no usable results."""

    kind = "empty_results"
    http_status = 404


class PromptBudgetExceeded(ResearchError):
    """The prompt header alone does not fit the configured budget."""

    kind = "prompt_budget_exceeded"
    http_status = 500


class SynthesisFailure(ResearchError):
    """The LLM call failed or returned an empty response."""

    kind = "synthesis_failure"
    http_status = 502


class ResearchCancelled(ResearchError):
    """The invocation was cancelled or ran past its deadline."""

    kind = "cancelled"
    http_status = 504
