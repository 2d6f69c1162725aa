"""
Aggo Research Agent

Answers "research topic T" by collecting a bounded set of web search results
and asking a language model for a short overview plus ranked source links.
"""

from aggo_agent.logger import setup_logging
from aggo_agent.orchestrator import ResearchOrchestrator

__version__ = "1.0.0"
__all__ = ["ResearchOrchestrator", "setup_logging"]
