"""
Research processing components.

This package contains the search aggregation and prompt assembly stages of
the research pipeline.
"""

from .prompt_builder import PromptBuilder
from .result_aggregator import ResultAggregator

__all__ = [
    "PromptBuilder",
    "ResultAggregator",
]
