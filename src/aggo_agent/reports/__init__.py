"""
Report Generation Package

Provides overview synthesis and final response formatting.
"""

from .formatter import ResponseFormatter
from .synthesis import Synthesizer

__all__ = ["ResponseFormatter", "Synthesizer"]
