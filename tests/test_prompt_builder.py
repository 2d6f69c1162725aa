"""
Unit tests for PromptBuilder.

Tests template rendering, tail truncation under the character budget and
determinism.
"""

import pytest
from conftest import make_results

from aggo_agent.exceptions import PromptBudgetExceeded
from aggo_agent.processing.prompt_builder import PromptBuilder
from aggo_agent.types import SearchResult


class TestPromptBuilder:
    """Test suite for PromptBuilder."""

    def setup_method(self):
        self.builder = PromptBuilder()
        self.results = make_results("http://a", "http://b", "http://c", "http://d")

    def test_renders_header_and_ranked_lines(self):
        prompt = self.builder.build("Durable agents", self.results, budget=10000)

        lines = prompt.split("\n")
        assert 'the topic "Durable agents"' in lines[0]
        assert lines[-4] == "[1] Title http://a | http://a | Snippet for http://a"
        assert lines[-1] == "[4] Title http://d | http://d | Snippet for http://d"

    def test_result_lines_are_single_line(self):
        result = SearchResult(url="http://x", title="Multi\nline", snippet="a\n\n b\t c")

        line = self.builder.render_result(1, result)

        assert line == "[1] Multi line | http://x | a b c"

    def test_drops_lowest_ranked_results_first(self):
        full = self.builder.build("topic", self.results, budget=10000)
        budget = len(full) - 5

        prompt = self.builder.build("topic", self.results, budget=budget)

        assert len(prompt) <= budget
        assert "[3] Title http://c" in prompt
        assert "[4]" not in prompt

    def test_exact_fit_keeps_everything(self):
        full = self.builder.build("topic", self.results, budget=10000)

        assert self.builder.build("topic", self.results, budget=len(full)) == full

    def test_header_only_when_no_result_fits(self):
        header = self.builder.render_header("topic")

        prompt = self.builder.build("topic", self.results, budget=len(header) + 3)

        assert prompt == header

    def test_header_over_budget_raises(self):
        header = self.builder.render_header("topic")

        with pytest.raises(PromptBudgetExceeded):
            self.builder.build("topic", self.results, budget=len(header) - 1)

    @pytest.mark.parametrize("budget", [700, 800, 900, 1000, 5000])
    def test_length_never_exceeds_budget(self, budget):
        prompt = self.builder.build("topic", self.results, budget=budget)

        assert len(prompt) <= budget

    def test_is_deterministic(self):
        first = self.builder.build("topic", self.results, budget=800)
        second = PromptBuilder().build("topic", self.results, budget=800)

        assert first == second
