"""
Prompt assembly under a character budget.

The prompt is a pure function of (topic, results, budget): the same inputs
always render the same string, so a replayed invocation sends an identical
request to the model.
"""

import re

from ..exceptions import PromptBudgetExceeded
from ..types import SearchResult

PROMPT_HEADER_TEMPLATE = """I'm writing a report on the topic "{topic}".
Your job is to be a research assistant and provide me an initial overview of the topic so I can dive into it in more detail.
Below are the top search results from a search engine, one per line, in rank order. Use your own knowledge and the snippets from the search results to write the overview.
Prioritize objective and reliable sources. Reply with the overview text only; the list of links is added separately.

Search results:"""

_WHITESPACE = re.compile(r"\s+")


def _one_line(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


class PromptBuilder:
    """Renders the topic and ranked results into a size-bounded prompt."""

    @staticmethod
    def render_header(topic: str) -> str:
        return PROMPT_HEADER_TEMPLATE.format(topic=_one_line(topic))

    @staticmethod
    def render_result(rank: int, result: SearchResult) -> str:
        return (
            f"[{rank}] {_one_line(result.title)} | {result.url} | "
            f"{_one_line(result.snippet)}"
        )

    def build(self, topic: str, results: tuple[SearchResult, ...], budget: int) -> str:
        """
        Build the synthesis prompt.

        Results are added in rank order until the next line would push the
        prompt past the budget, which drops the lowest-ranked results first.

        Args:
            topic: Research topic
            results: Aggregated results in rank order
            budget: Maximum prompt length in characters (B)

        Returns:
            Prompt string no longer than budget

        Raises:
            PromptBudgetExceeded: If the header alone is longer than budget
        """
        header = self.render_header(topic)
        if len(header) > budget:
            raise PromptBudgetExceeded(
                f"Prompt header needs {len(header)} characters but the budget is {budget}"
            )

        parts = [header]
        length = len(header)
        for rank, result in enumerate(results, 1):
            line = self.render_result(rank, result)
            if length + 1 + len(line) > budget:
                break
            parts.append(line)
            length += 1 + len(line)

        return "\n".join(parts)
