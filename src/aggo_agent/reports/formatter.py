"""
Research Response Formatting

Combines the overview with the best links into the final plain-text payload.
"""

import re

from ..types import SearchResult

BEST_LINKS_LABEL = "Best links:"

_WHITESPACE = re.compile(r"\s+")


class ResponseFormatter:
    """Formats the overview and ranked links as plain text."""

    @staticmethod
    def select_best_links(
        results: tuple[SearchResult, ...], limit: int
    ) -> tuple[SearchResult, ...]:
        """Take the first `limit` results by rank. No re-ranking is applied."""
        return tuple(results[: max(limit, 0)])

    @staticmethod
    def format_link(result: SearchResult) -> str:
        title = _WHITESPACE.sub(" ", result.title).strip()
        return f"{title} — {result.url}"

    def format(self, overview: str, best_links: tuple[SearchResult, ...]) -> str:
        """
        Render the research response.

        Args:
            overview: Synthesized overview text
            best_links: Ranked links to list after the overview

        Returns:
            The overview, a blank line, the label and one line per link; just
            the overview when there are no links
        """
        if not best_links:
            return overview

        lines = [overview, "", BEST_LINKS_LABEL]
        lines.extend(self.format_link(link) for link in best_links)
        return "\n".join(lines)
