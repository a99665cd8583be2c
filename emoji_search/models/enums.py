"""Enumeration types for the emoji search service."""

from enum import StrEnum


class SearchMode(StrEnum):
    """Which orchestrator entry point serves a request."""

    STANDARD = "standard"
    BEST_MATCHING = "best_matching"


class ToolName(StrEnum):
    """Tools exposed over the MCP transport."""

    EMOJI_SEARCH = "emoji_search"
    EMOJI_SEARCH_BEST_MATCHING = "emoji_search_best_matching"

    @property
    def mode(self) -> SearchMode:
        if self is ToolName.EMOJI_SEARCH_BEST_MATCHING:
            return SearchMode.BEST_MATCHING
        return SearchMode.STANDARD
