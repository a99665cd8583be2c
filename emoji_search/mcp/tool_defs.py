"""MCP tool definitions for emoji search.

Returned by the ``tools/list`` method. Both tools share one input schema
and differ only in the entry point they call.
"""

from ..engine.scoring.constants import DEFAULT_LIMIT
from ..models import ToolName

SEARCH_INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "Free-text query, e.g. 'dog' or 'smiling face'",
        },
        "limit": {
            "type": "integer",
            "default": DEFAULT_LIMIT,
            "minimum": 0,
            "description": "Maximum number of emojis to return",
        },
        "custom_keywords": {
            "type": "object",
            "additionalProperties": {"type": "array", "items": {"type": "string"}},
            "default": {},
            "description": "Emoji -> extra keywords for this request",
        },
        "custom_preferred_entity": {
            "type": "object",
            "additionalProperties": {"type": "string"},
            "default": {},
            "description": "Keyword -> emoji to prefer for it",
        },
        "recently_searched": {
            "type": "array",
            "items": {"type": "string"},
            "default": [],
            "description": "Past queries, most recent first",
        },
    },
    "required": ["query"],
}

TOOL_DEFINITIONS = [
    {
        "name": ToolName.EMOJI_SEARCH.value,
        "description": (
            "Rank emojis for a search-as-you-type query. Single words match keywords "
            "by prefix; multiple words match multi-word keywords first."
        ),
        "inputSchema": SEARCH_INPUT_SCHEMA,
    },
    {
        "name": ToolName.EMOJI_SEARCH_BEST_MATCHING.value,
        "description": (
            "Forgiving emoji search: ignores function words such as 'the' or 'with' "
            "and also matches stemmed words ('crying' -> 'cry')."
        ),
        "inputSchema": SEARCH_INPUT_SCHEMA,
    },
]
