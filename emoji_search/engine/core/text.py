"""Text normalization shared by every matcher.

Keywords and queries are always compared in their normalized form:
lowercased, with a fixed set of punctuation stripped, hyphens turned into
spaces and apostrophe variants folded onto the ASCII apostrophe.
"""

import logging

logger = logging.getLogger(__name__)

# Characters removed outright (straight and curly double quotes included)
STRIPPED_CHARACTERS = '"“”:;(),.!?'

# Typographic apostrophes folded onto "'"
APOSTROPHE_VARIANTS = "’‘ʼ`´"

_TRANSLATION = str.maketrans(
    {
        **{ch: None for ch in STRIPPED_CHARACTERS},
        **{ch: "'" for ch in APOSTROPHE_VARIANTS},
        "-": " ",
    }
)


def normalize_text(text: str) -> str:
    """Normalize a query or keyword for comparison.

    Whitespace is left untouched; callers that need a trimmed query
    strip the result themselves.

    Args:
        text: Any string.

    Returns:
        The normalized string. ``normalize_text`` is idempotent.
    """
    return text.lower().translate(_TRANSLATION)


def split_words(text: str) -> list[str]:
    """Split an already normalized string on single spaces."""
    return text.split(" ")
