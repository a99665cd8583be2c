"""Parts-of-speech filtering for multi-word queries.

Drops function words (pronouns, prepositions, conjunctions, articles and a
few other stop words) so best-match scoring only sees content words.
Predeterminers such as "all" are dropped too, except right after one of
the exception words: "calling all cars" keeps "all".
"""

import logging
from collections.abc import Sequence

from .constants import (
    FUNCTION_WORDS,
    PREDETERMINER_EXCEPTION_PREVIOUS_WORDS,
    PREDETERMINERS,
)

logger = logging.getLogger(__name__)


def is_function_word(word: str, previous_word: str | None = None) -> bool:
    """Check whether ``word`` is filtered given the word before it."""
    if word in FUNCTION_WORDS:
        return True
    if word in PREDETERMINERS:
        return previous_word not in PREDETERMINER_EXCEPTION_PREVIOUS_WORDS
    return False


def filter_parts_of_speech(words: Sequence[str]) -> list[str]:
    """Return the content words of ``words``, order preserved.

    The predeterminer exception looks at the previous word of the
    original sequence, not of the filtered one.
    """
    filtered = [
        word
        for idx, word in enumerate(words)
        if not is_function_word(word, words[idx - 1] if idx > 0 else None)
    ]
    logger.debug(f"Filtered parts of speech: {list(words)} -> {filtered}")
    return filtered
