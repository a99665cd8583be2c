"""Search entry points.

Optimized for search-as-you-type: the more characters or words a user
types, the narrower the set of emojis returned.

- ``search``: exact emoji short-circuit, then single-word or raw
  multi-word matching.
- ``search_best_matching``: a more forgiving variant that falls back to
  stemmed input and filters function words out of multi-word queries.
"""

import logging

from ..data import get_dataset
from ..errors import InvalidInputError
from ..models.options import Options
from .core.dataset import EmojiDataset
from .core.text import normalize_text
from .scoring.best_matching import match_emoji_to_words
from .scoring.constants import DEFAULT_LIMIT
from .scoring.multiple_words import match_emojis_to_words_raw
from .scoring.single_word import match_emojis_to_word
from .scoring.stemmer import stem_word

logger = logging.getLogger(__name__)


def _prepare(
    query: str, limit: int, options: Options | None, dataset: EmojiDataset | None
) -> tuple[str, Options, EmojiDataset]:
    if limit < 0:
        raise InvalidInputError(f"limit must be >= 0, got {limit}")
    if dataset is None:
        dataset = get_dataset()
    return normalize_text(query).strip(), options or Options(), dataset


def search(
    query: str,
    limit: int = DEFAULT_LIMIT,
    options: Options | None = None,
    dataset: EmojiDataset | None = None,
) -> list[str]:
    """Search emojis for a free-text query.

    Args:
        query: The search query string.
        limit: Maximum number of results to return.
        options: Per-request personalization.
        dataset: Dataset to search (default: the process-wide dataset).

    Returns:
        Up to ``limit`` emojis, best first. Blank queries return [].

    Raises:
        InvalidInputError: If ``limit`` is negative.
        DatasetNotLoadedError: If no dataset is given and none is loaded.
    """
    logger.debug(f"Searching emojis with input: '{query}', limit: {limit}")
    query, options, dataset = _prepare(query, limit, options, dataset)

    if not query:
        logger.debug("Empty input, returning empty results")
        return []

    if query in dataset.entity_set:
        logger.debug("Input is a known emoji, returning it directly")
        return [query][:limit]

    if " " not in query:
        results = match_emojis_to_word(query, dataset, options)
    else:
        results = match_emojis_to_words_raw(query, dataset, options)

    return results[:limit]


def search_best_matching(
    query: str,
    limit: int = DEFAULT_LIMIT,
    options: Options | None = None,
    dataset: EmojiDataset | None = None,
) -> list[str]:
    """Search emojis, tolerating inflected words and function words.

    Single words that match nothing are retried in stemmed form. Multi-word
    queries go through parts-of-speech filtering and stemming.

    Args:
        query: The search query string.
        limit: Maximum number of results to return.
        options: Per-request personalization.
        dataset: Dataset to search (default: the process-wide dataset).

    Returns:
        Up to ``limit`` emojis, best first. Blank queries return [].

    Raises:
        InvalidInputError: If ``limit`` is negative.
        DatasetNotLoadedError: If no dataset is given and none is loaded.
    """
    logger.debug(f"Searching best matching emojis with input: '{query}', limit: {limit}")
    query, options, dataset = _prepare(query, limit, options, dataset)

    if not query:
        logger.debug("Empty input, returning empty results")
        return []

    if " " not in query:
        results = match_emojis_to_word(query, dataset, options)
        if not results:
            stemmed_query = stem_word(query)
            if stemmed_query != query:
                logger.debug(f"No results for '{query}', retrying with stem '{stemmed_query}'")
                results = match_emojis_to_word(stemmed_query, dataset, options)
    else:
        results = match_emoji_to_words(query, dataset, options)
        if not results:
            # Second attempt with unchanged input; yields the same result
            results = match_emoji_to_words(query, dataset, options)

    return results[:limit]
