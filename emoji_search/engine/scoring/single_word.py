"""Single-word matcher.

Scores every emoji against one normalized query word, e.g. "dog". A keyword
word matches when it equals the query word (exact) or starts with it
(prefix). Each emoji is represented by its best-ranking matched word.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.dataset import EmojiDataset, entries_with_custom_keywords
from ..core.parallel import fan_out
from ..core.text import normalize_text, split_words
from .comparator import ComparatorRule, RankingComparator, optional_rank

if TYPE_CHECKING:
    from ...models.options import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingleWordAttributes:
    """Ranking signals for one matched keyword word."""

    is_exact_match: bool
    is_custom_preferred: bool
    is_preferred: bool
    is_emoji_name: bool
    is_single_word_keyword: bool
    match_word: str
    # Only set for prefix matches
    recently_searched_idx: int | None = None
    top_words_idx: int | None = None


def _exact(attrs: SingleWordAttributes) -> bool:
    return attrs.is_exact_match


def _prefix(attrs: SingleWordAttributes) -> bool:
    return not attrs.is_exact_match


SINGLE_WORD_RULES: tuple[ComparatorRule[SingleWordAttributes], ...] = (
    ComparatorRule("exact_match", _exact, descending=True),
    # Exact matches
    ComparatorRule("custom_preferred", lambda a: a.is_custom_preferred, True, _exact),
    ComparatorRule("preferred", lambda a: a.is_preferred, True, _exact),
    ComparatorRule("emoji_name", lambda a: a.is_emoji_name, True, _exact),
    ComparatorRule("single_word_keyword", lambda a: a.is_single_word_keyword, True, _exact),
    # Prefix matches
    ComparatorRule(
        "recently_searched", lambda a: optional_rank(a.recently_searched_idx), applies=_prefix
    ),
    ComparatorRule("single_word_keyword", lambda a: a.is_single_word_keyword, True, _prefix),
    ComparatorRule("top_words", lambda a: optional_rank(a.top_words_idx), applies=_prefix),
    ComparatorRule("alphabetical", lambda a: a.match_word, applies=_prefix),
    ComparatorRule("custom_preferred", lambda a: a.is_custom_preferred, True, _prefix),
    ComparatorRule("preferred", lambda a: a.is_preferred, True, _prefix),
)

single_word_comparator: RankingComparator[SingleWordAttributes] = RankingComparator(
    SINGLE_WORD_RULES
)


def match_kind(input_word: str, word: str) -> bool | None:
    """True for an exact match, False for a prefix match, None otherwise."""
    if input_word == word:
        return True
    if word.startswith(input_word):
        return False
    return None


def get_best_attributes(
    input_word: str,
    emoji: str,
    keywords: Sequence[str],
    custom_preferred_entity: Mapping[str, str],
    keyword_preferred_entity: Mapping[str, str],
    recently_searched_idx: Mapping[str, int],
    word_rank_index: Mapping[str, int],
) -> SingleWordAttributes | None:
    """Best-ranking attributes of ``emoji`` for ``input_word``, or None."""
    best: SingleWordAttributes | None = None

    for i, raw_keyword in enumerate(keywords):
        keyword = normalize_text(raw_keyword)
        is_single_word_keyword = " " not in keyword
        words = [keyword] if is_single_word_keyword else split_words(keyword)

        for word in words:
            is_exact_match = match_kind(input_word, word)
            if is_exact_match is None:
                continue

            attributes = SingleWordAttributes(
                is_exact_match=is_exact_match,
                is_custom_preferred=custom_preferred_entity.get(word) == emoji,
                is_preferred=keyword_preferred_entity.get(word) == emoji,
                is_emoji_name=i == 0,
                is_single_word_keyword=is_single_word_keyword,
                match_word=word,
                recently_searched_idx=None if is_exact_match else recently_searched_idx.get(word),
                top_words_idx=None if is_exact_match else word_rank_index.get(word),
            )
            if single_word_comparator.is_better(attributes, best):
                best = attributes

    return best


def match_emojis_to_word(
    input_word: str,
    dataset: EmojiDataset,
    options: Options,
) -> list[str]:
    """Rank emojis for a single normalized word, best first.

    Args:
        input_word: One normalized word without spaces.
        dataset: The loaded emoji dataset.
        options: Per-request personalization.

    Returns:
        Matching emojis; emojis without any matching keyword are left out.
    """
    logger.debug(f"Searching emojis for single word input: {input_word}")

    recently_searched_idx = options.recently_searched_index()
    entries = entries_with_custom_keywords(dataset, options.custom_keywords)

    def score(entry: tuple[str, Sequence[str]]) -> tuple[str, SingleWordAttributes] | None:
        emoji, keywords = entry
        attributes = get_best_attributes(
            input_word,
            emoji,
            keywords,
            options.custom_preferred_entity,
            dataset.keyword_preferred_entity,
            recently_searched_idx,
            dataset.word_rank_index,
        )
        return (emoji, attributes) if attributes is not None else None

    results = single_word_comparator.rank(fan_out(entries, score))
    logger.debug(f"Found {len(results)} matching emojis for single word input")
    return results
