"""Multi-word matcher.

Scores every emoji against a raw multi-word query such as "smiling face".
Multi-word keywords are tried first (in order, then out of order); when
none of them matches, the emoji falls back to its "jointed" keywords: the
set of every word across all of its keywords.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.dataset import EmojiDataset, entries_with_custom_keywords
from ..core.parallel import fan_out
from ..core.text import normalize_text, split_words
from .comparator import ComparatorRule, RankingComparator

if TYPE_CHECKING:
    from ...models.options import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MultiWordAttributes:
    """Ranking signals for one emoji against a multi-word query."""

    is_multi_word_keyword_match: bool
    is_in_order_match: bool = False
    is_in_order_exact_match: bool = False
    is_custom_preferred: bool = False
    num_exact_matches: int = 0
    num_prefix_matches: int = 0
    # Words in the matched keyword; 0 for exact in-order and jointed matches
    num_keyword_words: int = 0


def _multi(attrs: MultiWordAttributes) -> bool:
    return attrs.is_multi_word_keyword_match


def _in_order(attrs: MultiWordAttributes) -> bool:
    return attrs.is_multi_word_keyword_match and attrs.is_in_order_match


def _out_of_order(attrs: MultiWordAttributes) -> bool:
    return attrs.is_multi_word_keyword_match and not attrs.is_in_order_match


def _jointed(attrs: MultiWordAttributes) -> bool:
    return not attrs.is_multi_word_keyword_match


MULTI_WORD_RULES: tuple[ComparatorRule[MultiWordAttributes], ...] = (
    ComparatorRule("multi_word_keyword", _multi, descending=True),
    ComparatorRule("in_order", lambda a: a.is_in_order_match, True, _multi),
    # In-order matches
    ComparatorRule("in_order_exact", lambda a: a.is_in_order_exact_match, True, _in_order),
    ComparatorRule("custom_preferred", lambda a: a.is_custom_preferred, True, _in_order),
    # Out-of-order matches
    ComparatorRule("exact_words", lambda a: a.num_exact_matches, True, _out_of_order),
    ComparatorRule("prefix_words", lambda a: a.num_prefix_matches, True, _out_of_order),
    ComparatorRule("fewer_keyword_words", lambda a: a.num_keyword_words, applies=_multi),
    # Jointed keyword matches
    ComparatorRule("exact_words", lambda a: a.num_exact_matches, True, _jointed),
    ComparatorRule("prefix_words", lambda a: a.num_prefix_matches, True, _jointed),
)

multi_word_comparator: RankingComparator[MultiWordAttributes] = RankingComparator(
    MULTI_WORD_RULES
)


def get_num_matches(
    input_words: Sequence[str], keyword_words: Iterable[str]
) -> tuple[int, int]:
    """Count query words matched exactly and by prefix.

    Each query word counts once, preferring an exact match. If any query
    word matches nothing, the result is (0, 0): partial progress on the
    other words is discarded.

    Returns:
        (num_exact_matches, num_prefix_matches)
    """
    keyword_words = list(keyword_words)
    num_exact_matches = 0
    num_prefix_matches = 0

    for input_word in input_words:
        if input_word in keyword_words:
            num_exact_matches += 1
        elif any(word.startswith(input_word) for word in keyword_words):
            num_prefix_matches += 1
        else:
            return 0, 0

    return num_exact_matches, num_prefix_matches


def get_best_attributes(
    input_words: str,
    input_words_array: Sequence[str],
    emoji: str,
    keywords: Sequence[str],
    custom_preferred_entity: Mapping[str, str],
) -> MultiWordAttributes | None:
    """Best-ranking attributes of ``emoji`` for the query, or None."""
    best: MultiWordAttributes | None = None
    processed_keywords = [normalize_text(keyword) for keyword in keywords]

    for keyword in processed_keywords:
        if " " not in keyword:
            continue

        if keyword == input_words:
            attributes = MultiWordAttributes(
                is_multi_word_keyword_match=True,
                is_in_order_match=True,
                is_in_order_exact_match=True,
                is_custom_preferred=custom_preferred_entity.get(keyword) == emoji,
            )
        elif keyword.startswith(input_words) or f" {input_words}" in keyword:
            attributes = MultiWordAttributes(
                is_multi_word_keyword_match=True,
                is_in_order_match=True,
                is_custom_preferred=custom_preferred_entity.get(keyword) == emoji,
                num_keyword_words=len(split_words(keyword)),
            )
        else:
            keyword_words = split_words(keyword)
            if len(keyword_words) < len(input_words_array):
                continue

            num_exact_matches, num_prefix_matches = get_num_matches(
                input_words_array, keyword_words
            )
            if num_exact_matches == 0 and num_prefix_matches == 0:
                continue

            attributes = MultiWordAttributes(
                is_multi_word_keyword_match=True,
                num_exact_matches=num_exact_matches,
                num_prefix_matches=num_prefix_matches,
                num_keyword_words=len(keyword_words),
            )

        if multi_word_comparator.is_better(attributes, best):
            best = attributes

    if best is not None:
        return best

    jointed_keywords = {word for keyword in processed_keywords for word in split_words(keyword)}
    num_exact_matches, num_prefix_matches = get_num_matches(input_words_array, jointed_keywords)
    if num_exact_matches == 0 and num_prefix_matches == 0:
        return None

    return MultiWordAttributes(
        is_multi_word_keyword_match=False,
        num_exact_matches=num_exact_matches,
        num_prefix_matches=num_prefix_matches,
    )


def match_emojis_to_words_raw(
    input_words: str,
    dataset: EmojiDataset,
    options: Options,
) -> list[str]:
    """Rank emojis for an unfiltered, unstemmed multi-word query, best first.

    Args:
        input_words: Normalized query containing at least one space.
        dataset: The loaded emoji dataset.
        options: Per-request personalization.

    Returns:
        Matching emojis; emojis without any matching word are left out.
    """
    logger.debug(f"Searching emojis for multiple words input: {input_words}")

    input_words_array = split_words(input_words)
    entries = entries_with_custom_keywords(dataset, options.custom_keywords)

    def score(entry: tuple[str, Sequence[str]]) -> tuple[str, MultiWordAttributes] | None:
        emoji, keywords = entry
        attributes = get_best_attributes(
            input_words,
            input_words_array,
            emoji,
            keywords,
            options.custom_preferred_entity,
        )
        return (emoji, attributes) if attributes is not None else None

    results = multi_word_comparator.rank(fan_out(entries, score))
    logger.debug(f"Found {len(results)} matching emojis for multiple words input")
    return results
