"""Best-matching matcher.

A forgiving multi-word search: the query is stripped of function words and
each remaining word is also tried in stemmed form. Every emoji is scored
against the set of all words in its keywords.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.dataset import EmojiDataset, entries_with_custom_keywords
from ..core.parallel import fan_out
from ..core.text import normalize_text, split_words
from .comparator import ComparatorRule, RankingComparator
from .parts_of_speech import filter_parts_of_speech
from .stemmer import stem_word

if TYPE_CHECKING:
    from ...models.options import Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BestMatchAttributes:
    """Match counters for one emoji."""

    num_exact_word_matches: int = 0
    num_exact_stemmed_word_matches: int = 0
    num_prefix_word_matches: int = 0
    num_prefix_stemmed_word_matches: int = 0

    @property
    def num_exact_matches(self) -> int:
        return self.num_exact_word_matches + self.num_exact_stemmed_word_matches

    def has_match(self) -> bool:
        return any(
            (
                self.num_exact_word_matches,
                self.num_exact_stemmed_word_matches,
                self.num_prefix_word_matches,
                self.num_prefix_stemmed_word_matches,
            )
        )


BEST_MATCH_RULES: tuple[ComparatorRule[BestMatchAttributes], ...] = (
    ComparatorRule("exact_words", lambda a: a.num_exact_matches, descending=True),
    ComparatorRule("exact_original_words", lambda a: a.num_exact_word_matches, descending=True),
    ComparatorRule("prefix_original_words", lambda a: a.num_prefix_word_matches, descending=True),
    ComparatorRule(
        "prefix_stemmed_words", lambda a: a.num_prefix_stemmed_word_matches, descending=True
    ),
)

best_match_comparator: RankingComparator[BestMatchAttributes] = RankingComparator(
    BEST_MATCH_RULES
)


def get_num_matches(
    input_words: Sequence[str],
    stemmed_input_words: Sequence[str],
    keyword_words: Sequence[str],
) -> BestMatchAttributes:
    """Count how each query word matches the emoji's keyword words.

    Per query word, in order of preference: exact original, exact stem,
    prefix of the original word, prefix of the stem only.
    """
    keyword_set = set(keyword_words)
    num_exact_word_matches = 0
    num_exact_stemmed_word_matches = 0
    num_prefix_word_matches = 0
    num_prefix_stemmed_word_matches = 0

    for input_word, stemmed_word in zip(input_words, stemmed_input_words):
        if input_word in keyword_set:
            num_exact_word_matches += 1
        elif input_word != stemmed_word and stemmed_word in keyword_set:
            num_exact_stemmed_word_matches += 1
        else:
            stem_prefix_match = False
            for word in keyword_words:
                if word.startswith(stemmed_word):
                    if word.startswith(input_word):
                        num_prefix_word_matches += 1
                        stem_prefix_match = False
                        break
                    stem_prefix_match = True

            if stem_prefix_match:
                num_prefix_stemmed_word_matches += 1

    return BestMatchAttributes(
        num_exact_word_matches=num_exact_word_matches,
        num_exact_stemmed_word_matches=num_exact_stemmed_word_matches,
        num_prefix_word_matches=num_prefix_word_matches,
        num_prefix_stemmed_word_matches=num_prefix_stemmed_word_matches,
    )


def get_best_attributes(
    input_words: Sequence[str],
    stemmed_input_words: Sequence[str],
    keywords: Sequence[str],
) -> BestMatchAttributes | None:
    """Attributes of an emoji with the given keywords, or None without any match."""
    keyword_words = split_words(" ".join(normalize_text(keyword) for keyword in keywords))
    attributes = get_num_matches(input_words, stemmed_input_words, keyword_words)
    return attributes if attributes.has_match() else None


def match_filtered_words(
    input_words: Sequence[str],
    stemmed_input_words: Sequence[str],
    dataset: EmojiDataset,
    options: Options,
) -> list[str]:
    """Rank emojis for already filtered words and their stems.

    Args:
        input_words: Content words of the query.
        stemmed_input_words: ``stem_word`` of each entry of ``input_words``.
        dataset: The loaded emoji dataset.
        options: Per-request personalization; only custom keywords apply.

    Returns:
        Matching emojis, best first.
    """
    entries = entries_with_custom_keywords(dataset, options.custom_keywords)

    def score(entry: tuple[str, Sequence[str]]) -> tuple[str, BestMatchAttributes] | None:
        emoji, keywords = entry
        attributes = get_best_attributes(input_words, stemmed_input_words, keywords)
        return (emoji, attributes) if attributes is not None else None

    return best_match_comparator.rank(fan_out(entries, score))


def match_emoji_to_words(
    input_words: str,
    dataset: EmojiDataset,
    options: Options,
) -> list[str]:
    """Filter, stem and rank a normalized multi-word query, best first."""
    logger.debug(f"Searching best matching emojis for: {input_words}")

    filtered_words = filter_parts_of_speech(split_words(input_words))
    stemmed_words = [stem_word(word) for word in filtered_words]

    results = match_filtered_words(filtered_words, stemmed_words, dataset, options)
    logger.debug(f"Found {len(results)} best matching emojis")
    return results
