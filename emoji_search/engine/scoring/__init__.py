"""Scoring engine for emoji search.

This package provides the matching and ranking algorithms:
- Suffix stemming with override rules
- Parts-of-speech filtering of function words
- Rule-based tie-break comparators
- Single-word, multi-word and best-matching matchers

Usage:
    from emoji_search.engine.scoring import (
        match_emojis_to_word,
        match_emojis_to_words_raw,
        match_emoji_to_words,
        stem_word,
    )
"""

from .best_matching import (
    BestMatchAttributes,
    best_match_comparator,
    match_emoji_to_words,
    match_filtered_words,
)
from .comparator import ComparatorRule, RankingComparator, optional_rank
from .constants import DEFAULT_LIMIT, FUNCTION_WORDS, STEM_RULES, StemRule
from .multiple_words import (
    MultiWordAttributes,
    match_emojis_to_words_raw,
    multi_word_comparator,
)
from .parts_of_speech import filter_parts_of_speech, is_function_word
from .single_word import (
    SingleWordAttributes,
    match_emojis_to_word,
    single_word_comparator,
)
from .stemmer import stem_word

__all__ = [
    # Constants
    "DEFAULT_LIMIT",
    "FUNCTION_WORDS",
    "STEM_RULES",
    "StemRule",
    # NLP
    "stem_word",
    "filter_parts_of_speech",
    "is_function_word",
    # Comparators
    "ComparatorRule",
    "RankingComparator",
    "optional_rank",
    # Single word
    "SingleWordAttributes",
    "match_emojis_to_word",
    "single_word_comparator",
    # Multiple words
    "MultiWordAttributes",
    "match_emojis_to_words_raw",
    "multi_word_comparator",
    # Best matching
    "BestMatchAttributes",
    "best_match_comparator",
    "match_emoji_to_words",
    "match_filtered_words",
]
