"""
Tests for the multi-word matcher.

Covers:
- In-order, out-of-order and jointed keyword matches
- Precedence between them
- The all-or-nothing word count
"""

import pytest

from emoji_search.engine.core.dataset import EmojiDataset
from emoji_search.engine.scoring.multiple_words import (
    get_best_attributes,
    get_num_matches,
    match_emojis_to_words_raw,
)
from emoji_search.models import Options


class TestGetNumMatches:
    """Tests for get_num_matches."""

    def test_counts_exact_and_prefix(self):
        """Should count each query word once, preferring exact."""
        assert get_num_matches(["face", "cry"], ["crying", "face"]) == (1, 1)

    def test_any_unmatched_word_discards_all(self):
        """Should return (0, 0) when one query word matches nothing.

        Current behaviour, kept as is: the matched "face" is discarded too,
        so partial keyword overlap never ranks as an out-of-order match.
        """
        assert get_num_matches(["sad", "face"], ["crying", "face"]) == (0, 0)

    def test_accepts_sets(self):
        """Should accept any iterable of keyword words."""
        assert get_num_matches(["hello", "wave"], {"hello", "wave", "hand"}) == (2, 0)


class TestGetBestAttributes:
    """Tests for multi-word get_best_attributes."""

    def test_exact_in_order(self):
        """Should flag an identical multi-word keyword."""
        attrs = get_best_attributes("dog face", ["dog", "face"], "🐶", ["dog face"], {})
        assert attrs.is_in_order_exact_match
        assert attrs.num_keyword_words == 0

    def test_partial_in_order_inside_keyword(self):
        """Should match the query starting at a word boundary."""
        attrs = get_best_attributes(
            "face with", ["face", "with"], "😎", ["smiling face with sunglasses"], {}
        )
        assert attrs.is_in_order_match
        assert not attrs.is_in_order_exact_match
        assert attrs.num_keyword_words == 4

    def test_short_keyword_skipped(self):
        """Should skip keywords with fewer words than the query."""
        assert get_best_attributes("a b c", ["a", "b", "c"], "x", ["a b"], {}) is None

    def test_jointed_fallback(self):
        """Should fall back to words across all keywords."""
        attrs = get_best_attributes(
            "hello wave", ["hello", "wave"], "👋", ["waving hand", "hello", "wave"], {}
        )
        assert not attrs.is_multi_word_keyword_match
        assert (attrs.num_exact_matches, attrs.num_prefix_matches) == (2, 0)

    def test_jointed_skipped_when_keyword_matches(self):
        """Should not use jointed words once a multi-word keyword matched."""
        attrs = get_best_attributes(
            "face sad", ["face", "sad"], "😢", ["crying face", "sad face"], {}
        )
        assert attrs.is_multi_word_keyword_match


class TestMatchEmojisToWordsRaw:
    """Tests for match_emojis_to_words_raw ranking."""

    def test_fewer_keyword_words_first(self, dataset, options):
        """Should prefer the shorter keyword among partial in-order matches."""
        assert match_emojis_to_words_raw("smiling face", dataset, options) == ["😎", "😊"]

    def test_custom_preferred_in_order(self, dataset):
        """Should prefer the custom preferred emoji for the keyword."""
        options = Options(custom_preferred_entity={"smiling face with smiling eyes": "😊"})
        assert match_emojis_to_words_raw("smiling face", dataset, options) == ["😊", "😎"]

    def test_exact_in_order_first(self, dataset):
        """Should rank an identical keyword above a longer one."""
        options = Options(custom_keywords={"🐕": ["dog face mask"]})
        assert match_emojis_to_words_raw("dog face", dataset, options) == ["🐶", "🐕"]

    def test_in_order_before_out_of_order(self, dataset):
        """Should rank in-order matches above out-of-order ones."""
        options = Options(custom_keywords={"😀": ["face smiling"]})
        result = match_emojis_to_words_raw("smiling face", dataset, options)
        assert result == ["😎", "😊", "😀"]

    def test_out_of_order_exact_count(self):
        """Should rank more exact words first among out-of-order matches."""
        dataset = EmojiDataset.from_mappings(
            {"b": ["reddish apples"], "a": ["red apple"]}, {}
        )
        assert match_emojis_to_words_raw("apple red", dataset, Options()) == ["a", "b"]

    def test_multi_word_keyword_before_jointed(self, dataset, options):
        """Should rank keyword matches above jointed ones with more exact words."""
        assert match_emojis_to_words_raw("face smile", dataset, options) == ["😎", "😊", "😀"]

    def test_jointed_exact_count(self):
        """Should rank more exact words first among jointed matches."""
        dataset = EmojiDataset.from_mappings(
            {
                "b": ["gamma delta", "hello", "waves"],
                "a": ["alpha beta", "hello", "wave"],
                "c": ["zeta", "hello"],
            },
            {},
        )
        assert match_emojis_to_words_raw("hello wave", dataset, Options()) == ["a", "b"]

    @pytest.mark.parametrize("query", ["sad face", "face sad"])
    def test_out_of_order_all_or_nothing(self, dataset, options, query):
        """Should still find an emoji through its jointed words.

        "crying face" itself contributes nothing because "sad" misses it.
        """
        assert match_emojis_to_words_raw(query, dataset, options) == ["😢"]

    def test_no_match(self, dataset, options):
        """Should return an empty list when no emoji has every word."""
        assert match_emojis_to_words_raw("dog wave", dataset, options) == []
