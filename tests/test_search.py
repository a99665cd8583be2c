"""
Tests for the search entry points.

Covers:
- Routing between single-word and multi-word matching
- Exact emoji short-circuit
- Blank queries and limits
- Stemmed fallback of the best-matching search
- Process-wide dataset usage
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from emoji_search import search, search_best_matching, set_dataset
from emoji_search.errors import DatasetNotLoadedError, InvalidInputError
from emoji_search.models import Options


class TestSearch:
    """Tests for search."""

    def test_single_word(self, dataset):
        """Should route single words to the single-word matcher."""
        assert search("wave", dataset=dataset) == ["🌊", "👋"]

    def test_query_is_normalized(self, dataset):
        """Should normalize and trim the query."""
        assert search("  WAVE! ", dataset=dataset) == ["🌊", "👋"]

    def test_multiple_words(self, dataset):
        """Should route multi-word queries to the multi-word matcher."""
        assert search("smiling face", dataset=dataset) == ["😎", "😊"]

    def test_hyphenated_query_is_multi_word(self, dataset):
        """Should treat hyphens as word separators."""
        assert search("smiling-face", dataset=dataset) == ["😎", "😊"]

    def test_known_emoji_short_circuit(self, dataset):
        """Should return a known emoji as the only result."""
        assert search("🐶", dataset=dataset) == ["🐶"]

    def test_known_emoji_respects_limit(self, dataset):
        """Should still apply the limit to a known emoji."""
        assert search("🐶", limit=0, dataset=dataset) == []

    @pytest.mark.parametrize("query", ["", "   ", '"!?', "..."])
    def test_blank_query(self, dataset, query):
        """Should return nothing for queries that normalize to blank."""
        assert search(query, dataset=dataset) == []

    def test_limit_truncates(self, dataset):
        """Should keep the best results up to the limit."""
        assert search("smil", limit=2, dataset=dataset) == ["😊", "😀"]

    def test_default_limit(self):
        """Should return at most 24 results by default."""
        from emoji_search.engine.core.dataset import EmojiDataset

        dataset = EmojiDataset.from_mappings({f"e{i}": [f"cat {i}"] for i in range(30)}, {})
        assert len(search("cat", dataset=dataset)) == 24

    def test_negative_limit(self, dataset):
        """Should reject a negative limit."""
        with pytest.raises(InvalidInputError):
            search("wave", limit=-1, dataset=dataset)

    def test_options(self, dataset):
        """Should apply per-request options."""
        options = Options(custom_preferred_entity={"wave": "👋"})
        assert search("wave", options=options, dataset=dataset) == ["👋", "🌊"]

    def test_options_do_not_leak(self, dataset):
        """Should not change later searches."""
        search("wave", options=Options(custom_keywords={"😎": ["waves"]}), dataset=dataset)
        assert search("wave", dataset=dataset) == ["🌊", "👋"]

    def test_no_match(self, dataset):
        """Should return an empty list when nothing matches."""
        assert search("dogs", dataset=dataset) == []


class TestProcessWideDataset:
    """Tests for searches without an explicit dataset."""

    def test_not_loaded(self):
        """Should raise when no dataset is loaded."""
        with pytest.raises(DatasetNotLoadedError):
            search("dog")

    def test_uses_installed_dataset(self, dataset):
        """Should use the installed dataset."""
        set_dataset(dataset)
        assert search("dog") == ["🐶", "🐕"]
        assert search_best_matching("dogs") == ["🐶", "🐕"]

    def test_concurrent_searches(self, dataset):
        """Should return identical results from concurrent callers."""
        set_dataset(dataset)
        queries = ["wave", "smil", "smiling face", "h", "dog face"] * 10
        expected = [search(query) for query in queries]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(search, queries))

        assert results == expected


class TestSearchBestMatching:
    """Tests for search_best_matching."""

    def test_single_word_same_as_search(self, dataset):
        """Should match single words like the regular search."""
        assert search_best_matching("wave", dataset=dataset) == search("wave", dataset=dataset)

    def test_stemmed_fallback(self, dataset):
        """Should retry an unmatched single word in stemmed form."""
        assert search_best_matching("dogs", dataset=dataset) == ["🐶", "🐕"]

    def test_no_fallback_when_stem_unchanged(self, dataset):
        """Should return nothing when the stem equals the word."""
        assert search_best_matching("xyz", dataset=dataset) == []

    def test_multiple_words(self, dataset):
        """Should filter function words and match stems."""
        result = search_best_matching("The smiling dogs", dataset=dataset)

        assert set(result[:2]) == {"😊", "😎"}
        assert set(result[2:4]) == {"🐶", "🐕"}
        assert result[4:] == ["😀"]

    def test_multiple_words_limit(self, dataset):
        """Should apply the limit."""
        result = search_best_matching("the smiling dogs", limit=3, dataset=dataset)

        assert len(result) == 3
        assert set(result[:2]) == {"😊", "😎"}
        assert result[2] in {"🐶", "🐕"}

    def test_only_function_words(self, dataset):
        """Should return nothing when every word is filtered out."""
        assert search_best_matching("of the", dataset=dataset) == []

    def test_no_known_emoji_short_circuit(self, dataset):
        """Should match an emoji query against keywords only."""
        assert search_best_matching("🐶", dataset=dataset) == []

    def test_blank_query(self, dataset):
        """Should return nothing for a blank query."""
        assert search_best_matching("  ", dataset=dataset) == []

    def test_negative_limit(self, dataset):
        """Should reject a negative limit."""
        with pytest.raises(InvalidInputError):
            search_best_matching("wave", limit=-5, dataset=dataset)
