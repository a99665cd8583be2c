"""Dataset structures for the emoji search engine.

The dataset is built once per process by the loader in ``emoji_search.data``
and shared read-only by every search call.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class EmojiDataset:
    """Read-only emoji vocabulary.

    Attributes:
        entry_keywords: Emoji -> ordered keywords. The first keyword is the
            emoji name and is never empty.
        keyword_preferred_entity: Normalized keyword -> the emoji considered
            most representative of it.
        entity_set: Every known emoji (the keys of ``entry_keywords``).
        word_rank_index: Common English word -> frequency rank, 0 being
            the most frequent.
        glossary: Keyword -> emojis tagged with it. Carried along from the
            data files but not used for ranking.
    """

    entry_keywords: Mapping[str, tuple[str, ...]]
    keyword_preferred_entity: Mapping[str, str]
    entity_set: frozenset[str]
    word_rank_index: Mapping[str, int]
    glossary: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mappings(
        cls,
        entry_keywords: Mapping[str, Sequence[str]],
        keyword_preferred_entity: Mapping[str, str],
        top_words: Iterable[str] = (),
        glossary: Mapping[str, Sequence[str]] | None = None,
    ) -> "EmojiDataset":
        """Build a dataset from plain mappings.

        ``entity_set`` is derived from ``entry_keywords`` and
        ``word_rank_index`` from the position of each word in ``top_words``.
        When a word is listed twice its first (most frequent) rank is kept.
        """
        word_rank_index: dict[str, int] = {}
        for rank, word in enumerate(top_words):
            word_rank_index.setdefault(word, rank)

        return cls(
            entry_keywords=MappingProxyType(
                {emoji: tuple(keywords) for emoji, keywords in entry_keywords.items()}
            ),
            keyword_preferred_entity=MappingProxyType(dict(keyword_preferred_entity)),
            entity_set=frozenset(entry_keywords),
            word_rank_index=MappingProxyType(word_rank_index),
            glossary=MappingProxyType(
                {keyword: tuple(emojis) for keyword, emojis in (glossary or {}).items()}
            ),
        )

    def __len__(self) -> int:
        return len(self.entry_keywords)


def entries_with_custom_keywords(
    dataset: EmojiDataset,
    custom_keywords: Mapping[str, Sequence[str]] | None = None,
) -> list[tuple[str, tuple[str, ...]]]:
    """List (emoji, keywords) pairs with per-request keywords appended.

    Custom keywords only extend emojis already in the dataset; they never
    replace the built-in list, so the emoji name stays first.
    """
    custom_keywords = custom_keywords or {}
    entries = []
    for emoji, keywords in dataset.entry_keywords.items():
        extra = custom_keywords.get(emoji)
        entries.append((emoji, keywords + tuple(extra) if extra else keywords))
    return entries
