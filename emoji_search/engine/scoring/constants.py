"""Scoring constants for the emoji search engine.

This module contains the fixed tables used by the matchers:
- Function-word sets for parts-of-speech filtering
- Override rules for the suffix stemmer
- Result limit defaults
"""

from typing import NamedTuple

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
DEFAULT_LIMIT = 24


# ---------------------------------------------------------------------------
# Parts of speech - function words removed before best-match scoring.
# ---------------------------------------------------------------------------
# Subject/object pronouns, possessives, reflexives, demonstratives
PRONOUNS = frozenset(
    {
        "i",
        "you",
        "he",
        "she",
        "it",
        "we",
        "they",
        "me",
        "him",
        "her",
        "us",
        "them",
        "my",
        "your",
        "his",
        "its",
        "our",
        "their",
        "mine",
        "yours",
        "hers",
        "ours",
        "theirs",
        "myself",
        "yourself",
        "himself",
        "herself",
        "itself",
        "ourselves",
        "themselves",
        "yourselves",
        "this",
        "that",
        "these",
        "those",
        "who",
        "whom",
        "which",
        "what",
    }
)

PREPOSITIONS = frozenset(
    {
        "about",
        "across",
        "after",
        "against",
        "along",
        "among",
        "around",
        "as",
        "at",
        "before",
        "behind",
        "beneath",
        "beside",
        "between",
        "beyond",
        "by",
        "despite",
        "during",
        "except",
        "for",
        "from",
        "in",
        "inside",
        "into",
        "near",
        "of",
        "on",
        "onto",
        "out",
        "outside",
        "over",
        "since",
        "than",
        "through",
        "throughout",
        "to",
        "toward",
        "under",
        "until",
        "upon",
        "via",
        "with",
        "within",
        "without",
    }
)

# Coordinating conjunctions
CONJUNCTIONS = frozenset({"for", "and", "nor", "but", "or", "yet", "so"})

ARTICLES = frozenset({"a", "an", "the"})

# Quantity words, kept only after one of the exception words ("calling all")
PREDETERMINERS = frozenset({"all", "both"})
PREDETERMINER_EXCEPTION_PREVIOUS_WORDS = frozenset({"calling"})

OTHER_STOP_WORDS = frozenset(
    {
        "is",
        "are",
        "was",
        "were",
        "if",
        "will",
        "would",
        "be",
        "being",
        "one",
        "have",
        "has",
        "had",
        "can",
        "more",
        "then",
        "do",
        "don't",
        "first",
        "even",
        "there",
        "only",
        "also",
        "such",
        "each",
        "because",
        "however",
        "very",
        "must",
        "due",
    }
)

# Always filtered, regardless of position
FUNCTION_WORDS = PRONOUNS | PREPOSITIONS | CONJUNCTIONS | ARTICLES | OTHER_STOP_WORDS


# ---------------------------------------------------------------------------
# Stemmer override rules, scanned in order after the base suffix reduction.
# ---------------------------------------------------------------------------
class StemRule(NamedTuple):
    """One override rule.

    Fires when the original word ends with ``word_suffix`` and the base
    reduction ends with ``stemmed_suffix`` (or left the word unchanged).
    The result is the original word minus its last ``cut`` characters,
    or the original word itself when ``cut`` is None.
    """

    word_suffix: str
    stemmed_suffix: str
    cut: int | None


STEM_RULES: tuple[StemRule, ...] = (
    StemRule("y", "i", None),  # happy -> happy
    StemRule("Y", "i", None),  # DIY -> DIY
    StemRule("ying", "i", 3),
    StemRule("yings", "i", 4),
    StemRule("ing", "e", 3),
    StemRule("ings", "e", 4),
    StemRule("ingly", "e", 5),
    StemRule("ility", "l", 4),
    StemRule("ilities", "l", 6),
    StemRule("ys", "i", 1),
    StemRule("est", "est", 3),  # coolest -> cool
)
