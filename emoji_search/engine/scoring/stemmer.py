"""Suffix stemmer tuned for emoji keyword matching.

A base reduction strips one of a few common suffixes; an ordered table of
override rules (``STEM_RULES``) then gets a chance to replace that result,
e.g. keeping "happy" intact or cutting "coolest" down to "cool".
"""

import logging

from .constants import STEM_RULES

logger = logging.getLogger(__name__)


def _base_reduction(word: str) -> str:
    if word.endswith("ing"):
        return word[:-3]
    if word.endswith("ed") and len(word) > 3:
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss") and len(word) > 2:
        return word[:-1]
    if word.endswith("ly") and len(word) > 3:
        return word[:-2]
    return word


def stem_word(word: str) -> str:
    """Reduce a single word to an approximate root.

    Rule order is significant: the first override rule whose suffixes
    match wins. A rule whose cut would consume the whole word is skipped
    and scanning continues with the next rule.

    Args:
        word: The word to stem (normally already normalized).

    Returns:
        The stemmed word; possibly the word itself.
    """
    stemmed = _base_reduction(word)

    for rule in STEM_RULES:
        if not word.endswith(rule.word_suffix):
            continue
        if not (stemmed.endswith(rule.stemmed_suffix) or stemmed == word):
            continue
        if rule.cut is None:
            return word
        if len(word) > rule.cut:
            return word[: -rule.cut]

    return stemmed
