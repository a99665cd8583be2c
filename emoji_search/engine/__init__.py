"""Emoji ranking engine.

- core: dataset structures, text normalization, scoring fan-out
- scoring: stemmer, parts-of-speech filter, comparators and matchers
- search: the ``search`` and ``search_best_matching`` entry points
"""
