"""Engine core module.

This module contains core utilities and data structures for the engine:
- Dataset structures
- Text normalization
- Parallel per-entity scoring
"""

from .dataset import EmojiDataset, entries_with_custom_keywords
from .parallel import fan_out
from .text import normalize_text, split_words

__all__ = [
    # Dataset structures
    "EmojiDataset",
    "entries_with_custom_keywords",
    # Text utilities
    "normalize_text",
    "split_words",
    # Scoring fan-out
    "fan_out",
]
