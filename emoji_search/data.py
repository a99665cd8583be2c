"""Dataset loading with a single process-wide instance.

The dataset is read once from JSON files and then shared read-only by every
search. ``ensure_dataset`` serializes the first load behind a lock so that
concurrent callers never observe a partially built dataset.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any

from .config import settings
from .engine.core.dataset import EmojiDataset
from .errors import DataLoadError, DatasetNotLoadedError

logger = logging.getLogger(__name__)

EMOJI_KEYWORDS_FILE = "emoogle-emoji-keywords.json"
KEYWORD_PREFERRED_EMOJI_FILE = "emoogle-keyword-most-relevant-emoji.json"
TOP_WORDS_FILE = "top-1000-words-by-frequency.json"
GLOSSARY_FILE = "emoogle-emoji-glossary.json"

# Global dataset instance
_dataset: EmojiDataset | None = None
_lock = threading.Lock()


def _read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError("Dataset file not found", path) from e
    except OSError as e:
        raise DataLoadError(f"Could not read dataset file ({e.strerror})", path) from e
    except UnicodeDecodeError as e:
        raise DataLoadError("Dataset file is not valid UTF-8", path) from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON at line {e.lineno}", path) from e


def _expect_mapping(value: Any, path: Path, value_type: type) -> dict:
    if not isinstance(value, dict):
        raise DataLoadError("Expected a JSON object", path)
    for key, item in value.items():
        if not isinstance(item, value_type):
            raise DataLoadError(f"Unexpected value for key {key!r}", path)
    return value


def _expect_word_list(value: Any, path: Path) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(word, str) for word in value):
        raise DataLoadError("Expected a JSON array of strings", path)
    return value


def load_dataset(data_dir: str | Path | None = None) -> EmojiDataset:
    """Load the emoji dataset from ``data_dir``.

    Args:
        data_dir: Directory with the dataset files (default ``settings.data_dir``).
            The glossary file is optional; the other three are required.

    Returns:
        A read-only EmojiDataset.

    Raises:
        DataLoadError: If a required file is missing, unreadable or malformed.
    """
    data_dir = Path(data_dir or settings.data_dir)
    logger.info(f"Loading emoji dataset from {data_dir}")

    keywords_path = data_dir / EMOJI_KEYWORDS_FILE
    entry_keywords = _expect_mapping(_read_json(keywords_path), keywords_path, list)
    for emoji, keywords in entry_keywords.items():
        if not keywords or not all(isinstance(keyword, str) for keyword in keywords):
            raise DataLoadError(
                f"Emoji {emoji!r} needs a non-empty list of keywords", keywords_path
            )
        if not keywords[0]:
            raise DataLoadError(f"Emoji {emoji!r} has an empty name", keywords_path)

    preferred_path = data_dir / KEYWORD_PREFERRED_EMOJI_FILE
    keyword_preferred_entity = _expect_mapping(_read_json(preferred_path), preferred_path, str)

    top_words_path = data_dir / TOP_WORDS_FILE
    top_words = _expect_word_list(_read_json(top_words_path), top_words_path)

    glossary_path = data_dir / GLOSSARY_FILE
    glossary = None
    if glossary_path.exists():
        glossary = _expect_mapping(_read_json(glossary_path), glossary_path, list)

    dataset = EmojiDataset.from_mappings(
        entry_keywords,
        keyword_preferred_entity,
        top_words,
        glossary,
    )
    logger.info(f"Emoji dataset loaded: {len(dataset)} emojis, {len(top_words)} ranked words")
    return dataset


def get_dataset() -> EmojiDataset:
    """Return the process-wide dataset.

    Raises:
        DatasetNotLoadedError: If no dataset has been loaded or set.
    """
    if _dataset is None:
        raise DatasetNotLoadedError()
    return _dataset


def set_dataset(dataset: EmojiDataset) -> None:
    """Install ``dataset`` as the process-wide dataset."""
    global _dataset
    with _lock:
        _dataset = dataset


def ensure_dataset(data_dir: str | Path | None = None) -> EmojiDataset:
    """Load the process-wide dataset once and return it.

    Concurrent callers block until the first load finishes. A failed load
    leaves no dataset installed and re-raises DataLoadError.
    """
    global _dataset
    with _lock:
        if _dataset is None:
            _dataset = load_dataset(data_dir)
        return _dataset


def reset_dataset() -> None:
    """Drop the process-wide dataset."""
    global _dataset
    with _lock:
        _dataset = None
