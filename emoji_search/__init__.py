"""Emoji search: rank emojis against free-text, search-as-you-type queries."""

__version__ = "0.1.0"

from .data import ensure_dataset, get_dataset, load_dataset, reset_dataset, set_dataset
from .engine.core.dataset import EmojiDataset
from .engine.search import search, search_best_matching
from .errors import DataLoadError, DatasetNotLoadedError, EmojiSearchError, InvalidInputError
from .models.options import Options

__all__ = [
    "__version__",
    # Search
    "search",
    "search_best_matching",
    "Options",
    # Dataset
    "EmojiDataset",
    "load_dataset",
    "ensure_dataset",
    "get_dataset",
    "set_dataset",
    "reset_dataset",
    # Errors
    "EmojiSearchError",
    "DataLoadError",
    "DatasetNotLoadedError",
    "InvalidInputError",
]
