"""Exception types for the emoji search engine.

Matching and ranking never raise: an unmatched query is an empty result.
The errors below cover the dataset precondition and invalid arguments.
"""

from pathlib import Path


class EmojiSearchError(Exception):
    """Base class for all emoji search errors."""


class DataLoadError(EmojiSearchError):
    """A dataset file is missing, unreadable or malformed."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = str(path) if path is not None else None
        super().__init__(f"{message}: {self.path}" if self.path else message)


class DatasetNotLoadedError(EmojiSearchError):
    """A search was attempted before any dataset was loaded."""

    def __init__(self, message: str = "No emoji dataset loaded"):
        super().__init__(message)


class InvalidInputError(EmojiSearchError):
    """An argument outside its accepted range, e.g. a negative limit."""
