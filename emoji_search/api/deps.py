"""FastAPI dependency injection functions.

This module contains shared dependencies for the API endpoints:
- Dataset lookup
- Search dispatch by mode
- Error sanitization
"""

import logging

from fastapi import HTTPException

from ..data import get_dataset
from ..engine.core.dataset import EmojiDataset
from ..engine.search import search, search_best_matching
from ..errors import DatasetNotLoadedError, EmojiSearchError
from ..models import Options, SearchMode

logger = logging.getLogger(__name__)


# ============ ERROR SANITIZATION ============


def sanitize_error_message(error: Exception) -> str:
    """
    Sanitize error messages to prevent information disclosure.

    Messages of the package's own errors are safe to return; anything else
    is logged and replaced by a generic message.
    """
    if isinstance(error, EmojiSearchError):
        return str(error)

    logger.error(f"Search execution error: {error}", exc_info=True)
    return "An error occurred processing your request. Please try again."


# ============ DEPENDENCIES ============


def get_search_dataset() -> EmojiDataset:
    """Provide the loaded dataset, or fail with 503 while none is available."""
    try:
        return get_dataset()
    except DatasetNotLoadedError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e


# ============ SEARCH DISPATCH ============


def run_search(
    mode: SearchMode,
    query: str,
    limit: int,
    options: Options | None,
    dataset: EmojiDataset | None = None,
) -> list[str]:
    """Run the entry point selected by ``mode``.

    Without an explicit ``dataset`` the process-wide one is used, which
    raises DatasetNotLoadedError when none is loaded.
    """
    if mode is SearchMode.BEST_MATCHING:
        return search_best_matching(query, limit=limit, options=options, dataset=dataset)
    return search(query, limit=limit, options=options, dataset=dataset)
