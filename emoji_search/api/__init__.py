"""API utilities and dependencies.

This package contains shared API utilities:
- deps: FastAPI dependency injection functions
"""

from .deps import get_search_dataset, run_search, sanitize_error_message

__all__ = [
    "get_search_dataset",
    "run_search",
    "sanitize_error_message",
]
