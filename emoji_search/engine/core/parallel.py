"""Bounded fan-out for per-entity scoring.

Scoring one emoji only reads the shared dataset, so the entity list is cut
into contiguous chunks that are scored on a small thread pool and gathered
back in submission order before the caller sorts.
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from ...config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _score_chunk(chunk: Sequence[T], score: Callable[[T], R | None]) -> list[R]:
    results = []
    for item in chunk:
        result = score(item)
        if result is not None:
            results.append(result)
    return results


def fan_out(
    items: Sequence[T],
    score: Callable[[T], R | None],
    max_workers: int | None = None,
    min_chunk_size: int | None = None,
) -> list[R]:
    """Score every item and return the non-None results in input order.

    Args:
        items: Work items, e.g. (emoji, keywords) pairs.
        score: Pure scoring function; ``None`` drops the item.
        max_workers: Pool size (default ``settings.max_workers``).
        min_chunk_size: Items per task (default ``settings.min_chunk_size``).
            Workloads no larger than one chunk are scored inline.

    Returns:
        Results in the same relative order as ``items``.
    """
    max_workers = max_workers or settings.max_workers
    min_chunk_size = min_chunk_size or settings.min_chunk_size

    if max_workers <= 1 or len(items) <= min_chunk_size:
        return _score_chunk(items, score)

    chunk_size = max(min_chunk_size, -(-len(items) // max_workers))
    chunks = [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]
    logger.debug(f"Scoring {len(items)} items in {len(chunks)} chunks")

    results: list[R] = []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(chunks))) as executor:
        futures = [executor.submit(_score_chunk, chunk, score) for chunk in chunks]
        for future in futures:
            results.extend(future.result())
    return results
