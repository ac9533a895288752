"""
Generator functions used by the walkthrough.

Calling a generator function runs none of its body. Each ``next()`` resumes
execution right after the previous ``yield`` and pauses at the following one.
"""

import logging
from itertools import islice
from typing import Iterable, Iterator, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def two_step() -> Iterator[int]:
    """Generator that logs before each of its two values."""
    logger.info("invoked 1st time")
    yield 1
    logger.info("invoked 2nd time")
    yield 2


def forever(start: int = 0) -> Iterator[int]:
    """Generator that counts up from ``start`` without end."""
    index = start
    while True:
        yield index
        index += 1


def take(iterable: Iterable[T], n: int) -> List[T]:
    """
    Pull the first ``n`` items from an iterable.

    Only ``n`` items are ever requested, so infinite generators are fine.

    Args:
        iterable: Source of items
        n: Number of items to take

    Returns:
        List with at most ``n`` items
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    return list(islice(iterable, n))
