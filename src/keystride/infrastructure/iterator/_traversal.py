"""
Python iteration over a `[begin, end)` pair of shaped iterators.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ._shaped_iterator import ShapedIterator

logger = logging.getLogger(__name__)


def traverse(begin: ShapedIterator, end: ShapedIterator) -> Iterator[Any]:
    """
    Return an iterator over every element from `begin` up to (excluding) `end`.

    Parameters
    ----------
    begin : ShapedIterator
        Start position. It is copied first, so the caller's iterator is not
        advanced.
    end : ShapedIterator
        End position, typically built with the same shape as `begin`.

    Returns
    -------
    Iterator[Any]
        Dereferenced elements in row-major order of the iteration shape.

    Raises
    ------
    ValueError
        If `begin` and `end` have different shapes. Such iterators never
        compare equal, so the walk would not terminate. Raised by this call,
        before any element is produced.
    """
    if begin.shape != end.shape:
        raise ValueError(
            f"traverse() requires matching shapes, got {begin.shape} and {end.shape}"
        )
    return _walk(begin.copy(), end)


def _walk(it: ShapedIterator, end: ShapedIterator) -> Iterator[Any]:
    count = 0
    while it != end:
        yield it.dereference()
        it.increment()
        count += 1
    logger.debug("traversal of shape %r finished after %d element(s)", it.shape, count)
