from __future__ import annotations

import logging
from typing import Sequence, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")


def subsets(items: Sequence[T], min_length: int = 1) -> list[list[T]]:
    """
    Every subset of `items` with at least `min_length` elements.

    Subsets are ordered by their presence bitmask (bit j set <=> items[j]
    present); elements keep their original order.  The cost is 2**len(items).
    """
    pool = list(items)
    n = len(pool)
    if n > 20:
        logger.debug("Enumerating %d candidate subsets of %d items", 1 << n, n)

    masks = np.arange(1 << n, dtype=np.int64)[:, None]
    present = ((masks >> np.arange(n, dtype=np.int64)) & 1).astype(bool)
    keep = present.sum(axis=1) >= min_length

    return [[pool[j] for j in np.flatnonzero(row)] for row in present[keep]]
