"""
Lexicographic comparison and sort delegation.

``order`` compares element by element and falls back to length when one
buffer is a prefix of the other. ``sort`` hands the buffer to NumPy's
in-place stable sort; descending order sorts a reversed view of the same
memory.
"""

from __future__ import annotations
from typing import Any, Union

import numpy as np

from .mutation import require_writeable
from .needle import coerce_array
from .options import Option, Order, SORT_DIRECTIONS, require_option


def order(items: np.ndarray, other: Any) -> Order:
    """
    Three-way lexicographic comparison of ``items`` against ``other``.

    Example:
        >>> order(np.array([1, 2, 3]), [1, 2, 4])
        <Order.LESS: -1>
        >>> order(np.array([1, 2]), [1, 2, 0])
        <Order.LESS: -1>
    """
    other = coerce_array(other, items.dtype)
    n = min(items.size, other.size)
    diff = np.flatnonzero(items[:n] != other[:n])
    if diff.size:
        i = int(diff[0])
        return Order.LESS if items[i] < other[i] else Order.GREATER
    if items.size == other.size:
        return Order.EQUAL
    return Order.LESS if items.size < other.size else Order.GREATER


def equal(items: np.ndarray, other: Any) -> bool:
    return order(items, other) is Order.EQUAL


def sort(items: np.ndarray, direction: Union[Option, str] = Option.ASCENDING) -> np.ndarray:
    """Sort ``items`` in place (stable) and return it."""
    require_writeable(items)
    direction = require_option(direction, SORT_DIRECTIONS, "sort")
    if direction is Option.ASCENDING:
        items.sort(kind="stable")
    else:
        items[::-1].sort(kind="stable")
    return items


__all__ = [
    'order',
    'equal',
    'sort',
]
