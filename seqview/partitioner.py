"""
Partitioner - In-Place Reordering Around a Predicate

Moves every element satisfying ``predicate`` ahead of every element that does
not, inside the caller's buffer:

    STABLE    adjacent-swap pass (insertion-sort-like). Preserves the relative
              order inside both classes. O(n^2) swaps in the worst case.
    UNSTABLE  two-pointer pass from both ends. O(n), no order guarantee.

The predicate is evaluated once per element; the verdicts travel with the
elements as they are swapped. Buffers shorter than 2 are left untouched.
"""

from __future__ import annotations
from typing import Any, Callable, List, Union

import numpy as np

from .options import Option, PARTITION_POLICIES, require_option


def _swap(items: np.ndarray, flags: List[bool], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]
    flags[i], flags[j] = flags[j], flags[i]


def stable_partition(items: np.ndarray, predicate: Callable[[Any], bool]) -> None:
    if items.size < 2:
        return
    flags = [bool(predicate(x)) for x in items]
    for i in range(1, items.size):
        j = i
        while j >= 1 and not flags[j - 1] and flags[j]:
            _swap(items, flags, j - 1, j)
            j -= 1


def unstable_partition(items: np.ndarray, predicate: Callable[[Any], bool]) -> None:
    if items.size < 2:
        return
    flags = [bool(predicate(x)) for x in items]
    i, j = 0, items.size - 1
    while True:
        while i < j and flags[i]:
            i += 1
        while i < j and not flags[j]:
            j -= 1
        if i >= j:
            return
        _swap(items, flags, i, j)
        i += 1
        j -= 1


def partition(items: np.ndarray, predicate: Callable[[Any], bool],
              policy: Union[Option, str] = Option.STABLE) -> np.ndarray:
    """
    Partition ``items`` in place.

    Args:
        items: Writeable 1-D buffer
        predicate: Element test; passing elements move to the front
        policy: Option.STABLE or Option.UNSTABLE

    Returns:
        ``items`` (same object, reordered)

    Example:
        >>> buf = np.array([1, 2, 3, 1, 2, 3, 1, 2, 3])
        >>> partition(buf, lambda x: x == 1, "stable")
        array([1, 1, 1, 2, 3, 2, 3, 2, 3])
    """
    policy = require_option(policy, PARTITION_POLICIES, "partition")
    if policy is Option.STABLE:
        stable_partition(items, predicate)
    else:
        unstable_partition(items, predicate)
    return items


__all__ = [
    'stable_partition',
    'unstable_partition',
    'partition',
]
