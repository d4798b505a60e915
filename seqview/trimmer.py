"""
Trimmer - Boundary Removal

Shrinks a buffer by dropping boundary elements that pass a test:

    trim(items, "both", "scalar", ord(" "))        spaces at both ends
    trim(items, "left", "set", b"\\t\\n ")         whitespace on the left
    trim(items, "right", "predicate", is_zero)     zeros on the right

``start`` advances from the left and ``end`` retreats from the right while the
test holds; the resulting pair goes through :func:`resolve_range`. Two
consequences callers depend on:

- buffers of length <= 1 are returned unchanged
- a test that consumes every element yields the *whole* buffer, because an
  empty range resolves to the full one

The result is a sub-view sharing memory with ``items``.
"""

from __future__ import annotations
from typing import Any, Union

import numpy as np

from .index_space import Bounds, resolve_range
from .needle import coerce_needle, membership
from .options import Mode, Option, TRIM_DIRECTIONS, require_option

_LEFT = frozenset({Option.LEFT, Option.LEADING, Option.BOTH})
_RIGHT = frozenset({Option.RIGHT, Option.TRAILING, Option.BOTH})


def _mask_bounds(mask: np.ndarray, left: bool, right: bool) -> tuple:
    length = mask.size
    misses = np.flatnonzero(~mask)
    start, end = 0, length
    if left:
        start = int(misses[0]) if misses.size else length
    if right:
        end = int(misses[-1]) + 1 if misses.size else start
        end = max(end, start)
    return start, end


def trim_bounds(items: np.ndarray, direction: Union[Option, str],
                mode: Union[Mode, str], test: Any) -> Bounds:
    """
    Compute the bounds that remain after trimming.

    Args:
        items: Buffer to trim
        direction: LEFT/LEADING, RIGHT/TRAILING or BOTH
        mode: Mode.SCALAR, Mode.SET or Mode.PREDICATE
        test: Scalar, member collection or callable(element) -> bool

    Returns:
        Bounds of the kept region
    """
    direction = require_option(direction, TRIM_DIRECTIONS, "trim")
    mode = Mode.coerce(mode)
    if mode is Mode.SEQUENCE:
        raise ValueError("trim does not support mode 'sequence'")

    length = items.size
    if length <= 1:
        return Bounds(0, length)

    test = coerce_needle(mode, test, items.dtype)
    left = direction in _LEFT
    right = direction in _RIGHT

    if mode is Mode.PREDICATE:
        start, end = 0, length
        if left:
            while start < end and test(items[start]):
                start += 1
        if right:
            while end > start and test(items[end - 1]):
                end -= 1
    elif mode is Mode.SCALAR:
        start, end = _mask_bounds(np.asarray(items == test), left, right)
    else:
        start, end = _mask_bounds(membership(items, test), left, right)

    return resolve_range(length, start, end)


def trim(items: np.ndarray, direction: Union[Option, str],
         mode: Union[Mode, str], test: Any) -> np.ndarray:
    """Trimmed sub-view of ``items``; see :func:`trim_bounds`."""
    return items[trim_bounds(items, direction, mode, test).as_slice()]


__all__ = [
    'trim_bounds',
    'trim',
]
