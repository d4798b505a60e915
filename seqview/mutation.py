"""
In-place mutation primitives.

Every function writes only into buffers the caller supplied; nothing is
resized. Capacity and length contracts are checked before the first write, so
a violated precondition never leaves a partially written destination.

    fill(items, 0)                        every element := 0
    copy(items, source)                   len(source) must equal len(items)
    swap(items, 0, -1)                    wrapped indices
    concat(items, other, dest)            dest[:n] := items ++ other
    join(items, [a, b], dest)             dest[:n] := items ++ a ++ b
    rotate(items, 2)                      left by 2; negative rotates right
    set_range(items, 1, 3, 9)             through resolve_range
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Sequence

import numpy as np

from .errors import PreconditionError, ReadOnlyViewError
from .index_space import resolve_index, resolve_range
from .needle import coerce_array


def require_writeable(items: np.ndarray, what: str = "buffer") -> np.ndarray:
    if not items.flags.writeable:
        raise ReadOnlyViewError(f"{what} is read-only")
    return items


# =============================================================================
# SECTION 1: Element Writes
# =============================================================================

def fill(items: np.ndarray, scalar: Any) -> np.ndarray:
    require_writeable(items)
    items[:] = scalar
    return items


def copy(items: np.ndarray, source: Any) -> np.ndarray:
    """Overwrite ``items`` with ``source`` (same length required)."""
    require_writeable(items)
    source = coerce_array(source, items.dtype)
    if source.size != items.size:
        raise PreconditionError(
            f"copy source has {source.size} elements, destination has {items.size}"
        )
    items[:] = source
    return items


def swap(items: np.ndarray, idx1: int, idx2: int) -> None:
    require_writeable(items)
    i = resolve_index(items.size, idx1)
    j = resolve_index(items.size, idx2)
    items[i], items[j] = items[j], items[i]


def set_at(items: np.ndarray, idx: int, value: Any) -> np.ndarray:
    require_writeable(items)
    items[resolve_index(items.size, idx)] = value
    return items


def set_range(items: np.ndarray, start: int, end: int, value: Any) -> np.ndarray:
    """Assign ``value`` over ``resolve_range(len, start, end)``."""
    require_writeable(items)
    items[resolve_range(items.size, start, end).as_slice()] = value
    return items


def set_where(items: np.ndarray, predicate: Callable[[Any], bool], value: Any) -> np.ndarray:
    """Assign ``value`` to every element for which ``predicate`` holds."""
    require_writeable(items)
    mask = np.fromiter((bool(predicate(x)) for x in items), dtype=bool, count=items.size)
    items[mask] = value
    return items


def map_inplace(items: np.ndarray, func: Callable[[Any], Any]) -> np.ndarray:
    require_writeable(items)
    items[:] = np.fromiter((func(x) for x in items), dtype=items.dtype, count=items.size)
    return items


# =============================================================================
# SECTION 2: Destination Writes
# =============================================================================

def concat(items: np.ndarray, other: Any, dest: np.ndarray) -> np.ndarray:
    """
    Write ``items`` followed by ``other`` into the front of ``dest``.

    Returns:
        ``dest[:len(items) + len(other)]``

    Raises:
        PreconditionError: ``dest`` is too small.
    """
    require_writeable(dest, "destination")
    other = coerce_array(other, items.dtype)
    total = items.size + other.size
    if total > dest.size:
        raise PreconditionError(f"concat needs {total} elements, destination holds {dest.size}")
    dest[:items.size] = items
    dest[items.size:total] = other
    return dest[:total]


def join(items: np.ndarray, collection: Iterable[Any], dest: np.ndarray) -> np.ndarray:
    """
    Write ``items`` followed by every piece of ``collection`` into ``dest``.

    Returns:
        ``dest[:combined_length]``

    Raises:
        PreconditionError: ``dest`` is too small for the combined length.
    """
    require_writeable(dest, "destination")
    pieces: Sequence[np.ndarray] = [coerce_array(p, items.dtype) for p in collection]
    total = items.size + sum(p.size for p in pieces)
    if total > dest.size:
        raise PreconditionError(f"join needs {total} elements, destination holds {dest.size}")

    dest[:items.size] = items
    cursor = items.size
    for piece in pieces:
        dest[cursor:cursor + piece.size] = piece
        cursor += piece.size
    return dest[:cursor]


# =============================================================================
# SECTION 3: Permutations
# =============================================================================

def reverse(items: np.ndarray) -> np.ndarray:
    require_writeable(items)
    items[:] = items[::-1]
    return items


def rotate(items: np.ndarray, amount: int) -> np.ndarray:
    """
    Rotate in place. Positive ``amount`` rotates left, negative rotates right,
    both modulo ``len(items)``. Empty buffers are left alone.

    Example:
        >>> rotate(np.array([1, 2, 3, 4]), 1)
        array([2, 3, 4, 1])
        >>> rotate(np.array([1, 2, 3, 4]), -1)
        array([4, 1, 2, 3])
    """
    require_writeable(items)
    length = items.size
    if length == 0:
        return items
    shift = int(amount) % length
    if shift:
        # three reversals: head, tail, whole
        reverse(items[:shift])
        reverse(items[shift:])
        reverse(items)
    return items


__all__ = [
    'require_writeable',
    'fill',
    'copy',
    'swap',
    'set_at',
    'set_range',
    'set_where',
    'map_inplace',
    'concat',
    'join',
    'reverse',
    'rotate',
]
