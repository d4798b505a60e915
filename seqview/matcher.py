"""
Matcher - Three-Mode Pattern Search

Determines whether and where a needle occurs in a buffer:

    SCALAR    first index >= start whose element equals the scalar
    SEQUENCE  first index >= start beginning a full, contiguous copy of the needle
    SET       first index >= start whose element is a member of the needle

A miss is ``None`` (``False`` for the contains/starts/ends family), never an
exception. Sequence and set needles may be empty or longer than the buffer.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from .index_space import resolve_index
from .needle import coerce_needle, membership
from .options import Mode


# =============================================================================
# SECTION 1: Per-Mode Search Kernels
# =============================================================================

def _first(mask: np.ndarray, offset: int) -> Optional[int]:
    hits = np.flatnonzero(mask)
    return offset + int(hits[0]) if hits.size else None


def _find_scalar(items: np.ndarray, start: int, value: Any) -> Optional[int]:
    if start >= items.size:
        return None
    return _first(items[start:] == value, start)


def _find_sequence(items: np.ndarray, start: int, seq: np.ndarray) -> Optional[int]:
    n = seq.size
    length = items.size
    if n == 0:
        return start if start <= length else None
    if start + n > length:
        return None
    # anchor on the first needle element, then verify the full window
    candidates = np.flatnonzero(items[start:length - n + 1] == seq[0])
    for offset in candidates:
        pos = start + int(offset)
        if np.array_equal(items[pos:pos + n], seq):
            return pos
    return None


def _find_set(items: np.ndarray, start: int, members: np.ndarray) -> Optional[int]:
    if start >= items.size:
        return None
    return _first(membership(items[start:], members), start)


_FINDERS: Dict[Mode, Callable[[np.ndarray, int, Any], Optional[int]]] = {
    Mode.SCALAR: _find_scalar,
    Mode.SEQUENCE: _find_sequence,
    Mode.SET: _find_set,
}


def _search_mode(mode: Union[Mode, str]) -> Mode:
    mode = Mode.coerce(mode)
    if mode not in _FINDERS:
        raise ValueError(f"search does not support mode '{mode.value}'")
    return mode


# =============================================================================
# SECTION 2: Public Search API
# =============================================================================

def find_from(items: np.ndarray, mode: Union[Mode, str], start: int, needle: Any) -> Optional[int]:
    """
    Find the first match of ``needle`` at or after ``start``.

    Args:
        items: Buffer to search
        mode: Mode.SCALAR, Mode.SEQUENCE or Mode.SET
        start: First candidate position (negative values wrap)
        needle: Value(s) to match

    Returns:
        Position of the match, or None

    Example:
        >>> buf = np.frombuffer(b"This is a test", dtype=np.uint8)
        >>> find_from(buf, "scalar", 12, "t")
        13
    """
    mode = _search_mode(mode)
    needle = coerce_needle(mode, needle, items.dtype)
    return _FINDERS[mode](items, resolve_index(items.size, start), needle)


def find(items: np.ndarray, mode: Union[Mode, str], needle: Any) -> Optional[int]:
    """``find_from`` starting at position 0."""
    return find_from(items, mode, 0, needle)


def contains_from(items: np.ndarray, mode: Union[Mode, str], start: int, needle: Any) -> bool:
    return find_from(items, mode, start, needle) is not None


def contains(items: np.ndarray, mode: Union[Mode, str], needle: Any) -> bool:
    return find(items, mode, needle) is not None


def starts_with(items: np.ndarray, mode: Union[Mode, str], needle: Any) -> bool:
    """
    Test the head of the buffer.

    SCALAR compares the first element, SEQUENCE the full prefix, SET the
    first element's membership. Always False on an empty buffer.
    """
    if items.size == 0:
        return False
    mode = _search_mode(mode)
    needle = coerce_needle(mode, needle, items.dtype)
    if mode is Mode.SCALAR:
        return bool(items[0] == needle)
    if mode is Mode.SEQUENCE:
        n = needle.size
        return n <= items.size and bool(np.array_equal(items[:n], needle))
    return bool(membership(items[:1], needle)[0])


def ends_with(items: np.ndarray, mode: Union[Mode, str], needle: Any) -> bool:
    """Mirror of :func:`starts_with` for the tail of the buffer."""
    if items.size == 0:
        return False
    mode = _search_mode(mode)
    needle = coerce_needle(mode, needle, items.dtype)
    if mode is Mode.SCALAR:
        return bool(items[-1] == needle)
    if mode is Mode.SEQUENCE:
        n = needle.size
        return n <= items.size and bool(np.array_equal(items[items.size - n:], needle))
    return bool(membership(items[-1:], needle)[0])


__all__ = [
    'find_from',
    'find',
    'contains_from',
    'contains',
    'starts_with',
    'ends_with',
]
