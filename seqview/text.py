"""
ASCII case transforms for byte buffers (uint8).

Only the ASCII letters A-Z / a-z are touched; every other byte passes through.
All functions write in place and return the buffer.
"""

from __future__ import annotations

import numpy as np

from .mutation import require_writeable

_CASE_GAP = 32
_SPACES = np.frombuffer(b" \t\n\r\x0b\x0c", dtype=np.uint8)


def _upper_mask(items: np.ndarray) -> np.ndarray:
    return (items >= ord("A")) & (items <= ord("Z"))


def _lower_mask(items: np.ndarray) -> np.ndarray:
    return (items >= ord("a")) & (items <= ord("z"))


def lower(items: np.ndarray) -> np.ndarray:
    require_writeable(items)
    items[_upper_mask(items)] += _CASE_GAP
    return items


def upper(items: np.ndarray) -> np.ndarray:
    require_writeable(items)
    items[_lower_mask(items)] -= _CASE_GAP
    return items


def capitalize(items: np.ndarray) -> np.ndarray:
    """First byte upper-cased, the rest lower-cased (as ``str.capitalize``)."""
    require_writeable(items)
    if items.size > 0:
        upper(items[:1])
    if items.size > 1:
        lower(items[1:])
    return items


def title(items: np.ndarray) -> np.ndarray:
    """
    Upper-case letters that follow whitespace (or start the buffer) and
    lower-case every other letter.
    """
    require_writeable(items)
    prev_space = np.empty(items.size, dtype=bool)
    if items.size:
        prev_space[0] = True
        prev_space[1:] = np.isin(items[:-1], _SPACES)
    to_upper = _lower_mask(items) & prev_space
    to_lower = _upper_mask(items) & ~prev_space
    items[to_upper] -= _CASE_GAP
    items[to_lower] += _CASE_GAP
    return items


__all__ = [
    'lower',
    'upper',
    'capitalize',
    'title',
]
