"""
Counter - Windowed Occurrence Counting

Counts occurrences of a needle under one of seven policies:

    ALL              total occurrences
    LEADING / LEFT   length of the matching prefix
    TRAILING / RIGHT length of the matching suffix
    UNTIL            offset of the first match (scalar miss: 0, set miss: len)
    BOTH / AROUND    LEADING + TRAILING
    INSIDE           ALL - (LEADING + TRAILING), floored at 0
    INVERSE          len - ALL

Mode notes:

- SCALAR counts elements.
- SEQUENCE counts *windows*. ALL scans for non-overlapping matches;
  LEADING, TRAILING and UNTIL step through the buffer in fixed windows of
  needle length, so a repeat that does not start on a multiple of the needle
  length is not seen. The trailing scan walks back from ``len - n`` with
  saturating subtraction and stops once the cursor reaches 0: the window that
  begins at index 0 is never tested.
- SET tallies elements that belong to the needle (each element counted once);
  it does not count distinct members.

Options outside the count vocabulary (STABLE, ASCENDING, ...) and the
PREDICATE mode return 0 instead of raising.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Union

import numpy as np

from ._logging import scoped_logger
from .matcher import _find_sequence
from .needle import coerce_needle, membership
from .options import COUNT_POLICIES, Mode, Option

log = scoped_logger("counter")


# =============================================================================
# SECTION 1: Window Helpers
# =============================================================================

def _window_matches(items: np.ndarray, start: int, seq: np.ndarray) -> bool:
    window = items[start:start + seq.size]
    return window.size == seq.size and bool(np.array_equal(window, seq))


# =============================================================================
# SECTION 2: Policy Kernels
# =============================================================================

def _count_all(items: np.ndarray, mode: Mode, needle: Any) -> int:
    if mode is Mode.SCALAR:
        return int(np.count_nonzero(items == needle))
    if mode is Mode.SET:
        return int(np.count_nonzero(membership(items, needle)))

    n = needle.size
    if n == 0:
        return 0
    result = 0
    pos = _find_sequence(items, 0, needle)
    while pos is not None:
        result += 1
        pos = _find_sequence(items, pos + n, needle)
    return result


def _count_leading(items: np.ndarray, mode: Mode, needle: Any) -> int:
    if mode is Mode.SEQUENCE:
        n = needle.size
        if n == 0:
            return 0
        result = 0
        for start in range(0, items.size, n):
            if not _window_matches(items, start, needle):
                break
            result += 1
        return result

    misses = np.flatnonzero(~_element_test(items, mode, needle))
    return int(misses[0]) if misses.size else items.size


def _count_trailing(items: np.ndarray, mode: Mode, needle: Any) -> int:
    if mode is Mode.SEQUENCE:
        n = needle.size
        if n == 0 or items.size < n:
            return 0
        result = 0
        start = items.size - n
        while start != 0:
            if not _window_matches(items, start, needle):
                break
            result += 1
            start = max(start - n, 0)
        return result

    misses = np.flatnonzero(~_element_test(items, mode, needle))
    return items.size - 1 - int(misses[-1]) if misses.size else items.size


def _count_until(items: np.ndarray, mode: Mode, needle: Any) -> int:
    if mode is Mode.SEQUENCE:
        n = needle.size
        if n == 0 or items.size < n:
            return 0
        result = 0
        for start in range(0, items.size, n):
            if _window_matches(items, start, needle):
                break
            result += 1
        return result

    hits = np.flatnonzero(_element_test(items, mode, needle))
    if hits.size:
        return int(hits[0])
    # a scalar miss counts nothing; a set miss runs to the end
    return 0 if mode is Mode.SCALAR else items.size


def _element_test(items: np.ndarray, mode: Mode, needle: Any) -> np.ndarray:
    if mode is Mode.SCALAR:
        return np.asarray(items == needle)
    return membership(items, needle)


def _count_both(items: np.ndarray, mode: Mode, needle: Any) -> int:
    return _count_leading(items, mode, needle) + _count_trailing(items, mode, needle)


def _count_inside(items: np.ndarray, mode: Mode, needle: Any) -> int:
    # leading and trailing overlap when the whole buffer matches
    return max(_count_all(items, mode, needle) - _count_both(items, mode, needle), 0)


def _count_inverse(items: np.ndarray, mode: Mode, needle: Any) -> int:
    return items.size - _count_all(items, mode, needle)


_POLICIES: Dict[Option, Callable[[np.ndarray, Mode, Any], int]] = {
    Option.ALL: _count_all,
    Option.LEADING: _count_leading,
    Option.LEFT: _count_leading,
    Option.TRAILING: _count_trailing,
    Option.RIGHT: _count_trailing,
    Option.UNTIL: _count_until,
    Option.BOTH: _count_both,
    Option.AROUND: _count_both,
    Option.INSIDE: _count_inside,
    Option.INVERSE: _count_inverse,
}

assert set(_POLICIES) == COUNT_POLICIES


# =============================================================================
# SECTION 3: Public API
# =============================================================================

def count(items: np.ndarray, policy: Union[Option, str], mode: Union[Mode, str], needle: Any) -> int:
    """
    Count ``needle`` in ``items`` under ``policy``.

    Args:
        items: Buffer to scan
        policy: One of COUNT_POLICIES
        mode: Mode.SCALAR, Mode.SEQUENCE or Mode.SET
        needle: Value(s) to count

    Returns:
        Non-negative count; 0 for an empty buffer and for unsupported
        (policy, mode) pairs.

    Example:
        >>> buf = np.frombuffer(b"000_111_000", dtype=np.uint8)
        >>> count(buf, "leading", "scalar", "0")
        3
    """
    if items.size == 0:
        return 0

    policy = Option.coerce(policy)
    mode = Mode.coerce(mode)
    kernel = _POLICIES.get(policy)
    if kernel is None or mode is Mode.PREDICATE:
        log.debug("count(%s, %s) is not a counting pair, returning 0", policy.value, mode.value)
        return 0

    return kernel(items, mode, coerce_needle(mode, needle, items.dtype))


__all__ = [
    'count',
]
