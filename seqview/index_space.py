"""
IndexSpace - Circular Index and Range Resolution

Turns possibly-negative indices and possibly-out-of-range (start, end) pairs
into bounds valid for a buffer of known length.

    resolve_index(5, -1)       -> 4
    resolve_range(5, 1, 3)     -> Bounds(1, 3)
    resolve_range(5, 3, 1)     -> Bounds(1, 3)    (swapped)
    resolve_range(5, 2, 2)     -> Bounds(0, 5)    (empty request -> whole buffer)
    resolve_range(5, 0, 9)     -> Bounds(0, 4)    (end clamps to len - 1)

The last two rules are long-standing behaviour that callers depend on and are
kept exactly as written.
"""

from __future__ import annotations
from typing import NamedTuple

from ._logging import scoped_logger

log = scoped_logger("index")


class Bounds(NamedTuple):
    """Half-open ``[start, end)`` range with ``start <= end``."""
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


def resolve_index(length: int, idx: int) -> int:
    """
    Resolve a Python-style index against ``length``.

    Non-negative indices are returned unchanged; negative ones count back from
    the end (``length - |idx|``). The caller guarantees the result lies in
    ``[0, length)``: anything else is a contract violation, not an error the
    engine reports.
    """
    idx = int(idx)
    if idx >= 0:
        return idx
    return length - abs(idx)


def resolve_range(length: int, start: int, end: int) -> Bounds:
    """
    Resolve ``(start, end)`` into valid bounds for ``length`` elements.

    Rules, applied in order:
        1. ``length == 0``          -> (0, 0)
        2. negative start/end       -> wrapped with resolve_index
        3. ``start > length``       -> start = 0
        4. ``end > length``         -> end = length - 1
        5. ``start == end``         -> (0, length), the whole buffer
        6. ``start > end``          -> swapped

    Args:
        length: Buffer length
        start: Requested start (inclusive)
        end: Requested end (exclusive)

    Returns:
        Bounds with 0 <= start <= end <= length
    """
    if length == 0:
        return Bounds(0, 0)

    start = resolve_index(length, start)
    end = resolve_index(length, end)

    start = 0 if start > length else start
    end = length - 1 if end > length else end

    if start == end:
        log.debug("empty range [%d, %d) widened to the whole buffer", start, end)
        return Bounds(0, length)
    if start > end:
        return Bounds(end, start)
    return Bounds(start, end)


__all__ = [
    'Bounds',
    'resolve_index',
    'resolve_range',
]
