"""
Reducer - Chunked Numeric Reduction

Folds a buffer into one scalar (sum, product, min, max) the way a vector unit
would:

    1. split the buffer into full chunks of ``lanes`` elements, where
       lanes = vector_bytes // itemsize (1 when chunking is disabled)
    2. reduce every chunk horizontally
    3. fold the chunk results into the running accumulator, left to right
    4. fold the remaining tail elements one at a time

Identities:

    sum      0
    product  1
    min      dtype maximum   (iinfo.max, or finfo.max for floats)
    max      dtype minimum   (iinfo.min, or -finfo.max for floats)

An empty buffer returns the identity. For min/max that is the dtype extreme,
not a "no data" marker, and callers rely on exactly those values.

Floating-point results follow the chunk-then-tail association and may differ
in the last bit from a naive left-to-right loop. Integer arithmetic wraps in
the element dtype.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import os

import numpy as np

from ._logging import scoped_logger
from .constants import ENV_VECTOR_BYTES, VECTOR_REGISTER_BYTES

log = scoped_logger("reducer")


# =============================================================================
# SECTION 1: Configuration
# =============================================================================

@dataclass(frozen=True)
class ReduceConfig:
    """
    Chunking configuration for the reducer.

    Attributes:
        vector_bytes: Width of the emulated vector register in bytes.
            0 disables chunking (every element is folded one at a time).
    """
    vector_bytes: int = VECTOR_REGISTER_BYTES

    def __post_init__(self):
        """Validate configuration."""
        if self.vector_bytes < 0:
            raise ValueError(f"vector_bytes must be >= 0, got {self.vector_bytes}")

    def lane_count(self, dtype) -> int:
        """Elements per chunk for ``dtype`` (at least 1)."""
        itemsize = np.dtype(dtype).itemsize
        return max(self.vector_bytes // itemsize, 1)


def _config_from_env() -> ReduceConfig:
    raw = os.environ.get(ENV_VECTOR_BYTES)
    if raw is None or raw.strip() == "":
        return ReduceConfig()
    return ReduceConfig(vector_bytes=int(raw))


DEFAULT_REDUCE_CONFIG = _config_from_env()


# =============================================================================
# SECTION 2: Operations and Identities
# =============================================================================

class ReduceOp(Enum):
    """Combining function of a reduction."""
    ADD = "add"
    MUL = "mul"
    MIN = "min"
    MAX = "max"

    @property
    def ufunc(self) -> np.ufunc:
        return _UFUNCS[self]


_UFUNCS = {
    ReduceOp.ADD: np.add,
    ReduceOp.MUL: np.multiply,
    ReduceOp.MIN: np.minimum,
    ReduceOp.MAX: np.maximum,
}


def reduce_init(op: ReduceOp, dtype) -> np.generic:
    """Starting accumulator for ``op`` over elements of ``dtype``."""
    dtype = np.dtype(dtype)
    if op is ReduceOp.ADD:
        return dtype.type(0)
    if op is ReduceOp.MUL:
        return dtype.type(1)

    is_int = dtype.kind in "iu"
    if op is ReduceOp.MIN:
        return dtype.type(np.iinfo(dtype).max if is_int else np.finfo(dtype).max)
    if op is ReduceOp.MAX:
        return dtype.type(np.iinfo(dtype).min if is_int else -np.finfo(dtype).max)
    raise ValueError(f"reduce_init: unsupported op {op}")


# =============================================================================
# SECTION 3: Chunked Reduction
# =============================================================================

def simd_reduce(items: np.ndarray, op: ReduceOp, initial: np.generic,
                lanes: int) -> np.generic:
    """
    Reduce ``items`` with ``op`` in chunks of ``lanes`` elements.

    Args:
        items: 1-D buffer
        op: Combining function
        initial: Starting accumulator
        lanes: Chunk width (1 folds every element individually)

    Returns:
        Scalar of ``items.dtype``
    """
    dtype = items.dtype
    ufunc = op.ufunc
    full = (items.size // lanes) * lanes if lanes > 1 else 0

    parts = [np.asarray([initial], dtype=dtype)]
    with np.errstate(over="ignore", invalid="ignore"):
        if full:
            chunks = items[:full].reshape(-1, lanes)
            parts.append(ufunc.reduce(chunks, axis=1, dtype=dtype))
        parts.append(items[full:])
        # accumulate folds strictly left to right
        folded = ufunc.accumulate(np.concatenate(parts), dtype=dtype)
    return folded[-1]


def _reduce(items: np.ndarray, op: ReduceOp, config: Optional[ReduceConfig]) -> np.generic:
    config = config or DEFAULT_REDUCE_CONFIG
    initial = reduce_init(op, items.dtype)
    if items.size == 0:
        return initial
    lanes = config.lane_count(items.dtype)
    log.debug("%s over %d x %s in chunks of %d", op.value, items.size, items.dtype, lanes)
    return simd_reduce(items, op, initial, lanes)


def reduce_sum(items: np.ndarray, config: Optional[ReduceConfig] = None) -> np.generic:
    """Sum of all elements; 0 when empty."""
    return _reduce(items, ReduceOp.ADD, config)


def reduce_product(items: np.ndarray, config: Optional[ReduceConfig] = None) -> np.generic:
    """Product of all elements; 1 when empty."""
    return _reduce(items, ReduceOp.MUL, config)


def reduce_min(items: np.ndarray, config: Optional[ReduceConfig] = None) -> np.generic:
    """Smallest element; the dtype maximum when empty."""
    return _reduce(items, ReduceOp.MIN, config)


def reduce_max(items: np.ndarray, config: Optional[ReduceConfig] = None) -> np.generic:
    """Largest element; the dtype minimum when empty."""
    return _reduce(items, ReduceOp.MAX, config)


__all__ = [
    'ReduceConfig',
    'DEFAULT_REDUCE_CONFIG',
    'ReduceOp',
    'reduce_init',
    'simd_reduce',
    'reduce_sum',
    'reduce_product',
    'reduce_min',
    'reduce_max',
]
