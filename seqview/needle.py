"""
Needle coercion.

A needle is the value (or values) searched for, shaped by its Mode:

    Mode.SCALAR    -> one element            'T', 0x54, 2.5
    Mode.SEQUENCE  -> ordered 1-D run        b"This", [1, 2, 3]
    Mode.SET       -> unordered collection   "01_", {1, 3}
    Mode.PREDICATE -> callable(element) -> bool

Byte views (uint8) also accept ASCII ``str`` needles. Needles are never cast to
the view's dtype: ``3.5`` searched in an int array simply matches nothing.
"""

from __future__ import annotations
from typing import Any, Callable, Union

import numpy as np

from .constants import BYTE_DTYPE
from .options import Mode


_BUFFER_TYPES = (bytes, bytearray, memoryview)


def _encode_text(text: str, dtype: np.dtype) -> np.ndarray:
    if dtype != BYTE_DTYPE:
        raise TypeError(f"str needles require a uint8 view, got dtype {dtype}")
    return np.frombuffer(text.encode("ascii"), dtype=BYTE_DTYPE)


def coerce_scalar(value: Any, dtype: np.dtype) -> Any:
    """Return a single comparable element."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"scalar needle must be one character, got {value!r}")
        return _encode_text(value, dtype)[0]
    if isinstance(value, _BUFFER_TYPES):
        raw = bytes(value)
        if len(raw) != 1:
            raise ValueError(f"scalar needle must be one byte, got {raw!r}")
        return np.uint8(raw[0])
    if np.ndim(value) != 0:
        raise ValueError("scalar mode expects a single element")
    return value


def coerce_array(value: Any, dtype: np.dtype) -> np.ndarray:
    """Return a 1-D array for sequence and set needles."""
    if hasattr(value, "items") and isinstance(getattr(value, "items"), np.ndarray):
        return value.items
    if isinstance(value, str):
        return _encode_text(value, dtype)
    if isinstance(value, _BUFFER_TYPES):
        return np.frombuffer(value, dtype=BYTE_DTYPE)
    if isinstance(value, (set, frozenset)):
        value = list(value)
    arr = np.asarray(value)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise ValueError(f"needle must be one-dimensional, got shape {arr.shape}")
    return arr


def coerce_needle(mode: Union[Mode, str], needle: Any, dtype: np.dtype) -> Any:
    """
    Normalize ``needle`` for ``mode`` against elements of ``dtype``.

    Args:
        mode: Matching mode
        needle: Raw needle as supplied by the caller
        dtype: Element dtype of the searched buffer

    Returns:
        A scalar (SCALAR), a 1-D ndarray (SEQUENCE, SET) or the callable
        itself (PREDICATE).
    """
    mode = Mode.coerce(mode)
    if mode is Mode.SCALAR:
        return coerce_scalar(needle, dtype)
    if mode is Mode.PREDICATE:
        if not callable(needle):
            raise TypeError("predicate mode expects a callable")
        return needle
    arr = coerce_array(needle, dtype)
    if mode is Mode.SET and arr.size > 1:
        # membership only: duplicates would otherwise be tallied twice
        arr = np.unique(arr)
    return arr


def membership(items: np.ndarray, needle: np.ndarray) -> np.ndarray:
    """Boolean mask of ``items`` whose element belongs to ``needle``."""
    if needle.size == 0:
        return np.zeros(items.shape, dtype=bool)
    return np.isin(items, needle)


Predicate = Callable[[Any], bool]


__all__ = [
    'coerce_scalar',
    'coerce_array',
    'coerce_needle',
    'membership',
    'Predicate',
]
