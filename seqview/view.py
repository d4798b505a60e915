"""
View - Borrowed Sequence Buffers

A View is a non-owning window over a caller's one-dimensional buffer. It never
copies or resizes the memory it borrows; sub-views (slice, trim, split fields)
share it too. The engine modules operate on the wrapped ``numpy.ndarray``;
View methods are thin delegations.

================================================================================
CAPABILITY LAYERS
================================================================================

                    ┌──────────────────────────┐
                    │ View                     │  search, count, reduce,
                    │                          │  compare, split, trim
                    └────────────┬─────────────┘
                 ┌───────────────┴───────────────┐
    ┌────────────┴─────────────┐   ┌─────────────┴────────────┐
    │ MutableView              │   │ ByteView (uint8)         │
    │ fill, copy, swap, sort,  │   │ to_bytes, str()          │
    │ rotate, partition, set_* │   │                          │
    └────────────┬─────────────┘   └─────────────┬────────────┘
                 └───────────────┬───────────────┘
                    ┌────────────┴─────────────┐
                    │ MutableByteView          │  lower, upper,
                    │                          │  capitalize, title
                    └──────────────────────────┘

``view(buffer)`` picks the layer: read-only buffers (``bytes``, non-writeable
arrays) get a read-only View, ``uint8`` buffers get the byte layer.

Usage:
    >>> v = view(bytearray(b"000_111_000"))
    >>> v.count("leading", "scalar", "0")
    3
    >>> v.rotate(4).to_bytes()
    b'111_000000_'
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, Optional, Union

import numpy as np

from . import counter, matcher, mutation, ordering, partitioner, reducer, text, trimmer
from .constants import BYTE_DTYPE, SUPPORTED_KINDS
from .errors import ReadOnlyViewError, UnsupportedBufferError
from .index_space import resolve_index, resolve_range
from .iteration import SplitIterator, TokenIterator
from .options import Mode, Option, Order
from .reducer import ReduceConfig


# =============================================================================
# SECTION 1: Buffer Borrowing
# =============================================================================

def as_array(buffer: Any) -> np.ndarray:
    """
    Borrow ``buffer`` as a 1-D ndarray without copying.

    Accepts ndarrays, Views and any buffer-protocol object (``bytes``,
    ``bytearray``, ``memoryview``, ``array.array``, ...).

    Raises:
        UnsupportedBufferError: not a buffer, not 1-D, or not int/uint/float.
    """
    if isinstance(buffer, View):
        return buffer.items
    if isinstance(buffer, np.ndarray):
        arr = buffer
    else:
        try:
            arr = np.asarray(memoryview(buffer))
        except TypeError as exc:
            raise UnsupportedBufferError(
                f"{type(buffer).__name__} does not expose a buffer"
            ) from exc

    if arr.ndim != 1:
        raise UnsupportedBufferError(f"expected a 1-D buffer, got {arr.ndim}D")
    if arr.dtype.kind not in SUPPORTED_KINDS:
        raise UnsupportedBufferError(f"unsupported element type {arr.dtype}")
    return arr


# =============================================================================
# SECTION 2: Read-Only Layer
# =============================================================================

class View:
    """
    Read-only capability set: search, count, reduce, compare, iterate, trim.

    Attributes:
        items: The borrowed ndarray (shares memory with the caller's buffer)
    """

    __slots__ = ("items",)

    def __init__(self, buffer: Any):
        self.items = as_array(buffer)

    # -- protocol ------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self.items.dtype

    @property
    def readonly(self) -> bool:
        return not self.items.flags.writeable

    def __len__(self) -> int:
        return self.items.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._wrap(self.items[key])
        return self.items[key]

    def __array__(self, dtype=None, copy=None):
        if dtype is None or np.dtype(dtype) == self.items.dtype:
            return self.items
        return self.items.astype(dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dtype={self.dtype}, len={len(self)}, items={self.items!r})"

    def _wrap(self, items: np.ndarray) -> "View":
        return type(self)(items)

    # -- indexing ------------------------------------------------------------

    def get_at(self, idx: int) -> Any:
        """Element at ``idx``; negative indices count from the end."""
        return self.items[resolve_index(self.items.size, idx)]

    def slice(self, start: int, end: int) -> "View":
        """Sub-view over ``resolve_range(len, start, end)``."""
        return self._wrap(self.items[resolve_range(self.items.size, start, end).as_slice()])

    # -- search --------------------------------------------------------------

    def find_from(self, mode: Union[Mode, str], start: int, needle: Any) -> Optional[int]:
        return matcher.find_from(self.items, mode, start, needle)

    def find(self, mode: Union[Mode, str], needle: Any) -> Optional[int]:
        return matcher.find(self.items, mode, needle)

    def contains_from(self, mode: Union[Mode, str], start: int, needle: Any) -> bool:
        return matcher.contains_from(self.items, mode, start, needle)

    def contains(self, mode: Union[Mode, str], needle: Any) -> bool:
        return matcher.contains(self.items, mode, needle)

    def starts_with(self, mode: Union[Mode, str], needle: Any) -> bool:
        return matcher.starts_with(self.items, mode, needle)

    def ends_with(self, mode: Union[Mode, str], needle: Any) -> bool:
        return matcher.ends_with(self.items, mode, needle)

    # -- counting ------------------------------------------------------------

    def count(self, policy: Union[Option, str], mode: Union[Mode, str], needle: Any) -> int:
        return counter.count(self.items, policy, mode, needle)

    # -- comparison ----------------------------------------------------------

    def order(self, other: Any) -> Order:
        return ordering.order(self.items, other)

    def equal(self, other: Any) -> bool:
        return ordering.equal(self.items, other)

    # -- reduction -----------------------------------------------------------

    def sum(self, config: Optional[ReduceConfig] = None):
        return reducer.reduce_sum(self.items, config)

    def product(self, config: Optional[ReduceConfig] = None):
        return reducer.reduce_product(self.items, config)

    def min(self, config: Optional[ReduceConfig] = None):
        return reducer.reduce_min(self.items, config)

    def max(self, config: Optional[ReduceConfig] = None):
        return reducer.reduce_max(self.items, config)

    # -- iteration -----------------------------------------------------------

    def split(self, mode: Union[Mode, str], delimiter: Any) -> SplitIterator:
        return SplitIterator(self.items, mode, delimiter, wrap=self._wrap)

    def tokenize(self, mode: Union[Mode, str], delimiter: Any) -> TokenIterator:
        return TokenIterator(self.items, mode, delimiter, wrap=self._wrap)

    # -- trimming ------------------------------------------------------------

    def trim(self, direction: Union[Option, str], mode: Union[Mode, str], test: Any) -> "View":
        """Sub-view without boundary elements passing ``test``."""
        return self._wrap(trimmer.trim(self.items, direction, mode, test))


# =============================================================================
# SECTION 3: Mutable Layer
# =============================================================================

class MutableView(View):
    """View over a writeable buffer. Mutators work in place and return self."""

    __slots__ = ()

    def __init__(self, buffer: Any):
        super().__init__(buffer)
        if not self.items.flags.writeable:
            raise ReadOnlyViewError(f"{type(self).__name__} needs a writeable buffer")

    def sort(self, direction: Union[Option, str] = Option.ASCENDING) -> "MutableView":
        ordering.sort(self.items, direction)
        return self

    def fill(self, scalar: Any) -> "MutableView":
        mutation.fill(self.items, scalar)
        return self

    def copy(self, source: Any) -> "MutableView":
        mutation.copy(self.items, source)
        return self

    def swap(self, idx1: int, idx2: int) -> None:
        mutation.swap(self.items, idx1, idx2)

    def concat(self, other: Any, dest: Any) -> "MutableView":
        """Write self ++ other into ``dest``; returns a view of the written part."""
        return view(mutation.concat(self.items, other, as_array(dest)))

    def join(self, collection: Iterable[Any], dest: Any) -> "MutableView":
        return view(mutation.join(self.items, collection, as_array(dest)))

    def partition(self, predicate: Callable[[Any], bool],
                  policy: Union[Option, str] = Option.STABLE) -> "MutableView":
        partitioner.partition(self.items, predicate, policy)
        return self

    def rotate(self, amount: int) -> "MutableView":
        mutation.rotate(self.items, amount)
        return self

    def reverse(self) -> "MutableView":
        mutation.reverse(self.items)
        return self

    def map(self, func: Callable[[Any], Any]) -> "MutableView":
        mutation.map_inplace(self.items, func)
        return self

    def set_at(self, idx: int, value: Any) -> "MutableView":
        mutation.set_at(self.items, idx, value)
        return self

    def set_range(self, start: int, end: int, value: Any) -> "MutableView":
        mutation.set_range(self.items, start, end, value)
        return self

    def set_where(self, predicate: Callable[[Any], bool], value: Any) -> "MutableView":
        mutation.set_where(self.items, predicate, value)
        return self


# =============================================================================
# SECTION 4: Byte Layer (uint8 only)
# =============================================================================

class ByteViewMixin:
    """Byte helpers available on every uint8 view."""

    __slots__ = ()

    def to_bytes(self) -> bytes:
        return self.items.tobytes()

    def __str__(self) -> str:
        return self.items.tobytes().decode("latin-1")


class MutableByteViewMixin(ByteViewMixin):
    """ASCII case transforms; requires a writeable uint8 view."""

    __slots__ = ()

    def lower(self):
        text.lower(self.items)
        return self

    def upper(self):
        text.upper(self.items)
        return self

    def capitalize(self):
        text.capitalize(self.items)
        return self

    def title(self):
        text.title(self.items)
        return self


class ByteView(ByteViewMixin, View):
    __slots__ = ()

    def __init__(self, buffer: Any):
        super().__init__(buffer)
        _require_bytes(self.items)


class MutableByteView(MutableByteViewMixin, MutableView):
    __slots__ = ()

    def __init__(self, buffer: Any):
        super().__init__(buffer)
        _require_bytes(self.items)


def _require_bytes(items: np.ndarray) -> None:
    if items.dtype != BYTE_DTYPE:
        raise UnsupportedBufferError(f"byte views need uint8 elements, got {items.dtype}")


# =============================================================================
# SECTION 5: Construction
# =============================================================================

def view(buffer: Any) -> View:
    """
    Wrap ``buffer`` in the richest View its type allows.

    Args:
        buffer: ndarray, View or buffer-protocol object

    Returns:
        View | MutableView | ByteView | MutableByteView
    """
    items = as_array(buffer)
    writeable = bool(items.flags.writeable)
    if items.dtype == BYTE_DTYPE:
        return MutableByteView(items) if writeable else ByteView(items)
    return MutableView(items) if writeable else View(items)


__all__ = [
    'as_array',
    'View',
    'MutableView',
    'ByteViewMixin',
    'MutableByteViewMixin',
    'ByteView',
    'MutableByteView',
    'view',
]
