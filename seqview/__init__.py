"""
seqview - Sequence Algorithms over Borrowed Buffers

Pattern search, windowed counting, circular indexing, chunked reduction,
in-place partitioning and boundary trimming over a homogeneous, fixed-width
buffer (bytes, integers or floats) that the caller keeps ownership of.

Components (leaves first):
- index_space: resolve_index, resolve_range
- matcher:     find / find_from / contains / starts_with / ends_with
- counter:     count(policy, mode, needle)
- reducer:     sum, product, min, max (chunked)
- partitioner: stable / unstable in-place partition
- trimmer:     left / right / both boundary trimming
- view:        View, MutableView, ByteView, MutableByteView, view()

Quick start:
    >>> import seqview
    >>> v = seqview.view(b"This is a test")
    >>> v.find("scalar", "T"), v.find_from("scalar", 12, "t")
    (0, 13)
"""

__version__ = "0.1.0"

from ._logging import setup_logging
from .errors import (
    SeqViewError,
    PreconditionError,
    ReadOnlyViewError,
    UnsupportedBufferError,
)
from .options import Mode, Option, Order
from .index_space import Bounds, resolve_index, resolve_range
from .reducer import ReduceConfig, ReduceOp, DEFAULT_REDUCE_CONFIG
from .iteration import SplitIterator, TokenIterator
from .view import (
    View,
    MutableView,
    ByteView,
    MutableByteView,
    view,
)

__all__ = [
    # Construction
    "view",
    "View",
    "MutableView",
    "ByteView",
    "MutableByteView",

    # Vocabulary
    "Mode",
    "Option",
    "Order",

    # Index space
    "Bounds",
    "resolve_index",
    "resolve_range",

    # Reduction
    "ReduceConfig",
    "ReduceOp",
    "DEFAULT_REDUCE_CONFIG",

    # Iteration
    "SplitIterator",
    "TokenIterator",

    # Errors
    "SeqViewError",
    "PreconditionError",
    "ReadOnlyViewError",
    "UnsupportedBufferError",

    # Logging
    "setup_logging",
]
