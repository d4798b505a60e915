"""
Split and tokenize iteration.

Both iterators walk a buffer that the caller keeps ownership of and yield
sub-views of it; the iterator alone owns the cursor.

    SplitIterator   yields every field between delimiters, empty ones included
                    "a,,b" split on ","   -> "a", "", "b"
    TokenIterator   yields only non-empty runs between delimiters
                    ",a,,b," tokenized    -> "a", "b"

Delimiters follow the three needle modes. An empty sequence delimiter never
matches, so the whole buffer comes back as a single field/token.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

import numpy as np

from .matcher import _find_sequence
from .needle import coerce_needle, membership
from .options import Mode


class _DelimitedIterator(ABC):
    """Cursor state shared by split and tokenize."""

    def __init__(self, buffer: np.ndarray, mode: Union[Mode, str], delimiter: Any,
                 wrap: Optional[Callable[[np.ndarray], Any]] = None):
        mode = Mode.coerce(mode)
        if mode is Mode.PREDICATE:
            raise ValueError("split/tokenize do not support mode 'predicate'")
        self.buffer = buffer
        self.mode = mode
        self.delimiter = coerce_needle(mode, delimiter, buffer.dtype)
        self.index: Optional[int] = 0
        self._wrap = wrap or (lambda arr: arr)
        if mode is Mode.SEQUENCE:
            self._mask = None
            self._width = self.delimiter.size
        else:
            self._mask = (np.asarray(buffer == self.delimiter) if mode is Mode.SCALAR
                          else membership(buffer, self.delimiter))
            self._width = 1

    def _is_delimiter(self, i: int) -> bool:
        if self._mask is not None:
            return bool(self._mask[i])
        n = self._width
        return n > 0 and i + n <= self.buffer.size and bool(
            np.array_equal(self.buffer[i:i + n], self.delimiter))

    def _find_delimiter(self, start: int) -> Optional[int]:
        if self._mask is not None:
            hits = np.flatnonzero(self._mask[start:])
            return start + int(hits[0]) if hits.size else None
        if self._width == 0:
            return None
        return _find_sequence(self.buffer, start, self.delimiter)

    def reset(self) -> None:
        self.index = 0

    def __iter__(self):
        return self

    def __next__(self):
        result = self.next()
        if result is None:
            raise StopIteration
        return result

    @abstractmethod
    def next(self):
        """Advance the cursor; None once exhausted."""


class SplitIterator(_DelimitedIterator):
    """Fields separated by every delimiter occurrence."""

    def first(self):
        """First field; always present, even for an empty buffer."""
        if self.index != 0:
            raise ValueError("first() must be called before next()")
        return self.next()

    def next(self):
        if self.index is None:
            return None
        start = self.index
        pos = self._find_delimiter(start)
        if pos is None:
            end = self.buffer.size
            self.index = None
        else:
            end = pos
            self.index = pos + self._width
        return self._wrap(self.buffer[start:end])

    def peek(self):
        saved = self.index
        result = self.next()
        self.index = saved
        return result

    def rest(self):
        """Unconsumed remainder of the buffer."""
        start = self.buffer.size if self.index is None else self.index
        return self._wrap(self.buffer[start:])


class TokenIterator(_DelimitedIterator):
    """Non-empty runs between delimiters."""

    def _skip_delimiters(self) -> int:
        i = self.index
        step = max(self._width, 1)
        while i < self.buffer.size and self._is_delimiter(i):
            i += step
        self.index = i
        return i

    def peek(self):
        start = self._skip_delimiters()
        if start >= self.buffer.size:
            return None
        end = start
        while end < self.buffer.size and not self._is_delimiter(end):
            end += 1
        return self._wrap(self.buffer[start:end])

    def next(self):
        result = self.peek()
        if result is None:
            return None
        self.index += len(result)
        return result

    def rest(self):
        start = self._skip_delimiters()
        return self._wrap(self.buffer[start:])


def split(buffer: np.ndarray, mode: Union[Mode, str], delimiter: Any) -> SplitIterator:
    return SplitIterator(buffer, mode, delimiter)


def tokenize(buffer: np.ndarray, mode: Union[Mode, str], delimiter: Any) -> TokenIterator:
    return TokenIterator(buffer, mode, delimiter)


__all__ = [
    'SplitIterator',
    'TokenIterator',
    'split',
    'tokenize',
]
