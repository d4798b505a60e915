"""
Tests for comparison and sorting
"""

import pytest
import numpy as np
from numpy.testing import assert_array_equal

from seqview.options import Order
from seqview.ordering import order, equal, sort


class TestOrder:
    def test_equal(self):
        assert order(np.array([1, 2, 3]), [1, 2, 3]) is Order.EQUAL
        assert equal(np.array([1, 2, 3]), np.array([1, 2, 3]))

    def test_first_difference_decides(self):
        assert order(np.array([1, 2, 3]), [1, 2, 4]) is Order.LESS
        assert order(np.array([1, 3]), [1, 2, 9, 9]) is Order.GREATER

    def test_prefix_is_less(self):
        assert order(np.array([1, 2]), [1, 2, 0]) is Order.LESS
        assert order(np.array([1, 2, 0]), [1, 2]) is Order.GREATER

    def test_bytes(self):
        items = np.frombuffer(b"apple", dtype=np.uint8)
        assert order(items, b"apply") is Order.LESS
        assert order(items, "apple") is Order.EQUAL
        assert not equal(items, b"Apple")

    def test_empty(self):
        empty = np.array([], dtype=np.int64)
        assert order(empty, []) is Order.EQUAL
        assert order(empty, [0]) is Order.LESS


class TestSort:
    def test_ascending(self):
        items = np.array([3, 1, 2])
        assert sort(items) is items
        assert_array_equal(items, [1, 2, 3])

    def test_descending(self):
        items = np.array([3, 1, 2, 5])
        sort(items, "descending")
        assert_array_equal(items, [5, 3, 2, 1])

    def test_short_aliases(self):
        items = np.array([2.5, -1.0, 0.0])
        sort(items, "desc")
        assert_array_equal(items, [2.5, 0.0, -1.0])
        sort(items, "asc")
        assert_array_equal(items, [-1.0, 0.0, 2.5])

    def test_sorts_the_borrowed_buffer(self):
        raw = bytearray(b"dcba")
        sort(np.frombuffer(raw, dtype=np.uint8))
        assert raw == bytearray(b"abcd")

    def test_non_sort_direction_rejected(self):
        with pytest.raises(ValueError):
            sort(np.array([2, 1]), "leading")
