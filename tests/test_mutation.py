"""
Tests for in-place mutation primitives
"""

import pytest
import numpy as np
from numpy.testing import assert_array_equal

from seqview.errors import PreconditionError, ReadOnlyViewError
from seqview.mutation import (
    fill,
    copy,
    swap,
    set_at,
    set_range,
    set_where,
    map_inplace,
    concat,
    join,
    reverse,
    rotate,
)


class TestElementWrites:
    def test_fill(self):
        items = np.arange(5)
        fill(items, 7)
        assert_array_equal(items, [7, 7, 7, 7, 7])

    def test_copy(self):
        items = np.zeros(3, dtype=np.int32)
        copy(items, [4, 5, 6])
        assert_array_equal(items, [4, 5, 6])

    def test_copy_length_mismatch(self):
        items = np.zeros(3, dtype=np.int32)
        with pytest.raises(PreconditionError):
            copy(items, [1, 2])
        assert_array_equal(items, [0, 0, 0])

    def test_swap_with_wrapped_index(self):
        items = np.array([1, 2, 3, 4])
        swap(items, 0, -1)
        assert_array_equal(items, [4, 2, 3, 1])

    def test_set_at(self):
        items = np.zeros(4)
        set_at(items, -2, 1.5)
        assert_array_equal(items, [0.0, 0.0, 1.5, 0.0])

    def test_set_range_resolves_bounds(self):
        items = np.zeros(6, dtype=np.int64)
        set_range(items, 4, 1, 9)
        assert_array_equal(items, [0, 9, 9, 9, 0, 0])

    def test_set_range_empty_request_is_whole_buffer(self):
        items = np.zeros(3, dtype=np.int64)
        set_range(items, 1, 1, 2)
        assert_array_equal(items, [2, 2, 2])

    def test_set_where(self):
        items = np.array([1, 5, 2, 8])
        set_where(items, lambda x: x > 4, 0)
        assert_array_equal(items, [1, 0, 2, 0])

    def test_map_inplace(self):
        items = np.array([1, 2, 3])
        map_inplace(items, lambda x: x * x)
        assert_array_equal(items, [1, 4, 9])

    def test_read_only_rejected(self):
        items = np.frombuffer(b"abc", dtype=np.uint8)
        with pytest.raises(ReadOnlyViewError):
            fill(items, 0)
        with pytest.raises(ReadOnlyViewError):
            rotate(items, 1)


class TestDestinationWrites:
    def test_concat(self):
        dest = np.zeros(6, dtype=np.int64)
        written = concat(np.array([1, 2]), [3, 4, 5], dest)
        assert_array_equal(written, [1, 2, 3, 4, 5])
        assert_array_equal(dest, [1, 2, 3, 4, 5, 0])
        assert np.shares_memory(written, dest)

    def test_concat_too_small(self):
        dest = np.zeros(3, dtype=np.int64)
        with pytest.raises(PreconditionError):
            concat(np.array([1, 2]), [3, 4], dest)
        assert_array_equal(dest, [0, 0, 0])

    def test_join(self):
        dest = np.zeros(8, dtype=np.uint8)
        written = join(np.frombuffer(b"ab", dtype=np.uint8), [b"cd", b"", b"e"], dest)
        assert written.tobytes() == b"abcde"

    def test_join_too_small(self):
        dest = np.zeros(4, dtype=np.uint8)
        with pytest.raises(PreconditionError):
            join(np.frombuffer(b"ab", dtype=np.uint8), [b"cd", b"e"], dest)
        assert not dest.any()

    def test_read_only_destination(self):
        dest = np.frombuffer(bytes(4), dtype=np.uint8)
        with pytest.raises(ReadOnlyViewError):
            concat(np.frombuffer(b"a", dtype=np.uint8), b"b", dest)


class TestPermutations:
    def test_reverse(self):
        items = np.array([1, 2, 3, 4, 5])
        reverse(items)
        assert_array_equal(items, [5, 4, 3, 2, 1])

    def test_rotate_left(self):
        items = np.array([1, 2, 3, 4])
        rotate(items, 1)
        assert_array_equal(items, [2, 3, 4, 1])

    def test_rotate_right(self):
        items = np.array([1, 2, 3, 4])
        rotate(items, -1)
        assert_array_equal(items, [4, 1, 2, 3])

    def test_rotate_by_length_is_identity(self):
        items = np.frombuffer(bytearray(b"abc"), dtype=np.uint8)
        rotate(items, -3)
        assert items.tobytes() == b"abc"
        rotate(items, 3)
        assert items.tobytes() == b"abc"

    def test_rotate_wraps_modulo_length(self):
        items = np.array([1, 2, 3, 4])
        rotate(items, 6)
        assert_array_equal(items, [3, 4, 1, 2])

    def test_rotate_empty(self):
        items = np.array([], dtype=np.int64)
        rotate(items, 5)
        assert items.size == 0

    @pytest.mark.parametrize("amount", [-7, -1, 0, 2, 5, 11])
    def test_rotate_matches_roll(self, amount):
        items = np.arange(9)
        expected = np.roll(items.copy(), -amount)
        rotate(items, amount)
        assert_array_equal(items, expected)
