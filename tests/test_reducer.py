"""
Tests for chunked reduction
"""

import dataclasses

import pytest
import numpy as np
from numpy.testing import assert_allclose

from seqview.reducer import (
    ReduceConfig,
    ReduceOp,
    reduce_init,
    simd_reduce,
    reduce_sum,
    reduce_product,
    reduce_min,
    reduce_max,
)


NUMERIC_DTYPES = [np.uint8, np.int16, np.int32, np.int64, np.uint64, np.float32, np.float64]


class TestReduceConfig:
    def test_default_lanes(self):
        config = ReduceConfig()
        assert config.lane_count(np.uint8) == 32
        assert config.lane_count(np.int32) == 8
        assert config.lane_count(np.float64) == 4

    def test_zero_width_folds_one_at_a_time(self):
        assert ReduceConfig(vector_bytes=0).lane_count(np.int64) == 1

    def test_narrow_register_still_has_one_lane(self):
        assert ReduceConfig(vector_bytes=4).lane_count(np.int64) == 1

    def test_negative_width_rejected(self):
        with pytest.raises(ValueError):
            ReduceConfig(vector_bytes=-1)

    def test_frozen(self):
        config = ReduceConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.vector_bytes = 64


class TestIdentities:
    def test_add_and_mul(self):
        assert reduce_init(ReduceOp.ADD, np.int32) == 0
        assert reduce_init(ReduceOp.MUL, np.float64) == 1.0

    def test_integer_extremes(self):
        assert reduce_init(ReduceOp.MIN, np.int16) == np.iinfo(np.int16).max
        assert reduce_init(ReduceOp.MAX, np.int16) == np.iinfo(np.int16).min
        assert reduce_init(ReduceOp.MAX, np.uint8) == 0

    def test_float_extremes_are_finite(self):
        assert reduce_init(ReduceOp.MIN, np.float32) == np.finfo(np.float32).max
        assert reduce_init(ReduceOp.MAX, np.float32) == -np.finfo(np.float32).max

    @pytest.mark.parametrize("dtype", NUMERIC_DTYPES)
    def test_empty_returns_identity(self, dtype):
        empty = np.array([], dtype=dtype)
        assert reduce_sum(empty) == 0
        assert reduce_product(empty) == 1
        assert reduce_min(empty) == reduce_init(ReduceOp.MIN, dtype)
        assert reduce_max(empty) == reduce_init(ReduceOp.MAX, dtype)


class TestReductions:
    def test_sum_of_large_buffer(self):
        items = np.full(10000, 2, dtype=np.int64)
        assert reduce_sum(items) == 20000

    def test_product_of_ones(self):
        items = np.ones(10000, dtype=np.int32)
        assert reduce_product(items) == 1

    def test_min_max(self):
        items = np.array([5, -3, 9, 0, 12, -7, 4], dtype=np.int32)
        assert reduce_min(items) == -7
        assert reduce_max(items) == 12

    def test_result_keeps_dtype(self):
        items = np.arange(10, dtype=np.int16)
        assert reduce_sum(items).dtype == np.int16

    def test_integer_sum_wraps(self):
        items = np.array([200, 100], dtype=np.uint8)
        assert reduce_sum(items) == 44

    @pytest.mark.parametrize("dtype", NUMERIC_DTYPES)
    @pytest.mark.parametrize("size", [1, 3, 4, 31, 32, 33, 100])
    def test_matches_numpy_across_chunk_boundaries(self, dtype, size):
        items = (np.arange(size) % 7 + 1).astype(dtype)
        assert reduce_min(items) == items.min()
        assert reduce_max(items) == items.max()
        assert_allclose(reduce_sum(items), items.sum(dtype=dtype), rtol=1e-6)

    @pytest.mark.parametrize("vector_bytes", [0, 8, 32, 64])
    def test_chunk_width_does_not_change_integer_results(self, vector_bytes):
        items = np.arange(1, 50, dtype=np.int64)
        config = ReduceConfig(vector_bytes=vector_bytes)
        assert reduce_sum(items, config) == 1225
        assert reduce_min(items, config) == 1
        assert reduce_max(items, config) == 49

    def test_float_sum(self):
        items = np.linspace(0.0, 1.0, 101)
        assert_allclose(reduce_sum(items), 50.5)


class TestSimdReduce:
    def test_initial_is_folded_in(self):
        items = np.arange(1, 9, dtype=np.int32)
        assert simd_reduce(items, ReduceOp.ADD, np.int32(100), 4) == 136

    def test_tail_only(self):
        items = np.array([3, 4, 5], dtype=np.int64)
        assert simd_reduce(items, ReduceOp.MUL, np.int64(1), 4) == 60

    def test_single_lane(self):
        items = np.array([3, 1, 2], dtype=np.int64)
        assert simd_reduce(items, ReduceOp.MIN, np.int64(10), 1) == 1
