"""
Tests for split and tokenize iterators
"""

import pytest
import numpy as np

from seqview.iteration import _DelimitedIterator, split, tokenize


def as_bytes(text):
    return np.frombuffer(text, dtype=np.uint8)


def fields(iterator):
    return [part.tobytes() for part in iterator]


class TestSplit:
    def test_keeps_empty_fields(self):
        assert fields(split(as_bytes(b"a,,b"), "scalar", ",")) == [b"a", b"", b"b"]

    def test_leading_and_trailing_delimiters(self):
        assert fields(split(as_bytes(b",a,"), "scalar", ",")) == [b"", b"a", b""]

    def test_sequence_delimiter(self):
        assert fields(split(as_bytes(b"a::b::c"), "sequence", "::")) == [b"a", b"b", b"c"]

    def test_set_delimiter(self):
        assert fields(split(as_bytes(b"a b\tc"), "set", " \t")) == [b"a", b"b", b"c"]

    def test_no_delimiter(self):
        assert fields(split(as_bytes(b"abc"), "scalar", ",")) == [b"abc"]

    def test_empty_sequence_delimiter_never_matches(self):
        assert fields(split(as_bytes(b"abc"), "sequence", "")) == [b"abc"]

    def test_empty_buffer_has_one_field(self):
        it = split(as_bytes(b""), "scalar", ",")
        assert it.first().tobytes() == b""
        assert it.next() is None

    def test_first_peek_rest(self):
        it = split(as_bytes(b"k=v=w"), "scalar", "=")
        assert it.first().tobytes() == b"k"
        assert it.peek().tobytes() == b"v"
        assert it.rest().tobytes() == b"v=w"
        assert it.next().tobytes() == b"v"
        assert it.next().tobytes() == b"w"
        assert it.next() is None
        assert it.rest().tobytes() == b""

    def test_first_after_next_is_an_error(self):
        it = split(as_bytes(b"a,b"), "scalar", ",")
        it.next()
        with pytest.raises(ValueError):
            it.first()

    def test_first_after_exhaustion_is_an_error(self):
        it = split(as_bytes(b"abc"), "scalar", ",")
        list(it)
        with pytest.raises(ValueError):
            it.first()

    def test_reset(self):
        it = split(as_bytes(b"a,b"), "scalar", ",")
        assert fields(it) == [b"a", b"b"]
        it.reset()
        assert fields(it) == [b"a", b"b"]

    def test_fields_share_memory(self):
        items = as_bytes(b"ab,cd")
        for part in split(items, "scalar", ","):
            assert np.shares_memory(part, items)

    def test_integer_buffer(self):
        parts = list(split(np.array([1, 0, 2, 3, 0, 4]), "scalar", 0))
        assert [p.tolist() for p in parts] == [[1], [2, 3], [4]]

    def test_predicate_rejected(self):
        with pytest.raises(ValueError):
            split(as_bytes(b"a"), "predicate", lambda x: True)


class TestTokenize:
    def test_skips_empty_runs(self):
        assert fields(tokenize(as_bytes(b",a,,b,"), "scalar", ",")) == [b"a", b"b"]

    def test_set_delimiter(self):
        text = as_bytes(b"  the quick\t\nfox ")
        assert fields(tokenize(text, "set", b" \t\n")) == [b"the", b"quick", b"fox"]

    def test_sequence_delimiter(self):
        assert fields(tokenize(as_bytes(b"--a--b----c--"), "sequence", "--")) == [b"a", b"b", b"c"]

    def test_only_delimiters(self):
        assert fields(tokenize(as_bytes(b",,,"), "scalar", ",")) == []

    def test_empty_sequence_delimiter(self):
        assert fields(tokenize(as_bytes(b"abc"), "sequence", "")) == [b"abc"]

    def test_peek_and_rest(self):
        it = tokenize(as_bytes(b"  one two  "), "scalar", " ")
        assert it.peek().tobytes() == b"one"
        assert it.next().tobytes() == b"one"
        assert it.rest().tobytes() == b"two  "
        assert it.next().tobytes() == b"two"
        assert it.peek() is None
        assert it.next() is None

    def test_reset(self):
        it = tokenize(as_bytes(b"a b"), "scalar", " ")
        assert fields(it) == [b"a", b"b"]
        it.reset()
        assert it.next().tobytes() == b"a"


class TestDelimitedBase:
    def test_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            _DelimitedIterator(as_bytes(b"a,b"), "scalar", ",")
