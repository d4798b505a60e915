"""
Tests for ASCII case transforms
"""

import pytest
import numpy as np

from seqview.errors import ReadOnlyViewError
from seqview.text import lower, upper, capitalize, title


def writeable(text):
    return np.frombuffer(bytearray(text), dtype=np.uint8)


class TestCase:
    def test_lower(self):
        assert lower(writeable(b"HeLLo, World 42!")).tobytes() == b"hello, world 42!"

    def test_upper(self):
        assert upper(writeable(b"HeLLo, World 42!")).tobytes() == b"HELLO, WORLD 42!"

    def test_non_ascii_bytes_untouched(self):
        raw = bytes([0xC0, 0xE9, ord("a"), 0x5B, 0x60, 0x7B])
        assert upper(writeable(raw)).tobytes() == bytes([0xC0, 0xE9, ord("A"), 0x5B, 0x60, 0x7B])

    def test_capitalize(self):
        assert capitalize(writeable(b"hELLO world")).tobytes() == b"Hello world"
        assert capitalize(writeable(b"")).tobytes() == b""

    def test_title(self):
        assert title(writeable(b"hello wORLD")).tobytes() == b"Hello World"
        assert title(writeable(b"a\tb\nc")).tobytes() == b"A\tB\nC"
        assert title(writeable(b"")).tobytes() == b""

    def test_matches_python_for_ascii_words(self):
        sample = b"the QUICK brown fox"
        assert lower(writeable(sample)).tobytes() == sample.lower()
        assert upper(writeable(sample)).tobytes() == sample.upper()
        assert capitalize(writeable(sample)).tobytes() == sample.capitalize()
        assert title(writeable(sample)).tobytes() == sample.title()

    @pytest.mark.parametrize("transform", [lower, upper, capitalize, title])
    def test_read_only_rejected(self, transform):
        with pytest.raises(ReadOnlyViewError):
            transform(np.frombuffer(b"abc", dtype=np.uint8))
