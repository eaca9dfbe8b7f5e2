"""
Tests for the Burrows-Wheeler Transform codec and the suffix array builder.
"""
import pytest

from strmatch.index.bwt import decode_bwt, encode_bwt, first_column, rotate
from strmatch.index.suffix_array import build_sarray


class TestBWT:
    def test_rotate(self):
        assert rotate("ABC") == ["ABC", "CAB", "BCA"]

    def test_encode(self):
        assert encode_bwt("ABCDEFG") == "G$ABCDEF"
        assert encode_bwt("banana") == "annb$aa"

    def test_first_column_is_sorted_text(self):
        assert first_column("banana") == "$aaabnn"
        assert first_column("ABRACADABRA") == "".join(sorted("ABRACADABRA$"))

    def test_bwt_is_permutation_of_text(self):
        text = "MISSISSIPPI"
        assert sorted(encode_bwt(text)) == sorted(text + "$")

    def test_decode(self):
        assert decode_bwt("G$ABCDEF") == "ABCDEFG"
        assert decode_bwt("annb$aa") == "banana"

    @pytest.mark.parametrize(
        "text",
        ["ABCDEFG", "", "A", "BBBBBBBBBB", "TCGATCGA", "MISSISSIPPI", "ZGTATAGAGTATATGZGATGTAT"],
    )
    def test_round_trip(self, text):
        assert decode_bwt(encode_bwt(text)) == text

    def test_decode_without_sentinel(self):
        assert decode_bwt("abc") == ""
        assert decode_bwt("") == ""


class TestSuffixArray:
    def test_banana(self, banana):
        assert build_sarray(banana) == [6, 5, 3, 1, 0, 4, 2]

    def test_empty_text(self):
        assert build_sarray("") == [0]

    def test_is_permutation(self, sample_texts):
        for text in sample_texts:
            assert sorted(build_sarray(text)) == list(range(len(text) + 1))

    def test_suffixes_are_sorted(self, sample_texts):
        for text in sample_texts:
            s = text + "$"
            suffixes = [s[i:] for i in build_sarray(text)]
            assert suffixes == sorted(suffixes)

    def test_bwt_agrees_with_suffix_array(self, sample_texts):
        for text in sample_texts:
            s = text + "$"
            assert "".join(s[i - 1] for i in build_sarray(text)) == encode_bwt(text)
