"""
Tests for k-mer seeding, pattern partitioning, verification and
pigeonhole approximate matching.
"""
import pytest

from strmatch.extend.verifier import ApproximateMatch, Verifier, hamming_mismatches
from strmatch.hashing.hash import Hash
from strmatch.index.fm_index import FMIndex
from strmatch.models.alphabet import Alphabet
from strmatch.search.pigeonhole import approximate_matches, approximate_search
from strmatch.seed.fm_seed import FMSeedExtractor
from strmatch.seed.kmer_index import KmerIndex, text_to_kmer_map
from strmatch.seed.partition import partition_pattern

DNA = "ACGTTGCATGCATCGATCGATGCTAGCTAGCTAGGCTTACGATCGACGT"


def brute_force_approx(text, pattern, mismatches):
    m = len(pattern)
    hits = []
    for i in range(len(text) - m + 1):
        if sum(1 for a, b in zip(text[i:i + m], pattern) if a != b) <= mismatches:
            hits.append(i)
    return hits or [-1]


class TestHash:
    def test_rolling_update_matches_direct_hash(self):
        h = Hash(4, "ACGT")
        current = h.hash_sequence(DNA[:4])
        for i in range(1, len(DNA) - 3):
            current = h.update(current, DNA[i - 1], DNA[i + 3])
            assert current == h.hash_sequence(DNA[i:i + 4])

    def test_binary_matches_string(self):
        h = Hash(5, "ACGT")
        assert h.hash_binary(h.encode_sequence("GATTA")) == h.hash_sequence("GATTA")

    def test_distinct_kmers_distinct_hashes(self):
        h = Hash(3, "AB")
        hashes = {h.hash_sequence(a + b + c) for a in "AB" for b in "AB" for c in "AB"}
        assert len(hashes) == 8


class TestKmerIndex:
    def test_kmer_map(self):
        assert text_to_kmer_map("ABCDEFG", 4) == {"ABCD": [0], "BCDE": [1], "CDEF": [2], "DEFG": [3]}

    def test_lookup(self):
        index = KmerIndex("ABABAB", 2)
        assert index.lookup("AB") == [0, 2, 4]
        assert index.lookup("BA") == [1, 3]
        assert index.lookup("AC") == []
        assert index.lookup("A") == []
        assert "BA" in index
        assert len(index) == 2

    def test_text_shorter_than_k(self):
        assert text_to_kmer_map("AB", 3) == {}

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            KmerIndex("ABC", 0)


class TestPartition:
    @pytest.mark.parametrize(
        "pattern, parts, ans",
        [
            ("ABCD", 3, [("AB", 0), ("C", 2), ("D", 3)]),
            ("ABCDEF", 2, [("ABC", 0), ("DEF", 3)]),
            ("ABCDEFG", 3, [("ABC", 0), ("DE", 3), ("FG", 5)]),
            ("ABC", 1, [("ABC", 0)]),
        ],
    )
    def test_partition(self, pattern, parts, ans):
        assert partition_pattern(pattern, parts) == ans

    def test_partitions_cover_pattern(self):
        pattern = "Its_weird_that_the_animaniacs_are_on_tv_again"
        seeds = partition_pattern(pattern, 6)
        assert "".join(seed for seed, _ in seeds) == pattern
        assert all(pattern[offset:offset + len(seed)] == seed for seed, offset in seeds)

    def test_invalid_parts(self):
        with pytest.raises(ValueError):
            partition_pattern("ABC", 0)


class TestVerifier:
    def test_hamming(self):
        assert hamming_mismatches("ABCDE", "ABXDE", 0) == 1
        assert hamming_mismatches("ABCDE", "CDE", 2) == 0

    def test_out_of_bounds(self):
        assert hamming_mismatches("ABC", "ABCD", 0) is None
        assert hamming_mismatches("ABC", "AB", -1) is None

    def test_verify(self):
        verifier = Verifier(1)
        assert verifier.verify("ABCDE", "ABXDE", 0) == ApproximateMatch(start=0, mismatches=1)
        assert verifier.verify("ABCDE", "XBXDE", 0) is None

    def test_verify_all_sorted_and_unique(self):
        matches = Verifier(0).verify_all("ABAB", "AB", [2, 0, 2, 1])
        assert [m.start for m in matches] == [0, 2]

    def test_negative_budget(self):
        with pytest.raises(ValueError):
            Verifier(-1)


class TestApproximateSearch:
    def test_single_mismatch(self):
        text = "the quick brown fox jumps over the lazy dog"
        assert approximate_search(text, "quack", 1).to_list() == [4]

    def test_too_many_mismatches(self):
        text = "the quick brown fox jumps over the lazy dog"
        assert approximate_search(text, "lazy cat", 1).to_list() == [-1]

    def test_exact_is_zero_mismatches(self):
        assert approximate_search("BANANA", "ANA", 0).to_list() == [1, 3]

    def test_reports_mismatch_counts(self):
        matches = approximate_matches("BANANA", "ANA", 1)
        assert [(m.start, m.mismatches) for m in matches] == [(1, 0), (3, 0)]

    def test_budget_larger_than_pattern(self):
        assert approximate_search("ABCD", "XY", 2).to_list() == [0, 1, 2]

    def test_pattern_longer_than_text(self):
        assert approximate_search("AB", "ABC", 1).to_list() == [-1]

    def test_negative_budget(self):
        with pytest.raises(ValueError):
            approximate_search("ABC", "AB", -1)

    @pytest.mark.parametrize("mismatches", [0, 1, 2, 3])
    def test_matches_brute_force(self, mismatches):
        for pattern in ["GCTAGCTA", "ACGATCGA", "TTTTTTTT", "CATGCATC", "GGCTTAC"]:
            got = approximate_search(DNA, pattern, mismatches).to_list()
            assert got == brute_force_approx(DNA, pattern, mismatches), (pattern, mismatches)

    @pytest.mark.parametrize("mismatches", [0, 1, 2])
    def test_fm_seeds_agree_with_kmer_seeds(self, mismatches):
        index = FMIndex(DNA, "ACGT", sample_rate=3)
        for pattern in ["GCTAGCTA", "ACGATCGA", "TTTTTTTT", "CATGCATC"]:
            assert (
                approximate_search(DNA, pattern, mismatches, fm_index=index)
                == approximate_search(DNA, pattern, mismatches)
            )

    def test_fm_seed_extractor(self):
        extractor = FMSeedExtractor(FMIndex("BANANA", Alphabet("ABN")))
        assert sorted(extractor.seed_pattern("ANA", 1)) == [(1, 0), (3, 0)]
        assert extractor.candidate_starts("NAX", 2) == [2]
