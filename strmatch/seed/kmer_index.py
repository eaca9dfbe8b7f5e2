from typing import Dict, List

from strmatch.hashing.hash import Hash


class KmerIndex:
    """
    Every k-mer of a text mapped to its ascending start offsets.

    K-mers are bucketed by rolling hash; within a bucket they are keyed by
    the k-mer itself, so hash collisions never produce false hits.
    """
    def __init__(self, text: str, k: int):
        if k < 1:
            raise ValueError("k must be at least 1")
        self.k = k
        self.text = text
        self.hash = Hash(k, set(text))
        self.buckets: Dict[int, Dict[str, List[int]]] = {}
        self._build()

    def _build(self):
        k = self.k
        if len(self.text) < k:
            return

        codes = self.hash.encode_sequence(self.text)
        current_hash = self.hash.hash_binary(codes[:k])
        for i in range(len(self.text) - k + 1):
            if i > 0:
                current_hash = self.hash.update_binary(current_hash, codes[i-1], codes[i+k-1])
            kmer = self.text[i:i+k]
            self.buckets.setdefault(current_hash, {}).setdefault(kmer, []).append(i)

    def lookup(self, kmer: str) -> List[int]:
        if len(kmer) != self.k:
            return []
        bucket = self.buckets.get(self.hash.hash_sequence(kmer), {})
        return list(bucket.get(kmer, []))

    def kmers(self) -> Dict[str, List[int]]:
        out = {}
        for bucket in self.buckets.values():
            for kmer, positions in bucket.items():
                out[kmer] = list(positions)
        return out

    def __contains__(self, kmer: str) -> bool:
        return bool(self.lookup(kmer))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets.values())


def text_to_kmer_map(text: str, k: int) -> Dict[str, List[int]]:
    return KmerIndex(text, k).kmers()
