from typing import Dict, Iterable

import numpy as np


class Hash:
    """
    Polynomial rolling hash over a fixed symbol set, modulo 2**64.

    Every symbol gets a non-zero code, so k-mers that differ only by leading
    "zero" symbols do not collide. Unknown symbols encode as 0.
    """
    def __init__(self, k: int, symbols: Iterable[str]):
        self.k = k
        self.encode: Dict[str, int] = {s: i + 1 for i, s in enumerate(sorted(set(symbols)))}
        self.base = len(self.encode) + 1
        self.mod = 2**64 - 1
        self.power = self.base**(k-1)

    def encode_sequence(self, s: str) -> np.ndarray:
        return np.fromiter((self.encode.get(c, 0) for c in s), dtype=np.int64, count=len(s))

    def hash_sequence(self, s: str) -> int:
        h = 0
        for c in s:
            h = (h * self.base + self.encode.get(c, 0)) & self.mod
        return h

    def hash_binary(self, binary_s: np.ndarray) -> int:
        h = 0
        for val in binary_s:
            h = (h * self.base + int(val)) & self.mod
        return h

    def update(self, prev_hash: int, out_char: str, in_char: str) -> int:
        """
        Rolling hash update - removes leftmost character and adds rightmost character
        """
        return self.update_binary(prev_hash, self.encode.get(out_char, 0), self.encode.get(in_char, 0))

    def update_binary(self, prev_hash: int, out_val: int, in_val: int) -> int:
        # Remove contribution of outgoing character
        h = (prev_hash - int(out_val) * self.power) & self.mod

        # Shift left and add incoming character
        h = (h * self.base + int(in_val)) & self.mod

        return h
