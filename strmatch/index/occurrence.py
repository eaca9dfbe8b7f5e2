from typing import Iterable, Union

import numpy as np

from strmatch.constants.constants import DEFAULT_SAMPLE_RATE, SENTINEL
from strmatch.models.alphabet import Alphabet


def build_occurrence_table(
        bwt: str,
        alphabet: Union[Alphabet, Iterable[str]],
        sentinel: str = SENTINEL,
        ) -> np.ndarray:
    """
    |bwt| x |alphabet| matrix; row i holds the count of each symbol in
    bwt[0..i] inclusive. Symbols outside the alphabet (the sentinel) are not
    counted.
    """
    if not isinstance(alphabet, Alphabet):
        alphabet = Alphabet(alphabet, sentinel)
    hits = np.zeros((len(bwt), len(alphabet)), dtype=np.int64)
    for i, ch in enumerate(bwt):
        col = alphabet.column(ch)
        if col is not None:
            hits[i, col] = 1
    return np.cumsum(hits, axis=0)


class OccurrenceTable:
    """
    Occurrence counts over the BWT, checkpointed every `sample_rate` rows.
    With sample_rate=1 every row is stored and lookups never scan.
    """
    def __init__(self, bwt: str, alphabet: Alphabet, sample_rate: int = DEFAULT_SAMPLE_RATE):
        if sample_rate < 1:
            raise ValueError("sample_rate must be at least 1")
        self.bwt = bwt
        self.alphabet = alphabet
        self.sample_rate = sample_rate
        self.checkpoints = self._build_checkpoints(bwt, alphabet, sample_rate)

    @staticmethod
    def _build_checkpoints(bwt: str, alphabet: Alphabet, step: int) -> np.ndarray:
        n = len(bwt)
        chk = np.zeros(((n + step - 1) // step, len(alphabet)), dtype=np.int64)
        run = np.zeros(len(alphabet), dtype=np.int64)
        for i, ch in enumerate(bwt):
            col = alphabet.column(ch)
            if col is not None:
                run[col] += 1
            if i % step == 0:
                chk[i // step] = run
        return chk

    def count(self, symbol: str, i: int) -> int:
        """Occurrences of symbol in bwt[0..i] inclusive; 0 for i < 0."""
        i = min(i, len(self.bwt) - 1)
        if i < 0:
            return 0
        col = self.alphabet.column(symbol)
        if col is None:
            return 0
        block = i // self.sample_rate
        base = int(self.checkpoints[block, col])
        start = block * self.sample_rate + 1
        return base + self.bwt.count(symbol, start, i + 1)

    def total(self, symbol: str) -> int:
        return self.count(symbol, len(self.bwt) - 1)

    def rows(self) -> np.ndarray:
        if self.sample_rate == 1:
            return self.checkpoints.copy()
        return build_occurrence_table(self.bwt, self.alphabet)

    def __len__(self) -> int:
        return len(self.bwt)
