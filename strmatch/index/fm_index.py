# index/fm_index.py
import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from strmatch.constants.constants import DEFAULT_SAMPLE_RATE, SENTINEL
from strmatch.index.occurrence import OccurrenceTable
from strmatch.index.suffix_array import build_sarray
from strmatch.models.alphabet import Alphabet
from strmatch.models.config import IndexConfig
from strmatch.models.match import MatchResult

logger = logging.getLogger(__name__)

Range = Tuple[int, int]


class FMIndex:
    """
    FM-index (BWT + F + SA + occurrence table) over text + sentinel.

    sample_rate > 1 keeps only every sample_rate-th occurrence row and only
    the suffix array entries whose offset is a multiple of sample_rate; the
    rest are recovered by scanning the BWT and by LF-mapping walks.

    The sentinel defaults to '$' and must sort before every alphabet symbol.
    """
    def __init__(
            self,
            text: str,
            alphabet: Union[Alphabet, Iterable[str]],
            sample_rate: int = DEFAULT_SAMPLE_RATE,
            sentinel: str = SENTINEL,
            ):
        if sample_rate < 1:
            raise ValueError("sample_rate must be at least 1")
        if isinstance(alphabet, Alphabet):
            self.alphabet = alphabet.with_sentinel(sentinel)
        else:
            self.alphabet = Alphabet(alphabet, sentinel)
        self.alphabet.validate(text)

        self.sentinel = sentinel
        self.s = text + sentinel
        self.n = len(self.s)
        self.sample_rate = sample_rate

        sa = build_sarray(text, sentinel)
        self.bwt = self._bwt_from_sa(self.s, sa)
        self.F = "".join(self.s[p] for p in sa)
        self.C = self._build_C(self.F)
        self.ot = OccurrenceTable(self.bwt, self.alphabet, sample_rate)
        self.sa_samples: Dict[int, int] = {
            rank: p for rank, p in enumerate(sa) if p % sample_rate == 0
        }
        self._sa: Optional[List[int]] = None
        logger.debug(
            "Built FM-index: n=%d alphabet=%s sample_rate=%d sampled_sa=%d",
            self.n, self.alphabet, sample_rate, len(self.sa_samples),
        )

    @classmethod
    def from_config(cls, text: str, config: IndexConfig) -> "FMIndex":
        return cls(text, config.alphabet, sample_rate=config.sample_rate, sentinel=config.sentinel)

    @staticmethod
    def _bwt_from_sa(s: str, sa: List[int]) -> str:
        # s[-1] is the sentinel, which precedes the suffix starting at 0
        return "".join(s[p - 1] if p != 0 else s[-1] for p in sa)

    @staticmethod
    def _build_C(F: str) -> Dict[str, int]:
        # F is sorted, so each symbol's block starts at its first position
        C = {}
        for i, ch in enumerate(F):
            if ch not in C:
                C[ch] = i
        return C

    @property
    def sa(self) -> List[int]:
        """Full suffix array, rebuilt from the samples on first access."""
        if self._sa is None:
            self._sa = self.locate(0, self.n - 1)
        return self._sa

    def get_frange(self, c: str, s_rank: int, e_rank: int) -> Optional[Range]:
        """
        Positions in F of the s_rank-th and e_rank-th occurrence of c
        (0-indexed ranks). None if c has no such occurrences.
        """
        if c not in self.C or s_rank < 0 or s_rank > e_rank:
            return None
        if e_rank >= self.ot.total(c):
            return None
        return self.C[c] + s_rank, self.C[c] + e_rank

    def get_lrange(self, c: str, s_index: int, e_index: int) -> Range:
        """
        (occurrences of c in L strictly before s_index,
         occurrences of c in L up to and including e_index)
        """
        return self.ot.count(c, s_index - 1), self.ot.count(c, e_index)

    def search_range(self, pat: str) -> Optional[Range]:
        """Inclusive range of suffix array ranks whose suffixes start with pat."""
        if not pat:
            return 0, self.n - 1

        c = pat[-1]
        if c not in self.alphabet:
            return None

        # first occurrence of c has rank 0, the last has rank (#occurrences - 1)
        occurrences = self.ot.total(c)
        if occurrences == 0:
            return None
        frange = self.get_frange(c, 0, occurrences - 1)

        for c in reversed(pat[:-1]):
            if c not in self.alphabet:
                return None
            before, last = self.get_lrange(c, *frange)
            if last - before <= 0:
                return None
            # occurrence counts -> ranks -> F positions
            frange = self.get_frange(c, before, last - 1)
            if frange is None:
                return None
        return frange

    def search(self, pat: str) -> MatchResult:
        frange = self.search_range(pat)
        if frange is None:
            logger.debug("No FM-index match for pattern %r", pat)
            return MatchResult.not_found()
        return MatchResult.of(self.locate(*frange))

    def count(self, pat: str) -> int:
        frange = self.search_range(pat)
        if frange is None:
            return 0
        return frange[1] - frange[0] + 1

    def lf(self, rank: int) -> int:
        """Rank of the suffix one position to the left of the suffix at rank."""
        c = self.bwt[rank]
        if c == self.sentinel:
            return 0
        return self.C[c] + self.ot.count(c, rank - 1)

    def locate_rank(self, rank: int) -> int:
        steps = 0
        while rank not in self.sa_samples:
            rank = self.lf(rank)
            steps += 1
        return self.sa_samples[rank] + steps

    def locate(self, l: int, r: int) -> List[int]:
        if l > r:
            return []
        return [self.locate_rank(i) for i in range(l, r + 1)]

    def __len__(self) -> int:
        return self.n
