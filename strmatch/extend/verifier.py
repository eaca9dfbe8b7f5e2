from dataclasses import dataclass
from typing import List, Optional

from strmatch.constants.constants import DEFAULT_MISMATCHES


@dataclass
class ApproximateMatch:
    start:      int         # offset of the alignment in the text
    mismatches: int         # Hamming distance between pattern and text there


def hamming_mismatches(text: str, pattern: str, start: int) -> Optional[int]:
    """Mismatches with pattern aligned at text[start]; None if it runs off the text."""
    if start < 0 or start + len(pattern) > len(text):
        return None
    return sum(1 for a, b in zip(text[start:start + len(pattern)], pattern) if a != b)


class Verifier:
    """
    Checks candidate alignments produced by seeding and keeps those within
    max_mismatches substitutions (no gaps).
    """
    def __init__(self, max_mismatches: int = DEFAULT_MISMATCHES):
        if max_mismatches < 0:
            raise ValueError("max_mismatches must not be negative")
        self.max_mismatches = max_mismatches

    def verify(self, text: str, pattern: str, start: int) -> Optional[ApproximateMatch]:
        mismatches = hamming_mismatches(text, pattern, start)
        if mismatches is None or mismatches > self.max_mismatches:
            return None
        return ApproximateMatch(start=start, mismatches=mismatches)

    def verify_all(self, text: str, pattern: str, candidates) -> List[ApproximateMatch]:
        out = []
        for start in sorted(set(candidates)):
            match = self.verify(text, pattern, start)
            if match is not None:
                out.append(match)
        return out
