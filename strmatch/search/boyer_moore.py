"""
Boyer-Moore exact matching with right-to-left scanning and the strong bad
character rule only (no good suffix rule).
"""
from typing import Dict, Iterable, List, Tuple

from strmatch.models.match import MatchResult


def prep_bc_array(pattern: str, alphabet: Iterable[str]) -> List[List[int]]:
    """
    Bad character table. Row = alphabet symbol (in the order given),
    column = pattern position j, value = alignments that can be skipped when
    the text symbol facing pattern[j] mismatches.
    """
    bc_array = []
    for a in alphabet:
        row = []
        for j in range(len(pattern)):
            skips = 0
            while j - 1 - skips >= 0 and pattern[j - 1 - skips] != a:
                skips += 1
            row.append(skips)
        bc_array.append(row)
    return bc_array


def bmoore_search(pattern: str, text: str, alphabet: Iterable[str]) -> Tuple[int, MatchResult]:
    """
    Returns (number of alignments skipped by the bad character rule, matches).
    Text symbols missing from the alphabet skip the pattern past them.
    """
    alphabet = list(alphabet)
    m, n = len(pattern), len(text)
    if m == 0:
        return 0, MatchResult.of(range(n + 1))

    bc_array = prep_bc_array(pattern, alphabet)
    row_of: Dict[str, int] = {a: i for i, a in enumerate(alphabet)}

    matches = []
    skipped = 0
    index = 0
    while index <= n - m:
        num_skips = 0
        for j in range(m - 1, -1, -1):
            if pattern[j] != text[index + j]:
                row = row_of.get(text[index + j])
                num_skips = j if row is None else bc_array[row][j]
                # never shift the pattern past the end of the text
                num_skips = min(num_skips, max(0, n - m - index))
                break
        else:
            matches.append(index)

        skipped += num_skips
        index += num_skips + 1

    return skipped, MatchResult.of(matches)
