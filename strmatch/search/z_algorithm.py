"""
Z-values and Z-based exact matching.

create_zarray() is the linear-time Z-algorithm that reuses the rightmost
Z-box [l, r); create_zarray_naive() rescans from the start of the string at
every position. Both report the number of character comparisons they made.
Z[0] is left at 0.
"""
from typing import List, Tuple

from strmatch.constants.constants import SENTINEL
from strmatch.models.match import MatchResult


def lr_scan(x: str, y: str) -> Tuple[int, int]:
    """(character comparisons, longest common prefix length) of x and y."""
    comparisons = 0
    length = 0
    for a, b in zip(x, y):
        comparisons += 1
        if a != b:
            break
        length += 1
    return comparisons, length


def _extend(s: str, a: int, b: int) -> Tuple[int, int]:
    # compare s[a:] against s[b:] until the first mismatch
    comparisons = 0
    length = 0
    while b < len(s):
        comparisons += 1
        if s[a] != s[b]:
            break
        a += 1
        b += 1
        length += 1
    return comparisons, length


def create_zarray(s: str) -> Tuple[List[int], int]:
    z = [0] * len(s)
    comparisons = 0
    l = r = 0
    for i in range(1, len(s)):
        start = 0
        if i < r:
            k = i - l
            box = r - i
            if z[k] < box:
                z[i] = z[k]
                continue
            if z[k] > box:
                z[i] = box
                continue
            # z[k] == box: known to match up to r, keep comparing from there
            start = box

        c, length = _extend(s, start, i + start)
        comparisons += c
        z[i] = start + length
        if i + z[i] > r:
            l, r = i, i + z[i]
    return z, comparisons


def create_zarray_naive(s: str) -> Tuple[List[int], int]:
    z = [0] * len(s)
    comparisons = 0
    for i in range(1, len(s)):
        c, z[i] = lr_scan(s, s[i:])
        comparisons += c
    return z, comparisons


def _z_matches(pattern: str, text: str, z: List[int]) -> MatchResult:
    m = len(pattern)
    return MatchResult.of(i - m - 1 for i in range(m + 1, len(z)) if z[i] >= m)


def zalg_search(pattern: str, text: str) -> MatchResult:
    if not pattern:
        return MatchResult.of(range(len(text) + 1))
    z, _ = create_zarray(pattern + SENTINEL + text)
    return _z_matches(pattern, text, z)


def zval_search(pattern: str, text: str) -> MatchResult:
    if not pattern:
        return MatchResult.of(range(len(text) + 1))
    z, _ = create_zarray_naive(pattern + SENTINEL + text)
    return _z_matches(pattern, text, z)
