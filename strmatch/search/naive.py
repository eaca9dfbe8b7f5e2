from strmatch.constants.constants import NO_MATCH
from strmatch.models.match import MatchResult


def naive_search(pattern: str, text: str) -> int:
    """Offset of the first exact match of pattern in text, or -1."""
    for i in range(len(text) - len(pattern) + 1):
        if text[i:i + len(pattern)] == pattern:
            return i
    return NO_MATCH


def naive_search_all(pattern: str, text: str) -> MatchResult:
    """Every i with text[i:i+len(pattern)] == pattern, checked one alignment at a time."""
    m = len(pattern)
    return MatchResult.of(i for i in range(len(text) - m + 1) if text[i:i + m] == pattern)


def longest_common_prefix(p: str, t: str) -> str:
    n = min(len(p), len(t))
    i = 0
    while i < n and p[i] == t[i]:
        i += 1
    return p[:i]


def longest_common_suffix(p: str, t: str) -> str:
    n = min(len(p), len(t))
    i = 0
    while i < n and p[len(p) - 1 - i] == t[len(t) - 1 - i]:
        i += 1
    return p[len(p) - i:]
