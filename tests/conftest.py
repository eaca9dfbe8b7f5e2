"""
Shared pytest fixtures for strmatch tests.
"""
from typing import List

import pytest

# Test data
SAMPLE_TEXTS = [
    "ABCDEFG",
    "ABRACADABRA",
    "BBBBBBBBBB",
    "BBAABBAABBAAB",
    "MISSISSIPPI",
    "TCGATCGA",
    "ZGTATAGAGTATATGZGATGTAT",
]


def brute_force(pattern: str, text: str) -> List[int]:
    """Legacy list form of every exact occurrence: offsets, or [-1]."""
    m = len(pattern)
    hits = [i for i in range(len(text) - m + 1) if text[i:i + m] == pattern]
    return hits or [-1]


def patterns_for(text: str, max_len: int = 4) -> List[str]:
    """Every distinct substring up to max_len plus a few that never occur."""
    found = {text[i:i + k] for k in range(1, max_len + 1) for i in range(len(text) - k + 1)}
    return sorted(found) + ["", "Q", text + "A", text[::-1][:3] + "Q"]


@pytest.fixture
def sample_texts() -> List[str]:
    return SAMPLE_TEXTS


@pytest.fixture
def banana() -> str:
    return "banana"
