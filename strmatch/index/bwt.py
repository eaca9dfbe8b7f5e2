from typing import List

from strmatch.constants.constants import SENTINEL


def rotate(s: str) -> List[str]:
    """All rotations of s, each one moving the last symbol to the front."""
    out = []
    for _ in range(len(s)):
        out.append(s)
        s = s[-1] + s[:-1]
    return out


def _sorted_rotations(text: str, sentinel: str) -> List[str]:
    return sorted(rotate(text + sentinel))


def encode_bwt(text: str, sentinel: str = SENTINEL) -> str:
    """Last column of the sorted rotation matrix of text + sentinel."""
    return "".join(row[-1] for row in _sorted_rotations(text, sentinel))


def first_column(text: str, sentinel: str = SENTINEL) -> str:
    return "".join(row[0] for row in _sorted_rotations(text, sentinel))


def decode_bwt(bwt: str, sentinel: str = SENTINEL) -> str:
    """
    Invert the BWT by rebuilding the rotation matrix: prepend the BWT as a
    column and re-sort, once per symbol. Quadratic in memory and cubic-ish in
    time, fine for short texts.
    """
    matrix = [""] * len(bwt)
    for _ in range(len(bwt)):
        matrix = sorted(ch + row for ch, row in zip(bwt, matrix))

    # the original text is the row ending in the sentinel
    for row in matrix:
        if row.endswith(sentinel):
            return row[:-1]
    return ""
