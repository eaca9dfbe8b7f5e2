from typing import List

from strmatch.constants.constants import SENTINEL


def build_sarray(text: str, sentinel: str = SENTINEL) -> List[int]:
    """
    Suffix array of text + sentinel: start offsets of its suffixes in
    lexicographic order. The sentinel is unique, so no two suffixes tie.
    """
    s = text + sentinel
    suffixes = sorted((s[i:], i) for i in range(len(s)))
    return [i for _, i in suffixes]
