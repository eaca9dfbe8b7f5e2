from typing import List, Tuple

from strmatch.index.fm_index import FMIndex
from strmatch.seed.partition import partition_pattern


class FMSeedExtractor:
    """
    Pigeonhole seeding on top of an FMIndex.
    seed_pattern(pattern, parts) -> List[(text_pos, pattern_offset)]
    """
    def __init__(self, fm_index: FMIndex):
        self.fm = fm_index

    def seed_pattern(self, pattern: str, parts: int) -> List[Tuple[int, int]]:
        hits = []
        for seed, offset in partition_pattern(pattern, parts):
            result = self.fm.search(seed)
            if result.found:
                for pos in result.positions:
                    hits.append((pos, offset))
        return hits

    def candidate_starts(self, pattern: str, parts: int) -> List[int]:
        text_len = self.fm.n - 1
        last_start = text_len - len(pattern)
        starts = {pos - offset for pos, offset in self.seed_pattern(pattern, parts)}
        return sorted(s for s in starts if 0 <= s <= last_start)
