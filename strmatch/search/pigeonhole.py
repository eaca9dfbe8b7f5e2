"""
Approximate (k-mismatch) matching by the pigeonhole principle.

Split the pattern into mismatches + 1 seeds. Any occurrence with at most
`mismatches` substitutions matches at least one seed exactly, so exact seed
hits from a k-mer index give every candidate alignment, which is then
verified by Hamming distance.
"""
import logging
from typing import Dict, List, Optional, Set

from strmatch.constants.constants import DEFAULT_MISMATCHES
from strmatch.extend.verifier import ApproximateMatch, Verifier
from strmatch.index.fm_index import FMIndex
from strmatch.models.match import MatchResult
from strmatch.seed.fm_seed import FMSeedExtractor
from strmatch.seed.kmer_index import KmerIndex
from strmatch.seed.partition import partition_pattern

logger = logging.getLogger(__name__)


def _candidates(text: str, pattern: str, mismatches: int) -> Set[int]:
    m = len(pattern)
    last_start = len(text) - m

    # fewer symbols than seeds: some seed is empty and matches everywhere
    if m < mismatches + 1:
        return set(range(last_start + 1))

    indexes: Dict[int, KmerIndex] = {}
    candidates: Set[int] = set()
    for seed, offset in partition_pattern(pattern, mismatches + 1):
        if len(seed) not in indexes:
            indexes[len(seed)] = KmerIndex(text, len(seed))
        for location in indexes[len(seed)].lookup(seed):
            start = location - offset
            if 0 <= start <= last_start:
                candidates.add(start)
    return candidates


def approximate_matches(
        text: str,
        pattern: str,
        mismatches: int = DEFAULT_MISMATCHES,
        fm_index: Optional[FMIndex] = None,
        ) -> List[ApproximateMatch]:
    """
    Every alignment of pattern in text with at most `mismatches`
    substitutions, ascending by start. Seeds are looked up in fm_index when
    one is given (it must be built over text), otherwise in k-mer indexes.
    """
    verifier = Verifier(mismatches)
    if not pattern:
        return [ApproximateMatch(start=i, mismatches=0) for i in range(len(text) + 1)]
    if len(pattern) > len(text):
        return []

    if fm_index is not None and len(pattern) >= mismatches + 1:
        candidates = set(FMSeedExtractor(fm_index).candidate_starts(pattern, mismatches + 1))
    else:
        candidates = _candidates(text, pattern, mismatches)
    matches = verifier.verify_all(text, pattern, candidates)
    logger.debug(
        "Pigeonhole search: %d candidates, %d within %d mismatches",
        len(candidates), len(matches), mismatches,
    )
    return matches


def approximate_search(
        text: str,
        pattern: str,
        mismatches: int = DEFAULT_MISMATCHES,
        fm_index: Optional[FMIndex] = None,
        ) -> MatchResult:
    return MatchResult.of(a.start for a in approximate_matches(text, pattern, mismatches, fm_index))
