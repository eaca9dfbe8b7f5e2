from multiprocessing import Pool
from typing import List, Sequence, Tuple

from strmatch.constants.constants import DEFAULT_PROCESSES, DEFAULT_SAMPLE_RATE, SENTINEL
from strmatch.index.fm_index import FMIndex
from strmatch.models.alphabet import Alphabet
from strmatch.models.match import MatchResult

_FM_INDEX : FMIndex


def _init_worker(text: str, alphabet: str, sampleRate: int, sentinel: str = SENTINEL):
    global _FM_INDEX

    # one index per worker process
    _FM_INDEX = FMIndex(text, alphabet, sample_rate=sampleRate, sentinel=sentinel)


def process_pattern_batch(args) -> List[Tuple[int, MatchResult]]:
    """Search one batch of (position, pattern) pairs against the worker's index"""
    global _FM_INDEX
    batch = args

    results = []
    for i, pattern in batch:
        results.append((i, _FM_INDEX.search(pattern)))
    return results


def search_patterns(
        text: str,
        alphabet: str,
        patterns: Sequence[str],
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        num_processes: int = DEFAULT_PROCESSES,
        sentinel: str = SENTINEL,
        ) -> List[MatchResult]:
    """
    FM-index search for many patterns across a process pool.
    Results come back in the same order as patterns.
    """
    if sample_rate < 1:
        raise ValueError("sample_rate must be at least 1")
    # must fail before the pool starts; a raising initializer is respawned forever
    Alphabet(alphabet, sentinel).validate(text)
    if not patterns:
        return []

    indexed_patterns = list(enumerate(patterns))
    batch_size = max(1, len(indexed_patterns) // (num_processes * 3))

    # Split into batches
    batches = []
    for i in range(0, len(indexed_patterns), batch_size):
        batches.append(indexed_patterns[i:i + batch_size])

    results: List[MatchResult] = [MatchResult.not_found()] * len(patterns)
    with Pool(
        processes=num_processes,
        initializer=_init_worker,
        initargs=(text, alphabet, sample_rate, sentinel),
        ) as pool:
        batch_results = pool.map(process_pattern_batch, batches)
        for batch in batch_results:
            for i, result in batch:
                results[i] = result
    return results
