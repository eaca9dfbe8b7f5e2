from typing import List, Tuple

Seed = Tuple[str, int]  # (partition, offset in pattern)


def partition_pattern(pattern: str, parts: int) -> List[Seed]:
    """
    Split pattern into `parts` non-overlapping seeds. Leftover symbols go
    one each to the leading partitions: "ABCD" in 3 parts is AB, C, D.
    """
    if parts < 1:
        raise ValueError("parts must be at least 1")

    size, extra = divmod(len(pattern), parts)
    seeds: List[Seed] = []
    offset = 0
    for i in range(parts):
        length = size + 1 if i < extra else size
        seeds.append((pattern[offset:offset + length], offset))
        offset += length
    return seeds
