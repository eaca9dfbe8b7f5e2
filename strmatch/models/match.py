from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from strmatch.constants.constants import NO_MATCH


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of an exact or approximate search.

    A search either finds at least one offset (found=True) or finds nothing
    (found=False). An empty positions tuple never means "found".
    """
    positions:  Tuple[int, ...] = field(default_factory=tuple)   # match start offsets, in search order
    found:      bool = False                                    # if the pattern occurs at all

    @classmethod
    def of(cls, positions: Iterable[int]) -> "MatchResult":
        positions = tuple(positions)
        if not positions:
            return cls.not_found()
        return cls(positions=positions, found=True)

    @classmethod
    def not_found(cls) -> "MatchResult":
        return cls(positions=(), found=False)

    def sorted(self) -> List[int]:
        return sorted(self.positions)

    def to_list(self) -> List[int]:
        """Sorted offsets, or [-1] when nothing matched."""
        if not self.found:
            return [NO_MATCH]
        return self.sorted()

    def __len__(self) -> int:
        return len(self.positions)

    def __bool__(self) -> bool:
        return self.found
