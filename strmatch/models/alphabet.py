from typing import Dict, Iterable, Iterator, List, Optional

from strmatch.constants.constants import SENTINEL


class Alphabet:
    """
    Sorted set of distinct single-character symbols.

    Range search in the FM-index relies on the symbols being sorted, so the
    order is fixed here once instead of at every lookup. Every symbol must
    sort after the end-of-text sentinel; pass a lower sentinel such as "\\0"
    for texts with spaces or punctuation.
    """
    def __init__(self, symbols: Iterable[str], sentinel: str = SENTINEL):
        if len(sentinel) != 1:
            raise ValueError(f"Sentinel must be a single character, got {sentinel!r}")
        symbols = list(symbols)
        for s in symbols:
            if len(s) != 1:
                raise ValueError(f"Alphabet symbols must be single characters, got {s!r}")
            if s <= sentinel:
                raise ValueError(f"Alphabet symbol {s!r} must sort after the sentinel {sentinel!r}")
        self.sentinel = sentinel
        self.symbols: List[str] = sorted(set(symbols))
        self._column: Dict[str, int] = {s: i for i, s in enumerate(self.symbols)}

    @classmethod
    def from_text(cls, text: str, sentinel: str = SENTINEL) -> "Alphabet":
        return cls(set(text), sentinel)

    def with_sentinel(self, sentinel: str) -> "Alphabet":
        if sentinel == self.sentinel:
            return self
        return Alphabet(self.symbols, sentinel)

    def column(self, symbol: str) -> Optional[int]:
        """Position of symbol in the sorted alphabet, None if absent."""
        return self._column.get(symbol)

    def validate(self, text: str) -> None:
        for i, ch in enumerate(text):
            if ch == self.sentinel:
                raise ValueError(f"Text contains the sentinel {self.sentinel!r} at offset {i}")
            if ch not in self._column:
                raise ValueError(f"Symbol {ch!r} at offset {i} is not in the alphabet {self}")

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._column

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return "".join(self.symbols)

    def __repr__(self) -> str:
        return f"Alphabet({str(self)!r})"
