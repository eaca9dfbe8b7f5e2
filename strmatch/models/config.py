from typing import List, Optional

from pydantic import BaseModel, field_validator, model_validator

from strmatch.constants.constants import DEFAULT_SAMPLE_RATE, SENTINEL


class IndexConfig(BaseModel):
    # required fields
    alphabet: List[str]

    # optional fields
    sample_rate: int = DEFAULT_SAMPLE_RATE
    sentinel: str = SENTINEL
    label: Optional[str] = None

    @field_validator("alphabet", mode="before")
    @classmethod
    def split_alphabet(cls, value):
        # "ACGT" is accepted as shorthand for ["A", "C", "G", "T"]
        if isinstance(value, str):
            return list(value)
        return value

    @field_validator("alphabet")
    @classmethod
    def check_alphabet(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("alphabet must not be empty")
        for symbol in value:
            if len(symbol) != 1:
                raise ValueError(f"alphabet symbols must be single characters, got {symbol!r}")
        return sorted(set(value))

    @field_validator("sample_rate")
    @classmethod
    def check_sample_rate(cls, value: int) -> int:
        if value < 1:
            raise ValueError("sample_rate must be at least 1")
        return value

    @field_validator("sentinel")
    @classmethod
    def check_sentinel(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"sentinel must be a single character, got {value!r}")
        return value

    @model_validator(mode="after")
    def check_alphabet_after_sentinel(self) -> "IndexConfig":
        for symbol in self.alphabet:
            if symbol <= self.sentinel:
                raise ValueError(f"symbol {symbol!r} must sort after the sentinel {self.sentinel!r}")
        return self
