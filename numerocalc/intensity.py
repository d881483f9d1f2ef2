"""Digit frequency (intensity) table over a single, explicit digit source."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .dates import BirthDate
from .letters import letter_value

DIGITS: tuple[int, ...] = tuple(range(1, 10))
STRONG_THRESHOLD = 3


class IntensitySource(str, Enum):
    BIRTH_DATE = "birth_date"
    NAME = "name"


@dataclass(frozen=True)
class Intensity:
    source: IntensitySource
    digits: str
    # counts[d - 1] is the number of times digit d occurs
    counts: tuple[int, ...]
    strong: tuple[int, ...]
    missing: tuple[int, ...]

    def count(self, digit: int) -> int:
        return self.counts[digit - 1]

    def counts_by_digit(self) -> dict[int, int]:
        return dict(zip(DIGITS, self.counts))

    def to_dict(self) -> dict:
        return {
            "source": self.source.value,
            "digits": self.digits,
            "counts": {str(d): c for d, c in self.counts_by_digit().items()},
            "strong": list(self.strong),
            "missing": list(self.missing),
        }


def count_digits(digits: Iterable[int | str]) -> dict[int, int]:
    """Tally digits 1-9; zeros and anything that is not a digit 1-9 are skipped."""
    tally: Counter[int] = Counter()
    for item in digits:
        if isinstance(item, str):
            if len(item) != 1 or not "1" <= item <= "9":
                continue
            item = int(item)
        if item in DIGITS:
            tally[item] += 1
    return {d: tally[d] for d in DIGITS}


def strong_digits(counts: dict[int, int]) -> tuple[int, ...]:
    return tuple(d for d in DIGITS if counts.get(d, 0) >= STRONG_THRESHOLD)


def missing_digits(counts: dict[int, int]) -> tuple[int, ...]:
    return tuple(d for d in DIGITS if counts.get(d, 0) == 0)


def source_digits(birth: BirthDate, letters: str, source: IntensitySource) -> str:
    """Digit string fed to the counter, zeros removed."""
    if source is IntensitySource.BIRTH_DATE:
        raw = f"{birth.year}{birth.month}{birth.day}"
    elif source is IntensitySource.NAME:
        raw = "".join(str(letter_value(ch)) for ch in letters)
    else:
        raise ValueError(f"unknown intensity source: {source!r}")
    return raw.replace("0", "")


def calculate_intensity(birth: BirthDate, letters: str, source: IntensitySource) -> Intensity:
    digits = source_digits(birth, letters, source)
    counts = count_digits(digits)
    return Intensity(
        source=source,
        digits=digits,
        counts=tuple(counts[d] for d in DIGITS),
        strong=strong_digits(counts),
        missing=missing_digits(counts),
    )
