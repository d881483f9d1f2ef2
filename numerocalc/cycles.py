"""Pinnacles, challenges and the four age bands they cover.

Pinnacles reduce the raw month/day/year sums and keep master numbers.
Challenges take differences of the single-digit components.
"""
from __future__ import annotations

from dataclasses import dataclass

from .config import settings
from .dates import BirthDate
from .reduction import reduce_core, reduce_single

FIRST_CYCLE_BASE = 36
CYCLE_LENGTH = 9


@dataclass(frozen=True)
class Cycles:
    month_single: int
    day_single: int
    year_single: int
    pinnacles: tuple[int, int, int, int]
    challenges: tuple[int, int, int, int]
    end1: int
    ages: tuple[str, str, str, str]

    def to_dict(self) -> dict:
        return {
            "month_single": self.month_single,
            "day_single": self.day_single,
            "year_single": self.year_single,
            "pinnacles": list(self.pinnacles),
            "challenges": list(self.challenges),
            "end1": self.end1,
            "ages": list(self.ages),
        }


def calculate_pinnacles(birth: BirthDate) -> tuple[int, int, int, int]:
    p1 = reduce_core(birth.month + birth.day)
    p2 = reduce_core(birth.day + birth.year)
    p3 = reduce_core(p1 + p2)
    p4 = reduce_core(birth.month + birth.year)
    return p1, p2, p3, p4


def calculate_challenges(month_single: int, day_single: int, year_single: int) -> tuple[int, int, int, int]:
    c1 = reduce_core(abs(month_single - day_single))
    c2 = reduce_core(abs(day_single - year_single))
    c3 = reduce_core(abs(c1 - c2))
    c4 = reduce_core(abs(month_single - year_single))
    return c1, c2, c3, c4


def first_cycle_end(life_path: int) -> int:
    return FIRST_CYCLE_BASE - reduce_single(life_path)


def age_bands(end1: int, separator: str | None = None) -> tuple[str, str, str, str]:
    """Inclusive age ranges of the four periods; the last one is open-ended."""
    sep = settings.age_band_separator if separator is None else separator
    second_end = end1 + CYCLE_LENGTH
    third_end = second_end + CYCLE_LENGTH
    return (
        f"0{sep}{end1}",
        f"{end1 + 1}{sep}{second_end}",
        f"{second_end + 1}{sep}{third_end}",
        f"{third_end + 1}{sep}",
    )


def calculate_cycles(birth: BirthDate, life_path: int, separator: str | None = None) -> Cycles:
    month_single = reduce_single(birth.month)
    day_single = reduce_single(birth.day)
    year_single = reduce_single(birth.year)
    end1 = first_cycle_end(life_path)
    return Cycles(
        month_single=month_single,
        day_single=day_single,
        year_single=year_single,
        pinnacles=calculate_pinnacles(birth),
        challenges=calculate_challenges(month_single, day_single, year_single),
        end1=end1,
        ages=age_bands(end1, separator),
    )
