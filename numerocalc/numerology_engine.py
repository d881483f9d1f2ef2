"""Pure Python Pythagorean numerology calculations for Latin names."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import settings
from .cycles import Cycles, calculate_cycles
from .dates import BirthDate, parse_birth_date
from .intensity import Intensity, IntensitySource, calculate_intensity
from .letters import is_vowel, letter_value, normalize_name
from .reduction import reduce_core

logger = logging.getLogger("numerocalc.engine")


# ── Core numbers ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class LifePathSteps:
    year_core: int
    month_core: int
    day_core: int
    life_path: int


@dataclass(frozen=True)
class NameNumbers:
    destiny_sum: int
    soul_sum: int
    personality_sum: int
    destiny: int
    soul: int
    personality: int


def calculate_life_path(birth: BirthDate) -> LifePathSteps:
    """Life Path: reduce year, month, day separately → sum → reduce.

    Components are reduced before summing so that a master number inside a
    component (e.g. year 1993 → 22) survives into the total.
    """
    year_core = reduce_core(birth.year)
    month_core = reduce_core(birth.month)
    day_core = reduce_core(birth.day)
    return LifePathSteps(
        year_core=year_core,
        month_core=month_core,
        day_core=day_core,
        life_path=reduce_core(year_core + month_core + day_core),
    )


def calculate_name_numbers(letters: str) -> NameNumbers:
    """Destiny from all letters, Soul from vowels, Personality from consonants.

    ``letters`` is expected already normalized; anything outside A-Z counts 0.
    An empty name yields zeros everywhere, which is a valid result.
    """
    destiny_sum = 0
    soul_sum = 0
    personality_sum = 0
    for char in letters:
        value = letter_value(char)
        destiny_sum += value
        if is_vowel(char):
            soul_sum += value
        else:
            personality_sum += value
    return NameNumbers(
        destiny_sum=destiny_sum,
        soul_sum=soul_sum,
        personality_sum=personality_sum,
        destiny=reduce_core(destiny_sum),
        soul=reduce_core(soul_sum),
        personality=reduce_core(personality_sum),
    )


def calculate_maturity(life_path: int, destiny: int) -> int:
    return reduce_core(life_path + destiny)


# ── Result dataclass ─────────────────────────────────────────────────

@dataclass(frozen=True)
class NumerologyResult:
    birth_date: BirthDate
    letters: str

    life_path: int
    destiny: int
    soul: int
    personality: int
    maturity: int

    year_core: int
    month_core: int
    day_core: int

    destiny_sum: int
    soul_sum: int
    personality_sum: int

    intensity: Intensity
    cycles: Cycles

    def to_dict(self) -> dict:
        return {
            "birth_date": self.birth_date.isoformat(),
            "letters": self.letters,
            "life_path": self.life_path,
            "destiny": self.destiny,
            "soul": self.soul,
            "personality": self.personality,
            "maturity": self.maturity,
            "year_core": self.year_core,
            "month_core": self.month_core,
            "day_core": self.day_core,
            "destiny_sum": self.destiny_sum,
            "soul_sum": self.soul_sum,
            "personality_sum": self.personality_sum,
            "intensity": self.intensity.to_dict(),
            "cycles": self.cycles.to_dict(),
        }


def calculate(
    name: str,
    birth_date: str,
    *,
    intensity_source: IntensitySource | str | None = None,
) -> NumerologyResult | None:
    """Compute every number for (name, birth_date) at once.

    Returns None when ``birth_date`` is not a valid ``YYYY-MM-DD`` calendar
    date. The name never blocks the calculation.
    """
    birth = parse_birth_date(birth_date)
    if birth is None:
        return None

    if intensity_source is None:
        intensity_source = settings.intensity_source
    source = IntensitySource(intensity_source)
    letters = normalize_name(name or "")

    steps = calculate_life_path(birth)
    name_numbers = calculate_name_numbers(letters)
    result = NumerologyResult(
        birth_date=birth,
        letters=letters,
        life_path=steps.life_path,
        destiny=name_numbers.destiny,
        soul=name_numbers.soul,
        personality=name_numbers.personality,
        maturity=calculate_maturity(steps.life_path, name_numbers.destiny),
        year_core=steps.year_core,
        month_core=steps.month_core,
        day_core=steps.day_core,
        destiny_sum=name_numbers.destiny_sum,
        soul_sum=name_numbers.soul_sum,
        personality_sum=name_numbers.personality_sum,
        intensity=calculate_intensity(birth, letters, source),
        cycles=calculate_cycles(birth, steps.life_path),
    )
    logger.debug(
        "Numerology calculated | birth_date=%s | letters=%d | life_path=%s | intensity_source=%s",
        birth.isoformat(),
        len(letters),
        result.life_path,
        source.value,
    )
    return result
