from __future__ import annotations

import logging
from textwrap import wrap
from typing import Any

from .config import settings
from .intensity import IntensitySource
from .numerology_engine import NumerologyResult
from .reduction import reduce_single

logger = logging.getLogger("numerocalc.reporting")

BLANK = "—"
NO_VALUE = "-"
NONE_LABEL = "none"

REDUCTION_RULES = (
    "Every sum is reduced by adding its digits until one digit remains (e.g. 29 → 2+9 = 11).",
    "Core numbers (LP, DP, SP, PN, MP) keep 11, 22 and 33 as master numbers.",
    "Pinnacles keep master numbers; challenges use the single-digit month, day and year.",
    "Letters use the Pythagorean table (A=1 … I=9, J=1 … R=9, S=1 … Z=8); vowels are A, E, I, O, U.",
)

STEP_LABELS = (
    "LP (Life Path)",
    "DP (Destiny)",
    "SP (Soul)",
    "PN (Personality)",
    "MP (Maturity)",
    "Intensity digits",
    "Strong / missing",
    "Age bands",
    "Pinnacles",
    "Challenges",
)


def _safe_text(value: Any) -> str:
    if value is None:
        return ""
    return " ".join(str(value).split())


def _number(value: int) -> str:
    return str(value) if value else NO_VALUE


def _digits(values: tuple[int, ...]) -> str:
    return ", ".join(str(v) for v in values) if values else NONE_LABEL


def build_calculation_steps(result: NumerologyResult) -> list[tuple[str, str]]:
    """Explain each figure of ``result`` with the values actually used."""
    birth = result.birth_date
    cycles = result.cycles
    intensity = result.intensity
    lp_sum = result.year_core + result.month_core + result.day_core
    lp_single = reduce_single(result.life_path)
    p1, p2, p3, p4 = cycles.pinnacles
    c1, c2, c3, c4 = cycles.challenges

    if intensity.source is IntensitySource.BIRTH_DATE:
        digits_origin = "Birth date digits with zeros removed"
    else:
        digits_origin = "Name letter values with zeros removed"

    texts = (
        f"Year {birth.year} → {result.year_core}, month {birth.month} → {result.month_core}, "
        f"day {birth.day} → {result.day_core}. Sum: {result.year_core} + {result.month_core} + "
        f"{result.day_core} = {lp_sum}. Core reduction gives LP = {result.life_path}.",
        f"Name letters: {result.letters or BLANK}. Total {result.destiny_sum}, "
        f"core reduction gives DP = {_number(result.destiny)}.",
        f"Vowels only (A, E, I, O, U): total {result.soul_sum}, "
        f"core reduction gives SP = {_number(result.soul)}.",
        f"Consonants only: total {result.personality_sum}, "
        f"core reduction gives PN = {_number(result.personality)}.",
        f"MP = LP + DP: {result.life_path} + {result.destiny} = {result.life_path + result.destiny}. "
        f"Core reduction gives MP = {_number(result.maturity)}.",
        f"{digits_origin}: {intensity.digits or BLANK}.",
        f"Strong (3 or more): {_digits(intensity.strong)}. Missing (0): {_digits(intensity.missing)}.",
        f"End of the first period = 36 − LP (single digit). LP {result.life_path} → {lp_single}. "
        f"36 − {lp_single} = {cycles.end1}. Bands: {' / '.join(cycles.ages)}.",
        f"Month {birth.month} + day {birth.day} → P1 = {p1}; day {birth.day} + year {birth.year} → "
        f"P2 = {p2}; P1 + P2 = {p1 + p2} → P3 = {p3}; month {birth.month} + year {birth.year} → "
        f"P4 = {p4}. Result: {p1}, {p2}, {p3}, {p4}.",
        f"Month {birth.month} → {cycles.month_single}, day {birth.day} → {cycles.day_single}, "
        f"year {birth.year} → {cycles.year_single}. C1 = |month − day| = {c1}, "
        f"C2 = |day − year| = {c2}, C3 = |C1 − C2| = {c3}, C4 = |month − year| = {c4}. "
        f"Result: {c1}, {c2}, {c3}, {c4}.",
    )
    return list(zip(STEP_LABELS, texts))


def _prompt_steps() -> list[tuple[str, str]]:
    return [(label, "Enter a birth date (YYYY-MM-DD).") for label in STEP_LABELS]


def render_text_report(name: str, birth_date: str, result: NumerologyResult | None) -> str:
    """Plain-text report of the inputs, the reduction rules and every step."""
    width = settings.report_width
    name_label = _safe_text(name) or BLANK
    birth_label = _safe_text(birth_date) or BLANK

    lines = [
        "Numerology calculation",
        f"Name: {name_label}",
        f"Birth date: {birth_label}",
        "",
        "Reduction rules",
    ]
    for rule in REDUCTION_RULES:
        lines.extend(wrap(f"- {rule}", width=width, subsequent_indent="  ", break_on_hyphens=False))

    lines.extend(["", "Calculation steps"])
    steps = _prompt_steps() if result is None else build_calculation_steps(result)
    for label, text in steps:
        lines.extend(wrap(f"{label}: {text}", width=width, subsequent_indent="    ", break_on_hyphens=False) or [label])

    if result is None:
        logger.debug("Report rendered without result | birth_date=%r", birth_date)
    return "\n".join(lines) + "\n"
