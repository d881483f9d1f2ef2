"""Birth date parsing. Pure calendar arithmetic, no clock or time zone."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date

logger = logging.getLogger("numerocalc.dates")

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True)
class BirthDate:
    year: int
    month: int
    day: int

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def parse_birth_date(value: str) -> BirthDate | None:
    """Parse a strict ``YYYY-MM-DD`` string into a BirthDate.

    Returns None for anything that is not exactly 4-2-2 ASCII digits or does
    not name a real Gregorian date (Feb 30, Apr 31, Feb 29 outside leap
    years, month 13, year 0000).

    Accepted years run 0001-9999, the range of ``datetime.date``.
    """
    if not isinstance(value, str):
        logger.debug("Birth date rejected | reason=not_a_string | type=%s", type(value).__name__)
        return None

    match = _ISO_DATE_RE.fullmatch(value)
    if match is None:
        logger.debug("Birth date rejected | reason=format | value=%r", value)
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        logger.debug("Birth date rejected | reason=calendar | value=%s", value)
        return None
    return BirthDate(year=year, month=month, day=day)
