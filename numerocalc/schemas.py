from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .dates import parse_birth_date
from .numerology_engine import NumerologyResult


class NumerologyCalculateRequest(BaseModel):
    full_name: str = Field(default="", max_length=200)
    birth_date: str

    @field_validator("birth_date")
    @classmethod
    def birth_date_is_calendar_date(cls, v: str) -> str:
        if parse_birth_date(v) is None:
            raise ValueError("birth_date must be a real calendar date in YYYY-MM-DD form")
        return v

    @field_validator("full_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class NumerologyNumbers(BaseModel):
    life_path: int
    destiny: int
    soul: int
    personality: int
    maturity: int


class NumerologySteps(BaseModel):
    letters: str
    year_core: int
    month_core: int
    day_core: int
    destiny_sum: int
    soul_sum: int
    personality_sum: int


class NumerologyIntensity(BaseModel):
    source: Literal["birth_date", "name"]
    digits: str
    counts: dict[int, int]
    strong: list[int]
    missing: list[int]


class NumerologyCycles(BaseModel):
    month_single: int
    day_single: int
    year_single: int
    pinnacles: list[int] = Field(min_length=4, max_length=4)
    challenges: list[int] = Field(min_length=4, max_length=4)
    end1: int
    ages: list[str] = Field(min_length=4, max_length=4)


class NumerologyCalculateResponse(BaseModel):
    status: Literal["done", "invalid_date"]
    birth_date: str | None = None
    numbers: NumerologyNumbers | None = None
    steps: NumerologySteps | None = None
    intensity: NumerologyIntensity | None = None
    cycles: NumerologyCycles | None = None

    @classmethod
    def from_result(cls, result: NumerologyResult | None) -> "NumerologyCalculateResponse":
        if result is None:
            return cls(status="invalid_date")
        return cls(
            status="done",
            birth_date=result.birth_date.isoformat(),
            numbers=NumerologyNumbers(
                life_path=result.life_path,
                destiny=result.destiny,
                soul=result.soul,
                personality=result.personality,
                maturity=result.maturity,
            ),
            steps=NumerologySteps(
                letters=result.letters,
                year_core=result.year_core,
                month_core=result.month_core,
                day_core=result.day_core,
                destiny_sum=result.destiny_sum,
                soul_sum=result.soul_sum,
                personality_sum=result.personality_sum,
            ),
            intensity=NumerologyIntensity(
                source=result.intensity.source.value,
                digits=result.intensity.digits,
                counts=result.intensity.counts_by_digit(),
                strong=list(result.intensity.strong),
                missing=list(result.intensity.missing),
            ),
            cycles=NumerologyCycles(**result.cycles.to_dict()),
        )
