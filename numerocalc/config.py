from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NUMEROCALC_",
        extra="ignore",
    )

    # Digit source for the intensity table:
    # - "birth_date": digits of year, month and day (zeros dropped)
    # - "name": Pythagorean value of each name letter
    intensity_source: Literal["birth_date", "name"] = "birth_date"

    # Joins the bounds of an age band, e.g. "0–31"
    age_band_separator: str = "–"

    # Column width of the plain-text calculation report
    report_width: int = 95


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
