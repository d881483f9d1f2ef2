from .dates import BirthDate, parse_birth_date
from .intensity import IntensitySource
from .numerology_engine import NumerologyResult, calculate

__all__ = ["BirthDate", "IntensitySource", "NumerologyResult", "calculate", "parse_birth_date"]
