"""Unit tests for birth date parsing."""
import pytest

from numerocalc.dates import BirthDate, parse_birth_date


def test_parse_valid_date():
    assert parse_birth_date("1990-07-15") == BirthDate(year=1990, month=7, day=15)


def test_leap_day_in_leap_year():
    assert parse_birth_date("2024-02-29") == BirthDate(2024, 2, 29)


def test_leap_day_century_rules():
    assert parse_birth_date("2000-02-29") is not None   # divisible by 400
    assert parse_birth_date("1900-02-29") is None       # divisible by 100 only


@pytest.mark.parametrize(
    "value",
    [
        "2023-02-29",   # not a leap year
        "2023-04-31",   # April has 30 days
        "2023-02-30",
        "2023-13-01",
        "2023-00-10",
        "2023-01-00",
        "0000-01-01",
    ],
)
def test_impossible_calendar_dates_rejected(value):
    assert parse_birth_date(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "",
        "1990-7-15",
        "90-07-15",
        "1990/07/15",
        "19900715",
        " 1990-07-15",
        "1990-07-15 ",
        "1990-07-15\n",
        "１９９０-07-15",  # full-width digits
        "1990-07-15T00:00",
        "abcd-ef-gh",
    ],
)
def test_malformed_strings_rejected(value):
    assert parse_birth_date(value) is None


def test_non_string_rejected_without_raising():
    assert parse_birth_date(None) is None
    assert parse_birth_date(19900715) is None


def test_birth_date_is_immutable():
    birth = parse_birth_date("1990-07-15")
    with pytest.raises(AttributeError):
        birth.year = 1991


def test_year_range_matches_datetime_date():
    assert parse_birth_date("0001-01-01") == BirthDate(1, 1, 1)
    assert parse_birth_date("9999-12-31") == BirthDate(9999, 12, 31)
    assert parse_birth_date("0000-12-31") is None


def test_birth_date_helpers():
    birth = parse_birth_date("0005-01-02")
    assert birth == BirthDate(5, 1, 2)
    assert birth.isoformat() == "0005-01-02"
    assert birth.as_date().year == 5
