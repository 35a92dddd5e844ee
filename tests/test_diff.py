"""Tests for calendar-unit differences."""

import math
from datetime import datetime

import pytest

from richdate import TimeUnits, UnsupportedDiffUnit, richdate


def test_diff_years():
    """Test whole-year difference from the year fields."""
    assert richdate("2023-01-01").diff(richdate("2020-06-15"), TimeUnits.YEARS) == 3


def test_diff_defaults_to_years():
    """Test that YEARS is the default unit."""
    assert richdate(datetime(2023, 1, 1)).diff(datetime(2020, 6, 15)) == 3


def test_diff_years_negative_when_earlier():
    """Test that the result is negative when this date is earlier."""
    assert richdate(datetime(2020, 6, 15)).diff(datetime(2023, 1, 1)) == -3


def test_diff_years_decimal():
    """Test fractional years measured from each year's start."""
    later = richdate(datetime(2022, 7, 2))
    earlier = richdate(datetime(2022, 1, 1))

    # Jul 2 is 182 days after Jan 1 in a common year
    assert later.diff(earlier, TimeUnits.YEARS, use_decimal=True) == pytest.approx(
        182 / 365, abs=1e-3
    )
    assert richdate(datetime(2023, 1, 1)).diff(
        datetime(2022, 1, 1), TimeUnits.YEARS, True
    ) == pytest.approx(1.0)


def test_diff_years_decimal_uses_365_day_years():
    """Test that a leap year still counts as 365 days."""
    end = richdate(datetime(2024, 12, 31))
    start = richdate(datetime(2024, 1, 1))

    # 365 elapsed days of a 366-day year read as a full year
    assert end.diff(start, TimeUnits.YEARS, True) == pytest.approx(1.0, abs=1e-3)


def test_diff_months():
    """Test whole-month difference across a year boundary."""
    assert richdate("2023-03-01").diff(richdate("2022-01-01"), TimeUnits.MONTHS) == 14
    assert richdate("2022-01-01").diff(richdate("2023-03-01"), TimeUnits.MONTHS) == -14


def test_diff_months_ignores_day_of_month():
    """Test that non-decimal months only look at year and month fields."""
    end = richdate(datetime(2023, 2, 1))
    start = richdate(datetime(2023, 1, 31))
    assert end.diff(start, TimeUnits.MONTHS) == 1


def test_diff_months_decimal():
    """Test fractional months using 365/12-day months."""
    end = richdate(datetime(2023, 2, 16))
    start = richdate(datetime(2023, 1, 1))
    assert end.diff(start, TimeUnits.MONTHS, True) == pytest.approx(
        1 + 15 * 12 / 365, abs=1e-3
    )


def test_diff_days():
    """Test whole-day difference."""
    assert richdate("2023-01-10").diff(richdate("2023-01-01"), TimeUnits.DAYS) == 9


def test_diff_days_truncates_toward_zero():
    """Test that partial days are truncated, not rounded or floored."""
    later = richdate(datetime(2023, 1, 10, 18))
    earlier = richdate(datetime(2023, 1, 1))

    assert later.diff(earlier, TimeUnits.DAYS) == 9
    assert earlier.diff(later, TimeUnits.DAYS) == -9


def test_diff_days_decimal():
    """Test fractional days."""
    later = richdate(datetime(2023, 1, 10, 12))
    earlier = richdate(datetime(2023, 1, 1))
    assert later.diff(earlier, TimeUnits.DAYS, use_decimal=True) == pytest.approx(9.5)


def test_diff_accepts_string_units():
    """Test that plain unit names work like the enum."""
    assert richdate("2023-01-10").diff("2023-01-01", "DAYS") == 9


def test_diff_unsupported_unit():
    """Test that units other than YEARS, MONTHS and DAYS are rejected."""
    d = richdate(datetime(2023, 1, 1))

    with pytest.raises(UnsupportedDiffUnit, match="WEEKS") as exc_info:
        d.diff(richdate(), "WEEKS")
    assert exc_info.value.allowed == ("YEARS", "MONTHS", "DAYS")
    assert isinstance(exc_info.value, ValueError)

    with pytest.raises(UnsupportedDiffUnit, match="YEARS, MONTHS, DAYS"):
        d.diff(richdate(), TimeUnits.HOURS)


def test_diff_invalid_date_is_nan():
    """Test that an invalid date on either side gives NaN."""
    valid = richdate(datetime(2023, 1, 1))
    invalid = richdate("garbage")

    assert math.isnan(invalid.diff(valid, TimeUnits.DAYS))
    assert math.isnan(valid.diff(invalid, TimeUnits.YEARS))


def test_diff_is_pure():
    """Test that diff leaves both dates untouched."""
    a = richdate(datetime(2023, 1, 10))
    b = richdate(datetime(2023, 1, 1))
    before = (a.timestamp, b.timestamp)

    a.diff(b, TimeUnits.MONTHS, True)

    assert (a.timestamp, b.timestamp) == before


def test_diff_out_of_range_instant_is_nan():
    """Test that an instant beyond the calendar diffs as NaN."""
    assert math.isnan(richdate(1e17).diff(richdate(0)))
    assert math.isnan(richdate(0).diff(1e17, TimeUnits.DAYS))
