"""
tests/calendar/test_period.py

Covers:
  - Decoding YYYY / YYYYMM periods and rejecting malformed ones
  - Boolean validation (never raises)
  - Month navigation, including year rollover and clock-resolved defaults
  - Month length and last-day helpers
  - Spanish month/year formatting
  - Month counting and year lists
"""

from datetime import datetime

import numpy as np
import pytest

from supportbox.calendar import CalendarError, FixedClock, InvalidPeriod, Period, PeriodBounds
from supportbox.calendar import period


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def new_year_clock():
    return FixedClock("2024-01-01 00:00:00")


@pytest.fixture
def mid_january_clock():
    return FixedClock("2024-01-15")


# ── Decoding ──────────────────────────────────────────────────────────────────

class TestDecode:

    def test_year_month(self):
        assert period.decode(202401) == Period(2024, 1)

    def test_year_only(self):
        decoded = period.decode(2024)
        assert decoded == Period(2024, None)
        assert decoded.length == 4

    def test_numpy_integer(self):
        assert period.decode(np.int64(202412)) == Period(2024, 12)

    @pytest.mark.parametrize("value", [202413, 202400, 20241, 2024011, 99, -202401])
    def test_malformed_raises(self, value):
        with pytest.raises(InvalidPeriod):
            period.decode(value)

    @pytest.mark.parametrize("value", ["202401", 202401.0, None, True])
    def test_non_integer_raises(self, value):
        with pytest.raises(InvalidPeriod):
            period.decode(value)

    def test_error_is_calendar_error(self):
        with pytest.raises(CalendarError):
            period.decode(202413)
        with pytest.raises(ValueError):
            period.decode(202413)

    def test_bounds(self):
        assert period.decode(205001, PeriodBounds()) == Period(2050, 1)
        with pytest.raises(InvalidPeriod):
            period.decode(199912, PeriodBounds())
        with pytest.raises(InvalidPeriod):
            period.decode(2030, PeriodBounds(2000, 2020))

    def test_invalid_bounds_raise(self):
        with pytest.raises(ValueError):
            PeriodBounds(2100, 2000)

    def test_every_valid_month_decodes(self):
        for year in (2000, 2024, 2100):
            for month in range(1, 13):
                value = year * 100 + month
                assert period.decode(value) == Period(year, month)
                assert period.validate(value, 2000, 2100, 6) is True

    def test_encode(self):
        assert Period(2024, 3).encode() == 202403
        assert Period(2024).encode() == 2024

    def test_to_datetime(self):
        assert period.to_datetime(202402) == datetime(2024, 2, 1)
        assert period.to_datetime(2024) == datetime(2024, 1, 1)


# ── Validation ────────────────────────────────────────────────────────────────

class TestValidate:

    @pytest.mark.parametrize(
        "value, year_from, year_to, length, expected",
        [
            (2024, 2000, 2100, 4, True),
            (202401, 2000, 2100, 6, True),
            (1999, 2000, 2100, 4, False),
            (202413, 2000, 2100, 6, False),
            (2024, 2000, 2100, 6, False),
            (2024, 2000, 2100, None, True),
            (202401, 2000, 2100, None, True),
            (20241, 2000, 2100, None, False),
            ("202401", 2000, 2100, None, False),
        ],
    )
    def test_validate(self, value, year_from, year_to, length, expected):
        assert period.validate(value, year_from, year_to, length) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [(2024, True), (1999, False), (2101, False), (202401, False)],
    )
    def test_valid_period4(self, value, expected):
        assert period.valid_period4(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [(202401, True), (202413, False), (199912, False), (210101, False), (2024, False)],
    )
    def test_valid_period6(self, value, expected):
        assert period.valid_period6(value) is expected

    def test_bounds_validate(self):
        bounds = PeriodBounds(2010, 2020)
        assert bounds.validate(201501) is True
        assert bounds.validate(202101) is False
        assert bounds.validate(2015, length=6) is False


# ── Navigation ────────────────────────────────────────────────────────────────

class TestNavigation:

    @pytest.mark.parametrize(
        "value, steps, expected",
        [
            (202401, 1, 202402),
            (202401, 3, 202404),
            (202412, 1, 202501),
            (202401, 0, 202401),
            (202401, 24, 202601),
            (2024, 1, 202402),
        ],
    )
    def test_add_months(self, value, steps, expected):
        assert period.add_months(value, steps) == expected

    @pytest.mark.parametrize(
        "value, steps, expected",
        [
            (202402, 1, 202401),
            (202404, 3, 202401),
            (202401, 1, 202312),
            (202401, 0, 202401),
        ],
    )
    def test_sub_months(self, value, steps, expected):
        assert period.sub_months(value, steps) == expected

    def test_year_only_zero_steps_is_noop(self):
        assert period.add_months(2024, 0) == 2024

    def test_none_uses_clock(self, new_year_clock):
        assert period.add_months(None, 1, clock=new_year_clock) == 202402
        assert period.sub_months(None, 1, clock=new_year_clock) == 202312
        assert period.add_months(clock=new_year_clock, steps=0) == 202401

    def test_none_at_month_end_does_not_overflow(self):
        clock = FixedClock("2024-01-31 18:00:00")
        assert period.add_months(None, 1, clock=clock) == 202402

    def test_invalid_period_raises(self):
        with pytest.raises(InvalidPeriod):
            period.add_months(202413, 1)
        with pytest.raises(InvalidPeriod):
            period.sub_months(202413, 0)


# ── Month length ──────────────────────────────────────────────────────────────

class TestMonthLength:

    @pytest.mark.parametrize(
        "value, expected",
        [(202401, 31), (202302, 28), (202402, 29), (202404, 30), (202412, 31), (2100_02, 28)],
    )
    def test_days_in_month(self, value, expected):
        assert period.days_in_month(value) == expected

    def test_last_day_of_month(self):
        assert period.last_day_of_month(202401) == "2024-01-31"
        assert period.last_day_of_month(202402) == "2024-02-29"
        assert period.last_day_of_month(202404) == "2024-04-30"

    def test_last_day_of_current_month(self):
        clock = FixedClock("2024-02-10")
        assert period.last_day_of_month(clock=clock) == "2024-02-29"

    def test_invalid_month_raises(self):
        with pytest.raises(InvalidPeriod):
            period.days_in_month(202413)


# ── Spanish formatting ────────────────────────────────────────────────────────

class TestSpanishMonthYear:

    @pytest.mark.parametrize(
        "value, expected",
        [(202401, "Enero de 2024"), (202412, "Diciembre de 2024"), (203009, "Septiembre de 2030")],
    )
    def test_format(self, value, expected):
        assert period.format_spanish_month_year(value) == expected

    @pytest.mark.parametrize("value", [202413, 202400, 2024])
    def test_invalid_raises(self, value):
        with pytest.raises(InvalidPeriod):
            period.format_spanish_month_year(value)


# ── Counting ──────────────────────────────────────────────────────────────────

class TestCounting:

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            ("2023-01-15", "2024-01-15", 12),
            (202301, 202401, 12),
            (202301, "2024-01-15", 12),
            ("2024-01-01", "2024-01-31", 0),
            ("2024-01-15", "2024-02-14", 1),
            (202403, 202401, -2),
        ],
    )
    def test_count_months(self, start, end, expected):
        assert period.count_months(start, end) == expected

    def test_count_months_to_now(self, mid_january_clock):
        assert period.count_months("2023-01-15", clock=mid_january_clock) == 12

    def test_generate_years(self, mid_january_clock):
        assert period.generate_years(3, clock=mid_january_clock) == [2024, 2023, 2022]
        assert period.generate_years(5, 2020) == [2020, 2019, 2018, 2017, 2016]
        assert period.generate_years(1, 2024) == [2024]
        assert period.generate_years(0, 2024) == []
