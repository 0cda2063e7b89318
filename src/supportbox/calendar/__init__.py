# src/supportbox/calendar/__init__.py
"""
supportbox.calendar
~~~~~~~~~~~~~~~~~~~

Business-calendar date arithmetic.  Working days are weekdays that are not
holidays; periods are integers in YYYY or YYYYMM form; "now" always comes
from an injectable Clock so every time-dependent call is reproducible.

Basic usage::

    from supportbox.calendar import WorkingCalendar, add_working_days

    add_working_days("2024-01-19", 1)                 # → Mon 2024-01-22
    cal = WorkingCalendar(["2024-01-16"])
    cal.add("2024-01-15", 1)                          # → 2024-01-17
    cal.working_day(2024, 1, 2)                       # → 2024-01-02

Periods::

    from supportbox.calendar import period

    period.add_months(202412)                         # → 202501
    period.format_spanish_month_year(202401)          # → "Enero de 2024"

NumPy arrays of datetime64[D] are accepted by the shift operations::

    import numpy as np
    days = np.array(["2024-01-19", "2024-01-20"], dtype="datetime64[D]")
    cal.add(days, 1)

Public API
----------
WorkingCalendar   Compiled weekmask + holiday calendar.
Clock             Protocol for "now"; SystemClock and FixedClock implement it.
CalendarError     Base exception for all calendar-related errors.
"""

from __future__ import annotations

from supportbox.calendar import dates, period
from supportbox.calendar._exceptions import (
    CalendarError,
    InvalidDate,
    InvalidPeriod,
    InvalidUnit,
)
from supportbox.calendar.clock import (
    Clock,
    FixedClock,
    SystemClock,
    create,
    to_date,
    to_datetime,
)
from supportbox.calendar.humanize import ago_spanish, format_relative
from supportbox.calendar.period import Period, PeriodBounds
from supportbox.calendar.spanish import format_spanish
from supportbox.calendar.workdays import (
    WorkingCalendar,
    add_working_days,
    count_days_matching,
    get_working_day,
    get_working_day_number,
    is_last_working_day,
    is_working_day,
    subtract_working_days,
)

__all__ = [
    "CalendarError",
    "Clock",
    "FixedClock",
    "InvalidDate",
    "InvalidPeriod",
    "InvalidUnit",
    "Period",
    "PeriodBounds",
    "SystemClock",
    "WorkingCalendar",
    "add_working_days",
    "ago_spanish",
    "count_days_matching",
    "create",
    "dates",
    "format_relative",
    "format_spanish",
    "get_working_day",
    "get_working_day_number",
    "is_last_working_day",
    "is_working_day",
    "period",
    "subtract_working_days",
    "to_date",
    "to_datetime",
]
