from __future__ import annotations

import calendar as _stdlib_calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Union

import numpy as np
from dateutil.relativedelta import relativedelta

from ._exceptions import InvalidPeriod
from .clock import Clock, DateLike, resolve, today
from .clock import to_datetime as _to_datetime
from .spanish import MONTHS

YEAR_MIN: int = 2000
YEAR_MAX: int = 2100

PeriodLike = Union[int, DateLike]


@dataclass(frozen=True, slots=True)
class Period:
    """
    Decoded YYYY or YYYYMM period.  `month` is None for year-only periods.
    """

    year: int
    month: Optional[int] = None

    @property
    def length(self) -> int:
        return 4 if self.month is None else 6

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month or 1, 1)

    def encode(self) -> int:
        return self.year if self.month is None else self.year * 100 + self.month


@dataclass(frozen=True, slots=True)
class PeriodBounds:
    year_from: int = YEAR_MIN
    year_to: int = YEAR_MAX

    def __post_init__(self) -> None:
        if self.year_from > self.year_to:
            raise ValueError(
                f"year_from ({self.year_from}) must not exceed year_to ({self.year_to})."
            )

    def contains(self, year: int) -> bool:
        return self.year_from <= year <= self.year_to

    def validate(self, period: Any, length: Optional[int] = None) -> bool:
        return validate(period, self.year_from, self.year_to, length)


# ── codec ────────────────────────────────────────────────────────────────────

def _digits(period: Any) -> str:
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)):
        raise InvalidPeriod(period, "not an integer")
    if period < 0:
        raise InvalidPeriod(period, "negative")
    return str(int(period))


def decode(period: int, bounds: Optional[PeriodBounds] = None) -> Period:
    text = _digits(period)

    if len(text) == 4:
        result = Period(int(text))
    elif len(text) == 6:
        month = int(text[4:])
        if not 1 <= month <= 12:
            raise InvalidPeriod(period, f"month {month} outside 1..12")
        result = Period(int(text[:4]), month)
    else:
        raise InvalidPeriod(period, "expected YYYY or YYYYMM")

    if bounds is not None and not bounds.contains(result.year):
        raise InvalidPeriod(
            period, f"year {result.year} outside {bounds.year_from}..{bounds.year_to}"
        )
    return result


def validate(
    period: Any,
    year_from: int = YEAR_MIN,
    year_to: int = YEAR_MAX,
    length: Optional[int] = None,
) -> bool:
    try:
        decoded = decode(period)
    except InvalidPeriod:
        return False
    if length is not None and length != decoded.length:
        return False
    return year_from <= decoded.year <= year_to


def valid_period4(period: Any, year_from: int = YEAR_MIN, year_to: int = YEAR_MAX) -> bool:
    return validate(period, year_from, year_to, 4)


def valid_period6(period: Any, year_from: int = YEAR_MIN, year_to: int = YEAR_MAX) -> bool:
    return validate(period, year_from, year_to, 6)


def to_datetime(period: int) -> datetime:
    return decode(period).to_datetime()


# ── navigation ───────────────────────────────────────────────────────────────

def _month_start(period: Optional[int], clock: Optional[Clock]) -> datetime:
    if period is None:
        return today(clock).replace(day=1)
    return to_datetime(period)


def _encode_month(dt: datetime) -> int:
    return dt.year * 100 + dt.month


def add_months(
    period: Optional[int] = None,
    steps: int = 1,
    *,
    clock: Optional[Clock] = None,
) -> int:
    """
    Period `steps` months after `period` (the current month when None),
    always encoded as YYYYMM.
    """
    if steps == 0 and period is not None:
        decode(period)
        return int(period)
    start = _month_start(period, clock)
    return _encode_month(start + relativedelta(months=steps))


def sub_months(
    period: Optional[int] = None,
    steps: int = 1,
    *,
    clock: Optional[Clock] = None,
) -> int:
    return add_months(period, -steps, clock=clock)


def days_in_month(period: int) -> int:
    start = to_datetime(period)
    return _stdlib_calendar.monthrange(start.year, start.month)[1]


def last_day_of_month(
    period: Optional[int] = None,
    *,
    clock: Optional[Clock] = None,
) -> str:
    start = _month_start(period, clock)
    last = _stdlib_calendar.monthrange(start.year, start.month)[1]
    return date(start.year, start.month, last).isoformat()


def format_spanish_month_year(period: int) -> str:
    decoded = decode(period)
    if decoded.month is None:
        raise InvalidPeriod(period, "no month component")
    return f"{MONTHS[decoded.month]} de {decoded.year}"


# ── counting ─────────────────────────────────────────────────────────────────

def _coerce(value: PeriodLike) -> datetime:
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return to_datetime(int(value))
    return _to_datetime(value)


def count_months(
    start: PeriodLike,
    end: Optional[PeriodLike] = None,
    *,
    clock: Optional[Clock] = None,
) -> int:
    first = _coerce(start)
    last = resolve(clock).now() if end is None else _coerce(end)
    return (last.year - first.year) * 12 + (last.month - first.month)


def generate_years(
    total: int,
    start: Optional[int] = None,
    *,
    clock: Optional[Clock] = None,
) -> list[int]:
    first = resolve(clock).now().year if start is None else start
    return list(range(first, first - total, -1))
