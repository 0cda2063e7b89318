from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Optional

from dateutil.relativedelta import relativedelta

from ._exceptions import InvalidUnit
from .clock import Clock, DateLike, resolve, to_date, to_datetime

EXCEL_EPOCH = datetime(1900, 1, 1)
UNIX_EPOCH_SERIAL: int = 25569


def _step(unit: str, steps: int) -> relativedelta:
    key = unit.upper() if isinstance(unit, str) else unit
    if key == "D":
        return relativedelta(days=steps)
    if key == "W":
        return relativedelta(weeks=steps)
    if key == "M":
        return relativedelta(months=steps)
    if key == "Q":
        return relativedelta(months=3 * steps)
    if key == "S":
        return relativedelta(months=6 * steps)
    if key == "Y":
        return relativedelta(years=steps)
    raise InvalidUnit(unit)


def _reference(value: Optional[DateLike], clock: Optional[Clock]) -> datetime:
    return resolve(clock).now() if value is None else to_datetime(value)


def from_serial_number(n: int) -> datetime:
    """Datetime for an Excel serial day number."""
    if n == UNIX_EPOCH_SERIAL:
        return datetime(1970, 1, 1)
    return EXCEL_EPOCH + timedelta(days=n - 1)


def validate_date(value: Any, fmt: str = "%Y-%m-%d") -> bool:
    try:
        datetime.strptime(value, fmt)
    except (TypeError, ValueError):
        return False
    return True


def validate_and_convert(value: Any, fmt: str = "%d/%m/%Y") -> Optional[str]:
    """
    Re-format a strict YYYY-MM-DD string; None when `value` is anything else.
    """
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except (TypeError, ValueError):
        return None
    if parsed.strftime("%Y-%m-%d") != value:
        return None
    return parsed.strftime(fmt)


def calculate_age(born: DateLike, *, clock: Optional[Clock] = None) -> int:
    return relativedelta(resolve(clock).now().date(), to_date(born)).years


def count_days(
    start: DateLike,
    end: Optional[DateLike] = None,
    *,
    clock: Optional[Clock] = None,
) -> int:
    first = to_datetime(start)
    last = _reference(end, clock)
    return abs(last - first).days


# ── boundaries ───────────────────────────────────────────────────────────────

def start_of_week(value: Optional[DateLike] = None, *, clock: Optional[Clock] = None) -> datetime:
    dt = _reference(value, clock)
    monday = dt - timedelta(days=dt.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_week(value: Optional[DateLike] = None, *, clock: Optional[Clock] = None) -> datetime:
    sunday = start_of_week(value, clock=clock) + timedelta(days=6)
    return sunday.replace(hour=23, minute=59, second=59, microsecond=999999)


def start_of_month(value: Optional[DateLike] = None, *, clock: Optional[Clock] = None) -> datetime:
    dt = _reference(value, clock)
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def end_of_month(value: Optional[DateLike] = None, *, clock: Optional[Clock] = None) -> datetime:
    last = start_of_month(value, clock=clock) + relativedelta(months=1, days=-1)
    return last.replace(hour=23, minute=59, second=59, microsecond=999999)


# ── stepping ─────────────────────────────────────────────────────────────────

def next_date(
    value: Optional[DateLike] = None,
    unit: str = "M",
    steps: int = 1,
    *,
    clock: Optional[Clock] = None,
) -> datetime:
    """
    Move forward `steps` units: D(ays), W(eeks), M(onths), Q(uarters),
    S(emesters) or Y(ears).  Month arithmetic clamps to the last day of a
    shorter month instead of overflowing into the next one.
    """
    return _reference(value, clock) + _step(unit, steps)


def previous_date(
    value: Optional[DateLike] = None,
    unit: str = "M",
    steps: int = 1,
    *,
    clock: Optional[Clock] = None,
) -> datetime:
    return _reference(value, clock) + _step(unit, -steps)
