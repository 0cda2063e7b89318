from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional, Protocol, Union

import numpy as np
from dateutil import parser as _parser

from ._exceptions import InvalidDate

DateLike = Union[datetime, date, str, "np.datetime64"]


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime: ...


class SystemClock:

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


class FixedClock:
    """
    Clock frozen at a single instant.  Thread-safe by construction since it
    never changes after __init__.
    """

    def __init__(self, instant: DateLike) -> None:
        self._instant: datetime = to_datetime(instant)

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()!r})"


def resolve(clock: Optional[Clock]) -> Clock:
    return SystemClock() if clock is None else clock


def create(value: str) -> datetime:
    """Best-effort parse of a date/time string."""
    if not isinstance(value, str):
        raise InvalidDate(value, "expected a string")
    try:
        return _parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(value, str(exc)) from exc


def to_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidDate(value, "NaT")
        return value.astype("datetime64[us]").item()
    if isinstance(value, str):
        return create(value)
    raise InvalidDate(value, f"unsupported type {type(value).__name__}")


def to_date(value: DateLike) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return to_datetime(value).date()


def today(clock: Optional[Clock] = None) -> datetime:
    now = resolve(clock).now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)
