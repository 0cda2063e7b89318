from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

import numpy as np

from ._exceptions import CalendarError, InvalidDate
from .clock import DateLike, to_date, to_datetime

logger = logging.getLogger(__name__)

WEEKMASK: str = "1111100"  # Mon..Sun

HolidayLike = Union[str, date]
Shiftable = Union[DateLike, "np.ndarray"]


def _as_day(value: DateLike) -> np.datetime64:
    return np.datetime64(to_date(value), "D")


def _parse_holiday(value: HolidayLike) -> np.datetime64:
    if isinstance(value, date):
        return np.datetime64(to_date(value), "D")
    try:
        return np.datetime64(date.fromisoformat(value), "D")
    except (TypeError, ValueError) as exc:
        raise InvalidDate(value, "expected YYYY-MM-DD") from exc


def _instant(value: DateLike) -> Union[datetime, date]:
    # date and datetime pass through untouched so the caller's type and
    # time-of-day survive the shift.
    if isinstance(value, date):
        return value
    return to_datetime(value)


class WorkingCalendar:
    """
    Compiled working-day calendar: a weekday mask plus a set of holidays,
    backed by a NumPy business-day calendar.

    A working day is a day enabled in the weekmask that is not a holiday.
    Shift operations accept scalars (datetime, date, ISO string) and NumPy
    arrays of datetime64[D].
    """

    def __init__(
        self,
        holidays: Iterable[HolidayLike] = (),
        weekmask: str = WEEKMASK,
    ) -> None:
        if len(weekmask) != 7 or set(weekmask) - {"0", "1"}:
            raise CalendarError(f"Weekmask must be seven 0/1 characters; got {weekmask!r}.")
        if "1" not in weekmask:
            raise CalendarError("Weekmask must enable at least one day.")

        self._weekmask: str = weekmask
        self._holidays: set[np.datetime64] = {_parse_holiday(h) for h in holidays}
        self._compile()

    def _compile(self) -> None:
        self._busdaycal = np.busdaycalendar(
            weekmask=self._weekmask,
            holidays=np.array(sorted(self._holidays), dtype="datetime64[D]"),
        )
        logger.debug(
            "Compiled working calendar: weekmask=%s holidays=%d",
            self._weekmask,
            len(self._holidays),
        )

    # ── holiday management ───────────────────────────────────────────────

    def add_holiday(self, day: HolidayLike) -> None:
        self._holidays.add(_parse_holiday(day))
        self._compile()

    def remove_holiday(self, day: HolidayLike) -> None:
        parsed = _parse_holiday(day)
        if parsed in self._holidays:
            self._holidays.discard(parsed)
            self._compile()

    # ── predicates ───────────────────────────────────────────────────────

    def is_working_day(self, value: DateLike) -> bool:
        return bool(np.is_busday(_as_day(value), busdaycal=self._busdaycal))

    def is_last_working_day(self, value: DateLike) -> bool:
        day = _as_day(value)
        if not np.is_busday(day, busdaycal=self._busdaycal):
            return False
        following = np.busday_offset(day, 1, roll="forward", busdaycal=self._busdaycal)
        return bool(following.astype("datetime64[M]") != day.astype("datetime64[M]"))

    # ── shifting ─────────────────────────────────────────────────────────

    def add(self, value: Shiftable, days: Union[int, "np.ndarray"]) -> Shiftable:
        """
        Move `days` working days forward (backward when negative).  The
        starting day itself never counts; zero returns the input unchanged.
        """
        if isinstance(value, np.ndarray):
            return self._shift_array(value, days)

        instant = _instant(value)
        n = int(days)
        if n == 0:
            return instant

        start = _as_day(instant)
        # Rolling towards the opposite direction first makes a non-working
        # start behave like the last working day before it.
        roll = "backward" if n > 0 else "forward"
        end = np.busday_offset(start, n, roll=roll, busdaycal=self._busdaycal)
        return instant + timedelta(days=int((end - start).astype(np.int64)))

    def subtract(self, value: Shiftable, days: Union[int, "np.ndarray"]) -> Shiftable:
        return self.add(value, np.negative(days) if isinstance(days, np.ndarray) else -int(days))

    def _shift_array(self, values: np.ndarray, days: Union[int, np.ndarray]) -> np.ndarray:
        start = np.asarray(values, dtype="datetime64[D]")
        n = np.asarray(days, dtype=np.int64)
        start, n = np.broadcast_arrays(start, n)

        forward = np.busday_offset(start, n, roll="backward", busdaycal=self._busdaycal)
        backward = np.busday_offset(start, n, roll="forward", busdaycal=self._busdaycal)
        return np.where(n == 0, start, np.where(n > 0, forward, backward))

    # ── month ordinals ───────────────────────────────────────────────────

    def working_day(self, year: int, month: int, ordinal: int) -> Optional[datetime]:
        if ordinal < 1:
            return None
        first = np.datetime64(date(year, month, 1), "D")
        target = np.busday_offset(first, ordinal - 1, roll="forward", busdaycal=self._busdaycal)
        found: date = target.item()
        if found.year != year or found.month != month:
            return None
        return datetime(found.year, found.month, found.day)

    def working_day_number(self, value: DateLike) -> Optional[int]:
        day = _as_day(value)
        if not np.is_busday(day, busdaycal=self._busdaycal):
            return None
        first = day.astype("datetime64[M]").astype("datetime64[D]")
        return int(np.busday_count(first, day + 1, busdaycal=self._busdaycal))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def weekmask(self) -> str:
        return self._weekmask

    @property
    def holidays(self) -> list[str]:
        return [str(h) for h in sorted(self._holidays)]

    def __repr__(self) -> str:
        return (
            f"WorkingCalendar(weekmask={self._weekmask!r}, "
            f"holidays={len(self._holidays)})"
        )


CalendarLike = Union[WorkingCalendar, Iterable[HolidayLike]]


def _calendar(holidays: CalendarLike) -> WorkingCalendar:
    if isinstance(holidays, WorkingCalendar):
        return holidays
    return WorkingCalendar(holidays)


def is_working_day(value: DateLike, holidays: CalendarLike = ()) -> bool:
    return _calendar(holidays).is_working_day(value)


def add_working_days(value: Shiftable, days: int, holidays: CalendarLike = ()) -> Shiftable:
    return _calendar(holidays).add(value, days)


def subtract_working_days(value: Shiftable, days: int, holidays: CalendarLike = ()) -> Shiftable:
    return _calendar(holidays).subtract(value, days)


def get_working_day(
    year: int,
    month: int,
    ordinal: int,
    holidays: CalendarLike = (),
) -> Optional[datetime]:
    """Date of the `ordinal`-th working day of the month, or None."""
    return _calendar(holidays).working_day(year, month, ordinal)


def get_working_day_number(value: DateLike, holidays: CalendarLike = ()) -> Optional[int]:
    """1-based working-day ordinal of `value` in its month, or None."""
    return _calendar(holidays).working_day_number(value)


def is_last_working_day(value: DateLike, holidays: CalendarLike = ()) -> bool:
    return _calendar(holidays).is_last_working_day(value)


def count_days_matching(
    start: DateLike,
    end: DateLike,
    days: Iterable[HolidayLike],
    exclude_weekends: bool = False,
    weekmask: str = WEEKMASK,
) -> int:
    """
    Number of calendar days in [start, end] whose ISO form (YYYY-MM-DD)
    appears in `days`, optionally ignoring days outside the weekmask.
    Entries that are not such strings or dates simply match nothing.
    """
    span = np.arange(_as_day(start), _as_day(end) + 1, dtype="datetime64[D]")
    if exclude_weekends:
        span = span[np.is_busday(span, weekmask=weekmask)]
    wanted = [to_date(d).isoformat() if isinstance(d, date) else str(d) for d in days]
    return int(np.isin(np.datetime_as_string(span, unit="D"), wanted).sum())
