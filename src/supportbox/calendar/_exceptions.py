from __future__ import annotations

from typing import Any


class CalendarError(ValueError):
    """Base class for all calendar-related errors."""


class InvalidPeriod(CalendarError):
    def __init__(self, period: Any, reason: str) -> None:
        self.period = period
        super().__init__(f"Invalid period {period!r}: {reason}.")


class InvalidDate(CalendarError):
    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Invalid date {value!r}"
        super().__init__(f"{message}: {reason}" if reason else f"{message}.")


class InvalidUnit(CalendarError):
    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Invalid time unit {unit!r}; expected one of D, W, M, Q, S, Y.")
