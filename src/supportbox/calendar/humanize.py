from __future__ import annotations

from typing import Optional

from dateutil.relativedelta import relativedelta

from .clock import Clock, DateLike, resolve, to_datetime

JUST_NOW: str = "recién"

# Most significant first.
_UNITS: tuple[tuple[str, str], ...] = (
    ("years", "año"),
    ("months", "mes"),
    ("weeks", "semana"),
    ("days", "día"),
    ("hours", "hora"),
    ("minutes", "minuto"),
    ("seconds", "segundo"),
)


def _label(value: int, unit: str) -> str:
    if value > 1:
        unit = unit + "es" if unit == "mes" else unit + "s"
    return f"{value} {unit}"


def format_relative(now: DateLike, target: DateLike, full: bool = False) -> str:
    """
    Spanish "time ago" string for the civil-calendar distance between `now`
    and `target`, e.g. "hace 2 meses" or "hace 1 hora, 15 minutos".

    With `full=False` only the two most significant non-zero units are kept.
    A zero distance yields "recién".  When only one side carries a timezone
    the naive side is taken to be in that timezone.
    """
    end = to_datetime(now)
    start = to_datetime(target)
    # A naive side is read in the other side's timezone.
    if start.tzinfo is None and end.tzinfo is not None:
        start = start.replace(tzinfo=end.tzinfo)
    elif end.tzinfo is None and start.tzinfo is not None:
        end = end.replace(tzinfo=start.tzinfo)
    if start > end:
        start, end = end, start

    delta = relativedelta(end, start)
    weeks, days = divmod(delta.days, 7)
    values = {
        "years": delta.years,
        "months": delta.months,
        "weeks": weeks,
        "days": days,
        "hours": delta.hours,
        "minutes": delta.minutes,
        "seconds": delta.seconds,
    }

    parts = [_label(values[key], unit) for key, unit in _UNITS if values[key] > 0]
    if not full:
        parts = parts[:2]
    return "hace " + ", ".join(parts) if parts else JUST_NOW


def ago_spanish(
    target: DateLike,
    full: bool = False,
    *,
    clock: Optional[Clock] = None,
) -> str:
    return format_relative(resolve(clock).now(), target, full)
