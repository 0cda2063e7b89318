from __future__ import annotations

from .clock import DateLike, to_datetime

# Indexed by datetime.weekday(): Monday == 0.
DAYS: tuple[str, ...] = (
    "Lunes",
    "Martes",
    "Miércoles",
    "Jueves",
    "Viernes",
    "Sábado",
    "Domingo",
)

MONTHS: dict[int, str] = {
    1: "Enero",
    2: "Febrero",
    3: "Marzo",
    4: "Abril",
    5: "Mayo",
    6: "Junio",
    7: "Julio",
    8: "Agosto",
    9: "Septiembre",
    10: "Octubre",
    11: "Noviembre",
    12: "Diciembre",
}


def format_spanish(value: DateLike, include_day: bool = True) -> str:
    """
    "Lunes, 15 de Enero del 2024", or "15 de Enero del 2024" without the
    day name.
    """
    dt = to_datetime(value)
    prefix = f"{DAYS[dt.weekday()]}, " if include_day else ""
    return f"{prefix}{dt.day} de {MONTHS[dt.month]} del {dt.year}"
