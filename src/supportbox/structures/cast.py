from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Mapping

# Decimal numbers with optional sign, fraction and exponent ("42", "-4.2",
# ".5", "1e3").  Hex, "inf" and "nan" stay strings.
_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _cast_string(value: str, empty_value: Any) -> Any:
    text = value.strip()
    if text == "":
        return empty_value
    if not _NUMERIC.fullmatch(text):
        return text
    if "." in text:
        return float(text)
    if "e" in text or "E" in text:
        number = float(text)
        # Out-of-range and fractional exponents stay floats.
        if not math.isfinite(number) or not number.is_integer():
            return number
        return int(Decimal(text))
    return int(text)


def cast(data: Any, empty_value: Any = "") -> Any:
    """
    Recursively trim strings and turn numeric ones into int/float.

    Empty strings become `empty_value`; non-string values are returned as
    they are.  Mappings and lists are rebuilt, never modified in place.
    """
    if isinstance(data, Mapping):
        return {key: cast(value, empty_value) for key, value in data.items()}
    if isinstance(data, list):
        return [cast(value, empty_value) for value in data]
    if isinstance(data, tuple):
        return tuple(cast(value, empty_value) for value in data)
    if isinstance(data, str):
        return _cast_string(data, empty_value)
    return data
