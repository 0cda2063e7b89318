from __future__ import annotations

from typing import Any


class StructureError(ValueError):
    """Base class for all structure transformation errors."""


class InvalidRow(StructureError):
    def __init__(self, index: Any, reason: str = "must have exactly 2 columns") -> None:
        self.index = index
        super().__init__(f"Row {index} {reason}.")


class InvalidKey(StructureError):
    def __init__(self, key: Any, separator: str, reason: str = "") -> None:
        self.key = key
        self.separator = separator
        reason = reason or f"contains the path separator {separator!r}"
        super().__init__(f"Key {key!r} {reason}.")
