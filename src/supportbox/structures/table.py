from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping, Optional, Sequence

from ._exceptions import InvalidRow


def _cell(column: Optional[Sequence[Any]], index: int) -> Any:
    if column is None or index >= len(column):
        return None
    return column[index]


def group_to_table(
    grouped: Mapping[Hashable, Sequence[Any]],
    keys: Optional[Iterable[Hashable]] = None,
) -> list[dict[Hashable, Any]]:
    """
    Turn column-wise data into rows::

        group_to_table({"a": [1, 2], "b": [3]})
        # → [{"a": 1, "b": 3}, {"a": 2, "b": None}]

    The row count is the longest selected column; shorter (or missing)
    columns are padded with None.
    """
    columns = list(grouped) if keys is None else list(keys)
    if not columns:
        return []

    height = max((len(grouped[key]) for key in columns if key in grouped), default=0)
    return [
        {key: _cell(grouped.get(key), i) for key in columns}
        for i in range(height)
    ]


def table_to_associative(table: Iterable[Sequence[Any]] | Mapping[Any, Sequence[Any]]) -> dict[Any, Any]:
    rows = table.items() if isinstance(table, Mapping) else enumerate(table)

    result: dict[Any, Any] = {}
    for index, row in rows:
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence) or len(row) != 2:
            raise InvalidRow(index)
        key, value = row
        result[key] = value
    return result
