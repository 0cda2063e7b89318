"""
tests/structures/test_table.py

Covers:
  - Column-wise groups to row tables (key selection, padding)
  - Two-column tables to mappings, including row validation
"""

import pytest

from supportbox.structures import InvalidRow, StructureError, group_to_table, table_to_associative


# ── group_to_table ────────────────────────────────────────────────────────────

class TestGroupToTable:

    @pytest.mark.parametrize(
        "grouped, keys, expected",
        [
            (
                {"key1": [1, 2, 3], "key2": [4, 5, 6]},
                None,
                [
                    {"key1": 1, "key2": 4},
                    {"key1": 2, "key2": 5},
                    {"key1": 3, "key2": 6},
                ],
            ),
            (
                {"key1": [1, 2], "key2": [3, 4], "key3": [5, 6]},
                ["key1", "key3"],
                [{"key1": 1, "key3": 5}, {"key1": 2, "key3": 6}],
            ),
            (
                {"key1": [1, 2], "key2": [3]},
                None,
                [{"key1": 1, "key2": 3}, {"key1": 2, "key2": None}],
            ),
            ({}, None, []),
            ({"key1": [1]}, [], []),
            ({"key1": [], "key2": []}, None, []),
        ],
    )
    def test_table(self, grouped, keys, expected):
        assert group_to_table(grouped, keys) == expected

    def test_key_order_follows_selection(self):
        rows = group_to_table({"a": [1], "b": [2]}, ["b", "a"])
        assert list(rows[0]) == ["b", "a"]

    def test_missing_key_is_padded(self):
        assert group_to_table({"a": [1, 2]}, ["a", "z"]) == [
            {"a": 1, "z": None},
            {"a": 2, "z": None},
        ]

    def test_only_missing_keys(self):
        assert group_to_table({"a": [1, 2]}, ["z"]) == []

    def test_tuples_and_generators(self):
        assert group_to_table({"a": (1, 2)}, (key for key in ["a"])) == [{"a": 1}, {"a": 2}]


# ── table_to_associative ──────────────────────────────────────────────────────

class TestTableToAssociative:

    @pytest.mark.parametrize(
        "table, expected",
        [
            ([["key1", "value1"], ["key2", "value2"]], {"key1": "value1", "key2": "value2"}),
            ([["key1", 1], ["key2", True]], {"key1": 1, "key2": True}),
            ([("a", None), (1, [2, 3])], {"a": None, 1: [2, 3]}),
            ([], {}),
        ],
    )
    def test_table(self, table, expected):
        assert table_to_associative(table) == expected

    def test_later_duplicate_wins(self):
        assert table_to_associative([["k", 1], ["k", 2]]) == {"k": 2}

    @pytest.mark.parametrize(
        "table, index",
        [
            ([["a", 1], ["b"]], 1),
            ([["a", 1, 2]], 0),
            ([["a", 1], ["b", 2], []], 2),
            ([["a", 1], "ab"], 1),
            ([5], 0),
        ],
    )
    def test_invalid_row(self, table, index):
        with pytest.raises(InvalidRow) as exc_info:
            table_to_associative(table)
        assert exc_info.value.index == index

    def test_invalid_row_is_structure_error(self):
        with pytest.raises(StructureError, match="Row 0"):
            table_to_associative([["only"]])

    def test_mapping_input(self):
        table = {"first": ["a", 1], "second": ["b", 2]}
        assert table_to_associative(table) == {"a": 1, "b": 2}
        with pytest.raises(InvalidRow) as exc_info:
            table_to_associative({"first": ["a", 1], "bad": ["b"]})
        assert exc_info.value.index == "bad"
