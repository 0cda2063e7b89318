# src/supportbox/structures/__init__.py
"""
supportbox.structures
~~~~~~~~~~~~~~~~~~~~~

Pure transformations over plain dicts and lists: dot-path flattening,
parent-reference trees, column/row tables and subset enumeration.  Every
function returns a fresh structure and leaves its input untouched.

Basic usage::

    from supportbox.structures import flatten, unflatten, to_tree, group_to_table

    flat = flatten({"a": {"b": 1}})                     # → {"a.b": 1}
    unflatten(flat)                                    # → {"a": {"b": 1}}

    items = {1: {"name": "Root", "parent_id": None},
             2: {"name": "Child", "parent_id": 1}}
    to_tree(items, "parent_id", "children")
    # → {1: {"name": "Root", "children": {2: {"name": "Child", "children": {}}}}}

    group_to_table({"a": [1, 2], "b": [3]})
    # → [{"a": 1, "b": 3}, {"a": 2, "b": None}]

Public API
----------
flatten / unflatten     Dot-path codec for nested mappings.
to_tree / tree_to_list  Parent-reference records to nested trees and back.
group_to_table          Column groups to rows.
subsets                 Power-set enumeration filtered by size.
StructureError          Base exception for all structure-related errors.
"""

from __future__ import annotations

from supportbox.structures._exceptions import InvalidKey, InvalidRow, StructureError
from supportbox.structures.cast import cast
from supportbox.structures.dotpath import ensure_list_at_path, flatten, unflatten
from supportbox.structures.subsets import subsets
from supportbox.structures.table import group_to_table, table_to_associative
from supportbox.structures.tree import ensure_id_in_elements, to_tree, tree_to_list

__all__ = [
    "InvalidKey",
    "InvalidRow",
    "StructureError",
    "cast",
    "ensure_id_in_elements",
    "ensure_list_at_path",
    "flatten",
    "group_to_table",
    "subsets",
    "table_to_associative",
    "to_tree",
    "tree_to_list",
    "unflatten",
]
