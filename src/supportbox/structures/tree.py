from __future__ import annotations

import logging
from typing import Any, Hashable, Mapping

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


def to_tree(
    items: Mapping[Hashable, Record],
    parent_field: str,
    children_field: str,
    parent_id: Hashable = None,
) -> dict[Hashable, dict[str, Any]]:
    """
    Build a hierarchy from flat records that reference their parent's key.

    Records whose `parent_field` equals `parent_id` become the top level;
    each node is a copy of its record without `parent_field` and with a
    `children_field` mapping built the same way from the node's own key.
    Siblings keep the order of `items`.  Records without `parent_field`, and
    records whose parent is neither `parent_id` nor a key of `items`, are
    left out.
    """
    children_of: dict[Hashable, list[Hashable]] = {}
    for key, item in items.items():
        if parent_field not in item:
            continue
        children_of.setdefault(item[parent_field], []).append(key)

    orphans = [
        key
        for parent, keys in children_of.items()
        if parent != parent_id and parent not in items
        for key in keys
    ]
    if orphans:
        logger.debug("to_tree dropped %d record(s) with unknown parent: %r", len(orphans), orphans)

    def build(parent: Hashable, ancestors: frozenset) -> dict[Hashable, dict[str, Any]]:
        branch: dict[Hashable, dict[str, Any]] = {}
        for key in children_of.get(parent, ()):
            # A key already on the path means the references loop back.
            if key in ancestors:
                continue
            node = dict(items[key])
            del node[parent_field]
            node[children_field] = build(key, ancestors | {key})
            branch[key] = node
        return branch

    return build(parent_id, frozenset([parent_id]))


def tree_to_list(
    tree: Mapping[Hashable, Record],
    name_field: str,
    children_field: str,
) -> dict[Hashable, dict[str, Any]]:
    """
    Pre-order listing of a tree as ``{key: {"name": ..., "level": depth}}``.

    Nodes without a name emit no row, but their children are still listed.
    """
    result: dict[Hashable, dict[str, Any]] = {}
    _walk(tree, name_field, children_field, 0, result, set())
    return result


def _walk(
    branch: Mapping[Hashable, Record],
    name_field: str,
    children_field: str,
    level: int,
    result: dict[Hashable, dict[str, Any]],
    path_ids: set[int],
) -> None:
    if id(branch) in path_ids:
        return
    path_ids.add(id(branch))

    for key, node in branch.items():
        name = node.get(name_field)
        if name is not None:
            result[key] = {"name": name, "level": level}

        children = node.get(children_field)
        if children:
            _walk(children, name_field, children_field, level + 1, result, path_ids)

    path_ids.discard(id(branch))


def ensure_id_in_elements(
    data: Mapping[Hashable, Record],
    id_field: str,
) -> dict[Hashable, dict[str, Any]]:
    """Copy of each record with its key stored under `id_field`."""
    return {key: {id_field: key, **item} for key, item in data.items()}
