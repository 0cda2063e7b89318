from __future__ import annotations

import copy
from typing import Any, Hashable, Mapping, MutableMapping

from ._exceptions import InvalidKey, StructureError

SEPARATOR: str = "."


def flatten(
    nested: Mapping[Hashable, Any],
    prefix: str = "",
    separator: str = SEPARATOR,
) -> dict[Hashable, Any]:
    """
    Collapse nested mappings into a single level keyed by dot paths::

        flatten({"a": {"b": 1}, "c": 2})  # → {"a.b": 1, "c": 2}

    Only mappings are descended into; lists and other values are leaves and
    empty mappings contribute nothing.  A key containing `separator`, or a
    non-string key that would become part of a joined path, raises InvalidKey because the result
    could not be unflattened back.
    """
    result: dict[Hashable, Any] = {}
    _flatten_into(result, nested, prefix, separator, set())
    return result


def _flatten_into(
    out: dict[Hashable, Any],
    nested: Mapping[Hashable, Any],
    prefix: Any,
    separator: str,
    path_ids: set[int],
) -> None:
    if id(nested) in path_ids:
        raise StructureError(f"Cyclic mapping reached at {prefix!r}.")
    path_ids.add(id(nested))

    for key, value in nested.items():
        if isinstance(key, str) and separator in key:
            raise InvalidKey(key, separator)
        nested_value = isinstance(value, Mapping)
        # Only plain top-level leaves may keep a non-string key.
        if not isinstance(key, str) and (prefix != "" or (nested_value and value)):
            raise InvalidKey(key, separator, "must be a string inside a dot path")
        path = key if prefix == "" else f"{prefix}{separator}{key}"
        if nested_value:
            _flatten_into(out, value, path, separator, path_ids)
        else:
            out[path] = value

    path_ids.discard(id(nested))


def unflatten(
    flat: Mapping[Hashable, Any],
    separator: str = SEPARATOR,
) -> dict[Hashable, Any]:
    """
    Inverse of flatten().  Intermediate values that are not dicts are
    replaced by dicts; keys without a separator are assigned as they are.
    """
    result: dict[Hashable, Any] = {}
    for key, value in flat.items():
        if not (isinstance(key, str) and separator in key):
            result[key] = value
            continue

        *parents, leaf = key.split(separator)
        node = result
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[leaf] = value
    return result


# ── path access ──────────────────────────────────────────────────────────────

def _lookup(node: Any, key: str) -> tuple[bool, Any]:
    if isinstance(node, Mapping):
        if key in node:
            return True, key
        return False, None
    if isinstance(node, list) and key.isdigit() and int(key) < len(node):
        return True, int(key)
    return False, None


def ensure_list_at_path(
    data: MutableMapping[Hashable, Any],
    path: str,
    separator: str = SEPARATOR,
) -> MutableMapping[Hashable, Any]:
    """
    Copy of `data` in which the value at `path` is wrapped in a list, unless
    it already is a list/tuple or an empty mapping.  Missing paths and None
    values leave the copy unchanged.  `data` itself is never modified.
    """
    result = copy.deepcopy(data)
    node: Any = result
    *parents, leaf = path.split(separator)

    for part in parents:
        found, index = _lookup(node, part)
        if not found:
            return result
        node = node[index]

    found, index = _lookup(node, leaf)
    if not found or node[index] is None:
        return result

    value = node[index]
    if isinstance(value, (list, tuple)) or (isinstance(value, Mapping) and not value):
        return result
    node[index] = [value]
    return result
