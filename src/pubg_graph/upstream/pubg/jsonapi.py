from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

Resource = dict[str, Any]


def dig(obj: Any, *path: str, default: Any = None) -> Any:
    """Walk nested mappings; return `default` if any level is missing or null."""
    current = obj
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def reference_ids(relationship: Any) -> list[str]:
    """Ids from a `{data: [{id, type}, ...]}` relationship (empty if absent).

    References without an id are skipped.
    """
    refs = dig(relationship, "data", default=[])
    if not isinstance(refs, Sequence) or isinstance(refs, str):
        return []
    return [ref["id"] for ref in refs if isinstance(ref, Mapping) and ref.get("id") is not None]


def group_included(included: Any) -> dict[str, list[Resource]]:
    """Group side-loaded resources as {type: [resource, ...]} in response order.

    Resources sharing an id (or lacking one) are all kept.
    """
    by_type: dict[str, list[Resource]] = {}
    if not isinstance(included, Sequence) or isinstance(included, str):
        return by_type

    for resource in included:
        if not isinstance(resource, Mapping):
            continue
        kind = resource.get("type")
        if not isinstance(kind, str):
            continue
        by_type.setdefault(kind, []).append(dict(resource))
    return by_type
