"""JSON form of a parsed graph, for ``overtime dump`` and external generators.

The layout is the one produced by ``Graph.to_dict``: types and endpoints are
lists in declaration order, fields and args are nested lists. Loading checks
the keys every node needs before building the graph, so a hand-edited or
truncated file is reported as a ``SchemaError`` naming the broken node.
"""

from __future__ import annotations

import json
from typing import Any

from overtime.core.types import SchemaError
from overtime.dsl.graph import Graph

_REQUIRED_KEYS: dict[str, tuple[str, ...]] = {
    "types": ("name",),
    "fields": ("name", "type"),
    "endpoints": ("path", "method"),
    "args": ("name", "type"),
}


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    return graph.to_dict()


def graph_from_dict(data: Any) -> Graph:
    """Build a Graph from its dict form.

    Raises:
        SchemaError: if a node is not an object or lacks a required key.
    """
    if not isinstance(data, dict):
        raise SchemaError(f"Graph must be a JSON object, got {type(data).__name__}")

    for section, children in (("types", "fields"), ("endpoints", "args")):
        for index, node in enumerate(_entries(data, section, section)):
            where = f"{section}[{index}]"
            _check_keys(node, section, where)
            for child_index, child in enumerate(_entries(node, children, where)):
                _check_keys(child, children, f"{where}.{children}[{child_index}]")

    return Graph.from_dict(data)


def serialize_to_json(graph: Graph, indent: int = 2) -> str:
    return json.dumps(graph_to_dict(graph), indent=indent)


def deserialize_from_json(text: str) -> Graph:
    """Parse JSON produced by ``serialize_to_json`` back into a Graph."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid graph JSON at L{exc.lineno}:{exc.colno}: {exc.msg}") from exc
    return graph_from_dict(data)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _entries(node: dict[str, Any], key: str, where: str) -> list[Any]:
    entries = node.get(key, [])
    if not isinstance(entries, list):
        label = where if where == key else f"{where}.{key}"
        raise SchemaError(f"{label} must be a list")
    return entries


def _check_keys(node: Any, kind: str, where: str) -> None:
    if not isinstance(node, dict):
        raise SchemaError(f"{where} must be an object")
    for key in _REQUIRED_KEYS[kind]:
        if key not in node:
            raise SchemaError(f"{where} is missing {key!r}")
