"""AST serialization: JSON round-trip for ConciseMark trees.

Converts a node and its subtree to/from JSON-compatible dicts. Useful for
caching parsed trees and for debugging. Spans are kept as offsets, so a
tree can only be restored against the buffer it was parsed from.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from concisemark import parse
    from concisemark.serialization import from_json, to_json

    page = parse("# Hello **World**")
    data = to_json(page.root)
    root = from_json(data, page.content)

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import Any

from concisemark.location import Span
from concisemark.nodes import EmphasisStyle, Node, NodeKind, NodeTree


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its subtree to a JSON-compatible dict.

    Shape: ``{"kind", "span": [start, end], "attrs", "children"}``, plus
    ``"emphasis"`` for EMPHASIS nodes.

    """
    span = node.span
    result: dict[str, Any] = {
        "kind": node.kind.name,
        "span": [span.start, span.end],
        "attrs": dict(node.attrs),
        "children": [to_dict(child) for child in node.children],
    }
    if node.emphasis is not None:
        result["emphasis"] = node.emphasis.name
    return result


def from_dict(data: dict[str, Any], content: str) -> Node:
    """Rebuild a tree over ``content`` from a ``to_dict`` result.

    Args:
        data: Serialized root node
        content: The buffer the tree was parsed from

    Returns:
        The restored root node, in a fresh ``NodeTree``.

    Raises:
        ValueError: If a kind or emphasis name is unknown, or a span does not
            fit the buffer.

    """
    tree = NodeTree(content)
    return _build(tree, data)


def _build(tree: NodeTree, data: dict[str, Any]) -> Node:
    try:
        kind = NodeKind[data["kind"]]
        emphasis = EmphasisStyle[data["emphasis"]] if "emphasis" in data else None
    except KeyError as e:
        msg = f"unknown node kind or emphasis: {e.args[0]!r}"
        raise ValueError(msg) from e

    start, end = data["span"]
    node = tree.new_node(
        kind, Span(start, end), emphasis=emphasis, attrs=data.get("attrs", {})
    )
    for child in data.get("children", ()):
        node.add(_build(tree, child))
    return node


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a subtree to a JSON string.

    Args:
        node: Root of the subtree to serialize.
        indent: JSON indentation (None for compact).

    Returns:
        Deterministic JSON string (sorted keys).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str, content: str) -> Node:
    """Deserialize a JSON string back to a tree over ``content``."""
    return from_dict(json.loads(data), content)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
