"""Flattening of value trees into store-ready key/value pairs.

Nested mappings become dot-qualified names (``database.host``), sequences
become a single comma-joined string, and scalars are rendered as text.
Names from structured formats are then turned into store keys by
uppercasing them and replacing dots with underscores (``DATABASE_HOST``).
"""

import json
from typing import Any, Dict, Mapping

from flatenv.config.values import (
    BooleanNode,
    MappingNode,
    Node,
    NumberNode,
    SequenceNode,
    StringNode,
)

# Flat configuration view: store key -> string value
FlatMapping = Dict[str, str]

# Floats at or above this magnitude keep exponent notation
_EXPONENT_THRESHOLD = 1e21


def _render_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _to_plain(node: Node) -> Any:
    """Convert a node back into plain Python values for JSON rendering."""
    if isinstance(node, MappingNode):
        return {key: _to_plain(child) for key, child in node.entries.items()}
    if isinstance(node, SequenceNode):
        return [_to_plain(item) for item in node.items]
    return node.value


def stringify(node: Node) -> str:
    """Render a single node as text.

    Booleans render as ``true``/``false`` and numbers in plain decimal form.
    Mappings and sequences render as compact JSON.
    """
    if isinstance(node, StringNode):
        return node.value
    if isinstance(node, BooleanNode):
        return "true" if node.value else "false"
    if isinstance(node, NumberNode):
        return _render_number(node.value)
    if isinstance(node, (MappingNode, SequenceNode)):
        return json.dumps(_to_plain(node), separators=(",", ":"))
    raise TypeError(f"unknown value node: {node!r}")


def flatten(tree: MappingNode, prefix: str = "") -> FlatMapping:
    """Flatten a value tree into dot-qualified names.

    Args:
        tree: Mapping node to flatten
        prefix: Qualified name of ``tree`` itself ("" for the root)

    Returns:
        Mapping of qualified name to string value

    Example:
        {"app": {"debug": true, "features": ["auth", "logging"]}}
        -> {"app.debug": "true", "app.features": "auth,logging"}
    """
    result: FlatMapping = {}

    for key, node in tree.entries.items():
        full_key = f"{prefix}.{key}" if prefix else key

        if isinstance(node, MappingNode):
            result.update(flatten(node, full_key))
        elif isinstance(node, SequenceNode):
            result[full_key] = ",".join(stringify(item) for item in node.items)
        elif isinstance(node, (StringNode, NumberNode, BooleanNode)):
            result[full_key] = stringify(node)
        else:
            raise TypeError(f"unknown value node at {full_key}: {node!r}")

    return result


def to_store_key(name: str) -> str:
    """Convert a qualified name to its store key (``a.b.c`` -> ``A_B_C``)."""
    return name.upper().replace(".", "_")


def canonicalize_keys(flat: Mapping[str, str]) -> FlatMapping:
    """Apply ``to_store_key`` to every name of a flat mapping."""
    return {to_store_key(name): value for name, value in flat.items()}


__all__ = [
    "FlatMapping",
    "stringify",
    "flatten",
    "to_store_key",
    "canonicalize_keys",
]
