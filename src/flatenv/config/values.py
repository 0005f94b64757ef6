"""Value tree produced by the format parsers.

Every parser returns a ``MappingNode`` whose children are one of exactly
five node types. The flattener matches on these types and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class StringNode:
    value: str


@dataclass(frozen=True)
class NumberNode:
    value: Union[int, float]


@dataclass(frozen=True)
class BooleanNode:
    value: bool


@dataclass(frozen=True)
class SequenceNode:
    items: List["Node"] = field(default_factory=list)


@dataclass(frozen=True)
class MappingNode:
    entries: Dict[str, "Node"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)


Node = Union[StringNode, NumberNode, BooleanNode, SequenceNode, MappingNode]


def to_node(value: Any) -> Node:
    """Convert a decoded JSON/YAML value into a tree node.

    ``None`` becomes an empty string and any other scalar without a node
    type of its own (dates, timestamps) becomes its ``str`` form.
    Non-string mapping keys, which YAML allows, are converted with ``str``.
    """
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return BooleanNode(value)
    if isinstance(value, (int, float)):
        return NumberNode(value)
    if isinstance(value, str):
        return StringNode(value)
    if value is None:
        return StringNode("")
    if isinstance(value, dict):
        return to_mapping_node(value)
    if isinstance(value, (list, tuple)):
        return SequenceNode([to_node(item) for item in value])
    return StringNode(str(value))


def to_mapping_node(value: Dict[Any, Any]) -> MappingNode:
    """Convert a decoded mapping into a ``MappingNode``."""
    return MappingNode({str(k): to_node(v) for k, v in value.items()})


__all__ = [
    "StringNode",
    "NumberNode",
    "BooleanNode",
    "SequenceNode",
    "MappingNode",
    "Node",
    "to_node",
    "to_mapping_node",
]
