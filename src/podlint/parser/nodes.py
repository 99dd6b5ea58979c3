"""Immutable document tree nodes with source line tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

INT_TAG = "tag:yaml.org,2002:int"
STR_TAG = "tag:yaml.org,2002:str"


class NodeKind(StrEnum):
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    DOCUMENT = "document"


@dataclass(frozen=True)
class ScalarNode:
    """A leaf value: source text plus the resolved YAML tag."""

    value: str
    tag: str
    line: int
    kind: NodeKind = field(default=NodeKind.SCALAR, init=False)


@dataclass(frozen=True)
class MappingNode:
    """Ordered key/value pairs, in source order."""

    pairs: tuple[tuple[Node, Node], ...]
    line: int
    kind: NodeKind = field(default=NodeKind.MAPPING, init=False)


@dataclass(frozen=True)
class SequenceNode:
    items: tuple[Node, ...]
    line: int
    kind: NodeKind = field(default=NodeKind.SEQUENCE, init=False)


@dataclass(frozen=True)
class DocumentNode:
    """Outermost wrapper. ``content`` is None for an empty document."""

    content: Node | None
    line: int = 1
    kind: NodeKind = field(default=NodeKind.DOCUMENT, init=False)


Node = ScalarNode | MappingNode | SequenceNode | DocumentNode


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def lookup(node: Node | None, key: str) -> Node | None:
    """Return the value stored under ``key`` in a mapping node.

    Anything that is not a mapping (including ``None``) yields ``None``,
    so lookups can be chained through missing or wrongly-typed ancestors.
    """
    if not isinstance(node, MappingNode):
        return None
    for key_node, value_node in node.pairs:
        if isinstance(key_node, ScalarNode) and key_node.value == key:
            return value_node
    return None


def lookup_mapping(node: Node | None, key: str) -> MappingNode | None:
    """Like :func:`lookup`, but only returns mapping values."""
    value = lookup(node, key)
    return value if isinstance(value, MappingNode) else None


def lookup_path(node: Node | None, *keys: str) -> Node | None:
    """Follow ``keys`` through nested mappings.

    Every intermediate value must be a mapping; the final value may be of
    any kind.
    """
    if not keys:
        return node
    current = node
    for key in keys[:-1]:
        current = lookup_mapping(current, key)
        if current is None:
            return None
    return lookup(current, keys[-1])


def resolve_root(tree: Node | None) -> Node | None:
    """Unwrap a document node to the value it holds."""
    if isinstance(tree, DocumentNode):
        return tree.content
    return tree
