"""YAML composition with line fidelity, tree navigation and pod spec rules."""

from podlint.parser.loader import TrackedLoader, YAMLSafetyError
from podlint.parser.nodes import (
    DocumentNode,
    MappingNode,
    Node,
    NodeKind,
    ScalarNode,
    SequenceNode,
    lookup,
)
from podlint.parser.validator import PodSpecValidator

__all__ = [
    "DocumentNode",
    "MappingNode",
    "Node",
    "NodeKind",
    "PodSpecValidator",
    "ScalarNode",
    "SequenceNode",
    "TrackedLoader",
    "YAMLSafetyError",
    "lookup",
]
