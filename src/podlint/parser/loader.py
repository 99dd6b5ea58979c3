"""YAML loader that composes a position-annotated node tree."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml import nodes as yaml_nodes

from podlint.parser.nodes import (
    DocumentNode,
    MappingNode,
    Node,
    ScalarNode,
    SequenceNode,
)
from podlint.settings import Settings

logger = logging.getLogger(__name__)

# A "---" marker at the start of a line opens another document.
_DOCUMENT_START_RE = re.compile(r"^---(?:[ \t]|$)", re.MULTILINE)


class YAMLSafetyError(Exception):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: the document is well-formed but too large,
    too deep, or self-referencing through an alias.
    """


class TrackedLoader:
    """Composes YAML into :mod:`podlint.parser.nodes` trees.

    Uses ruamel.yaml's composer, which keeps the resolved tag and the start
    mark of every node, so quoted ``"2"`` and bare ``2`` stay distinguishable
    and every diagnostic can point at a source line.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        if settings is None:
            settings = Settings()
        self._yaml = YAML(typ="rt")
        self._max_document_size = settings.max_document_size
        self._max_depth = settings.max_depth
        self._max_node_count = settings.max_node_count

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> DocumentNode:
        """Read and compose a YAML file."""
        content = path.read_text(encoding="utf-8")
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> DocumentNode:
        """Compose YAML text. Only the first document of a stream is kept."""
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )
        stream = self._yaml.compose_all(content)
        try:
            first = next(stream, None)
        except RecursionError:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum depth ({self._max_depth})"
            ) from None
        finally:
            # Later documents are never composed, so their errors don't surface.
            stream.close()

        if first is None:
            logger.debug("%s holds no document", filename)
            return DocumentNode(content=None)
        if _DOCUMENT_START_RE.search(content, first.end_mark.index):
            logger.warning("%s contains more than one document; only the first is validated", filename)
        root = _TreeBuilder(self._max_depth, self._max_node_count).build(first)
        return DocumentNode(content=root, line=root.line)


class _TreeBuilder:
    """Converts one ruamel.yaml representation tree into our node types."""

    def __init__(self, max_depth: int, max_node_count: int) -> None:
        self._max_depth = max_depth
        self._max_node_count = max_node_count
        self._count = 0
        # Aliased nodes are shared objects in the composed tree.
        self._built: dict[int, Node] = {}
        self._in_progress: set[int] = set()

    def build(self, raw: Any, depth: int = 0) -> Node:
        key = id(raw)
        if key in self._built:
            return self._built[key]
        if key in self._in_progress:
            raise YAMLSafetyError("Recursive YAML alias detected")
        if depth > self._max_depth:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum depth ({self._max_depth})"
            )
        self._count += 1
        if self._count > self._max_node_count:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum node count ({self._max_node_count:,})"
            )

        line = raw.start_mark.line + 1
        self._in_progress.add(key)
        try:
            node: Node
            if isinstance(raw, yaml_nodes.MappingNode):
                node = MappingNode(
                    pairs=tuple(
                        (self.build(k, depth + 1), self.build(v, depth + 1))
                        for k, v in raw.value
                    ),
                    line=line,
                )
            elif isinstance(raw, yaml_nodes.SequenceNode):
                node = SequenceNode(
                    items=tuple(self.build(item, depth + 1) for item in raw.value),
                    line=line,
                )
            else:
                tag = raw.tag
                node = ScalarNode(
                    value=str(raw.value),
                    tag=str(tag) if tag is not None else "",
                    line=line,
                )
        finally:
            self._in_progress.discard(key)
        self._built[key] = node
        return node
