"""Semantic validation of pod specs: os, probe ports, cpu literal types."""

from __future__ import annotations

import logging
import re

from podlint.models.errors import Diagnostic
from podlint.parser.nodes import (
    INT_TAG,
    MappingNode,
    Node,
    ScalarNode,
    SequenceNode,
    lookup,
    lookup_mapping,
    lookup_path,
    resolve_root,
)

logger = logging.getLogger(__name__)

SUPPORTED_OS = ("linux", "windows")
MIN_PORT = 1
MAX_PORT = 65535
RESOURCE_SECTIONS = ("limits", "requests")

# Signed ASCII decimal, nothing else (no spaces, underscores or radix prefixes).
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def parse_port(text: str) -> int | None:
    """Parse a port literal as a base-10 integer, or None if it is not one."""
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return int(text)


class PodSpecValidator:
    """Runs every rule against ``spec`` and its containers.

    Rules never raise: a missing or wrongly-typed ancestor just means there
    is nothing to check below it.
    """

    def validate(self, tree: Node | None, filename: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        spec = lookup_mapping(resolve_root(tree), "spec")
        if spec is None:
            logger.debug("%s has no spec mapping; nothing to validate", filename)
            return diagnostics

        diagnostics.extend(self._check_os(spec, filename))

        containers = lookup(spec, "containers")
        if isinstance(containers, SequenceNode):
            for index, container in enumerate(containers.items):
                if not isinstance(container, MappingNode):
                    logger.debug("Skipping non-mapping container #%d", index)
                    continue
                diagnostics.extend(self._check_probe_port(container, filename))
                diagnostics.extend(self._check_cpu(container, filename))

        logger.debug("%s: %d diagnostic(s)", filename, len(diagnostics))
        return diagnostics

    def _check_os(self, spec: MappingNode, filename: str) -> list[Diagnostic]:
        """``spec.os`` is either a supported name or ``{name: <supported name>}``."""
        os_node = lookup(spec, "os")
        if os_node is None:
            return []

        if isinstance(os_node, ScalarNode):
            if os_node.value not in SUPPORTED_OS:
                return [_unsupported_os(os_node, filename)]
            return []

        if isinstance(os_node, MappingNode):
            name = lookup(os_node, "name")
            if name is None:
                return [Diagnostic(file=filename, line=os_node.line, message="os.name is required")]
            if not isinstance(name, ScalarNode):
                return [Diagnostic(file=filename, line=name.line, message="os.name must be string")]
            if name.value not in SUPPORTED_OS:
                return [_unsupported_os(name, filename)]
            return []

        return [
            Diagnostic(file=filename, line=os_node.line, message="os must be string or object")
        ]

    def _check_probe_port(self, container: MappingNode, filename: str) -> list[Diagnostic]:
        """``readinessProbe.httpGet.port`` must be a TCP port number."""
        port = lookup_path(container, "readinessProbe", "httpGet", "port")
        if not isinstance(port, ScalarNode):
            return []
        value = parse_port(port.value)
        if value is None or not MIN_PORT <= value <= MAX_PORT:
            return [Diagnostic(file=filename, line=port.line, message="port value out of range")]
        return []

    def _check_cpu(self, container: MappingNode, filename: str) -> list[Diagnostic]:
        """``cpu`` under limits/requests must be written as a bare integer."""
        errors: list[Diagnostic] = []
        resources = lookup_mapping(container, "resources")
        for section in RESOURCE_SECTIONS:
            cpu = lookup_path(resources, section, "cpu")
            if isinstance(cpu, ScalarNode) and cpu.tag != INT_TAG:
                errors.append(Diagnostic(file=filename, line=cpu.line, message="cpu must be int"))
        return errors


def _unsupported_os(node: ScalarNode, filename: str) -> Diagnostic:
    return Diagnostic(
        file=filename,
        line=node.line,
        message=f"os has unsupported value '{node.value}'",
    )
