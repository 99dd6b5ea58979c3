"""Tests for YAML parsing safeguards in TrackedLoader."""

from __future__ import annotations

import pytest
from ruamel.yaml.error import YAMLError

from podlint.parser.loader import TrackedLoader, YAMLSafetyError
from podlint.parser.nodes import lookup, resolve_root
from podlint.settings import Settings
from tests.conftest import VALID_POD_YAML


class TestAliases:
    """Aliases are shared, never expanded, and may not recurse."""

    def test_billion_laughs_is_not_expanded(self, loader: TrackedLoader) -> None:
        """Shared alias targets are built once, so the tree stays small."""
        yaml = (
            "a: &a ['lol','lol','lol','lol','lol']\n"
            "b: &b [*a,*a,*a,*a,*a]\n"
            "c: &c [*b,*b,*b,*b,*b]\n"
            "d: &d [*c,*c,*c,*c,*c]\n"
        )
        small = TrackedLoader(Settings(max_node_count=40))
        tree = small.load_string(yaml)
        assert lookup(resolve_root(tree), "d") is not None

    def test_recursive_alias_rejected(self, loader: TrackedLoader) -> None:
        """A node that contains itself through an alias is rejected."""
        with pytest.raises(YAMLSafetyError, match="Recursive"):
            loader.load_string("a: &a\n  - *a\n")

    def test_undefined_alias_is_parse_error(self, loader: TrackedLoader) -> None:
        with pytest.raises(YAMLError):
            loader.load_string("a: *missing\n")


class TestDepthLimit:
    """Reject deeply nested YAML structures."""

    def test_deep_nesting_rejected(self) -> None:
        yaml = ""
        for i in range(12):
            yaml += "  " * i + f"level{i}:\n"
        yaml += "  " * 12 + "value: deep\n"
        with pytest.raises(YAMLSafetyError, match="maximum depth"):
            TrackedLoader(Settings(max_depth=10)).load_string(yaml)

    def test_runaway_flow_nesting_rejected(self, loader: TrackedLoader) -> None:
        """Nesting past the interpreter's recursion limit is a safety error."""
        yaml = "[" * 5000 + "]" * 5000
        with pytest.raises(YAMLSafetyError, match="maximum depth"):
            loader.load_string(yaml)

    def test_nesting_within_limit(self) -> None:
        yaml = "a:\n  b:\n    c: 1\n"
        tree = TrackedLoader(Settings(max_depth=10)).load_string(yaml)
        assert resolve_root(tree) is not None


class TestDocumentSize:
    """Reject oversized documents."""

    def test_oversized_document_rejected(self) -> None:
        yaml = "key: " + "x" * 200 + "\n"
        with pytest.raises(YAMLSafetyError, match="maximum size"):
            TrackedLoader(Settings(max_document_size=100)).load_string(yaml)

    def test_small_document_passes(self, loader: TrackedLoader) -> None:
        tree = loader.load_string("key: value\n")
        assert lookup(resolve_root(tree), "key").value == "value"


class TestNodeCount:
    """Reject documents with excessive node counts."""

    def test_excessive_node_count_rejected(self) -> None:
        yaml = "\n".join(f"k{i}: v{i}" for i in range(100))
        with pytest.raises(YAMLSafetyError, match="node count"):
            TrackedLoader(Settings(max_node_count=50)).load_string(yaml)


class TestSyntaxErrors:
    """Malformed YAML surfaces as ruamel.yaml errors."""

    @pytest.mark.parametrize(
        "yaml",
        [
            "key: [unclosed\n",
            "a: b: c\n",
            "spec:\n  os: linux\n bad-indent: 1\n",
            "key: 'unterminated\n",
        ],
    )
    def test_invalid_yaml_raises(self, loader: TrackedLoader, yaml: str) -> None:
        with pytest.raises(YAMLError):
            loader.load_string(yaml)

    def test_valid_pod_passes(self, loader: TrackedLoader) -> None:
        tree = loader.load_string(VALID_POD_YAML)
        assert lookup(resolve_root(tree), "spec") is not None
