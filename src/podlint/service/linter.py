"""Load-then-validate service shared by the CLI and library callers."""

from __future__ import annotations

from pathlib import Path

from podlint.models.errors import ValidationResult
from podlint.parser.loader import TrackedLoader
from podlint.parser.validator import PodSpecValidator
from podlint.settings import Settings


class PodLinter:
    """Validates one pod spec document per call.

    Input errors (unreadable file, invalid YAML, safety limits) propagate
    as exceptions; rule violations are returned as diagnostics.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._loader = TrackedLoader(settings)
        self._validator = PodSpecValidator()

    def validate_string(self, content: str, filename: str = "<string>") -> ValidationResult:
        tree = self._loader.load_string(content, filename=filename)
        return ValidationResult(
            file=filename,
            diagnostics=self._validator.validate(tree, filename),
        )

    def validate_file(self, path: str | Path) -> ValidationResult:
        """Validate a file; diagnostics name the path exactly as given."""
        filename = str(path)
        tree = self._loader.load(Path(path))
        return ValidationResult(
            file=filename,
            diagnostics=self._validator.validate(tree, filename),
        )


def validate_string(content: str, filename: str = "<string>") -> ValidationResult:
    return PodLinter().validate_string(content, filename)


def validate_file(path: str | Path) -> ValidationResult:
    return PodLinter().validate_file(path)
