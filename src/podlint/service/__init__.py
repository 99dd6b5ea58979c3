"""Service layer reusable by the CLI and library callers."""

from podlint.service.linter import PodLinter, validate_file, validate_string

__all__ = ["PodLinter", "validate_file", "validate_string"]
