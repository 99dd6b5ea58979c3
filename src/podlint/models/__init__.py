"""Pydantic result models for podlint."""

from podlint.models.errors import Diagnostic, ValidationResult

__all__ = [
    "Diagnostic",
    "ValidationResult",
]
