"""Diagnostics with YAML source position."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Diagnostic(BaseModel):
    """One validation violation, pointing at a line of the input file."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    message: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line} {self.message}"


class ValidationResult(BaseModel):
    """Result of validating one document."""

    file: str
    diagnostics: list[Diagnostic] = []

    @property
    def valid(self) -> bool:
        return not self.diagnostics

    @property
    def exit_code(self) -> int:
        return 0 if self.valid else 1
