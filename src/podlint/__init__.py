"""podlint: semantic checks for pod specs that schema validators miss."""

__version__ = "0.1.0"

from podlint.service.linter import PodLinter, validate_file, validate_string  # noqa: E402

__all__ = ["PodLinter", "__version__", "validate_file", "validate_string"]
