"""Command-line entry point: ``podlint FILE``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from ruamel.yaml.error import YAMLError

from podlint import __version__
from podlint.parser.loader import YAMLSafetyError
from podlint.service.linter import PodLinter
from podlint.settings import Settings

logger = logging.getLogger("podlint.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """argparse with usage errors mapped to exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="podlint",
        description="Validate os, readiness probe ports and cpu types in a pod spec YAML file.",
    )
    parser.add_argument("file", metavar="FILE", help="YAML file to validate")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override PODLINT_LOG_LEVEL",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Validate one file; diagnostics go to stderr. Returns the exit status."""
    # Trailing arguments are ignored.
    args, _extra = build_parser().parse_known_args(argv)

    settings = Settings()
    logging.basicConfig(level=(args.log_level or settings.log_level).upper())
    logger.debug("podlint v%s validating %s", __version__, args.file)

    linter = PodLinter(settings)
    try:
        result = linter.validate_file(args.file)
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except (YAMLError, YAMLSafetyError, UnicodeDecodeError) as exc:
        print(f"Error parsing YAML: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    for diagnostic in result.diagnostics:
        print(diagnostic, file=sys.stderr)
    return result.exit_code
