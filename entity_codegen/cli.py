"""Command-line entry point for entity-codegen."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from . import __version__
from .codegen.cli_integration import create_generate_subparser
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="entity-codegen",
        description="Generate FreeBuilder-style interfaces for tables and UDTs",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")
    create_generate_subparser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``).

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug("Parsed arguments: %s", args)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
