#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the mdv terminal markdown viewer.

Examples
--------
Render a file at the terminal width::

    $ mdv README.md

Fixed width without styles, e.g. when piping::

    $ mdv README.md --width 60 --no-color | less

Show timing diagnostics::

    $ MDV_LOG_LEVEL=DEBUG mdv README.md

"""

import argparse
import logging
import sys

from mdv.cli.builder import (
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from mdv.exceptions import MdvError
from mdv.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the mdv command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.input:
        parser.print_usage(sys.stderr)
        print("Error: Input file is required", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    # Lazy import keeps --help and --version free of the parser stack
    from mdv.document import MdDocument
    from mdv.options import TerminalOptions

    options = TerminalOptions.default(color=False if parsed_args.no_color else None)
    if parsed_args.width is not None:
        options = options.create_updated(width=parsed_args.width, terminal_width=parsed_args.width)

    try:
        MdDocument.open(parsed_args.input, options).render()
    except MdvError as e:
        logger.debug("Rendering %s failed", parsed_args.input, exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
