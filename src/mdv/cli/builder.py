#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser and exit codes for the mdv command line."""

import argparse
import os

from mdv.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL
from mdv.exceptions import FileError, ParsingError, RenderingError, ValidationError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If *value* is not an integer greater than zero

    """
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got: {value}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got: {value}")
    return number


def _env_log_level() -> str:
    level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``mdv`` command."""
    from mdv import __version__

    parser = argparse.ArgumentParser(
        prog="mdv",
        description="Render a markdown file as styled, wrapped text in the terminal.",
        epilog=f"Environment: {ENV_LOG_LEVEL} sets the default log level; NO_COLOR disables styles.",
    )

    parser.add_argument("input", nargs="?", metavar="FILE", help="Markdown file to render")

    parser.add_argument(
        "--width",
        "-w",
        type=positive_int,
        metavar="N",
        help="Wrap width in columns (default: terminal width, paragraphs capped at 120)",
    )

    parser.add_argument("--no-color", action="store_true", help="Disable ANSI styles in the output")

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=_env_log_level(),
        help=f"Logging level for diagnostics on stderr (default: %(default)s, env: {ENV_LOG_LEVEL})",
    )

    parser.add_argument("--log-file", type=str, metavar="PATH", help="Also write diagnostics to this file")

    parser.add_argument(
        "--trace", action="store_true", help="Enable trace mode: DEBUG logging with timestamps and logger names"
    )

    parser.add_argument("--version", "-v", action="version", version=f"mdv {__version__}")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
