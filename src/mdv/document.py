#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/document.py
"""Parsed markdown document ready for terminal output.

MdDocument owns a parsed AST and the terminal options used to render it.
It is the boundary between file handling (reading, decoding, parsing) and
the pure rendering engine.

Examples
--------
    >>> from mdv import MdDocument
    >>> MdDocument.open("README.md").render()

"""

from __future__ import annotations

import builtins
import logging
from pathlib import Path
from typing import IO, Optional, Union

from mdv.ast import Document
from mdv.cli.timing import TimingContext
from mdv.exceptions import FileAccessError, FileNotFoundError
from mdv.options.terminal import TerminalOptions
from mdv.parsers.markdown import markdown_to_ast
from mdv.renderers.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


class MdDocument:
    """A parsed markdown document bound to its render options.

    Parameters
    ----------
    ast : Document
        Root of the parsed document tree
    options : TerminalOptions or None, default = None
        Render options; resolved from the terminal when None

    """

    def __init__(self, ast: Document, options: Optional[TerminalOptions] = None) -> None:
        """Initialize the document with its tree and options."""
        self.ast = ast
        self.options = options or TerminalOptions.default()

    @classmethod
    def open(cls, source: Union[str, Path], options: Optional[TerminalOptions] = None) -> "MdDocument":
        """Read and parse a UTF-8 markdown file.

        Parameters
        ----------
        source : str or Path
            Path to the markdown file
        options : TerminalOptions or None, default = None
            Render options for the document

        Returns
        -------
        MdDocument
            The parsed document

        Raises
        ------
        FileNotFoundError
            If *source* does not exist
        FileAccessError
            If *source* is a directory, is not readable, or is not UTF-8
        ParsingError
            If the markdown parser fails

        """
        path = Path(source)
        with TimingContext(f"Reading {path}", logger):
            try:
                text = path.read_text(encoding="utf-8")
            except builtins.FileNotFoundError as e:
                raise FileNotFoundError(str(path), original_error=e) from e
            except UnicodeDecodeError as e:
                raise FileAccessError(
                    str(path), message=f"Cannot read file: {path} is not valid UTF-8", original_error=e
                ) from e
            except OSError as e:
                raise FileAccessError(
                    str(path), message=f"Cannot read file: {path} ({e.strerror})", original_error=e
                ) from e

        return cls.from_string(text, options)

    @classmethod
    def from_string(cls, text: str, options: Optional[TerminalOptions] = None) -> "MdDocument":
        """Parse markdown *text* into a document.

        Raises
        ------
        ParsingError
            If the markdown parser fails

        """
        with TimingContext("Markdown parsing", logger):
            ast = markdown_to_ast(text)
        return cls(ast, options)

    def render_to_string(self) -> str:
        """Render the document to a styled string."""
        with TimingContext("Rendering", logger):
            return TerminalRenderer(self.options).render_to_string(self.ast)

    def render(self, stream: Optional[IO[str]] = None) -> None:
        """Render the document and write it line by line.

        Parameters
        ----------
        stream : IO[str] or None, default = None
            Text stream to write to; standard output when None

        Raises
        ------
        OutputWriteError
            If the stream cannot be written

        """
        with TimingContext("Rendering", logger):
            TerminalRenderer(self.options).render(self.ast, stream)
