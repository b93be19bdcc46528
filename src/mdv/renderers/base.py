#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/renderers/base.py
"""Base class for AST renderers.

The BaseRenderer provides the interface shared by renderers: rendering a
document to a string, and writing that string line by line to a text
stream.

"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import IO, Any, Iterator, Optional

from mdv.ast import Document
from mdv.exceptions import InvalidOptionsError, OutputWriteError


def iter_output_lines(text: str) -> Iterator[str]:
    """Yield the lines of *text*, splitting on ``"\\n"`` only.

    A trailing newline does not produce a final empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    yield from lines


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : Any or None, default = None
        Renderer-specific options

    Examples
    --------
    Creating a custom renderer:

        >>> class UpperRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "RENDERED\\n"

    """

    def __init__(self, options: Any = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        """
        pass

    def render(self, doc: Document, output: Optional[IO[str]] = None) -> None:
        """Render *doc* and write it line by line to *output*.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : IO[str] or None, default = None
            Text stream to write to; standard output when None

        Raises
        ------
        OutputWriteError
            If the stream cannot be written

        """
        self.write_lines(self.render_to_string(doc), output)

    @staticmethod
    def write_lines(text: str, output: Optional[IO[str]] = None) -> None:
        """Write each line of *text* followed by a newline to *output*.

        Raises
        ------
        OutputWriteError
            If the stream cannot be written (closed pipe, full disk, ...)

        """
        stream = output if output is not None else sys.stdout
        try:
            for line in iter_output_lines(text):
                stream.write(f"{line}\n")
            stream.flush()
        except (OSError, ValueError) as e:
            target = getattr(stream, "name", None) or repr(stream)
            raise OutputWriteError(str(target), original_error=e) from e

    @staticmethod
    def _validate_options_type(options: Any, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
