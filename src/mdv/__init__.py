"""mdv - render markdown files as styled, wrapped text in the terminal.

mdv parses a markdown file with mistune into a typed document tree and
renders that tree to text with ANSI styles, wrapped to the terminal width.
Headings, paragraphs, emphasis, strong text, inline code, fenced code
blocks, block quotes and links are rendered; other constructs (lists,
tables, images, footnotes, raw HTML) are parsed but produce no output.

Requirements
------------
- Python 3.10+
- mistune for parsing, rich for styles, wcwidth for display widths

Examples
--------
Render a file to standard output:

    >>> from mdv import MdDocument
    >>> MdDocument.open("README.md").render()

Render a tree to a string at a fixed width without color:

    >>> from mdv import TerminalOptions, markdown_to_ast, render
    >>> doc = markdown_to_ast("# Title\\n\\nBody text")
    >>> render(doc, TerminalOptions(width=40, terminal_width=40, color=False))
    '# Title\\n\\nBody text\\n'

See Also
--------
mdv.ast : AST node definitions
mdv.renderers.terminal : the rendering rules per node kind

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdv requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mdv.ast import Document, Node  # noqa: E402
from mdv.document import MdDocument  # noqa: E402
from mdv.exceptions import (  # noqa: E402
    FileAccessError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    MdvError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdv.options import TerminalOptions, TerminalStyles  # noqa: E402
from mdv.parsers import markdown_to_ast  # noqa: E402
from mdv.renderers import TerminalRenderer, render, render_nodes  # noqa: E402
from mdv.utils import display_width, strip_ansi, wrap_text  # noqa: E402

__all__ = [
    "__version__",
    "Document",
    "Node",
    "MdDocument",
    "MdvError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "TerminalOptions",
    "TerminalStyles",
    "TerminalRenderer",
    "markdown_to_ast",
    "render",
    "render_nodes",
    "display_width",
    "strip_ansi",
    "wrap_text",
]
