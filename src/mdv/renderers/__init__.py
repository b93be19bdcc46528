#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdv/renderers/__init__.py
"""AST renderers for mdv.

- TerminalRenderer: styled, width-wrapped text for terminals

Examples
--------
Render a document tree:

    >>> from mdv.renderers import TerminalRenderer
    >>> text = TerminalRenderer().render_to_string(doc)

"""

from mdv.renderers.base import BaseRenderer
from mdv.renderers.terminal import TerminalRenderer, render, render_nodes

__all__ = ["BaseRenderer", "TerminalRenderer", "render", "render_nodes"]
