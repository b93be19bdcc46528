#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/renderers/terminal.py
"""Styled terminal text rendering from AST.

This module provides the TerminalRenderer class which converts AST nodes
into width-wrapped text with ANSI styles, suitable for printing to a
terminal. Each visit method returns the string for its node, so rendering
is a pure function of the tree and the options.

Formatting rules by node kind:

- Document: children joined by newlines (blank line between blocks)
- Heading: ``#`` markers, heading style over the whole line, wrapped
- Paragraph: inline content wrapped to the options width
- BlockQuote: content wrapped with a bar prefix on every line
- CodeBlock: framed with border glyphs and a bold language label
- Emphasis, Strong, Code: styled, never wrapped on their own
- Link: the URL only, link style; the label is not shown
- Anything else: empty string

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from mdv.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    LineBreak,
    Link,
    Node,
    Paragraph,
    Strong,
    Text,
)
from mdv.ast.visitors import NodeVisitor
from mdv.constants import (
    BLOCK_QUOTE_PREFIX,
    CODE_BLOCK_BORDER,
    CODE_BLOCK_CLOSE,
    CODE_BLOCK_OPEN,
    HEADING_MARKER,
)
from mdv.options.terminal import TerminalOptions
from mdv.renderers.base import BaseRenderer
from mdv.utils.text import wrap_text

logger = logging.getLogger(__name__)


class TerminalRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to styled, wrapped terminal text.

    Parameters
    ----------
    options : TerminalOptions or None, default = None
        Terminal rendering options. When None, widths are resolved from the
        current terminal via :meth:`TerminalOptions.default`.

    Examples
    --------
        >>> from mdv.ast import Document, Heading, Text
        >>> from mdv.options import TerminalOptions
        >>> doc = Document(children=[Heading(level=2, content=[Text(content="Hi")])])
        >>> renderer = TerminalRenderer(TerminalOptions(color=False))
        >>> renderer.render_to_string(doc)
        '## Hi\\n'

    """

    def __init__(self, options: Optional[TerminalOptions] = None):
        """Initialize the terminal renderer with options."""
        BaseRenderer._validate_options_type(options, TerminalOptions, "terminal")
        options = options or TerminalOptions.default()
        BaseRenderer.__init__(self, options)
        self.options: TerminalOptions = options

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a styled string."""
        return self.render_node(document)

    def render_node(self, node: Node) -> str:
        """Render any node, supported or not, to a string."""
        return node.accept(self)

    def render_nodes(self, nodes: Sequence[Node], separator: str) -> str:
        """Render each node and join the results with *separator*."""
        return separator.join(self.render_node(node) for node in nodes)

    # -- block nodes --------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        # Blocks end with their own newline, so "\n" leaves one blank line
        return self.render_nodes(node.children, "\n")

    def visit_heading(self, node: Heading) -> str:
        content = self.render_nodes(node.content, "")
        content = f"{HEADING_MARKER * node.level} {content}"
        content = self.options.paint("heading", content)
        return f"{self.options.wrap(content)}\n"

    def visit_paragraph(self, node: Paragraph) -> str:
        content = self.render_nodes(node.content, "")
        return f"{self.options.wrap(content)}\n"

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Render quoted blocks with the bar prefix on every wrapped line.

        Quotes wrap at the terminal width rather than the capped paragraph
        width.
        """
        content = self.render_nodes(node.children, "")
        wrapped = wrap_text(content, self.options.terminal_width, BLOCK_QUOTE_PREFIX, BLOCK_QUOTE_PREFIX)
        return f"{wrapped}\n"

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a code block framed by border glyphs.

        The body wraps at the terminal width by display columns, so long
        unbroken tokens (URLs, identifiers) are split across lines.
        """
        opts = self.options
        before = f"{opts.paint('code_border', CODE_BLOCK_OPEN)} {opts.paint('strong', node.language or '')}"
        after = opts.paint("code_border", CODE_BLOCK_CLOSE)
        border = opts.paint("code_border", CODE_BLOCK_BORDER)
        body = wrap_text(node.content, opts.terminal_width, border, border)
        return f"{before}\n{body}\n{after}\n"

    # -- inline nodes -------------------------------------------------------

    def visit_text(self, node: Text) -> str:
        return node.content

    def visit_emphasis(self, node: Emphasis) -> str:
        return self.options.paint("emphasis", self.render_nodes(node.content, ""))

    def visit_strong(self, node: Strong) -> str:
        return self.options.paint("strong", self.render_nodes(node.content, ""))

    def visit_code(self, node: Code) -> str:
        return self.options.paint("inline_code", node.content)

    def visit_link(self, node: Link) -> str:
        # Only the destination is shown; label content is discarded
        return self.options.paint("link", node.url)

    def visit_line_break(self, node: LineBreak) -> str:
        return "\n"

    def generic_visit(self, node: Node) -> str:
        """Render unsupported node kinds as nothing."""
        logger.debug("Skipping unsupported node: %s", type(node).__name__)
        return ""


def render(node: Node, options: TerminalOptions) -> str:
    """Render *node* to a styled string.

    Parameters
    ----------
    node : Node
        Any AST node; unsupported kinds render as ``""``
    options : TerminalOptions
        Widths, color switch and styles for this render

    Returns
    -------
    str
        The rendered text

    """
    return TerminalRenderer(options).render_node(node)


def render_nodes(nodes: Sequence[Node], separator: str, options: TerminalOptions) -> str:
    """Render each of *nodes* and join the results with *separator*."""
    return TerminalRenderer(options).render_nodes(nodes, separator)
