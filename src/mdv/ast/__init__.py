#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed markdown documents.

The module consists of two components:

- nodes: AST node classes representing document structure
- visitors: Visitor base class used by renderers

Examples
--------
Building and rendering a small tree:

    >>> from mdv.ast import Document, Heading, Paragraph, Text
    >>> from mdv.renderers.terminal import TerminalRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> output = TerminalRenderer().render_to_string(doc)

"""

from __future__ import annotations

from mdv.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from mdv.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
]
