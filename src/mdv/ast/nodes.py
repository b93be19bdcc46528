#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/ast/nodes.py
"""AST node classes for parsed markdown documents.

This module defines the closed node hierarchy that the terminal renderer
consumes. The tree is built by :mod:`mdv.parsers.markdown` from the tokens
of the external markdown parser and is only ever read by renderers.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Supported block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote

Supported inline nodes:
    - Text, Emphasis, Strong, Code, Link, LineBreak

Unsupported nodes (kept in the tree, rendered as empty output):
    - List, ListItem, Table, TableRow, TableCell, ThematicBreak, HTMLBlock,
      FootnoteDefinition, Image, Strikethrough, HTMLInline, FootnoteReference

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_document(self)``."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_heading(self)``."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_paragraph(self)``."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block with optional language.

    Parameters
    ----------
    content : str
        Code content without the closing newline (not parsed as markdown)
    language : str or None, default = None
        Language label from the fence info string
    metadata : dict, default = empty dict
        Code block metadata (``info_string`` when the fence carried one)

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_code_block(self)``."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_block_quote(self)``."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        For task lists (GFM extension)

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node with optional header and column alignments (GFM extension)."""

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """A single row of table cells."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """A single table cell with inline content."""

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_thematic_break(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, kept verbatim."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_block(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition node (block).

    Parameters
    ----------
    identifier : str
        Footnote identifier matching a FootnoteReference
    content : list of Node, default = empty list
        Block-level content of the footnote

    """

    identifier: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_text(self)``."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with emphasis
    metadata : dict, default = empty dict
        Emphasis metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_emphasis(self)``."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with strong emphasis
    metadata : dict, default = empty dict
        Strong metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_strong(self)``."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code content
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_code(self)``."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink with inline label content.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_link(self)``."""
        return visitor.visit_link(self)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks
    metadata : dict, default = empty dict
        Line break metadata

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_line_break(self)``."""
        return visitor.visit_line_break(self)


@dataclass
class Image(Node):
    """Embedded image reference."""

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough text (GFM extension)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML, kept verbatim."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_html_inline(self)


@dataclass
class FootnoteReference(Node):
    """Inline reference to a footnote definition."""

    identifier: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_footnote_reference(self)
