#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Every node's ``accept`` method calls the matching ``visit_*`` method on the
visitor. Supported node kinds have abstract visit methods, so a renderer
that forgets one cannot be instantiated. Unsupported kinds are routed to
:meth:`NodeVisitor.generic_visit`, which subclasses override to choose the
fallback result.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from mdv.ast.nodes import (
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for each supported node kind
    and may override :meth:`generic_visit` for everything else.

    Examples
    --------
    Collecting plain text from a paragraph:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return node.content
        ...     def visit_paragraph(self, node):
        ...         return "".join(child.accept(self) for child in node.content)
        ...     # ... remaining abstract methods ...

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit an inline Code node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    # Unsupported kinds fall through to generic_visit

    def visit_list(self, node: List) -> Any:
        return self.generic_visit(node)

    def visit_list_item(self, node: ListItem) -> Any:
        return self.generic_visit(node)

    def visit_table(self, node: Table) -> Any:
        return self.generic_visit(node)

    def visit_table_row(self, node: TableRow) -> Any:
        return self.generic_visit(node)

    def visit_table_cell(self, node: TableCell) -> Any:
        return self.generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        return self.generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> Any:
        return self.generic_visit(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        return self.generic_visit(node)

    def visit_image(self, node: Image) -> Any:
        return self.generic_visit(node)

    def visit_strikethrough(self, node: Strikethrough) -> Any:
        return self.generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> Any:
        return self.generic_visit(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for node kinds without a dedicated handler.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
