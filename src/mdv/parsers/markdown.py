#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown text to the mdv AST using the
mistune parser. Every construct mistune recognizes is mapped to a node, so
the tree is complete even for kinds the terminal renderer skips.

"""

from __future__ import annotations

import html
import logging
from typing import Any

import mistune

from mdv.ast import (
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
from mdv.exceptions import ParsingError

logger = logging.getLogger(__name__)

MISTUNE_PLUGINS = ["strikethrough", "table", "footnotes", "task_lists"]


class MarkdownParser:
    r"""Convert Markdown to AST representation.

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\\n\\nThis is **bold**.")
        >>> [type(child).__name__ for child in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(self) -> None:
        """Initialize the parser and its mistune instance."""
        self._markdown = mistune.create_markdown(plugins=MISTUNE_PLUGINS, renderer=None)
        self._footnote_definitions: dict[str, list[Node]] = {}

    def parse(self, markdown_content: str) -> Document:
        """Parse Markdown text into an AST Document.

        Parameters
        ----------
        markdown_content : str
            Markdown source text

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        # Reset parser state to prevent leakage across parse calls
        self._footnote_definitions = {}

        try:
            tokens, _state = self._markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(
                f"Failed to parse markdown: {e}", parsing_stage="tokenize", original_error=e
            ) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        for identifier, content in self._footnote_definitions.items():
            children.append(FootnoteDefinition(identifier=identifier, content=content))

        logger.debug("Parsed %d top-level blocks", len(children))
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens with no content
            (blank lines, footnote definitions collected for later)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "footnotes":
            # Rendered footnote section; definitions arrive as footnote_def
            for child in token.get("children", []):
                self._process_token(child)
            return None
        elif token_type in ("footnote_def", "footnote_item"):
            self._process_footnote_def(token)
            return None

        if token_type != "blank_line":
            logger.debug("Ignoring mistune token type: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level) and 'children'

        Returns
        -------
        Heading
            Heading AST node

        """
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []

        return Heading(level=level, content=content)

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        mistune keeps the newline that ends the last code line; it is not
        part of the code value.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node

        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {})
        info_string = attrs.get("info", None) if isinstance(attrs, dict) else None

        metadata: dict[str, Any] = {}
        language = None

        if info_string:
            info_string = info_string.strip()
            metadata["info_string"] = info_string
            parts = info_string.split(maxsplit=1)
            if parts:
                language = parts[0]
                if len(parts) > 1:
                    metadata["info_attrs"] = parts[1]

        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        items = [
            self._process_list_item(child)
            for child in token.get("children", [])
            if isinstance(child, dict)
        ]

        return List(
            ordered=attrs.get("ordered", False),
            items=items,
            start=attrs.get("start", 1),
            tight=token.get("tight", attrs.get("tight", True)),
        )

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        content = self._process_tokens(token.get("children", []))

        task_status = None
        if token.get("type") == "task_list_item":
            attrs = token.get("attrs", {})
            task_status = "checked" if attrs.get("checked") else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token whose children are 'table_head' and 'table_body'

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []
        alignments = []

        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_cells(section.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    cells = self._process_table_cells(row_token.get("children", []))
                    rows.append(TableRow(cells=cells))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            content = self._process_inline_tokens(cell_token.get("children", []))
            alignment = cell_token.get("attrs", {}).get("align", None)
            cells.append(TableCell(content=content, alignment=alignment))
        return cells

    def _process_footnote_def(self, token: dict[str, Any]) -> None:
        """Store a footnote definition for the end of the document."""
        attrs = token.get("attrs", {})
        identifier = attrs.get("key", attrs.get("label", ""))
        self._footnote_definitions[identifier] = self._process_tokens(token.get("children", []))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=html.unescape(token.get("raw", "")))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(url=attrs.get("url", ""), content=self._process_inline_tokens(children), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is in children, not attrs
        alt_text = "".join(
            child.get("raw", "")
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "text"
        )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        # mistune stores the footnote key as the raw value of the reference
        return FootnoteReference(identifier=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unknown token types

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Ignoring mistune inline token type: %s", token_type)
        return None


def markdown_to_ast(markdown_content: str) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a parser and parses the
    markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from mdv.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser().parse(markdown_content)
