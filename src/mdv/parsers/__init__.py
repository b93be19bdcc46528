#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown parsing into the mdv AST."""

from mdv.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["MarkdownParser", "markdown_to_ast"]
