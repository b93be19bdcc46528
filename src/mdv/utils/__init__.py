#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/utils/__init__.py
"""Utility modules for the mdv package.

This package contains the escape-aware text measurement and wrapping used
by the terminal renderer.
"""

from mdv.utils.text import AnsiTextWrapper, display_width, strip_ansi, wrap_text

__all__ = ["AnsiTextWrapper", "display_width", "strip_ansi", "wrap_text"]
