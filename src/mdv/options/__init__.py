#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Rendering options for mdv."""

from mdv.options.base import CloneFrozenMixin
from mdv.options.terminal import TerminalOptions, TerminalStyles, detect_terminal_width

__all__ = ["CloneFrozenMixin", "TerminalOptions", "TerminalStyles", "detect_terminal_width"]
