#  Copyright (c) 2025 Tom Villani, Ph.D.
# mdv/options/terminal.py
"""Configuration options for terminal rendering.

This module defines the style registry that maps semantic roles to terminal
styles, and the render options bundling it with the resolved wrap widths.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Optional

from rich.style import Style

from mdv.constants import (
    DEFAULT_MAX_WIDTH,
    DEFAULT_TERMINAL_WIDTH,
    ENV_NO_COLOR,
    STYLE_ROLES,
    StyleRole,
)
from mdv.options.base import CloneFrozenMixin
from mdv.utils.text import wrap_text

logger = logging.getLogger(__name__)


def detect_terminal_width(fallback: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """Return the width of the controlling terminal in columns.

    Honors the ``COLUMNS`` environment variable and returns *fallback* when
    output is not attached to a terminal.
    """
    columns = shutil.get_terminal_size((fallback, 24)).columns
    return columns if columns > 0 else fallback


@dataclass(frozen=True)
class TerminalStyles:
    """Fixed mapping from semantic role to terminal style.

    Parameters
    ----------
    heading_style : Style, default magenta bold
        Applied to whole heading lines, ``#`` markers included
    emphasis_style : Style, default italic
        Applied to emphasized runs
    strong_style : Style, default bold
        Applied to strong runs and to code block language labels
    link_style : Style, default blue underline
        Applied to link URLs
    inline_code_style : Style, default bright red on bright black
        Applied to inline code spans
    code_border_style : Style, default bright red
        Applied to the frame glyphs around code blocks

    """

    heading_style: Style = field(default=Style(color="magenta", bold=True))
    emphasis_style: Style = field(default=Style(italic=True))
    strong_style: Style = field(default=Style(bold=True))
    link_style: Style = field(default=Style(color="blue", underline=True))
    inline_code_style: Style = field(default=Style(color="bright_red", bgcolor="bright_black"))
    code_border_style: Style = field(default=Style(color="bright_red"))

    def style_for(self, role: StyleRole) -> Style:
        """Look up the style registered for *role*.

        Raises
        ------
        KeyError
            If *role* is not one of the known style roles

        """
        if role not in STYLE_ROLES:
            raise KeyError(f"Unknown style role: {role!r}")
        return getattr(self, f"{role}_style")


@dataclass(frozen=True)
class TerminalOptions(CloneFrozenMixin):
    """Configuration options for rendering documents to a terminal.

    Parameters
    ----------
    width : int, default 80
        Wrap width for headings and paragraphs, in columns
    terminal_width : int, default 80
        Ambient terminal width, used to wrap block quotes and code blocks
    color : bool, default True
        Emit escape sequences for styles. When False every style is a no-op.
    styles : TerminalStyles
        Style registry consulted for every styled role

    Examples
    --------
    Resolve widths from the current terminal:
        >>> options = TerminalOptions.default()

    Fixed width without color, e.g. for tests or pipes:
        >>> options = TerminalOptions(width=40, terminal_width=40, color=False)

    """

    width: int = field(
        default=DEFAULT_TERMINAL_WIDTH,
        metadata={"help": "Wrap width for headings and paragraphs"},
    )
    terminal_width: int = field(
        default=DEFAULT_TERMINAL_WIDTH,
        metadata={"help": "Wrap width for block quotes and code blocks"},
    )
    color: bool = field(
        default=True,
        metadata={"help": "Emit ANSI styles"},
    )
    styles: TerminalStyles = field(default_factory=TerminalStyles)

    def __post_init__(self) -> None:
        """Validate width settings.

        Raises
        ------
        ValueError
            If either width is less than 1.

        """
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.terminal_width < 1:
            raise ValueError(f"terminal_width must be positive, got {self.terminal_width}")

    @classmethod
    def default(cls, max_width: int = DEFAULT_MAX_WIDTH, color: Optional[bool] = None) -> TerminalOptions:
        """Build options for the current terminal.

        The terminal width is queried once. ``width`` is capped at
        *max_width*; ``terminal_width`` is not.

        Parameters
        ----------
        max_width : int, default 120
            Upper bound for the heading and paragraph wrap width
        color : bool or None, default None
            Force color on or off. None enables color unless the ``NO_COLOR``
            environment variable is set to a non-empty value.

        """
        terminal_width = detect_terminal_width()
        if color is None:
            color = not os.environ.get(ENV_NO_COLOR)
        logger.debug("Resolved terminal width %d (wrap width %d)", terminal_width, min(terminal_width, max_width))
        return cls(width=min(terminal_width, max_width), terminal_width=terminal_width, color=color)

    def wrap(self, text: str) -> str:
        """Wrap *text* to ``width`` columns with no indents."""
        return wrap_text(text, self.width)

    def paint(self, role: StyleRole, text: str) -> str:
        """Apply the style registered for *role* to *text*."""
        if not self.color:
            return text
        return self.styles.style_for(role).render(text)
