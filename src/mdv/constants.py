#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdv terminal renderer.

This module centralizes the hardcoded values used across mdv: style role
names, the glyphs that frame block quotes and code blocks, width limits and
the environment variables read by the command-line entry point.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Terminal Layout - Width limits and framing glyphs
3. Environment - Variables read by the CLI
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

StyleRole = Literal["heading", "emphasis", "strong", "link", "inline_code", "code_border"]

STYLE_ROLES: tuple[StyleRole, ...] = ("heading", "emphasis", "strong", "link", "inline_code", "code_border")

# =============================================================================
# Terminal Layout
# =============================================================================

# Wrap width is capped so paragraphs stay readable on very wide terminals
DEFAULT_MAX_WIDTH = 120

# Used when the terminal size cannot be queried (pipes, CI)
DEFAULT_TERMINAL_WIDTH = 80

DEFAULT_TAB_SIZE = 4

BLOCK_QUOTE_PREFIX = "▎ "
CODE_BLOCK_OPEN = "╭"
CODE_BLOCK_BORDER = "│ "
CODE_BLOCK_CLOSE = "╰"

HEADING_MARKER = "#"

# =============================================================================
# Environment
# =============================================================================

ENV_LOG_LEVEL = "MDV_LOG_LEVEL"
ENV_NO_COLOR = "NO_COLOR"

DEFAULT_LOG_LEVEL = "WARNING"
