#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdv/utils/text.py
"""Terminal text utilities: escape stripping, display width and wrapping.

Styled text carries in-band escape sequences (SGR colors, OSC hyperlinks)
that occupy no columns on screen. Everything in this module measures text
by its *display* width, one grapheme cluster at a time. Escape sequences count
as zero and wide characters or emoji sequences count as two. Tabs are
expanded to the next tab stop. Styled text therefore wraps exactly like its
unstyled equivalent.

Functions
---------
strip_ansi : Remove escape sequences from text
display_width : Number of terminal columns a string occupies
wrap_text : Greedy word wrap with first-line and continuation prefixes

Examples
--------
    >>> display_width("\\x1b[1mbold\\x1b[0m")
    4
    >>> wrap_text("one two three", 8)
    'one two\\nthree'
    >>> wrap_text("quoted text", 8, "> ", "> ")
    '> quoted\\n> text'

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple

import grapheme
import wcwidth

from mdv.constants import DEFAULT_TAB_SIZE

_ESCAPE_RE = re.compile(
    r"\x1b\[[0-9;?]*[A-Za-z]"  # CSI (SGR colors, cursor movement)
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC (hyperlinks, titles)
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)


class _Token(NamedTuple):
    text: str
    width: int
    is_space: bool


def strip_ansi(text: str) -> str:
    """Remove all recognized escape sequences from *text*.

    Parameters
    ----------
    text : str
        Text that may contain escape sequences

    Returns
    -------
    str
        The printable characters of *text*

    """
    return _ESCAPE_RE.sub("", text)


def _grapheme_width(cluster: str) -> int:
    """Return the display width of one grapheme cluster.

    Emoji sequences (VS16 presentation, ZWJ joins, skin tones, flags) take
    two columns. Other clusters take the width of their base character, so
    combining marks add nothing.
    """
    if cluster.isspace():
        return 1
    if len(cluster) > 1:
        for char in cluster:
            cp = ord(char)
            if cp in (0xFE0F, 0x200D) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
                return 2
    return max(wcwidth.wcwidth(cluster[0]), 0)


def display_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies.

    Escape sequences contribute nothing. Width is measured per grapheme
    cluster. Wide characters and emoji sequences contribute two columns and
    combining or control characters none. Tabs advance to the next multiple
    of four columns.

    Parameters
    ----------
    text : str
        Text to measure

    Returns
    -------
    int
        Display width in columns

    """
    plain = strip_ansi(text)
    if plain.isascii() and plain.isprintable():
        return len(plain)
    return sum(token.width for token in _tokenize(plain))


def _tokenize(line: str, tab_size: int = DEFAULT_TAB_SIZE) -> list[_Token]:
    """Split *line* into escape sequences and grapheme clusters.

    Tabs are expanded to spaces up to the next tab stop, counted in display
    columns from the start of the line.
    """
    tokens: list[_Token] = []
    column = 0

    def add_text(segment: str) -> None:
        nonlocal column
        for cluster in grapheme.graphemes(segment):
            if cluster == "\t":
                spaces = tab_size - column % tab_size
                tokens.extend(_Token(" ", 1, True) for _ in range(spaces))
                column += spaces
                continue
            width = _grapheme_width(cluster)
            tokens.append(_Token(cluster, width, cluster.isspace()))
            column += width

    pos = 0
    for match in _ESCAPE_RE.finditer(line):
        add_text(line[pos : match.start()])
        tokens.append(_Token(match.group(), 0, False))
        pos = match.end()
    add_text(line[pos:])
    return tokens


def _segments(line: str, tab_size: int) -> Iterator[tuple[bool, list[_Token]]]:
    """Group a line into alternating runs of whitespace and words.

    Escape sequences always belong to a word run so they are never dropped
    at a break point.
    """
    run: list[_Token] = []
    run_is_space = False
    for token in _tokenize(line, tab_size):
        if run and token.is_space != run_is_space:
            yield run_is_space, run
            run = []
        run_is_space = token.is_space
        run.append(token)
    if run:
        yield run_is_space, run


def _width_of(tokens: list[_Token]) -> int:
    return sum(token.width for token in tokens)


@dataclass(frozen=True)
class AnsiTextWrapper:
    """Greedy word wrapper that measures text by display width.

    Lines break only at whitespace. A single word wider than a whole line is
    split at the column limit so that no line exceeds ``width`` (at least one
    character is always placed per line, so an indent wider than ``width``
    cannot stall wrapping). Explicit newlines are hard breaks. Whitespace
    inside a line, including leading indentation, is kept; whitespace at a
    break point is dropped, as is trailing whitespace.

    Parameters
    ----------
    width : int
        Maximum display columns per output line, indent included
    initial_indent : str, default ""
        Prefix for the first output line
    subsequent_indent : str, default ""
        Prefix for every later output line, including later hard lines
    tab_size : int, default 4
        Distance between tab stops; tabs are expanded to spaces

    """

    width: int
    initial_indent: str = ""
    subsequent_indent: str = ""
    tab_size: int = DEFAULT_TAB_SIZE

    def __post_init__(self) -> None:
        """Validate the target width and tab size."""
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.tab_size < 1:
            raise ValueError(f"tab_size must be positive, got {self.tab_size}")

    def wrap(self, text: str) -> list[str]:
        """Wrap *text* and return the output lines without newlines."""
        lines: list[str] = []
        for hard_line in text.split("\n"):
            self._wrap_line(hard_line, lines)
        return lines

    def fill(self, text: str) -> str:
        """Wrap *text* and join the output lines with newlines."""
        return "\n".join(self.wrap(text))

    def _wrap_line(self, line: str, lines: list[str]) -> None:
        state = _LineState(self, lines)
        pending: list[_Token] = []

        for is_space, tokens in _segments(line, self.tab_size):
            if is_space:
                pending = tokens
                continue

            # Leading whitespace survives only at the start of a hard line
            gap = pending if (state.has_word or not state.continued) else []
            pending = []
            word_width = _width_of(tokens)

            if state.used + _width_of(gap) + word_width <= self.width:
                state.place(gap + tokens)
                continue

            if word_width == 0:
                # Zero-width runs (a lone reset code) stay on the current line
                state.place(tokens)
                continue

            if state.has_word:
                state.break_line()
                gap = []
                if state.used + word_width <= self.width:
                    state.place(tokens)
                    continue

            state.place_split(gap + tokens)

        state.finish()


class _LineState:
    """Mutable cursor used while wrapping one hard line."""

    def __init__(self, wrapper: AnsiTextWrapper, lines: list[str]) -> None:
        self.wrapper = wrapper
        self.lines = lines
        self.continued = False
        self._start(wrapper.initial_indent if not lines else wrapper.subsequent_indent)

    def _start(self, indent: str) -> None:
        self.parts: list[str] = [indent]
        self.used = display_width(indent)
        self.has_word = False
        self.has_columns = False

    def place(self, tokens: list[_Token]) -> None:
        self.parts.extend(token.text for token in tokens)
        width = _width_of(tokens)
        self.used += width
        self.has_word = True
        self.has_columns = self.has_columns or width > 0

    def place_split(self, tokens: list[_Token]) -> None:
        for token in tokens:
            if token.width and self.has_columns and self.used + token.width > self.wrapper.width:
                self.break_line()
            self.parts.append(token.text)
            self.used += token.width
            self.has_columns = self.has_columns or token.width > 0
        self.has_word = True

    def break_line(self) -> None:
        self.lines.append("".join(self.parts))
        self.continued = True
        self._start(self.wrapper.subsequent_indent)

    def finish(self) -> None:
        self.lines.append("".join(self.parts))


def wrap_text(text: str, width: int, initial_indent: str = "", subsequent_indent: str = "") -> str:
    """Wrap *text* to *width* display columns.

    Parameters
    ----------
    text : str
        Text to wrap; may contain escape sequences and newlines
    width : int
        Maximum display columns per line, indent included
    initial_indent : str, default ""
        Prefix for the first output line
    subsequent_indent : str, default ""
        Prefix for all other output lines

    Returns
    -------
    str
        Wrapped text with lines joined by ``"\\n"``

    Raises
    ------
    ValueError
        If width is less than 1

    """
    return AnsiTextWrapper(width, initial_indent, subsequent_indent).fill(text)
