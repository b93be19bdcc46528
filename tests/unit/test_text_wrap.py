#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_text_wrap.py
"""Unit tests for escape-aware text measurement and wrapping.

Tests cover:
- Stripping escape sequences and measuring display width
- Greedy word wrapping with indents and hard breaks
- Splitting words wider than the line
- Property-based checks on line widths and styled text

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdv.utils.text import AnsiTextWrapper, display_width, strip_ansi, wrap_text

BOLD = "\x1b[1m"
RESET = "\x1b[0m"

words_strategy = st.lists(st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=10), min_size=1)


@pytest.mark.unit
class TestMeasurement:
    """Tests for strip_ansi and display_width."""

    def test_strip_sgr(self) -> None:
        """Test that SGR color codes are removed."""
        assert strip_ansi(f"{BOLD}bold{RESET} plain") == "bold plain"

    def test_strip_osc_hyperlink(self) -> None:
        """Test that OSC 8 hyperlink sequences are removed."""
        assert strip_ansi("\x1b]8;;http://x\x1b\\link\x1b]8;;\x1b\\") == "link"

    def test_plain_text_unchanged(self) -> None:
        """Test that text without escapes is returned as is."""
        assert strip_ansi("nothing to strip") == "nothing to strip"

    def test_display_width_ignores_escapes(self) -> None:
        """Test that escapes contribute no columns."""
        assert display_width(f"{BOLD}bold{RESET}") == 4

    def test_display_width_wide_characters(self) -> None:
        """Test that East Asian wide characters count as two columns."""
        assert display_width("日本") == 4

    def test_display_width_zwj_sequence(self) -> None:
        """Test that a joined emoji family is one two-column cluster."""
        assert display_width("\U0001f468\u200d\U0001f469\u200d\U0001f467") == 2

    def test_display_width_emoji_presentation(self) -> None:
        """Test that a heart with the emoji variation selector is two columns."""
        assert display_width("\u2764\ufe0f") == 2

    def test_display_width_flag(self) -> None:
        """Test that a regional indicator pair counts as one flag."""
        assert display_width("\U0001f1eb\U0001f1f7") == 2

    def test_display_width_combining_mark(self) -> None:
        """Test that a combining accent adds no columns."""
        assert display_width("e\u0301") == 1

    def test_display_width_tab_stops(self) -> None:
        """Test that tabs advance to the next multiple of four columns."""
        assert display_width("a\tb") == 5
        assert display_width("abcd\tb") == 9

    def test_display_width_empty(self) -> None:
        """Test the width of an empty string."""
        assert display_width("") == 0


@pytest.mark.unit
class TestWrapText:
    """Tests for greedy word wrapping."""

    def test_short_text_fits(self) -> None:
        """Test that text narrower than the width is one line."""
        assert wrap_text("hello world", 80) == "hello world"

    def test_breaks_at_whitespace(self) -> None:
        """Test greedy breaking between words."""
        assert wrap_text("one two three", 8) == "one two\nthree"

    def test_whitespace_at_break_dropped(self) -> None:
        """Test that the space at a break point does not start the next line."""
        assert wrap_text("aaa bbb", 3) == "aaa\nbbb"

    def test_trailing_whitespace_dropped(self) -> None:
        """Test that trailing whitespace is removed."""
        assert wrap_text("abc   ", 10) == "abc"

    def test_inner_whitespace_preserved(self) -> None:
        """Test that runs of spaces inside a line are kept."""
        assert wrap_text("a  b", 10) == "a  b"

    def test_leading_whitespace_preserved(self) -> None:
        """Test that indentation at the start of a line is kept."""
        assert wrap_text("    code", 20) == "    code"

    def test_hard_breaks(self) -> None:
        """Test that explicit newlines always break."""
        assert wrap_text("a\nb", 10) == "a\nb"

    def test_empty_hard_line(self) -> None:
        """Test that an empty line between hard breaks is kept."""
        assert wrap_text("a\n\nb", 10) == "a\n\nb"

    def test_empty_text(self) -> None:
        """Test wrapping the empty string."""
        assert wrap_text("", 10) == ""

    def test_indents(self) -> None:
        """Test first-line and continuation prefixes."""
        assert wrap_text("quoted text", 8, "> ", "> ") == "> quoted\n> text"

    def test_different_indents(self) -> None:
        """Test that the first line and later lines use their own prefix."""
        assert wrap_text("aa bb cc", 5, "* ", "  ") == "* aa\n  bb\n  cc"

    def test_indent_applies_to_empty_hard_line(self) -> None:
        """Test that blank lines still receive the continuation prefix."""
        assert wrap_text("a\n\nb", 10, "> ", "> ") == "> a\n> \n> b"

    def test_long_word_split(self) -> None:
        """Test that a word wider than the line is split at the column limit."""
        assert wrap_text("abcdefghij", 4) == "abcd\nefgh\nij"

    def test_long_word_after_short_word(self) -> None:
        """Test that a long word moves to a fresh line before splitting."""
        assert wrap_text("ab abcdefgh", 4) == "ab\nabcd\nefgh"

    def test_escapes_do_not_affect_breaks(self) -> None:
        """Test that styled text breaks where plain text breaks."""
        styled = wrap_text(f"{BOLD}one two three{RESET}", 8)
        assert styled == f"{BOLD}one two\nthree{RESET}"

    def test_wide_characters(self) -> None:
        """Test that wide characters are measured by columns."""
        assert wrap_text("日本 日本", 4) == "日本\n日本"

    def test_tabs_expanded(self) -> None:
        """Test that tabs become spaces up to the next tab stop."""
        assert wrap_text("a\tb", 20) == "a   b"
        assert wrap_text("\tx", 20) == "    x"

    def test_tab_stops_ignore_escapes(self) -> None:
        """Test that styled text before a tab does not shift the tab stop."""
        assert wrap_text(f"{BOLD}ab{RESET}\tc", 20) == f"{BOLD}ab{RESET}  c"

    def test_tab_is_break_point_by_columns(self) -> None:
        """Test that an expanded tab counts its full width when breaking."""
        assert wrap_text("ab\tcd", 5) == "ab\ncd"

    def test_grapheme_clusters_not_split(self) -> None:
        """Test that splitting a long word keeps emoji sequences whole."""
        family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
        assert wrap_text(family * 3, 4) == f"{family}{family}\n{family}"

    def test_invalid_width(self) -> None:
        """Test that a non-positive width is rejected."""
        with pytest.raises(ValueError):
            wrap_text("text", 0)


@pytest.mark.unit
class TestAnsiTextWrapper:
    """Tests for the wrapper object."""

    def test_wrap_returns_lines(self) -> None:
        """Test that wrap returns lines without newline characters."""
        wrapper = AnsiTextWrapper(width=5)
        assert wrapper.wrap("aa bb cc") == ["aa bb", "cc"]

    def test_fill_matches_wrap_text(self) -> None:
        """Test that fill and wrap_text agree."""
        wrapper = AnsiTextWrapper(width=6, initial_indent="> ", subsequent_indent="> ")
        assert wrapper.fill("alpha beta") == wrap_text("alpha beta", 6, "> ", "> ")

    def test_indent_wider_than_width(self) -> None:
        """Test that an oversized indent still places one character per line."""
        assert AnsiTextWrapper(width=1, subsequent_indent="> ").wrap("ab") == ["a", "> b"]

    def test_custom_tab_size(self) -> None:
        """Test that tab stops follow the configured size."""
        assert AnsiTextWrapper(width=20, tab_size=8).wrap("ab\tc") == ["ab      c"]

    def test_invalid_tab_size(self) -> None:
        """Test that a non-positive tab size is rejected."""
        with pytest.raises(ValueError):
            AnsiTextWrapper(width=10, tab_size=0)


@pytest.mark.unit
class TestWrapProperties:
    """Property-based tests for wrapping invariants."""

    @given(words=words_strategy, width=st.integers(min_value=10, max_value=60))
    def test_lines_fit_width(self, words: list[str], width: int) -> None:
        """Test that no wrapped line is wider than the width."""
        for line in wrap_text(" ".join(words), width).split("\n"):
            assert display_width(line) <= width

    @given(words=words_strategy, width=st.integers(min_value=10, max_value=60))
    def test_words_preserved(self, words: list[str], width: int) -> None:
        """Test that rejoining the lines reproduces the normalized text."""
        wrapped = wrap_text(" ".join(words), width)
        assert wrapped.split() == words

    @given(words=words_strategy, width=st.integers(min_value=1, max_value=60))
    def test_lines_fit_width_with_splitting(self, words: list[str], width: int) -> None:
        """Test that even split words never exceed the width."""
        for line in wrap_text(" ".join(words), width).split("\n"):
            assert display_width(line) <= width

    @given(
        words=words_strategy,
        styled=st.lists(st.booleans(), min_size=1),
        width=st.integers(min_value=10, max_value=60),
    )
    def test_styled_text_breaks_like_plain(self, words: list[str], styled: list[bool], width: int) -> None:
        """Test that escape sequences never change break positions."""
        marked = [f"{BOLD}{word}{RESET}" if styled[i % len(styled)] else word for i, word in enumerate(words)]
        plain = wrap_text(" ".join(words), width)
        assert strip_ansi(wrap_text(" ".join(marked), width)) == plain

    @given(words=words_strategy, width=st.integers(min_value=12, max_value=60))
    def test_every_line_prefixed(self, words: list[str], width: int) -> None:
        """Test that every output line carries its prefix."""
        lines = wrap_text(" ".join(words), width, "> ", "| ").split("\n")
        assert lines[0].startswith("> ")
        assert all(line.startswith("| ") for line in lines[1:])
