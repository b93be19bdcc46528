#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_document.py
"""Unit tests for MdDocument: reading, parsing and writing output."""

import io
import logging
from pathlib import Path

import pytest

from mdv.ast import Document, Heading
from mdv.document import MdDocument
from mdv.exceptions import FileAccessError, FileNotFoundError, OutputWriteError
from mdv.options import TerminalOptions


@pytest.mark.unit
class TestOpen:
    """Tests for loading documents."""

    def test_open_file(self, markdown_file: Path, plain_options: TerminalOptions) -> None:
        """Test reading and parsing a file."""
        doc = MdDocument.open(markdown_file, plain_options)
        assert isinstance(doc.ast, Document)
        assert isinstance(doc.ast.children[0], Heading)
        assert doc.options is plain_options

    def test_open_str_path(self, markdown_file: Path, plain_options: TerminalOptions) -> None:
        """Test that string paths are accepted."""
        assert MdDocument.open(str(markdown_file), plain_options).ast.children

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        missing = tmp_path / "missing.md"
        with pytest.raises(FileNotFoundError) as exc_info:
            MdDocument.open(missing)
        assert exc_info.value.file_path == str(missing)
        assert "File not found" in str(exc_info.value)

    def test_directory(self, tmp_path: Path) -> None:
        """Test that a directory cannot be opened."""
        with pytest.raises(FileAccessError):
            MdDocument.open(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Test that undecodable content is reported as a file error."""
        path = tmp_path / "latin1.md"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(FileAccessError, match="not valid UTF-8"):
            MdDocument.open(path)

    def test_from_string(self, plain_options: TerminalOptions) -> None:
        """Test parsing text directly."""
        doc = MdDocument.from_string("# Title", plain_options)
        assert doc.ast.children[0].level == 1

    def test_default_options(self, monkeypatch) -> None:
        """Test that options are resolved once when omitted."""
        monkeypatch.setenv("COLUMNS", "60")
        doc = MdDocument.from_string("x")
        assert doc.options.width == 60


@pytest.mark.unit
class TestRender:
    """Tests for rendering documents."""

    def test_render_to_string(self, plain_options: TerminalOptions) -> None:
        """Test the rendered string."""
        doc = MdDocument.from_string("# Title\n\nBody text", plain_options)
        assert doc.render_to_string() == "# Title\n\nBody text\n"

    def test_render_to_stream(self, plain_options: TerminalOptions) -> None:
        """Test writing lines to a stream."""
        stream = io.StringIO()
        MdDocument.from_string("# Title\n\nBody text", plain_options).render(stream)
        assert stream.getvalue() == "# Title\n\nBody text\n"

    def test_render_sample(self, markdown_file: Path, plain_options: TerminalOptions) -> None:
        """Test a mixed document: unsupported blocks leave blank lines only."""
        stream = io.StringIO()
        MdDocument.open(markdown_file, plain_options).render(stream)
        output = stream.getvalue()
        assert output.startswith("# Sample Document\n\n")
        assert "This is a sample document with italic text and some inline code." in output
        assert "▎ Quoted wisdom" in output
        assert "╭ python" in output
        assert '│     print("Hello, World!")' in output
        assert "See https://example.com/docs for more." in output
        assert "Item 1" not in output
        assert "\x1b" not in output

    def test_render_stdout(self, plain_options: TerminalOptions, capsys) -> None:
        """Test that standard output is the default stream."""
        MdDocument.from_string("hello", plain_options).render()
        assert capsys.readouterr().out == "hello\n"

    def test_render_closed_stream(self, plain_options: TerminalOptions) -> None:
        """Test that write failures raise OutputWriteError."""
        stream = io.StringIO()
        stream.close()
        with pytest.raises(OutputWriteError) as exc_info:
            MdDocument.from_string("hello", plain_options).render(stream)
        assert exc_info.value.rendering_stage == "write"

    def test_render_idempotent(self, color_options: TerminalOptions) -> None:
        """Test that repeated renders are identical."""
        doc = MdDocument.from_string("# T\n\n*a* **b** [x](http://y)\n\n```\nz\n```", color_options)
        assert doc.render_to_string() == doc.render_to_string()

    def test_timing_logged(self, plain_options: TerminalOptions, caplog) -> None:
        """Test that parse and render durations are logged at debug."""
        with caplog.at_level(logging.DEBUG, logger="mdv.document"):
            MdDocument.from_string("x", plain_options).render_to_string()
        assert "Markdown parsing completed in" in caplog.text
        assert "Rendering completed in" in caplog.text

    def test_render_decodes_entities(self, plain_options: TerminalOptions) -> None:
        """Test that character references print as characters outside code spans."""
        doc = MdDocument.from_string("Tom &amp; Jerry &copy; 2024 `a &amp; b`", plain_options)
        assert doc.render_to_string() == "Tom & Jerry © 2024 a &amp; b\n"

    def test_render_logs_timing(self, plain_options: TerminalOptions, caplog) -> None:
        """Test that writing to a stream is timed like rendering to a string."""
        with caplog.at_level(logging.DEBUG, logger="mdv.document"):
            MdDocument.from_string("x", plain_options).render(io.StringIO())
        assert "Rendering completed in" in caplog.text
