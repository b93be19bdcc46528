"""Unit tests for __main__.py entry points."""

import sys
from unittest.mock import patch

import pytest


@pytest.mark.unit
class TestMdvMain:
    """Test mdv/__main__.py entry point."""

    def test_main_module_importable(self):
        """Test that __main__.py module is importable."""
        import mdv.__main__  # noqa: F401

    def test_main_is_cli_main(self):
        """Test that the module entry point is the CLI main."""
        from mdv.__main__ import main
        from mdv.cli import main as cli_main

        assert main is cli_main

    def test_main_with_help(self):
        """Test running with --help argument."""
        from mdv.cli import main

        with patch.object(sys, "argv", ["mdv", "--help"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0

    def test_main_without_arguments(self, capsys):
        """Test running with no arguments."""
        from mdv.cli import main

        with patch.object(sys, "argv", ["mdv"]):
            assert main() == 3
        assert "usage:" in capsys.readouterr().err
