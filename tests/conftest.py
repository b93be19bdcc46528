"""Pytest configuration and shared fixtures for the mdv test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from mdv.options import TerminalOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def plain_options() -> TerminalOptions:
    """Provide fixed-width options with styles disabled.

    Returns
    -------
    TerminalOptions
        80-column options that emit no escape sequences.

    """
    return TerminalOptions(width=80, terminal_width=80, color=False)


@pytest.fixture
def color_options() -> TerminalOptions:
    """Provide fixed-width options with the default styles enabled."""
    return TerminalOptions(width=80, terminal_width=80, color=True)


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample markdown content for testing.

    Returns
    -------
    str
        Document mixing supported and unsupported constructs.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

> Quoted wisdom

- Item 1
- Item 2

```python
def hello_world():
    print("Hello, World!")
```

See [the docs](https://example.com/docs) for more.
"""


@pytest.fixture
def markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Write the sample markdown to a temporary file and return its path."""
    path = tmp_path / "sample.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
