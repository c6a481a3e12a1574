"""Pytest configuration and shared fixtures for the mdliteral test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
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
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by ``configure_logging``."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


@pytest.fixture
def sample_markdown() -> str:
    """Provide markdown mixing prose punctuation with real markup.

    Returns
    -------
    str
        Document exercising every protected character.

    """
    return """# Release notes

The foo_bar module now handles AT&T style names [draft].

- item (one) | two
- **bold** and *italic* ~approx~

See [the docs](https://example.com/docs?a=1&b=2 "Docs") or <https://example.com>.
"""
