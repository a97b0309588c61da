"""
Pytest configuration and fixtures for episode renamer tests.
"""

import os
import sys

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from episodes.utils import LogLevel, logger  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_log_level():
    """Keep log output quiet and restore the level after each test."""
    previous = logger.get_log_level()
    logger.set_log_level(LogLevel.WARN)
    yield
    logger.set_log_level(previous)


@pytest.fixture
def make_files(tmp_path):
    """Create empty files in a temporary folder and return the folder."""

    def _make(*names: str):
        for name in names:
            (tmp_path / name).write_text("")
        return tmp_path

    return _make
