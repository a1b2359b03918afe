"""Shared pytest fixtures for logbar tests."""

import io
import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from logbar.colors import Colors


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Path to the repository root."""
    return PROJECT_ROOT


@pytest.fixture
def stream():
    """In-memory stream to hand to a ProgressBar instead of stderr."""
    return io.StringIO()


@pytest.fixture
def restore_colors():
    """Put the ANSI codes back after a test that toggles Colors."""
    yield
    Colors.enable()


@pytest.fixture
def clean_logger():
    """Factory that hands out logger names and strips their handlers afterwards."""
    names = []

    def _make(name):
        names.append(name)
        return name

    yield _make
    for name in names:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
    # setup_logging switches colors off for non-TTY stderr
    Colors.enable()
