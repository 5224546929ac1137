"""
Pytest configuration and shared fixtures for gcodeprep tests.
"""

import logging
import os
import sys

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from gcodeprep.gcode import Position


@pytest.fixture
def origin() -> Position:
    return Position(0.0, 0.0, 0.0)


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture package debug output so failing tests show arc details."""
    caplog.set_level(logging.DEBUG, logger="gcodeprep")
    yield
