"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from almanac.core.date import CalendarDate  # noqa: E402


@pytest.fixture
def july_eleventh() -> CalendarDate:
    """A fresh 2003-07-11, the date most formatting tests start from."""
    return CalendarDate(2003, 7, 11)
