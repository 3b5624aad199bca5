"""
Global pytest fixtures for datesequence tests.
"""

from datetime import date

import pytest

from datesequence.utils.date import DashedDateFormatter


@pytest.fixture
def start():
    """Start of the January 2018 window used across the suite."""
    return "2018-01-01"


@pytest.fixture
def end():
    """End of the January 2018 window used across the suite."""
    return "2018-01-31"


@pytest.fixture
def end_date():
    return date(2018, 1, 31)


@pytest.fixture
def formatter():
    """A formatter instance independent of the shared one."""
    return DashedDateFormatter()
