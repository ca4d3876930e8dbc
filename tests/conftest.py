"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def calendar():
    """Default calendar: 24 ticks per day, 365 days per year."""
    from hakoniwa.core import CalendarConfig
    return CalendarConfig(one_day_of_time=24, one_year_of_day=365)


@pytest.fixture
def zero_time(calendar):
    """Tick zero in the default calendar."""
    return calendar.zero()


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
