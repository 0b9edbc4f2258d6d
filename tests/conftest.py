"""Shared test fixtures and utilities for timeperiod tests."""

import pytest
from datetime import datetime, timezone

from timeperiod.duration.durationformat import LOCALE_ENV_VAR
from timeperiod.period.periodclock import FixedClock


# Thursday, well away from month ends and DST changes
FIXED_NOW = datetime(2025, 10, 2, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    """The instant returned by the `clock` fixture."""
    return FIXED_NOW


@pytest.fixture
def clock():
    """Fixture providing a FixedClock pinned at FIXED_NOW.

    Example:
        def test_days(clock):
            period = Period.days(2, clock=clock)
            assert period.end_date == FIXED_NOW
    """
    return FixedClock(FIXED_NOW)


@pytest.fixture(autouse=True)
def default_locale_env(monkeypatch):
    """Keep duration output in English regardless of the caller's environment."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
