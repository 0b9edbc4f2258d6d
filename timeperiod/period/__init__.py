"""Period module for bounded time intervals.

Public API:
    Period(start_date, end_date)
        Time interval with factories, timezone conversion, differences
        and enumeration

    Unit
        Supported calendar units (seconds ... years)

    Clock, SystemClock, FixedClock
        Time sources for the relative factories

    TimeZone
        Named timezone constants

Examples:
    >>> from timeperiod.period import Period, FixedClock
    >>>
    >>> period = Period.create("2024-01-01", "2024-01-10")
    >>> [d.day for d in period.get_date_period_by_time(3, "days")]
    [1, 4, 7]
    >>>
    >>> period.diff("days")
    9
"""

from timeperiod.period.periodapi import Period
from timeperiod.period.periodclock import Clock, FixedClock, SystemClock
from timeperiod.period.periodexceptions import (
    InvalidDateError,
    InvalidPeriodError,
    PeriodError,
    UnknownTimezoneError,
    UnsupportedUnitError,
)
from timeperiod.period.periodrange import PeriodRange
from timeperiod.period.periodtimezone import TimeZone
from timeperiod.period.periodunits import Unit

__all__ = [
    "Period",
    "PeriodRange",
    "Unit",
    "Clock",
    "SystemClock",
    "FixedClock",
    "TimeZone",
    "PeriodError",
    "InvalidPeriodError",
    "UnsupportedUnitError",
    "UnknownTimezoneError",
    "InvalidDateError",
]
