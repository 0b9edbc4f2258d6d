"""Time Period - bounded time intervals

Public API for building, converting, measuring and enumerating periods.

Usage:
    from timeperiod import Period, TimeZone

    # Period between two dates (strings or datetimes)
    period = Period.create("2020-04-16 17:27", "2022-05-10 19:50")
    period.get_diff_to_string()  # Returns: '2 years, 24 days, 2 hours, 23 minutes'

    # Period relative to now
    period = Period.days(7)      # last 7 days up to now
    period.diff("hours")         # Returns: 168

    # Dates entered in UTC, shown in Montevideo time
    period.to_timezone(TimeZone.TZ_UY)

    # Enumerate every 6 hours, or split into 10 steps
    list(period.get_date_period_by_time(6, "hours"))
    list(period.get_date_period(10))
"""

__version__ = "0.0.1"

# ============================================================================
# Period API
# ============================================================================

from .period.periodapi import (
    Period,               # Primary API - bounded time interval
)

from .period.periodrange import (
    PeriodRange,          # Lazy, restartable enumeration of datetimes
)

from .period.periodunits import (
    Unit,                 # Supported calendar units
)

from .period.periodclock import (
    Clock,                # Time source interface
    SystemClock,          # Real time (UTC)
    FixedClock,           # Pinned time for tests
)

from .period.periodtimezone import (
    TimeZone,             # Named timezone constants
)

# ============================================================================
# Duration Formatting
# ============================================================================

from .duration.durationformat import (
    format_duration,      # relativedelta -> readable phrase
    available_locales,    # Locales with a phrase set
)

# ============================================================================
# Errors
# ============================================================================

from .period.periodexceptions import (
    PeriodError,           # Base class
    InvalidPeriodError,    # Start after end
    UnsupportedUnitError,  # Unknown unit name
    UnknownTimezoneError,  # Unknown zone name
    InvalidDateError,      # Unparseable date string
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY API - Start here!
    # ========================================================================
    "Period",

    # ========================================================================
    # Building blocks
    # ========================================================================
    "PeriodRange",
    "Unit",
    "Clock",
    "SystemClock",
    "FixedClock",
    "TimeZone",

    # ========================================================================
    # Duration Formatting
    # ========================================================================
    "format_duration",
    "available_locales",

    # ========================================================================
    # Errors
    # ========================================================================
    "PeriodError",
    "InvalidPeriodError",
    "UnsupportedUnitError",
    "UnknownTimezoneError",
    "InvalidDateError",
]
