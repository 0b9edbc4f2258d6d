"""Calendar Units
--------------

Closed set of units understood by periods, plus the two lookup tables that
give them meaning: shifting a datetime by N units and counting whole units
between two datetimes.

Supported units: seconds, minutes, hours, days, weeks, months, years.

Unit names are normalized before lookup, so "Minutes", "minute", "mins" and
the legacy "diffInMinutes" spelling all resolve to Unit.MINUTES.

Examples:
  >>> Unit.parse("diffInHours")
  <Unit.HOURS: 'hours'>

  >>> shift(datetime(2024, 1, 31, tzinfo=timezone.utc), 1, Unit.MONTHS)
  datetime.datetime(2024, 2, 29, 0, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Union

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiod.period.periodexceptions import UnsupportedUnitError


class Unit(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def parse(cls, value: Union["Unit", str]) -> "Unit":
        """
        Resolve a Unit or unit name to a Unit.

        Raises:
            UnsupportedUnitError: If the name is not a supported unit
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedUnitError(f"Unsupported unit: {value!r}")

        name = normalize_unit_name(value)
        try:
            return cls(name)
        except ValueError:
            supported = ", ".join(u.value for u in cls)
            raise UnsupportedUnitError(
                f"Unsupported unit: {value!r}. Use one of: {supported}"
            ) from None

    @property
    def is_calendar(self) -> bool:
        """True for units whose length depends on the calendar (months, years)."""
        return self in (Unit.MONTHS, Unit.YEARS)


# Short spellings accepted on top of singular/plural names
_UNIT_ALIASES = {
    "s": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "min": "minutes",
    "mins": "minutes",
    "h": "hours",
    "hr": "hours",
    "hrs": "hours",
    "d": "days",
    "w": "weeks",
    "wk": "weeks",
    "wks": "weeks",
    "mo": "months",
    "mos": "months",
    "y": "years",
    "yr": "years",
    "yrs": "years",
}

# Fixed-length units in seconds; months and years are handled by the calendar
_UNIT_SECONDS = {
    Unit.SECONDS: 1,
    Unit.MINUTES: 60,
    Unit.HOURS: 3600,
    Unit.DAYS: 86400,
    Unit.WEEKS: 604800,
}


def normalize_unit_name(text: str) -> str:
    """
    Normalize a unit name to its plural lowercase form.

    Examples:
        >>> normalize_unit_name("Minute")
        'minutes'

        >>> normalize_unit_name("diffInYears")
        'years'

        >>> normalize_unit_name(" hrs ")
        'hours'
    """
    name = text.strip().lower()
    name = re.sub(r"^diff_?in_?", "", name)

    if name in _UNIT_ALIASES:
        return _UNIT_ALIASES[name]

    if name and not name.endswith("s"):
        name += "s"

    return name


def unit_delta(quantity: int, unit: Union[Unit, str]) -> relativedelta:
    """Return a relativedelta of quantity units."""
    unit = Unit.parse(unit)
    return relativedelta(**{unit.value: quantity})


def shift(value: datetime, quantity: int, unit: Union[Unit, str]) -> datetime:
    """
    Move value by quantity units (negative moves backwards).

    Month and year shifts clip to the last day of the target month, so
    Jan 31 + 1 month is the last day of February.
    """
    return value + unit_delta(quantity, unit)


def calendar_delta(start: datetime, end: datetime) -> relativedelta:
    """
    Cascading calendar decomposition from start to end.

    The end is converted to the start's timezone first so the decomposition
    is done on one wall clock. The result is negative when end < start.

    Examples:
        >>> utc = timezone.utc
        >>> calendar_delta(datetime(2020, 4, 16, 17, 27, tzinfo=utc),
        ...                datetime(2022, 5, 10, 19, 50, tzinfo=utc))
        relativedelta(years=+2, days=+24, hours=+2, minutes=+23)
    """
    if start.tzinfo is not None and end.tzinfo is not None:
        end = end.astimezone(start.tzinfo)
    return relativedelta(end, start)


def diff_in(start: datetime, end: datetime, unit: Union[Unit, str]) -> int:
    """
    Count whole units from start to end, truncated toward zero.

    Fixed-length units count elapsed time (UTC based, so DST gaps are
    counted as real time). Months and years come from calendar_delta.
    Negative when end < start.
    """
    unit = Unit.parse(unit)

    if unit.is_calendar:
        delta = calendar_delta(start, end)
        months = delta.years * 12 + delta.months
        return months if unit == Unit.MONTHS else int(months / 12)

    elapsed = as_utc(end) - as_utc(start)
    micros = elapsed // timedelta(microseconds=1)
    per_unit = unit_seconds(unit) * 1000000

    whole = abs(micros) // per_unit
    return whole if micros >= 0 else -whole


def unit_seconds(unit: Union[Unit, str]) -> int:
    """Length of a fixed-length unit in seconds (months and years have none)."""
    unit = Unit.parse(unit)
    if unit.is_calendar:
        raise UnsupportedUnitError(f"{unit.value} have no fixed length in seconds")
    return _UNIT_SECONDS[unit]


def as_utc(value: datetime) -> datetime:
    """Same instant in UTC; naive values are read as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = [
    "Unit",
    "normalize_unit_name",
    "unit_delta",
    "shift",
    "calendar_delta",
    "diff_in",
    "unit_seconds",
    "as_utc",
]
