"""Period API.

A Period is a bounded time interval with a start and an end datetime.

Public API:
    Period(start_date, end_date)
        Build from two datetimes (start must not be after end)

    Period.create(start_date, end_date=None)
        Build from datetimes or date strings; end defaults to now

    Period.minutes / hours / days / weeks / months / years(start_qty, end_qty=0)
        Build relative to now: from start_qty units ago to end_qty units ahead

Examples:
    >>> period = Period.create("2020-04-16 17:27", "2022-05-10 19:50")
    >>> period.get_diff_to_string()
    '2 years, 24 days, 2 hours, 23 minutes'
    >>>
    >>> period.diff("years")
    2
    >>>
    >>> # Relative period with a pinned clock
    >>> clock = FixedClock(datetime(2025, 10, 2, 12, 0, tzinfo=timezone.utc))
    >>> str(Period.days(2, clock=clock))
    'From: 2025-09-30 12:00:00, To: 2025-10-02 12:00:00'
"""

import logging
from datetime import datetime
from math import ceil
from typing import Optional, Union

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiod.duration.durationformat import format_duration
from timeperiod.period.periodclock import Clock, DEFAULT_CLOCK, round_seconds
from timeperiod.period.periodexceptions import InvalidPeriodError
from timeperiod.period.periodrange import PeriodRange
from timeperiod.period.periodtimezone import TimeZone, relabel
from timeperiod.period.periodunits import Unit, calendar_delta, diff_in, shift
from timeperiod.shared_utils import ensure_aware, parse_datetime

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime]


class Period:
    """
    Time interval between start_date and end_date.

    The start <= end rule is checked when the period is built. limit_*,
    to_timezone and convert_to_timezone mutate the instance in place and do
    not check it again.

    Attributes:
        start_date: Start of the period (aware datetime)
        end_date: End of the period (aware datetime)
        timezone: Descriptive zone label carried with the period (default "UTC").
            It is never applied to start_date/end_date.
    """

    def __init__(self, start_date: datetime, end_date: datetime, timezone: str = TimeZone.TZ_UTC):
        start_date = ensure_aware(start_date)
        end_date = ensure_aware(end_date)

        if start_date > end_date:
            raise InvalidPeriodError.start_date_cannot_be_after_end_date(start_date, end_date)

        self.start_date = start_date
        self.end_date = end_date
        self.timezone = timezone

    # ---- Factories ----

    @classmethod
    def create(
        cls,
        start_date: DateLike,
        end_date: Optional[DateLike] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> "Period":
        """
        Build a period from datetimes or date strings.

        Strings go through dateutil's flexible parser, so "2021-11-05 18:56",
        "Nov 5 2021 6:56pm" and ISO 8601 with offsets are all accepted.
        Strings without a zone are read as UTC.

        Args:
            start_date: Start datetime or date string
            end_date: End datetime or date string (default: now)
            clock: Time source for the default end (default: system clock)

        Raises:
            InvalidDateError: If a string cannot be parsed
            InvalidPeriodError: If start_date is after end_date

        Examples:
            >>> Period.create("2021-11-05 18:56", "2021-11-09 13:56:39").to_array()
            [datetime.datetime(2021, 11, 5, 18, 56, tzinfo=tzutc()),
             datetime.datetime(2021, 11, 9, 13, 56, 39, tzinfo=tzutc())]
        """
        start_date = parse_datetime(start_date)

        if not end_date:
            end_date = (clock or DEFAULT_CLOCK).now()
        else:
            end_date = parse_datetime(end_date)

        return cls(start_date, end_date)

    @classmethod
    def minutes(cls, start_qty: int, end_qty: int = 0, *, clock: Optional[Clock] = None) -> "Period":
        """Period from start_qty minutes ago to end_qty minutes from now."""
        return cls._from_now(start_qty, end_qty, Unit.MINUTES, clock)

    @classmethod
    def hours(cls, start_qty: int, end_qty: int = 0, *, clock: Optional[Clock] = None) -> "Period":
        """Period from start_qty hours ago to end_qty hours from now."""
        return cls._from_now(start_qty, end_qty, Unit.HOURS, clock)

    @classmethod
    def days(cls, start_qty: int, end_qty: int = 0, *, clock: Optional[Clock] = None) -> "Period":
        """Period from start_qty days ago to end_qty days from now."""
        return cls._from_now(start_qty, end_qty, Unit.DAYS, clock)

    @classmethod
    def weeks(cls, start_qty: int, end_qty: int = 0, *, clock: Optional[Clock] = None) -> "Period":
        """Period from start_qty weeks ago to end_qty weeks from now."""
        return cls._from_now(start_qty, end_qty, Unit.WEEKS, clock)

    @classmethod
    def months(cls, start_qty: int, end_qty: int = 0, *, clock: Optional[Clock] = None) -> "Period":
        """Period from start_qty months ago to end_qty months from now."""
        return cls._from_now(start_qty, end_qty, Unit.MONTHS, clock)

    @classmethod
    def years(cls, start_qty: int, end_qty: int = 0, *, clock: Optional[Clock] = None) -> "Period":
        """Period from start_qty years ago to end_qty years from now."""
        return cls._from_now(start_qty, end_qty, Unit.YEARS, clock)

    @classmethod
    def _from_now(cls, start_qty: int, end_qty: int, unit: Unit, clock: Optional[Clock]) -> "Period":
        # One clock read per call: start and end share the same "now"
        now = round_seconds((clock or DEFAULT_CLOCK).now())

        end_date = shift(now, end_qty, unit) if end_qty else now
        start_date = shift(now, -start_qty, unit)

        return cls(start_date, end_date)

    # ---- Timezone conversion ----

    def to_timezone(self, tz_out: str, tz_in: str = TimeZone.TZ_UTC) -> None:
        """
        Treat the current wall-clock times as local to tz_in and express them in tz_out.

        Only the fields of start_date/end_date are kept; their current
        tzinfo is discarded.

        Args:
            tz_out: Zone the dates are shown in afterwards
            tz_in: Zone the dates were entered in (default: UTC)

        Raises:
            UnknownTimezoneError: If either zone cannot be resolved

        Examples:
            >>> period = Period.create("2022-05-16 17:27", "2022-05-16 17:50")
            >>> period.to_timezone(TimeZone.TZ_UY)
            >>> period.start_date.hour
            14
        """
        self.start_date = relabel(self.start_date, tz_in, tz_out)
        self.end_date = relabel(self.end_date, tz_in, tz_out)

    def convert_to_timezone(self, tz_in: str, tz_out: str = TimeZone.TZ_UTC) -> None:
        """
        Convert dates entered in tz_in to tz_out (default: UTC).

        Same as to_timezone(tz_out, tz_in).
        """
        self.to_timezone(tz_out, tz_in)

    # ---- Differences ----

    def diff(self, unit: Union[Unit, str], absolute: bool = True) -> int:
        """
        Whole number of units between start_date and end_date.

        Args:
            unit: Unit or unit name ("minutes", "Day", "diffInYears", ...)
            absolute: Return the magnitude only (default True); with False
                an inverted period gives a negative count

        Raises:
            UnsupportedUnitError: If unit is not a supported unit

        Examples:
            >>> Period.create("2024-01-01", "2024-03-15").diff("months")
            2
        """
        value = diff_in(self.start_date, self.end_date, unit)
        return abs(value) if absolute else value

    def calendar_diff(self) -> relativedelta:
        """Cascading years/months/days/hours/minutes/seconds between the bounds (non-negative)."""
        if self.start_date <= self.end_date:
            return calendar_delta(self.start_date, self.end_date)
        return calendar_delta(self.end_date, self.start_date)

    def get_diff_to_string(self, locale: Optional[str] = None) -> str:
        """
        Readable length of the period.

        Examples:
            >>> Period.create("2020-04-16 17:27", "2022-05-10 19:50").get_diff_to_string(locale="es")
            '2 años, 24 días, 2 horas, 23 minutos'
        """
        return format_duration(self.calendar_diff(), locale=locale)

    # ---- Enumeration ----

    def get_date_period_by_time(self, interval: int, unit: Union[Unit, str]) -> PeriodRange:
        """
        Datetimes from start_date (inclusive) to end_date (exclusive) every interval units.

        Args:
            interval: Step size, a positive integer
            unit: Unit of the step

        Raises:
            ValueError: If interval is not a positive integer
            UnsupportedUnitError: If unit is not a supported unit

        Examples:
            >>> period = Period.create("2024-01-01", "2024-01-10")
            >>> [d.day for d in period.get_date_period_by_time(3, "days")]
            [1, 4, 7]
        """
        date_range = PeriodRange(self.start_date, self.end_date, interval, unit)
        logger.debug(f"Built {date_range!r}")
        return date_range

    def get_date_period(self, steps: int) -> PeriodRange:
        """
        Split the period into roughly `steps` evenly spaced datetimes.

        The step is ceil(total_seconds / steps) seconds, so the number of
        datetimes is ceil(total_seconds / step). That equals `steps` for most
        lengths but can fall short when the division is far from exact
        (10 seconds in 6 steps gives a 2 second step and 5 datetimes).

        Raises:
            ValueError: If steps is not a positive integer
        """
        if isinstance(steps, bool) or not isinstance(steps, int) or steps <= 0:
            raise ValueError(f"Steps must be a positive integer, got {steps!r}")

        total = self.diff(Unit.SECONDS)
        step = max(ceil(total / steps), 1)
        return self.get_date_period_by_time(step, Unit.SECONDS)

    # ---- Bound limiting ----

    def limit_start_date(self, limit: datetime) -> None:
        """Move start_date forward to limit when limit is later. Never moves it back."""
        limit = ensure_aware(limit)
        if limit > self.start_date:
            logger.debug(f"Start date limited from {self.start_date.isoformat()} to {limit.isoformat()}")
            self.start_date = limit

    def limit_end_date(self, limit: datetime) -> None:
        """Move end_date back to limit when limit is earlier. Never moves it forward."""
        limit = ensure_aware(limit)
        if limit < self.end_date:
            logger.debug(f"End date limited from {self.end_date.isoformat()} to {limit.isoformat()}")
            self.end_date = limit

    # ---- Accessors ----

    def to_array(self) -> list:
        """Return [start_date, end_date]."""
        return [self.start_date, self.end_date]

    def __str__(self) -> str:
        return (
            f"From: {self.start_date.strftime('%Y-%m-%d %H:%M:%S')}, "
            f"To: {self.end_date.strftime('%Y-%m-%d %H:%M:%S')}"
        )

    def __repr__(self) -> str:
        return (
            f"Period(start_date={self.start_date.isoformat()}, "
            f"end_date={self.end_date.isoformat()}, timezone={self.timezone!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self.start_date == other.start_date
            and self.end_date == other.end_date
            and self.timezone == other.timezone
        )

    __hash__ = None


__all__ = [
    "Period",
]
