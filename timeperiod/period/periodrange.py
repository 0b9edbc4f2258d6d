"""Lazy enumeration of datetimes inside a period.

A PeriodRange walks from start (inclusive) to end (exclusive) in steps of a
fixed number of units. Element k is start + k * step, computed from start
each time:

  - Seconds, minutes, hours, days and weeks step by elapsed time. The shift
    is done in UTC and the result expressed back in the start's zone, so a
    DST change neither skips nor repeats an instant (an hourly walk across
    the autumn change in Madrid shows 02:00 twice).
  - Months and years step on the calendar. Month-end clipping does not
    accumulate (Jan 31 stepping by one month gives Feb 29, Mar 31, Apr 30
    in 2024).

Bounds are compared as instants. Iteration stops early if the next element
would fall outside the datetime range. Iterating twice starts over from the
beginning.
"""

from datetime import datetime, timedelta
from typing import Iterator, Union

from timeperiod.period.periodunits import Unit, as_utc, unit_delta, unit_seconds
from timeperiod.shared_utils import ensure_aware


class PeriodRange:
    """Restartable half-open range of datetimes."""

    def __init__(
        self,
        start: datetime,
        end: datetime,
        interval: int,
        unit: Union[Unit, str],
    ):
        if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
            raise ValueError(f"Interval must be a positive integer, got {interval!r}")

        self.start = ensure_aware(start)
        self.end = ensure_aware(end)
        self.interval = interval
        self.unit = Unit.parse(unit)

    def _element(self, k: int) -> datetime:
        if self.unit.is_calendar:
            return self.start + unit_delta(self.interval * k, self.unit)

        offset = timedelta(seconds=self.interval * k * unit_seconds(self.unit))
        return (as_utc(self.start) + offset).astimezone(self.start.tzinfo)

    def __iter__(self) -> Iterator[datetime]:
        end_utc = as_utc(self.end)
        k = 0
        current = self.start
        while as_utc(current) < end_utc:
            yield current
            k += 1
            try:
                current = self._element(k)
            except (OverflowError, ValueError):
                # next element is past datetime.max
                return

    def __repr__(self) -> str:
        return (
            f"PeriodRange(start={self.start.isoformat()}, end={self.end.isoformat()}, "
            f"interval={self.interval}, unit='{self.unit.value}')"
        )


__all__ = [
    "PeriodRange",
]
