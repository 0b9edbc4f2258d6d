"""Time sources for period factories.

Period factories never read the wall clock directly. They ask a Clock, so
tests can pin "now" with a FixedClock.

Examples:
  >>> clock = FixedClock(datetime(2025, 10, 2, 12, 0, tzinfo=timezone.utc))
  >>> clock.now()
  datetime.datetime(2025, 10, 2, 12, 0, tzinfo=datetime.timezone.utc)
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from timeperiod.shared_utils import ensure_aware


class Clock(ABC):
    """Source of the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as an aware datetime."""


class SystemClock(Clock):
    """Clock backed by the system time, in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """Clock frozen at a given instant until moved explicitly."""

    def __init__(self, instant: datetime):
        self._instant = ensure_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = ensure_aware(instant)

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


def round_seconds(value: datetime) -> datetime:
    """
    Round a datetime to the nearest whole second (half rounds up).

    Examples:
        >>> round_seconds(datetime(2025, 1, 1, 12, 0, 0, 500000))
        datetime.datetime(2025, 1, 1, 12, 0, 1)

        >>> round_seconds(datetime(2025, 1, 1, 12, 0, 0, 499999))
        datetime.datetime(2025, 1, 1, 12, 0)
    """
    truncated = value.replace(microsecond=0)
    if value.microsecond >= 500000:
        return truncated + timedelta(seconds=1)
    return truncated


DEFAULT_CLOCK: Clock = SystemClock()


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "round_seconds",
    "DEFAULT_CLOCK",
]
