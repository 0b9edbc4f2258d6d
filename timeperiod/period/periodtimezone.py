"""Timezone helpers for periods.

Zone names are resolved with dateutil.tz (IANA database, with the system
zoneinfo or dateutil's bundled copy).
"""

import logging
from datetime import datetime, tzinfo

try:
    from dateutil import tz as dateutil_tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiod.period.periodexceptions import UnknownTimezoneError

logger = logging.getLogger(__name__)


class TimeZone:
    """Named timezone constants."""

    TZ_UTC = "UTC"
    TZ_UY = "America/Montevideo"
    TZ_ES = "Europe/Madrid"


def get_timezone(name: str) -> tzinfo:
    """
    Resolve a zone name to a tzinfo.

    Raises:
        UnknownTimezoneError: If dateutil does not know the zone

    Examples:
        >>> get_timezone("UTC")
        tzutc()
    """
    if not name or not isinstance(name, str):
        raise UnknownTimezoneError(f"Unknown timezone: {name!r}")

    if name.strip().upper() == "UTC":
        return dateutil_tz.UTC

    zone = dateutil_tz.gettz(name.strip())
    if zone is None:
        raise UnknownTimezoneError(f"Unknown timezone: {name!r}")
    return zone


def relabel(value: datetime, tz_in: str, tz_out: str) -> datetime:
    """
    Read value's wall clock as local time in tz_in and express it in tz_out.

    The original tzinfo of value is discarded, only its fields are kept.

    Examples:
        >>> utc = get_timezone("UTC")
        >>> relabel(datetime(2022, 5, 16, 17, 27, tzinfo=utc), "UTC", TimeZone.TZ_UY).hour
        14
    """
    source = get_timezone(tz_in)
    target = get_timezone(tz_out)

    result = value.replace(tzinfo=source).astimezone(target)
    logger.debug(f"Relabelled {value.isoformat()} from {tz_in} to {tz_out}: {result.isoformat()}")
    return result


__all__ = [
    "TimeZone",
    "get_timezone",
    "relabel",
]
