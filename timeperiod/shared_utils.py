"""
Shared Utility Functions
------------------------

Common functions used across the period and duration modules.

Functions:
  - ensure_aware: Tag naive datetimes with a timezone
  - parse_datetime: Flexible string-to-datetime parsing (dateutil)
  - load_yaml_file: Load and parse YAML file
"""

from datetime import datetime, tzinfo
from pathlib import Path
from typing import Optional, Union

import yaml

try:
    from dateutil import parser as dateutil_parser
    from dateutil import tz as dateutil_tz
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiod.period.periodexceptions import InvalidDateError


def ensure_aware(value: datetime, default_tz: Optional[tzinfo] = None) -> datetime:
    """
    Return value with a tzinfo attached.

    Naive datetimes keep their wall-clock fields and are tagged with
    default_tz (UTC when omitted). Aware datetimes are returned unchanged.

    Examples:
        >>> ensure_aware(datetime(2024, 1, 1, 12, 0))
        datetime.datetime(2024, 1, 1, 12, 0, tzinfo=tzutc())
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    return value.replace(tzinfo=default_tz or dateutil_tz.UTC)


def parse_datetime(value: Union[str, datetime]) -> datetime:
    """
    Parse a date string into an aware datetime.

    Parsing is delegated to dateutil's flexible parser, so anything it
    accepts ("2020-04-16 17:27", "16 Apr 2020 5:27pm", ISO 8601 with
    offsets) works here. Datetimes pass through ensure_aware.

    Args:
        value: Date string or datetime

    Returns:
        Timezone-aware datetime (UTC when the input carries no zone)

    Raises:
        InvalidDateError: If the string cannot be parsed

    Examples:
        >>> parse_datetime("2020-04-16 17:27")
        datetime.datetime(2020, 4, 16, 17, 27, tzinfo=tzutc())

        >>> parse_datetime("2020-04-16T17:27:00-03:00").utcoffset()
        datetime.timedelta(days=-1, seconds=75600)
    """
    if isinstance(value, datetime):
        return ensure_aware(value)

    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Cannot parse date from {value!r}")

    try:
        parsed = dateutil_parser.parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Cannot parse date from {value!r}: {e}") from e

    return ensure_aware(parsed)


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


__all__ = [
    "ensure_aware",
    "parse_datetime",
    "load_yaml_file",
]
