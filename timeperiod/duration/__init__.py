"""Duration module for readable interval lengths.

Public API:
    format_duration(delta, locale=None) -> str
        Render a relativedelta as '2 years, 24 days, 2 hours, 23 minutes'

    available_locales() -> list[str]
        Locales with a phrase set in durationconfig.yaml
"""

from timeperiod.duration.durationformat import (
    available_locales,
    default_locale,
    format_duration,
)

__all__ = [
    "format_duration",
    "available_locales",
    "default_locale",
]
