"""Duration formatting.

Renders a calendar decomposition (dateutil relativedelta) as a readable
phrase:

  >>> format_duration(relativedelta(years=2, days=24, hours=2, minutes=23))
  '2 years, 24 days, 2 hours, 23 minutes'

  >>> format_duration(relativedelta(months=2), locale="es")
  '2 meses, 0 horas, 0 minutos'

Rules:
  1. Years, months and days appear only when greater than zero
  2. Hours and minutes always appear, even at zero
  3. Singular exactly at 1, plural otherwise
  4. Fixed order: years, months, days, hours, minutes (seconds are dropped)

Phrase sets live in durationconfig.yaml. The default locale comes from the
TIMEPERIOD_LOCALE environment variable, then from the config file.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiod.shared_utils import load_yaml_file

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "TIMEPERIOD_LOCALE"

# Used when the YAML file is missing or unreadable
_FALLBACK_CONFIG = {
    "default_locale": "en",
    "phrases": {
        "en": {
            "year": ["year", "years"],
            "month": ["month", "months"],
            "day": ["day", "days"],
            "hour": ["hour", "hours"],
            "minute": ["minute", "minutes"],
        },
    },
}


# ============================================================================
# Load Configuration
# ============================================================================

@lru_cache(maxsize=1)
def _load_config() -> Dict[str, Any]:
    """Load phrase configuration from durationconfig.yaml.

    Returns:
        Dictionary with default_locale and phrases per locale
    """
    config_path = Path(__file__).parent / "durationconfig.yaml"

    try:
        config = load_yaml_file(config_path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load {config_path.name}: {e}, using built-in English phrases")
        return _FALLBACK_CONFIG

    if not config.get("phrases"):
        logger.warning(f"No phrases in {config_path.name}, using built-in English phrases")
        return _FALLBACK_CONFIG

    return config


def available_locales() -> list:
    """List locales with a phrase set."""
    return sorted(_load_config()["phrases"])


def default_locale() -> str:
    """Locale used when none is given: TIMEPERIOD_LOCALE, then the config default."""
    env_locale = os.environ.get(LOCALE_ENV_VAR)
    if env_locale:
        return env_locale.strip().lower()
    return _load_config().get("default_locale", "en")


def get_phrases(locale: Optional[str] = None) -> Dict[str, list]:
    """
    Return the phrase set for a locale.

    Raises:
        ValueError: If the locale has no phrase set
    """
    locale = (locale or default_locale()).strip().lower()
    phrases = _load_config()["phrases"]

    if locale not in phrases:
        raise ValueError(
            f"Unknown locale: {locale!r}. Available: {', '.join(sorted(phrases))}"
        )
    return phrases[locale]


# ============================================================================
# Formatting
# ============================================================================

def _term(value: int, words: list) -> str:
    singular, plural = words
    return f"{value} {singular if value == 1 else plural}"


def format_duration(delta: relativedelta, locale: Optional[str] = None) -> str:
    """
    Format a calendar decomposition as a comma-joined phrase.

    Args:
        delta: relativedelta with non-negative years/months/days/hours/minutes
        locale: Phrase set to use (default: see default_locale())

    Returns:
        Phrase such as '1 year, 3 days, 1 hour, 0 minutes'
    """
    phrases = get_phrases(locale)

    duration = ""
    for field in ("year", "month", "day"):
        value = getattr(delta, f"{field}s")
        if value > 0:
            duration += _term(value, phrases[field]) + ", "

    duration += _term(delta.hours, phrases["hour"]) + ", " + _term(delta.minutes, phrases["minute"])

    return duration


__all__ = [
    "LOCALE_ENV_VAR",
    "available_locales",
    "default_locale",
    "get_phrases",
    "format_duration",
]
