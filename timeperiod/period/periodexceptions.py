"""
Exceptions raised by the period module.

Every error derives from PeriodError and also from ValueError, so callers that
already catch ValueError around date handling keep working.
"""

from datetime import datetime


class PeriodError(Exception):
    """Base exception for period errors."""
    pass


class InvalidPeriodError(PeriodError, ValueError):
    """Raised when a period is built with its start after its end."""

    @classmethod
    def start_date_cannot_be_after_end_date(
        cls,
        start_date: datetime,
        end_date: datetime,
    ) -> "InvalidPeriodError":
        """
        Build the error for an inverted period.

        Examples:
            >>> InvalidPeriodError.start_date_cannot_be_after_end_date(
            ...     datetime(2024, 1, 2), datetime(2024, 1, 1))
            InvalidPeriodError('Start date `2024-01-02` cannot be after end date `2024-01-01`.')
        """
        return cls(
            f"Start date `{start_date.strftime('%Y-%m-%d')}` "
            f"cannot be after end date `{end_date.strftime('%Y-%m-%d')}`."
        )


class UnsupportedUnitError(PeriodError, ValueError):
    """Raised when a unit name is not one of the supported calendar units."""
    pass


class UnknownTimezoneError(PeriodError, ValueError):
    """Raised when a timezone name cannot be resolved."""
    pass


class InvalidDateError(PeriodError, ValueError):
    """Raised when a date string cannot be parsed."""
    pass


__all__ = [
    "PeriodError",
    "InvalidPeriodError",
    "UnsupportedUnitError",
    "UnknownTimezoneError",
    "InvalidDateError",
]
