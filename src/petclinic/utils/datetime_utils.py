"""
Date helpers for visit scheduling.
"""

from datetime import date, timedelta
from typing import Optional, Tuple

DEFAULT_UPCOMING_DAYS = 7


def get_today() -> date:
    """Return the current local date."""
    return date.today()


def upcoming_window(
    days: int = DEFAULT_UPCOMING_DAYS, today: Optional[date] = None
) -> Tuple[date, date]:
    """
    Compute the inclusive date range for upcoming visits.

    Args:
        days: Number of days after today to include
        today: Reference date (defaults to the current date)

    Returns:
        Tuple of (start, end), both inclusive

    Raises:
        ValueError: If days is negative
    """
    if days < 0:
        raise ValueError("days must not be negative")

    start = today or get_today()
    return start, start + timedelta(days=days)


def is_future_date(value: date, today: Optional[date] = None) -> bool:
    """Check whether a date lies after today."""
    return value > (today or get_today())
