# -*- coding: utf-8 -*-
"""
DateTime Utilities.

Single place for the time formats used by the log:
- creation timestamps (ISO-8601, UTC, millisecond precision, "Z" suffix)
- entry/exit times of day ("HH:MM")
- header and export dates
"""

from datetime import datetime, date, timezone
from typing import Optional, Union

from athena.app.config import Config


def utc_timestamp(value: Optional[datetime] = None) -> str:
    """
    Format a creation timestamp.

    Naive datetimes are taken as local time and converted to UTC.

    Examples:
        >>> utc_timestamp(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
        '2024-01-15T10:30:00.000Z'
    """
    if value is None:
        value = datetime.now(timezone.utc)
    elif value.tzinfo is None:
        value = value.astimezone()

    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def time_of_day(value: Optional[datetime] = None) -> str:
    """Current (or given) local time as HH:MM."""
    value = value or datetime.now()
    return value.strftime(Config.TIME_FORMAT)


def display_date(value: Union[datetime, date, None] = None) -> str:
    """Header date, e.g. 19/10/2026."""
    value = value or datetime.now()
    return value.strftime(Config.DATE_FORMAT_DISPLAY)


def export_date(value: Union[datetime, date, None] = None) -> str:
    """Date stamp used in export file names."""
    value = value or datetime.now()
    return value.strftime(Config.EXPORT_DATE_FORMAT)
