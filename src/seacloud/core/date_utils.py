"""
Date and timezone utilities.

Centralizes timestamp formatting for query parameters sent to the API.
"""

import calendar
from datetime import datetime
from typing import Optional, Tuple, Union

import pytz

from . import constants


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @classmethod
    def to_iso_string(cls, dt: datetime) -> str:
        """
        Format a datetime as a UTC ISO-8601 string with millisecond precision.

        Args:
            dt: Datetime object (naive values are treated as UTC)

        Returns:
            String such as '2024-01-15T08:30:00.000Z'
        """
        utc = cls.to_utc(dt)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

    @classmethod
    def format_query_time(cls, value: Union[str, datetime]) -> str:
        """Render a query timestamp; strings are passed through untouched."""
        if isinstance(value, datetime):
            return cls.to_iso_string(value)
        return value

    @staticmethod
    def subtract_months(dt: datetime, months: int) -> datetime:
        """
        Move a datetime back by whole calendar months.

        The day of month is clamped to the last day of the target month,
        so 31 March minus one month is 28 (or 29) February.

        Args:
            dt: Datetime to shift
            months: Number of months to go back

        Returns:
            Shifted datetime with the same time of day and tzinfo
        """
        month_index = dt.year * 12 + (dt.month - 1) - months
        year, month = divmod(month_index, 12)
        month += 1
        day = min(dt.day, calendar.monthrange(year, month)[1])
        return dt.replace(year=year, month=month, day=day)

    @classmethod
    def default_sensor_value_range(
        cls,
        reference_time: Optional[datetime] = None
    ) -> Tuple[str, str]:
        """
        Get the default (from, to) range for sensor value queries.

        Args:
            reference_time: End of the range (defaults to now in UTC)

        Returns:
            Tuple of ISO-8601 strings: one month before the reference time,
            and the reference time itself
        """
        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        end = cls.to_utc(reference_time)
        start = cls.subtract_months(end, constants.DEFAULT_SENSOR_VALUES_MONTHS)
        return cls.to_iso_string(start), cls.to_iso_string(end)
