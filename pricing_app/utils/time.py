"""
Date utilities for projection period stepping.

Start dates arrive as ISO-8601 strings from the surrounding API layer. Only
the calendar date is significant; any time-of-day component is discarded.
"""

from datetime import date, datetime
from typing import Union

from dateutil.relativedelta import relativedelta

from ..data.models import ProjectionInterval
from ..errors import InvalidValueError, MalformedDataError


def parse_start_date(value: Union[str, date, datetime]) -> date:
    """
    Parse a projection start date.

    Args:
        value: ISO-8601 date or datetime string, or a date/datetime object

    Returns:
        Calendar date

    Raises:
        MalformedDataError: If the string is not ISO-8601
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str) or not value.strip():
        raise MalformedDataError(
            "Start date must be a non-empty ISO-8601 string",
            raw_data=repr(value),
            expected_format="YYYY-MM-DD"
        )

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise MalformedDataError(
            f"Invalid start date: {text}",
            raw_data=text,
            expected_format="YYYY-MM-DD"
        ) from e


def parse_interval(value: Union[str, ProjectionInterval]) -> ProjectionInterval:
    """Coerce an interval name into a ProjectionInterval."""
    try:
        return ProjectionInterval(value)
    except ValueError as e:
        raise InvalidValueError(
            f"Unsupported projection interval: {value}",
            field="interval",
            value=value
        ) from e


def period_date(start: date, index: int, interval: Union[str, ProjectionInterval]) -> date:
    """
    Calendar date of projection period ``index``.

    Each period is computed from the start date, not from the previous
    period, so 2024-01-31 monthly gives 2024-02-29 then 2024-03-31.
    """
    if parse_interval(interval) is ProjectionInterval.MONTHLY:
        return start + relativedelta(months=index)
    return start + relativedelta(years=index)
