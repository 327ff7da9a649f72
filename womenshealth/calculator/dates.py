"""Calendar-date helpers shared by the calculator.

All arithmetic is day-granular on ``datetime.date``; there is no time of day
and no time zone.  Strings cross the boundary in ``YYYY-MM-DD`` form only.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from womenshealth.calculator.errors import DateOutOfRange, InvalidDateFormat

DATE_FORMAT = "%Y-%m-%d"

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(value: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` string into a date.

    ``date`` values pass through unchanged; a ``datetime`` is truncated to its
    calendar date.

    Args:
        value: Date string or date object.

    Returns:
        The parsed calendar date.

    Raises:
        InvalidDateFormat: If the string does not match the pattern or names
                           an impossible date (e.g. ``2023-02-29``).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateFormat(value, f"expected a YYYY-MM-DD string, got {type(value).__name__}")
    if not _DATE_PATTERN.match(value):
        raise InvalidDateFormat(value)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateFormat(value, str(exc)) from exc


def format_calendar_date(value: date) -> str:
    """Render a date as zero-padded ``YYYY-MM-DD`` (years below 1000 included)."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def shift_date(start: date, days: int) -> date:
    """Move ``start`` by a signed number of days.

    Raises:
        DateOutOfRange: If the result falls before 0001-01-01 or after 9999-12-31.
    """
    try:
        return start + timedelta(days=days)
    except OverflowError as exc:
        raise DateOutOfRange(format_calendar_date(start), days) from exc


def date_range(start: date, end: date) -> list[date]:
    """Every date from ``start`` to ``end`` inclusive, ascending.

    Returns an empty list when ``start`` is after ``end``.
    """
    span = (end - start).days
    return [start + timedelta(days=i) for i in range(span + 1)]


def days_between(start: date, end: date) -> int:
    """Signed number of whole days from ``start`` to ``end``."""
    return (end - start).days


def weeks_between(start: date, end: date) -> int:
    """Whole weeks from ``start`` to ``end``, floored (negative if reversed)."""
    return days_between(start, end) // 7
