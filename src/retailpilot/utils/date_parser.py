"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta, UTC
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_OFFSET_PATTERN = re.compile(r"^(?:in\s+)?([+-]?\d+)\s*(day|days|d|week|weeks|w|month|months|m)(\s+ago)?$")


def _apply_offset(today: date, amount: int, unit: str) -> date:
    if unit.startswith("w"):
        return today + timedelta(weeks=amount)
    if unit.startswith("m"):
        return today + relativedelta(months=amount)
    return today + timedelta(days=amount)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", "2024-01-15T10:00:00Z"
    - Relative words: "today", "yesterday", "tomorrow"
    - Offsets: "+7d", "in 3 days", "5 days ago", "-2w", "1 month"

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to today in UTC)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    original = date_str.strip()
    date_str = original.lower()
    if today is None:
        today = datetime.now(UTC).date()

    relative_dates = {
        "today": today,
        "now": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    match = _OFFSET_PATTERN.match(date_str)
    if match:
        amount = int(match.group(1))
        if match.group(3):
            amount = -amount
        return _apply_offset(today, amount, match.group(2))

    try:
        dt = date_parser.parse(original)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{original}': {e}")


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-style timestamp into a timezone-aware datetime.

    Timestamps without a zone, and bare dates, are taken to be UTC.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = date_parser.isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Could not parse timestamp '{value}': {e}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
