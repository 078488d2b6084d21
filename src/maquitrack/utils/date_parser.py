"""Date parsing utilities."""

import math
import re
from datetime import date, datetime, timedelta, UTC
from typing import Any, Optional
from dateutil import parser as date_parser

# Spreadsheet serial of 1970-01-01 (serial day 0 is 1899-12-30)
EXCEL_EPOCH_OFFSET = 25569
SECONDS_PER_DAY = 86400
ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def normalize_date(value: Any) -> Optional[datetime]:
    """Normalize a spreadsheet cell into midnight UTC of the date it holds.

    Accepts:
    - "DD/MM/YYYY" strings (day first, no other order)
    - spreadsheet date serials (int or float, fraction discarded)
    - date/datetime cells, as openpyxl returns for date-formatted cells
    - ISO "YYYY-MM-DD" strings, as shown in the downloadable templates

    Anything else (None, booleans, blank or unparseable text) yields None.
    Only call this on columns that are known to hold dates: small counts
    are valid serials too.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        days = math.floor(value - EXCEL_EPOCH_OFFSET)
        try:
            return datetime(1970, 1, 1, tzinfo=UTC) + timedelta(seconds=days * SECONDS_PER_DAY)
        except OverflowError:
            return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if "/" in text:
            return _parse_day_first(text)
        if not ISO_DATE.fullmatch(text):
            return None
        try:
            parsed = date.fromisoformat(text)
        except ValueError:
            return None
        return datetime(parsed.year, parsed.month, parsed.day, tzinfo=UTC)

    return None


def _parse_day_first(text: str) -> Optional[datetime]:
    parts = text.split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(part.strip()) for part in parts)
        return datetime(year, month, day, tzinfo=UTC)
    except ValueError:
        return None


def excel_date_to_iso(value: Any) -> Optional[str]:
    """Normalize a cell and format it as an ISO-8601 UTC timestamp.

    >>> excel_date_to_iso(45292)
    '2024-01-01T00:00:00Z'
    >>> excel_date_to_iso("15/01/2024")
    '2024-01-15T00:00:00Z'
    """
    normalized = normalize_date(value)
    if normalized is None:
        return None
    return normalized.strftime("%Y-%m-%dT%H:%M:%SZ")


def cell_to_date(value: Any) -> Optional[date]:
    """Normalize a cell and return the calendar date only."""
    normalized = normalize_date(value)
    return normalized.date() if normalized is not None else None


def parse_date(date_str: str) -> date:
    """Parse a date typed on the command line.

    Supports "today", "yesterday", "tomorrow", day-first dates
    ("15/01/2024") and ISO dates ("2024-01-15").

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "hoy": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        if "/" in date_str:
            return date_parser.parse(date_str, dayfirst=True).date()
        return date_parser.isoparse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
