"""
Input Normalization
-------------------
Helpers that turn possibly-missing request fields into safe values for
prompt templates.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as dateutil_parser

# Two defaults that differ in every date part
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def safe_string(value: Any, fallback: str = "N/A") -> str:
    """Return value if it is a non-blank string, otherwise fallback."""
    if isinstance(value, str) and value.strip() != "":
        return value
    return fallback


def safe_array_join(items: Any, fallback: str = "N/A", separator: str = ", ") -> str:
    """
    Join a list of values, or return fallback when there is nothing to join.

    Args:
        items: Expected to be a list/tuple; anything else yields fallback
        fallback: Returned for non-sequences and empty sequences
        separator: Placed between elements, order is preserved

    Returns:
        Joined string or fallback
    """
    if isinstance(items, (list, tuple)) and len(items) > 0:
        return separator.join(str(item) for item in items)
    return fallback


def safe_parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date string leniently.

    Returns a timezone-aware UTC datetime, or None if the value is missing,
    cannot be parsed, or leaves out any of year, month or day. Naive values
    are taken to be UTC.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = dateutil_parser.parse(value, default=_DEFAULT_A)
            check = dateutil_parser.parse(value, default=_DEFAULT_B)
        except (ValueError, OverflowError):
            return None
        # A part that differs between the two parses was filled from the default
        if (parsed.year, parsed.month, parsed.day) != (check.year, check.month, check.day):
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def iso_date(value: datetime) -> str:
    """Format a parsed date as YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")
