"""Date/time helpers for the fixed ``yyyy-MM-dd HHmm`` format."""

from __future__ import annotations

import re
from datetime import datetime

from taskbook.errors import InvalidDateFormatError

DATETIME_FORMAT = "%Y-%m-%d %H%M"
DISPLAY_FORMAT = "%b %d %Y %H:%M"

INVALID_DATE_MESSAGE = "Invalid date format. Please use yyyy-MM-dd HHmm format."

# strptime accepts single-digit fields, so the shape is checked first
_DATETIME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")


def parse_datetime(text: str) -> datetime:
    """Parse a ``yyyy-MM-dd HHmm`` string.

    Args:
        text: The string to parse, e.g. ``2019-12-02 1800``

    Returns:
        A naive datetime with minute precision

    Raises:
        InvalidDateFormatError: If the string has the wrong shape or
            names an impossible date or time
    """
    if not _DATETIME_SHAPE.fullmatch(text):
        raise InvalidDateFormatError(INVALID_DATE_MESSAGE)

    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError as e:
        raise InvalidDateFormatError(INVALID_DATE_MESSAGE) from e


def format_datetime(value: datetime) -> str:
    """Format a datetime the way the task file stores it."""
    return value.strftime(DATETIME_FORMAT)


def display_datetime(value: datetime) -> str:
    """Format a datetime for people to read."""
    return value.strftime(DISPLAY_FORMAT)
