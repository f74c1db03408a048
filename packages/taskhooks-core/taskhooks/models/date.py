"""
Date handling for Taskwarrior timestamps.

Taskwarrior exports every timestamp as ``YYYYMMDDTHHMMSSZ``. The trailing
``Z`` is part of the template only; values are kept as naive datetimes and
never converted between timezones.
"""

import re
from datetime import datetime, timezone

# The date-time template used by taskwarrior's JSON export
TASKWARRIOR_DATETIME_TEMPLATE = "%Y%m%dT%H%M%SZ"

# strptime accepts single-digit fields, so the shape is checked first
_DATE_PATTERN = re.compile(r"\d{8}T\d{6}Z")


def parse_date(value: str) -> datetime:
    """
    Parse a taskwarrior timestamp.

    Args:
        value: String in the form 20150619T165438Z

    Returns:
        Naive datetime with the components taken verbatim

    Raises:
        ValueError: If the string does not match the template exactly
    """
    if not isinstance(value, str):
        raise ValueError(f"expected a date string, got {type(value).__name__}")
    if not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' does not match {TASKWARRIOR_DATETIME_TEMPLATE}")
    return datetime.strptime(value, TASKWARRIOR_DATETIME_TEMPLATE)


def format_date(value: datetime) -> str:
    """Format a datetime with the taskwarrior template."""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}T{value:%H%M%S}Z"


def now() -> datetime:
    """Current UTC wall-clock time as a naive datetime, truncated to seconds."""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
