"""Date arithmetic helpers."""

import re
from datetime import date, timedelta

# Capped below the interpreter's int conversion digit limit
_INTEGER_PATTERN = re.compile(r"^\s*[+-]?\d{1,4000}\s*$")


def parse_days(value: str) -> int:
    """Parse a base-10 day offset.

    Args:
        value: Raw text, e.g. a path parameter

    Returns:
        The parsed integer

    Raises:
        ValueError: If value is not a base-10 integer
    """
    if not _INTEGER_PATTERN.match(value):
        raise ValueError(f"Invalid number of days: {value[:32]!r}")
    return int(value)


def format_future_date(days: int, today: date | None = None) -> str:
    """Add a number of days to today's date and format it as YYYY-MM-DD.

    Args:
        days: Offset in days, may be zero or negative
        today: Reference date (defaults to the current local date)

    Returns:
        Formatted date string

    Raises:
        ValueError: If the resulting date is out of range
    """
    base = today or date.today()
    try:
        target = base + timedelta(days=days)
    except OverflowError as e:
        raise ValueError(f"Day offset {days} is out of range") from e
    return target.isoformat()
