from datetime import date, datetime, timezone
import re
from typing import Any

# Calendar dates travel as YYYY-MM-DD strings
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def get_now_utc() -> datetime:
    """Get current datetime in UTC"""
    return datetime.now(timezone.utc)


def parse_date_safe(value: Any) -> date:
    """
    Parse a calendar date from a `date` object or a 'YYYY-MM-DD' string.

    Raises:
        ValueError: If the value is not a real calendar date
    """
    if isinstance(value, datetime):
        raise ValueError(f"Expected a date, got datetime '{value}'")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a date string, got {type(value).__name__}")

    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Date '{value}' is not in YYYY-MM-DD format")
    # fromisoformat rejects impossible dates like 2023-02-30
    return date.fromisoformat(value)
