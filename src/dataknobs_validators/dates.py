"""Date parsing and comparison helpers.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any


def parse_date(value: Any) -> datetime | None:
    """Convert a date-like value to a naive ``datetime``.

    Accepts ``datetime`` and ``date`` instances, ISO 8601 strings (a trailing
    ``Z`` is accepted) and POSIX timestamps in seconds. Aware datetimes are
    converted to UTC before their timezone is dropped.

    Args:
        value: Value to convert

    Returns:
        The parsed datetime, or None if the value is not date-like
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, matching :func:`parse_date` output."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_timestamp(value: datetime) -> float:
    """POSIX seconds; naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def is_date_value(value: Any) -> bool:
    """True if the value is a date literal rather than a field name."""
    return parse_date(value) is not None


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999999)


def age_in_years(birth: datetime, today: date | None = None) -> int:
    """Whole years elapsed since ``birth``."""
    today = today or utc_now().date()
    years = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        years -= 1
    return years
