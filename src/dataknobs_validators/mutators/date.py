"""Date mutators.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from ..dates import end_of_day, parse_date, start_of_day


async def to_date_mutator(value, context):
    """Parse date-like input into a ``datetime``.

    Unparseable values are returned unchanged and fail the date rule.
    """
    parsed = parse_date(value)
    return value if parsed is None else parsed


async def start_of_day_mutator(value, context):
    if not isinstance(value, datetime):
        return value
    return start_of_day(value)


async def end_of_day_mutator(value, context):
    if not isinstance(value, datetime):
        return value
    return end_of_day(value)


async def add_days_mutator(value, context):
    if not isinstance(value, datetime):
        return value
    return value + timedelta(days=context.options.get("days", 0))


async def add_hours_mutator(value, context):
    if not isinstance(value, datetime):
        return value
    return value + timedelta(hours=context.options.get("hours", 0))
