"""Number and scalar coercion mutators.
"""

from __future__ import annotations

from ..helpers import MISSING, is_number, to_number


async def number_mutator(value, context):
    """Turn numeric strings into numbers; anything else is unchanged."""
    if isinstance(value, str) and value.strip():
        return to_number(value)
    return value


async def round_mutator(value, context):
    if not is_number(value):
        return value
    return round(value, context.options.get("decimals", 2))


async def boolean_mutator(value, context):
    if value is MISSING or value is None:
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    return bool(value)


async def as_string_mutator(value, context):
    """Stringify everything except absent and None values."""
    if value is MISSING or value is None:
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


numeric_mutator = number_mutator
