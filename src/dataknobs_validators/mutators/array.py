"""Array mutators.

All of them return new lists; the caller's input is never reordered in place.
"""

from __future__ import annotations

from ..helpers import MISSING, get_path, is_empty, sort_key


async def flip_mutator(value, context):
    if not isinstance(value, list):
        return value
    return list(reversed(value))


async def sort_mutator(value, context):
    if not isinstance(value, list):
        return value

    key = context.options.get("key")
    descending = context.options.get("direction", "asc") == "desc"

    def item_value(item):
        return get_path(item, key) if key else item

    def has_value(item):
        found = item_value(item)
        return found is not MISSING and found is not None

    # Items without a value stay at the end in either direction
    present = [item for item in value if has_value(item)]
    absent = [item for item in value if not has_value(item)]
    ordered = sorted(present, key=lambda item: sort_key(item_value(item)), reverse=descending)
    return ordered + absent


async def unique_mutator(value, context):
    """Drop repeated items, keeping first occurrences in order."""
    if not isinstance(value, list):
        return value

    result = []
    for item in value:
        if item not in result:
            result.append(item)
    return result


async def remove_empty_mutator(value, context):
    if not isinstance(value, list):
        return value
    return [item for item in value if not is_empty(item)]
