"""Array content rules.
"""

from __future__ import annotations

from ..helpers import sort_key
from .base import VALID_RULE, invalid_rule, schema_rule


def _marker(item):
    # Unhashable items are compared by their repr
    try:
        hash(item)
    except TypeError:
        return ("__unhashable__", repr(item))
    return item


@schema_rule(
    "uniqueArray",
    "The :input must contain unique values",
    description="The array must contain unique values",
)
async def unique_array_rule(value, rule, context):
    if not isinstance(value, (list, tuple)):
        return invalid_rule(rule, context)
    seen = {_marker(item) for item in value}
    if len(seen) == len(value):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("sortedArray", "The :input must be sorted", description="The array must be sorted")
async def sorted_array_rule(value, rule, context):
    if not isinstance(value, (list, tuple)):
        return invalid_rule(rule, context)
    if len(value) <= 1:
        return VALID_RULE

    descending = rule.options.get("direction", "asc") == "desc"
    keys = [sort_key(item) for item in value]
    for current, following in zip(keys, keys[1:]):
        if (current < following) if descending else (current > following):
            return invalid_rule(rule, context)
    return VALID_RULE
