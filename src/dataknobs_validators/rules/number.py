"""Numeric comparison rules.

Bounds given as numbers are used as is. Bounds given as strings name another
field (global or sibling scope); when that field is absent or not numeric the
comparison is skipped and the rule passes.
"""

from __future__ import annotations

from typing import Any

from ..helpers import MISSING, get_path, is_number, scope_source, to_number
from .base import VALID_RULE, invalid_rule, schema_rule


def resolve_bound(rule, context, option: str) -> Any:
    """Resolve a numeric bound option.

    Args:
        rule: Rule instance holding the option
        context: Current context
        option: Option name, e.g. ``"min"``

    Returns:
        The bound as a number, or ``MISSING`` when it cannot be resolved
    """
    bound = rule.options[option]
    if is_number(bound):
        return bound

    source = scope_source(context, rule.options.get("scope", "global"))
    field_value = get_path(source, str(bound))
    if field_value is MISSING:
        return MISSING

    number = to_number(field_value)
    if not is_number(number) or number != number:
        return MISSING
    return number


def _comparable(value: Any) -> bool:
    # Strings, lists and NaN fail every numeric rule instead of raising
    return is_number(value) and value == value


@schema_rule("min", "The :input must be at least :min")
async def min_rule(value, rule, context):
    if not _comparable(value):
        return invalid_rule(rule, context)
    bound = resolve_bound(rule, context, "min")
    if bound is MISSING or value >= bound:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("max", "The :input must equal to or less than :max")
async def max_rule(value, rule, context):
    if not _comparable(value):
        return invalid_rule(rule, context)
    bound = resolve_bound(rule, context, "max")
    if bound is MISSING or value <= bound:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("greaterThan", "The :input must be greater than :value")
async def greater_than_rule(value, rule, context):
    if not _comparable(value):
        return invalid_rule(rule, context)
    bound = resolve_bound(rule, context, "value")
    if bound is MISSING or value > bound:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("lessThan", "The :input must be less than :value")
async def less_than_rule(value, rule, context):
    if not _comparable(value):
        return invalid_rule(rule, context)
    bound = resolve_bound(rule, context, "value")
    if bound is MISSING or value < bound:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("betweenNumbers", "The :input must be between :min and :max")
async def between_numbers_rule(value, rule, context):
    if not _comparable(value):
        return invalid_rule(rule, context)
    low = resolve_bound(rule, context, "min")
    high = resolve_bound(rule, context, "max")
    if low is MISSING or high is MISSING:
        return VALID_RULE
    if low <= value <= high:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("positive", "The :input must be a positive number")
async def positive_rule(value, rule, context):
    if _comparable(value) and value > 0:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("negative", "The :input must be a negative number")
async def negative_rule(value, rule, context):
    if _comparable(value) and value < 0:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("odd", "The :input must be an odd number")
async def odd_rule(value, rule, context):
    if _comparable(value) and value % 2 != 0:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("even", "The :input must be an even number")
async def even_rule(value, rule, context):
    if _comparable(value) and value % 2 == 0:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("modulo", "The :input must be divisible by :value")
async def modulo_rule(value, rule, context):
    divisor = rule.options["value"]
    if _comparable(value) and is_number(divisor) and divisor != 0 and value % divisor == 0:
        return VALID_RULE
    return invalid_rule(rule, context)
