"""Presence, equality and composition rules.
"""

from __future__ import annotations

import math
from typing import Any

from ..helpers import MISSING, get_field_value, is_empty, maybe_await
from .base import VALID_RULE, invalid_rule, schema_rule


@schema_rule(
    "required", "The :input is required", requires_value=False, sort_order=-2
)
async def required_rule(value, rule, context):
    """Value must be present and not empty."""
    if is_empty(value):
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule(
    "present", "The :input field is required", requires_value=False, sort_order=-2
)
async def present_rule(value, rule, context):
    """Key must exist in the data; None and empty strings are accepted."""
    if value is MISSING:
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule("forbidden", "The :input is forbidden")
async def forbidden_rule(value, rule, context):
    if not is_empty(value):
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule("equal", "The :input must be equal to :value")
async def equal_rule(value, rule, context):
    if value != rule.options["value"]:
        return invalid_rule(rule, context)
    return VALID_RULE


def branch_key(value: Any) -> str:
    """Stringify a field value the way branch maps are keyed.

    ``True`` becomes ``"true"``, ``None`` becomes ``"null"`` and an absent
    field becomes ``"undefined"``; integral floats drop their fraction.
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


@schema_rule("when", description="Apply conditional validation based on another field value")
async def when_rule(value, rule, context):
    field_value = get_field_value(rule, context)
    branches = rule.options.get("is") or {}
    key = branch_key(field_value)

    validator = branches.get(key)
    if validator is None:
        validator = rule.options.get("otherwise")
    if validator is None:
        return VALID_RULE

    result = await validator.validate(value, context)
    if result.is_valid:
        return VALID_RULE

    first = result.first_error()
    return invalid_rule(rule, context, error=first.error if first else "Validation failed")


@schema_rule("union", "Value must match one of the allowed types")
async def union_rule(value, rule, context):
    """Value must satisfy the first candidate whose type matches.

    Candidates are tried in declaration order. Once a type-matching candidate
    fails, later candidates are only tried when ``first_error_only`` is off.
    """
    first_error_only = context.first_error_only
    messages: list[str] = []

    for validator in rule.options["validators"]:
        if not validator.matches_type(value):
            continue

        result = await validator.validate(value, context)
        if result.is_valid:
            return VALID_RULE

        first = result.first_error()
        messages.append(first.error if first else "Validation failed")

        if first_error_only:
            break

    if messages:
        error = messages[0] if first_error_only else "; ".join(messages)
        return invalid_rule(rule, context, error=error)

    return invalid_rule(rule, context)


@schema_rule("custom")
async def custom_rule(value, rule, context):
    """Run a user callback returning an error message or nothing."""
    message = await maybe_await(rule.options["callback"](value, context))
    if message:
        return invalid_rule(rule, context, error=str(message))
    return VALID_RULE
