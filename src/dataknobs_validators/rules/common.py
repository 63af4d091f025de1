"""Membership, unknown-key and field-equality rules.
"""

from __future__ import annotations

from ..helpers import get_field_value
from .base import VALID_RULE, invalid_rule, schema_rule


@schema_rule("enum", "The :input must be one of the following values: :enum")
async def enum_rule(value, rule, context):
    if value in rule.options["enum"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("in", "The :input must be one of the following values: :values")
async def in_rule(value, rule, context):
    if value in rule.options["values"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("allowedValues", "The :input must be one of the allowed values")
async def allowed_values_rule(value, rule, context):
    if value in rule.options["allowedValues"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("notAllowedValues", "The :input contains a forbidden value")
async def not_allowed_values_rule(value, rule, context):
    if value not in rule.options["notAllowedValues"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("unknownKeys", "The :input contains unknown keys: :unknownKeys")
async def unknown_keys_rule(value, rule, context):
    """Object must not contain keys outside its schema and allowed keys."""
    known = set(rule.options.get("schema") or ()) | set(rule.options.get("allowedKeys") or ())
    unknown = [key for key in value if key not in known]
    if unknown:
        return invalid_rule(rule, context, unknownKeys=", ".join(str(key) for key in unknown))
    return VALID_RULE


@schema_rule(
    "equalsField",
    "The :input must match the :field field",
    sort_order=-1,
    description="The value must equal another field's value",
)
async def equals_field_rule(value, rule, context):
    if value != get_field_value(rule, context):
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule(
    "notEqualsField",
    "The :input must not match the :field field",
    sort_order=-1,
    description="The value must NOT equal another field's value",
)
async def not_equals_field_rule(value, rule, context):
    if value == get_field_value(rule, context):
        return invalid_rule(rule, context)
    return VALID_RULE
