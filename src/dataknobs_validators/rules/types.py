"""Type rules.

Each rule checks the Python type of the (mutated) value. Numbers exclude
bools; ``float("nan")`` is a number.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date

from ..helpers import is_number
from .base import VALID_RULE, invalid_rule, schema_rule


@schema_rule("string", "The :input must be a string")
async def string_rule(value, rule, context):
    if isinstance(value, str):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("number", "The :input must be a number")
async def number_rule(value, rule, context):
    if is_number(value):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("int", "The :input must be an integer")
async def int_rule(value, rule, context):
    if isinstance(value, int) and not isinstance(value, bool):
        return VALID_RULE
    if isinstance(value, float) and value.is_integer():
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("float", "The :input must be a float")
async def float_rule(value, rule, context):
    if isinstance(value, float) and value == value and not value.is_integer():
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("boolean", "The :input must be a boolean")
async def boolean_rule(value, rule, context):
    if isinstance(value, bool):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("scalar", "The :input must be a scalar value")
async def scalar_rule(value, rule, context):
    if isinstance(value, (str, int, float)):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("object", "The :input must be an object")
async def object_rule(value, rule, context):
    if isinstance(value, Mapping):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("array", "The :input must be an array")
async def array_rule(value, rule, context):
    if isinstance(value, list):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("date", "The :input must be a valid date")
async def date_rule(value, rule, context):
    # datetime is a subclass of date
    if isinstance(value, date):
        return VALID_RULE
    return invalid_rule(rule, context)
