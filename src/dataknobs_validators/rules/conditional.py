"""Conditional presence rules.

Every rule here compares the current value against the state of one or more
other fields, looked up in the whole input (``scope="global"``) or in the
nearest parent container (``scope="sibling"``).

Three families share the same triggers:

- ``required*`` fails when the value is empty and the trigger holds
- ``present*`` fails when the key is absent and the trigger holds
- ``forbidden*`` fails when the value is not empty and the trigger holds

Required and present rules run before all other rules (sort order -2) and see
empty values; forbidden rules only run when there is a value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..helpers import MISSING, get_field_value, get_fields_values, is_empty
from .base import VALID_RULE, ContextualRule, Rule, invalid_rule

Trigger = Callable[[ContextualRule, Any], bool]


def _is(rule, context) -> bool:
    return get_field_value(rule, context) == rule.options["value"]


def _is_not(rule, context) -> bool:
    return get_field_value(rule, context) != rule.options["value"]


def _field_empty(rule, context) -> bool:
    return is_empty(get_field_value(rule, context))


def _field_not_empty(rule, context) -> bool:
    return not is_empty(get_field_value(rule, context))


def _field_in(rule, context) -> bool:
    return get_field_value(rule, context) in rule.options["values"]


def _field_not_in(rule, context) -> bool:
    return get_field_value(rule, context) not in rule.options["values"]


def _field_present(rule, context) -> bool:
    return get_field_value(rule, context) is not MISSING


def _field_missing(rule, context) -> bool:
    return get_field_value(rule, context) is MISSING


def _all_present(rule, context) -> bool:
    return all(value is not MISSING for value in get_fields_values(rule, context))


def _all_missing(rule, context) -> bool:
    return all(value is MISSING for value in get_fields_values(rule, context))


def _any_present(rule, context) -> bool:
    return any(value is not MISSING for value in get_fields_values(rule, context))


def _any_missing(rule, context) -> bool:
    return any(value is MISSING for value in get_fields_values(rule, context))


def _required_when(name: str, trigger: Trigger, description: str) -> Rule:
    async def validate(value, rule, context):
        if is_empty(value) and trigger(rule, context):
            return invalid_rule(rule, context)
        return VALID_RULE

    return Rule(
        name=name,
        validate=validate,
        default_error_message="The :input is required",
        requires_value=False,
        sort_order=-2,
        description=description,
    )


def _present_when(name: str, trigger: Trigger, description: str) -> Rule:
    async def validate(value, rule, context):
        if value is MISSING and trigger(rule, context):
            return invalid_rule(rule, context)
        return VALID_RULE

    return Rule(
        name=name,
        validate=validate,
        default_error_message="The :input field is required",
        requires_value=False,
        sort_order=-2,
        description=description,
    )


def _forbidden_when(name: str, trigger: Trigger, description: str) -> Rule:
    async def validate(value, rule, context):
        if not is_empty(value) and trigger(rule, context):
            return invalid_rule(rule, context)
        return VALID_RULE

    return Rule(
        name=name,
        validate=validate,
        default_error_message="The :input is forbidden",
        sort_order=-2,
        description=description,
    )


# Required: based on another field's value
required_if_rule = _required_when(
    "requiredIf", _is, "Required if another field equals a specific value"
)
required_unless_rule = _required_when(
    "requiredUnless", _is_not, "Required unless another field equals a specific value"
)
required_if_empty_rule = _required_when(
    "requiredIfEmpty", _field_empty, "Required if another field is empty"
)
required_if_not_empty_rule = _required_when(
    "requiredIfNotEmpty", _field_not_empty, "Required if another field is not empty"
)
required_if_in_rule = _required_when(
    "requiredIfIn", _field_in, "Required if another field's value is in the given list"
)
required_if_not_in_rule = _required_when(
    "requiredIfNotIn", _field_not_in, "Required if another field's value is not in the given list"
)

# Required: based on presence of other fields
required_with_rule = _required_when(
    "requiredWith", _field_present, "Required if another field is present"
)
required_without_rule = _required_when(
    "requiredWithout", _field_missing, "Required if another field is missing"
)
required_with_all_rule = _required_when(
    "requiredWithAll", _all_present, "Required if all of the given fields are present"
)
required_without_all_rule = _required_when(
    "requiredWithoutAll", _all_missing, "Required if all of the given fields are missing"
)
required_with_any_rule = _required_when(
    "requiredWithAny", _any_present, "Required if any of the given fields is present"
)
required_without_any_rule = _required_when(
    "requiredWithoutAny", _any_missing, "Required if any of the given fields is missing"
)

# Present
present_if_rule = _present_when(
    "presentIf", _is, "Present if another field equals a specific value"
)
present_unless_rule = _present_when(
    "presentUnless", _is_not, "Present unless another field equals a specific value"
)
present_if_empty_rule = _present_when(
    "presentIfEmpty", _field_empty, "Present if another field is empty"
)
present_if_not_empty_rule = _present_when(
    "presentIfNotEmpty", _field_not_empty, "Present if another field is not empty"
)
present_if_in_rule = _present_when(
    "presentIfIn", _field_in, "Present if another field's value is in the given list"
)
present_if_not_in_rule = _present_when(
    "presentIfNotIn", _field_not_in, "Present if another field's value is not in the given list"
)
present_with_rule = _present_when(
    "presentWith", _field_present, "Present if another field is present"
)
present_without_rule = _present_when(
    "presentWithout", _field_missing, "Present if another field is missing"
)
present_with_all_rule = _present_when(
    "presentWithAll", _all_present, "Present if all of the given fields are present"
)
present_without_all_rule = _present_when(
    "presentWithoutAll", _all_missing, "Present if all of the given fields are missing"
)
present_with_any_rule = _present_when(
    "presentWithAny", _any_present, "Present if any of the given fields is present"
)
present_without_any_rule = _present_when(
    "presentWithoutAny", _any_missing, "Present if any of the given fields is missing"
)

# Forbidden
forbidden_if_rule = _forbidden_when(
    "forbiddenIf", _is, "Forbidden if another field equals a specific value"
)
forbidden_if_not_rule = _forbidden_when(
    "forbiddenIfNot", _is_not, "Forbidden if another field does not equal a specific value"
)
forbidden_if_empty_rule = _forbidden_when(
    "forbiddenIfEmpty", _field_empty, "Forbidden if another field is empty"
)
forbidden_if_not_empty_rule = _forbidden_when(
    "forbiddenIfNotEmpty", _field_not_empty, "Forbidden if another field is not empty"
)
forbidden_if_in_rule = _forbidden_when(
    "forbiddenIfIn", _field_in, "Forbidden if another field's value is in the given list"
)
forbidden_if_not_in_rule = _forbidden_when(
    "forbiddenIfNotIn", _field_not_in, "Forbidden if another field's value is not in the given list"
)
