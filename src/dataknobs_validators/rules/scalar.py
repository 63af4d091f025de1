"""Accepted / declined rules for checkbox-like values.

A conditional variant only enforces its check while its trigger holds; when
the trigger does not hold, any value passes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..helpers import MISSING, get_field_value, is_empty
from .base import VALID_RULE, Rule, invalid_rule

ACCEPTED_VALUES = ("1", "true", "yes", "y", "on", 1, True, "Yes", "Y", "On")
DECLINED_VALUES = ("0", "false", "no", "n", "off", 0, False, "No", "N", "Off")


def _matches(value: Any, candidates: tuple) -> bool:
    # 1 == True in Python, so compare types as well
    return any(value == candidate and type(value) is type(candidate) for candidate in candidates)


def is_accepted(value: Any) -> bool:
    return _matches(value, ACCEPTED_VALUES)


def is_declined(value: Any) -> bool:
    return _matches(value, DECLINED_VALUES)


def _always(rule, context) -> bool:
    return True


def _field_equals(rule, context) -> bool:
    return get_field_value(rule, context) == rule.options["value"]


def _field_differs(rule, context) -> bool:
    return get_field_value(rule, context) != rule.options["value"]


def _field_filled(rule, context) -> bool:
    return not is_empty(get_field_value(rule, context))


def _field_present(rule, context) -> bool:
    return get_field_value(rule, context) is not MISSING


def _field_missing(rule, context) -> bool:
    return get_field_value(rule, context) is MISSING


def _build(
    name: str,
    check: Callable[[Any], bool],
    trigger: Callable[..., bool],
    message: str,
    description: str,
) -> Rule:
    async def validate(value, rule, context):
        if not trigger(rule, context) or check(value):
            return VALID_RULE
        return invalid_rule(rule, context)

    return Rule(
        name=name,
        validate=validate,
        default_error_message=message,
        description=description,
    )


_ACCEPTED = "The :input must be accepted"
_DECLINED = "The :input must be declined"

accepted_rule = _build(
    "accepted", is_accepted, _always, _ACCEPTED,
    "The value must be 1, true, yes, y or on",
)
accepted_if_rule = _build(
    "acceptedIf", is_accepted, _field_equals, _ACCEPTED,
    "Accepted if another field equals a specific value",
)
accepted_unless_rule = _build(
    "acceptedUnless", is_accepted, _field_differs, _ACCEPTED,
    "Accepted unless another field equals a specific value",
)
accepted_if_required_rule = _build(
    "acceptedIfRequired", is_accepted, _field_filled, _ACCEPTED,
    "Accepted if another field has a value",
)
accepted_if_present_rule = _build(
    "acceptedIfPresent", is_accepted, _field_present, _ACCEPTED,
    "Accepted if another field is present",
)
accepted_without_rule = _build(
    "acceptedWithout", is_accepted, _field_missing, _ACCEPTED,
    "Accepted if another field is missing",
)

declined_rule = _build(
    "declined", is_declined, _always, _DECLINED,
    "The value must be 0, false, no, n or off",
)
declined_if_rule = _build(
    "declinedIf", is_declined, _field_equals, _DECLINED,
    "Declined if another field equals a specific value",
)
declined_unless_rule = _build(
    "declinedUnless", is_declined, _field_differs, _DECLINED,
    "Declined unless another field equals a specific value",
)
declined_if_required_rule = _build(
    "declinedIfRequired", is_declined, _field_filled, _DECLINED,
    "Declined if another field has a value",
)
declined_if_present_rule = _build(
    "declinedIfPresent", is_declined, _field_present, _DECLINED,
    "Declined if another field is present",
)
declined_without_rule = _build(
    "declinedWithout", is_declined, _field_missing, _DECLINED,
    "Declined if another field is missing",
)
