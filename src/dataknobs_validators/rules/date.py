"""Date comparison rules.

Comparison targets given as date literals (``date``/``datetime`` instances,
ISO strings, timestamps) are used directly; any other string is treated as a
field name, looked up in global or sibling scope. A missing or unparseable
field value makes the rule pass.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ..dates import age_in_years, is_date_value, parse_date, start_of_day, utc_now
from ..helpers import MISSING, get_path, scope_source
from .base import VALID_RULE, invalid_rule, schema_rule


def resolve_date(rule, context, option: str = "dateOrField") -> datetime | None:
    target = rule.options[option]
    if is_date_value(target):
        return parse_date(target)

    source = scope_source(context, rule.options.get("scope", "global"))
    field_value = get_path(source, str(target))
    if field_value is MISSING:
        return None
    return parse_date(field_value)


def _compare(value: Any, rule, context, option: str = "dateOrField"):
    current = parse_date(value)
    target = resolve_date(rule, context, option)
    return current, target


@schema_rule("minDate", "The :input must be at least :dateOrField")
async def min_date_rule(value, rule, context):
    current, target = _compare(value, rule, context)
    if target is None or (current is not None and current >= target):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("maxDate", "The :input must be at most :dateOrField")
async def max_date_rule(value, rule, context):
    current, target = _compare(value, rule, context)
    if target is None or (current is not None and current <= target):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("beforeDate", "The :input must be before :dateOrField")
async def before_date_rule(value, rule, context):
    current, target = _compare(value, rule, context)
    if target is None or (current is not None and current < target):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("afterDate", "The :input must be after :dateOrField")
async def after_date_rule(value, rule, context):
    current, target = _compare(value, rule, context)
    if target is None or (current is not None and current > target):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("betweenDates", "The :input must be between :startDate and :endDate")
async def between_dates_rule(value, rule, context):
    current = parse_date(value)
    start = resolve_date(rule, context, "startDate")
    end = resolve_date(rule, context, "endDate")
    if start is None or end is None:
        return VALID_RULE
    if current is not None and start <= current <= end:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("today", "The :input must be today")
async def today_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and current.date() == utc_now().date():
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("past", "The :input must be in the past")
async def past_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and current < utc_now():
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("future", "The :input must be in the future")
async def future_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and current > utc_now():
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("fromToday", "The :input must be today or in the future")
async def from_today_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and start_of_day(current) >= start_of_day(utc_now()):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("beforeToday", "The :input must be before today")
async def before_today_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and start_of_day(current) < start_of_day(utc_now()):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("weekend", "The :input must be a weekend day")
async def weekend_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and current.weekday() >= 5:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("businessDay", "The :input must be a business day")
async def business_day_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and current.weekday() < 5:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("minAge", "The :input must be at least :minAge years old")
async def min_age_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and age_in_years(current) >= rule.options["minAge"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("maxAge", "The :input must be at most :maxAge years old")
async def max_age_rule(value, rule, context):
    current = parse_date(value)
    if current is not None and age_in_years(current) <= rule.options["maxAge"]:
        return VALID_RULE
    return invalid_rule(rule, context)
