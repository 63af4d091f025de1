"""Length and word-count rules for strings and arrays.
"""

from __future__ import annotations

from typing import Any

from .base import VALID_RULE, invalid_rule, schema_rule


def _length(value: Any) -> int:
    if isinstance(value, (str, list, tuple, dict)):
        return len(value)
    return len(str(value or ""))


def _word_count(value: Any) -> int:
    return len(str(value or "").split(" "))


@schema_rule("minLength", "The :input must be at least :minLength characters long")
async def min_length_rule(value, rule, context):
    if _length(value) >= rule.options["minLength"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("maxLength", "The :input must not exceed :maxLength characters")
async def max_length_rule(value, rule, context):
    if _length(value) <= rule.options["maxLength"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule(
    "betweenLength", "The :input must be between :minLength and :maxLength characters long"
)
async def between_length_rule(value, rule, context):
    length = _length(value)
    if rule.options["minLength"] <= length <= rule.options["maxLength"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("length", "The :input must be exactly :length characters long")
async def length_rule(value, rule, context):
    if _length(value) == rule.options["length"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("minWords", "The :input must be at least :minWords words")
async def min_words_rule(value, rule, context):
    if _word_count(value) >= rule.options["minWords"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("maxWords", "The :input must be at most :maxWords words")
async def max_words_rule(value, rule, context):
    if _word_count(value) <= rule.options["maxWords"]:
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("words", "The :input must be exactly :words words")
async def words_rule(value, rule, context):
    if _word_count(value) == rule.options["words"]:
        return VALID_RULE
    return invalid_rule(rule, context)
