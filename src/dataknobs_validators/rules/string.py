"""String format rules.
"""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlparse

from .base import VALID_RULE, invalid_rule, schema_rule

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)
ALPHA_PATTERN = re.compile(r"^[a-zA-Z]+$")
ALPHANUMERIC_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
DIGITS_PATTERN = re.compile(r"^[0-9]+$")
SPECIAL_CHARACTER_PATTERN = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")


@schema_rule("email", "The :input must be a valid email address")
async def email_rule(value, rule, context):
    if isinstance(value, str) and EMAIL_PATTERN.match(value):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("url", "The :input must be a valid URL")
async def url_rule(value, rule, context):
    parsed = urlparse(str(value))
    if parsed.scheme and (parsed.netloc or parsed.path) and " " not in str(value):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("ip", "The :input must be a valid IP address")
async def ip_rule(value, rule, context):
    try:
        ipaddress.ip_address(str(value))
    except ValueError:
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule("ip4", "The :input must be a valid IPv4 address")
async def ip4_rule(value, rule, context):
    try:
        ipaddress.IPv4Address(str(value))
    except ValueError:
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule("ip6", "The :input must be a valid IPv6 address")
async def ip6_rule(value, rule, context):
    try:
        ipaddress.IPv6Address(str(value))
    except ValueError:
        return invalid_rule(rule, context)
    return VALID_RULE


@schema_rule("pattern", "The :input does not match the required pattern")
async def pattern_rule(value, rule, context):
    pattern = rule.options["pattern"]
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    if pattern.search(str(value)):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("alpha", "The :input must contain only alphabetic characters")
async def alpha_rule(value, rule, context):
    if ALPHA_PATTERN.match(str(value)):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("alphaNumeric", "The :input must contain only alphanumeric characters")
async def alphanumeric_rule(value, rule, context):
    if ALPHANUMERIC_PATTERN.match(str(value)):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("isNumeric", "The :input must contain only numeric characters")
async def is_numeric_rule(value, rule, context):
    if DIGITS_PATTERN.match(str(value)):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("startsWith", "The :input must start with :value")
async def starts_with_rule(value, rule, context):
    if str(value).startswith(rule.options["value"]):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("endsWith", "The :input must end with :value")
async def ends_with_rule(value, rule, context):
    if str(value).endswith(rule.options["value"]):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("contains", "The :input must contain :value")
async def contains_rule(value, rule, context):
    if rule.options["value"] in str(value):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("notContains", "The :input must not contain :value")
async def not_contains_rule(value, rule, context):
    if rule.options["value"] not in str(value):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("withoutWhitespace", "The :input must not contain whitespace")
async def without_whitespace_rule(value, rule, context):
    if not re.search(r"\s", str(value)):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule(
    "strongPassword",
    "The :input must be at least :minLength characters and contain at least one "
    "uppercase letter, one lowercase letter, one number, and one special character",
)
async def strong_password_rule(value, rule, context):
    password = str(value)
    checks = (
        len(password) >= rule.options.get("minLength", 8),
        re.search(r"[A-Z]", password),
        re.search(r"[a-z]", password),
        re.search(r"[0-9]", password),
        SPECIAL_CHARACTER_PATTERN.search(password),
    )
    if all(checks):
        return VALID_RULE
    return invalid_rule(rule, context)


@schema_rule("creditCard", "The :input must be a valid credit card number")
async def credit_card_rule(value, rule, context):
    """Luhn checksum over the digits, ignoring whitespace."""
    number = re.sub(r"\s", "", str(value))
    if not DIGITS_PATTERN.match(number):
        return invalid_rule(rule, context)

    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    if total % 10 == 0:
        return VALID_RULE
    return invalid_rule(rule, context)
