"""Rule definitions.

Every rule is a module-level :class:`Rule` constant; validators wrap them in
:class:`ContextualRule` instances when they are added.
"""

from .array import sorted_array_rule, unique_array_rule
from .base import (
    VALID_RULE,
    ContextualRule,
    Rule,
    RuleResult,
    build_attributes,
    format_message,
    invalid_rule,
    schema_rule,
)
from .common import (
    allowed_values_rule,
    enum_rule,
    equals_field_rule,
    in_rule,
    not_allowed_values_rule,
    not_equals_field_rule,
    unknown_keys_rule,
)
from .conditional import (
    forbidden_if_empty_rule,
    forbidden_if_in_rule,
    forbidden_if_not_empty_rule,
    forbidden_if_not_in_rule,
    forbidden_if_not_rule,
    forbidden_if_rule,
    present_if_empty_rule,
    present_if_in_rule,
    present_if_not_empty_rule,
    present_if_not_in_rule,
    present_if_rule,
    present_unless_rule,
    present_with_all_rule,
    present_with_any_rule,
    present_with_rule,
    present_without_all_rule,
    present_without_any_rule,
    present_without_rule,
    required_if_empty_rule,
    required_if_in_rule,
    required_if_not_empty_rule,
    required_if_not_in_rule,
    required_if_rule,
    required_unless_rule,
    required_with_all_rule,
    required_with_any_rule,
    required_with_rule,
    required_without_all_rule,
    required_without_any_rule,
    required_without_rule,
)
from .core import (
    branch_key,
    custom_rule,
    equal_rule,
    forbidden_rule,
    present_rule,
    required_rule,
    union_rule,
    when_rule,
)
from .date import (
    after_date_rule,
    before_date_rule,
    before_today_rule,
    between_dates_rule,
    business_day_rule,
    from_today_rule,
    future_rule,
    max_age_rule,
    max_date_rule,
    min_age_rule,
    min_date_rule,
    past_rule,
    today_rule,
    weekend_rule,
)
from .length import (
    between_length_rule,
    length_rule,
    max_length_rule,
    max_words_rule,
    min_length_rule,
    min_words_rule,
    words_rule,
)
from .number import (
    between_numbers_rule,
    even_rule,
    greater_than_rule,
    less_than_rule,
    max_rule,
    min_rule,
    modulo_rule,
    negative_rule,
    odd_rule,
    positive_rule,
)
from .scalar import (
    accepted_if_present_rule,
    accepted_if_required_rule,
    accepted_if_rule,
    accepted_rule,
    accepted_unless_rule,
    accepted_without_rule,
    declined_if_present_rule,
    declined_if_required_rule,
    declined_if_rule,
    declined_rule,
    declined_unless_rule,
    declined_without_rule,
)
from .string import (
    alpha_rule,
    alphanumeric_rule,
    contains_rule,
    credit_card_rule,
    email_rule,
    ends_with_rule,
    ip4_rule,
    ip6_rule,
    ip_rule,
    is_numeric_rule,
    not_contains_rule,
    pattern_rule,
    starts_with_rule,
    strong_password_rule,
    url_rule,
    without_whitespace_rule,
)
from .types import (
    array_rule,
    boolean_rule,
    date_rule,
    float_rule,
    int_rule,
    number_rule,
    object_rule,
    scalar_rule,
    string_rule,
)

__all__ = [name for name in dir() if name.endswith("_rule")] + [
    "Rule",
    "ContextualRule",
    "RuleResult",
    "VALID_RULE",
    "build_attributes",
    "branch_key",
    "format_message",
    "invalid_rule",
    "schema_rule",
]
