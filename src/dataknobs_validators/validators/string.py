"""String validator.
"""

from __future__ import annotations

import re
from typing import Any

from ..mutators import string as mutators
from ..rules import length, string
from ..rules.types import string_rule
from .base import BaseValidator
from .scalar import ScalarCapable


class StringValidator(ScalarCapable, BaseValidator):
    """Validates strings.

    Mutator methods (``trim``, ``lowercase``, ...) rewrite the value before
    the rules run; they leave non-string input alone so the type rule can
    report it.
    """

    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_rule(string_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, str)

    # ==================== Mutators ====================

    def to_string(self):
        """Convert numbers and booleans to strings before validation."""
        return self.add_mutator(mutators.to_string_mutator)

    def lowercase(self):
        return self.add_mutator(mutators.lowercase_mutator)

    def uppercase(self):
        return self.add_mutator(mutators.uppercase_mutator)

    def capitalize(self):
        return self.add_mutator(mutators.capitalize_mutator)

    def title_case(self):
        return self.add_mutator(mutators.title_case_mutator)

    def snake_case(self):
        return self.add_mutator(mutators.snake_case_mutator)

    def kebab_case(self):
        return self.add_mutator(mutators.kebab_case_mutator)

    def camel_case(self):
        return self.add_mutator(mutators.camel_case_mutator)

    def pascal_case(self):
        return self.add_mutator(mutators.pascal_case_mutator)

    def trim(self, needle: str | None = None):
        """Strip whitespace, or repeated ``needle`` occurrences, from both ends."""
        return self.add_mutator(mutators.trim_mutator, {"needle": needle})

    def ltrim(self, needle: str | None = None):
        return self.add_mutator(mutators.ltrim_mutator, {"needle": needle})

    def rtrim(self, needle: str | None = None):
        return self.add_mutator(mutators.rtrim_mutator, {"needle": needle})

    def trim_multiple_whitespace(self):
        return self.add_mutator(mutators.trim_multiple_whitespace_mutator)

    def slug(self):
        return self.add_mutator(mutators.slug_mutator)

    def append(self, suffix: str):
        return self.add_mutator(mutators.append_mutator, {"suffix": suffix})

    def prepend(self, prefix: str):
        return self.add_mutator(mutators.prepend_mutator, {"prefix": prefix})

    def replace(self, search: str | re.Pattern, replace: str):
        return self.add_mutator(mutators.replace_mutator, {"search": search, "replace": replace})

    def replace_all(self, search: str | re.Pattern, replace: str):
        return self.add_mutator(
            mutators.replace_all_mutator, {"search": search, "replace": replace}
        )

    def truncate(self, max_length: int, suffix: str = "..."):
        return self.add_mutator(
            mutators.truncate_mutator, {"maxLength": max_length, "suffix": suffix}
        )

    def mask(self, start: int, end: int | None = None, char: str = "*"):
        """Hide ``value[start:end]`` behind ``char``."""
        return self.add_mutator(mutators.mask_mutator, {"start": start, "end": end, "char": char})

    # ==================== Rules ====================

    def email(self, error_message: str | None = None):
        self.add_rule(string.email_rule, error_message)
        return self

    def url(self, error_message: str | None = None):
        self.add_rule(string.url_rule, error_message)
        return self

    def ip(self, error_message: str | None = None):
        self.add_rule(string.ip_rule, error_message)
        return self

    def ip4(self, error_message: str | None = None):
        self.add_rule(string.ip4_rule, error_message)
        return self

    def ip6(self, error_message: str | None = None):
        self.add_rule(string.ip6_rule, error_message)
        return self

    def credit_card(self, error_message: str | None = None):
        self.add_rule(string.credit_card_rule, error_message)
        return self

    def pattern(self, pattern: str | re.Pattern, error_message: str | None = None):
        """Value must contain a match for ``pattern`` (anchor it to match fully)."""
        self.add_rule(string.pattern_rule, error_message).options["pattern"] = pattern
        return self

    def without_whitespace(self, error_message: str | None = None):
        self.add_rule(string.without_whitespace_rule, error_message)
        return self

    def strong_password(self, min_length: int = 8, error_message: str | None = None):
        self.add_rule(string.strong_password_rule, error_message).options["minLength"] = min_length
        return self

    def alpha(self, error_message: str | None = None):
        self.add_rule(string.alpha_rule, error_message)
        return self

    def alphanumeric(self, error_message: str | None = None):
        self.add_rule(string.alphanumeric_rule, error_message)
        return self

    def numeric(self, error_message: str | None = None):
        """Value must contain only digits."""
        self.add_rule(string.is_numeric_rule, error_message)
        return self

    def starts_with(self, value: str, error_message: str | None = None):
        self.add_rule(string.starts_with_rule, error_message).options["value"] = value
        return self

    def ends_with(self, value: str, error_message: str | None = None):
        self.add_rule(string.ends_with_rule, error_message).options["value"] = value
        return self

    def contains(self, value: str, error_message: str | None = None):
        self.add_rule(string.contains_rule, error_message).options["value"] = value
        return self

    def not_contains(self, value: str, error_message: str | None = None):
        self.add_rule(string.not_contains_rule, error_message).options["value"] = value
        return self

    def words(self, words: int, error_message: str | None = None):
        self.add_rule(length.words_rule, error_message).options["words"] = words
        return self

    def min_words(self, words: int, error_message: str | None = None):
        self.add_rule(length.min_words_rule, error_message).options["minWords"] = words
        return self

    def max_words(self, words: int, error_message: str | None = None):
        self.add_rule(length.max_words_rule, error_message).options["maxWords"] = words
        return self

    def min_length(self, length_: int, error_message: str | None = None):
        self.add_rule(length.min_length_rule, error_message).options["minLength"] = length_
        return self

    def min(self, min_: int, error_message: str | None = None):
        """Alias of :meth:`min_length`."""
        return self.min_length(min_, error_message)

    def max_length(self, length_: int, error_message: str | None = None):
        self.add_rule(length.max_length_rule, error_message).options["maxLength"] = length_
        return self

    def max(self, max_: int, error_message: str | None = None):
        return self.max_length(max_, error_message)

    def length(self, length_: int, error_message: str | None = None):
        self.add_rule(length.length_rule, error_message).options["length"] = length_
        return self

    def between(self, min_: int, max_: int, error_message: str | None = None):
        """Length must be within ``min_`` and ``max_`` inclusive."""
        rule = self.add_rule(length.between_length_rule, error_message)
        rule.options.update(minLength=min_, maxLength=max_)
        return self

    def length_between(self, min_: int, max_: int, error_message: str | None = None):
        return self.between(min_, max_, error_message)
