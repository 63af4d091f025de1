"""Number validators.
"""

from __future__ import annotations

from typing import Any

from ..helpers import is_number, is_numeric
from ..mutators.number import number_mutator, numeric_mutator, round_mutator
from ..rules import length
from ..rules import number as rules
from ..rules.types import float_rule, int_rule, number_rule
from .base import GLOBAL, SIBLING, BaseValidator
from .scalar import ScalarCapable


class NumberValidator(ScalarCapable, BaseValidator):
    """Validates numbers; numeric strings are converted first.

    Bounds passed to ``min``/``max``/``greater_than``/``less_than``/``between``
    may be numbers or the dotted name of another field.
    """

    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_rule(number_rule, error_message)
        self.add_mutator(number_mutator)

    def matches_type(self, value: Any) -> bool:
        return is_number(value)

    def _bound(self, rule, error_message, scope, **options):
        instance = self.add_rule(rule, error_message)
        instance.options.update(options, scope=scope)
        return self

    def min(self, min_: float | str, error_message: str | None = None):
        """Value must be >= ``min_`` (a number or a field name)."""
        return self._bound(rules.min_rule, error_message, GLOBAL, min=min_)

    def min_sibling(self, field: str, error_message: str | None = None):
        return self._bound(rules.min_rule, error_message, SIBLING, min=field)

    def max(self, max_: float | str, error_message: str | None = None):
        return self._bound(rules.max_rule, error_message, GLOBAL, max=max_)

    def max_sibling(self, field: str, error_message: str | None = None):
        return self._bound(rules.max_rule, error_message, SIBLING, max=field)

    def greater_than(self, value: float | str, error_message: str | None = None):
        return self._bound(rules.greater_than_rule, error_message, GLOBAL, value=value)

    def greater_than_sibling(self, field: str, error_message: str | None = None):
        return self._bound(rules.greater_than_rule, error_message, SIBLING, value=field)

    def gt(self, value: float | str, error_message: str | None = None):
        return self.greater_than(value, error_message)

    def less_than(self, value: float | str, error_message: str | None = None):
        return self._bound(rules.less_than_rule, error_message, GLOBAL, value=value)

    def less_than_sibling(self, field: str, error_message: str | None = None):
        return self._bound(rules.less_than_rule, error_message, SIBLING, value=field)

    def lt(self, value: float | str, error_message: str | None = None):
        return self.less_than(value, error_message)

    def between(self, min_: float | str, max_: float | str, error_message: str | None = None):
        """Value must be within ``min_`` and ``max_`` inclusive."""
        return self._bound(rules.between_numbers_rule, error_message, GLOBAL, min=min_, max=max_)

    def between_sibling(self, min_field: str, max_field: str, error_message: str | None = None):
        return self._bound(
            rules.between_numbers_rule, error_message, SIBLING, min=min_field, max=max_field
        )

    def modulo(self, value: int, error_message: str | None = None):
        self.add_rule(rules.modulo_rule, error_message).options["value"] = value
        return self

    def positive(self, error_message: str | None = None):
        self.add_rule(rules.positive_rule, error_message)
        return self

    def negative(self, error_message: str | None = None):
        self.add_rule(rules.negative_rule, error_message)
        return self

    def odd(self, error_message: str | None = None):
        self.add_rule(rules.odd_rule, error_message)
        return self

    def even(self, error_message: str | None = None):
        self.add_rule(rules.even_rule, error_message)
        return self

    def round(self, decimals: int = 2):
        return self.add_mutator(round_mutator, {"decimals": decimals})

    # Length of the number's text representation

    def min_length(self, length_: int, error_message: str | None = None):
        self.add_rule(length.min_length_rule, error_message).options["minLength"] = length_
        return self

    def max_length(self, length_: int, error_message: str | None = None):
        self.add_rule(length.max_length_rule, error_message).options["maxLength"] = length_
        return self

    def length(self, length_: int, error_message: str | None = None):
        self.add_rule(length.length_rule, error_message).options["length"] = length_
        return self


class IntValidator(NumberValidator):
    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_rule(int_rule, error_message)


class FloatValidator(NumberValidator):
    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_rule(float_rule, error_message)


class NumericValidator(NumberValidator):
    """Accepts numbers and numeric strings."""

    def __init__(self, error_message: str | None = None) -> None:
        super().__init__(error_message)
        self.add_mutator(numeric_mutator)

    def matches_type(self, value: Any) -> bool:
        return is_numeric(value)
