"""Scalar validator and the membership / accepted / declined methods shared
by every scalar-like validator.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import Any

from ..mutators.number import as_string_mutator, boolean_mutator, number_mutator
from ..rules.common import allowed_values_rule, enum_rule, in_rule, not_allowed_values_rule
from ..rules.scalar import (
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
from ..rules.types import scalar_rule
from .base import GLOBAL, BaseValidator


def enum_values(values: Any) -> list[Any]:
    """Flatten an Enum class, a mapping or an iterable into a list of values."""
    if isinstance(values, type) and issubclass(values, enum.Enum):
        return [member.value for member in values]
    if isinstance(values, Mapping):
        return list(values.values())
    return list(values)


class ScalarCapable:
    """Membership and checkbox-style rules for scalar validators.

    Mixed into :class:`ScalarValidator`, ``StringValidator``,
    ``NumberValidator`` and ``BooleanValidator``; it relies on the
    ``add_rule`` method of :class:`BaseValidator`.
    """

    def enum(self, values: Any, error_message: str | None = None):
        """Value must be one of an Enum's values (or a mapping's values)."""
        self.add_rule(enum_rule, error_message).options["enum"] = enum_values(values)
        return self

    def in_(self, values: Iterable[Any], error_message: str | None = None):
        self.add_rule(in_rule, error_message).options["values"] = list(values)
        return self

    def one_of(self, values: Iterable[Any], error_message: str | None = None):
        return self.in_(values, error_message)

    def allows_only(self, values: Iterable[Any], error_message: str | None = None):
        self.add_rule(allowed_values_rule, error_message).options["allowedValues"] = list(values)
        return self

    def forbids(self, values: Iterable[Any], error_message: str | None = None):
        self.add_rule(not_allowed_values_rule, error_message).options["notAllowedValues"] = list(
            values
        )
        return self

    def not_in(self, values: Iterable[Any], error_message: str | None = None):
        return self.forbids(values, error_message)

    def _add_conditional(self, rule, error_message, **options):
        instance = self.add_rule(rule, error_message)
        instance.options.update(options, scope=GLOBAL)
        return self

    # Accepted: 1, "1", True, "true", "yes", "y", "on"

    def accepted(self, error_message: str | None = None):
        self.add_rule(accepted_rule, error_message)
        return self

    def accepted_if(self, field: str, value: Any, error_message: str | None = None):
        return self._add_conditional(accepted_if_rule, error_message, field=field, value=value)

    def accepted_unless(self, field: str, value: Any, error_message: str | None = None):
        return self._add_conditional(accepted_unless_rule, error_message, field=field, value=value)

    def accepted_if_required(self, field: str, error_message: str | None = None):
        return self._add_conditional(accepted_if_required_rule, error_message, field=field)

    def accepted_if_present(self, field: str, error_message: str | None = None):
        return self._add_conditional(accepted_if_present_rule, error_message, field=field)

    def accepted_without(self, field: str, error_message: str | None = None):
        return self._add_conditional(accepted_without_rule, error_message, field=field)

    # Declined: 0, "0", False, "false", "no", "n", "off"

    def declined(self, error_message: str | None = None):
        self.add_rule(declined_rule, error_message)
        return self

    def declined_if(self, field: str, value: Any, error_message: str | None = None):
        return self._add_conditional(declined_if_rule, error_message, field=field, value=value)

    def declined_unless(self, field: str, value: Any, error_message: str | None = None):
        return self._add_conditional(declined_unless_rule, error_message, field=field, value=value)

    def declined_if_required(self, field: str, error_message: str | None = None):
        return self._add_conditional(declined_if_required_rule, error_message, field=field)

    def declined_if_present(self, field: str, error_message: str | None = None):
        return self._add_conditional(declined_if_present_rule, error_message, field=field)

    def declined_without(self, field: str, error_message: str | None = None):
        return self._add_conditional(declined_without_rule, error_message, field=field)


class ScalarValidator(ScalarCapable, BaseValidator):
    """Accepts strings, numbers and booleans."""

    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_rule(scalar_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, (str, int, float))

    def as_number(self):
        """Convert numeric strings to numbers before validation."""
        return self.add_mutator(number_mutator)

    def as_string(self):
        return self.add_mutator(as_string_mutator)

    def as_boolean(self):
        """Convert "true"/"false" and truthy values to booleans before validation."""
        return self.add_mutator(boolean_mutator)
