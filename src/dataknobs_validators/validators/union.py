"""Union validator.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..exceptions import SchemaDefinitionError
from ..rules.core import union_rule
from .base import BaseValidator


class UnionValidator(BaseValidator):
    """Accepts a value matching one of several validators.

    Candidates are tried in declaration order, skipping those whose type does
    not match. The first type-matching candidate decides: if it fails, later
    candidates are only tried when ``first_error_only`` is off. List the most
    specific candidate first.

    Example:
        ```python
        identifier = v.union([v.string().email(), v.int().positive()])
        ```
    """

    def __init__(self) -> None:
        super().__init__()
        self.validators: list[BaseValidator] = []

    def union(self, validators: Sequence[BaseValidator], error_message: str | None = None):
        """Set the candidate validators.

        Raises:
            SchemaDefinitionError: If no candidates are given
        """
        if not validators:
            raise SchemaDefinitionError("A union needs at least one candidate validator")
        self.validators = list(validators)
        self.add_rule(union_rule, error_message).options["validators"] = self.validators
        return self

    def matches_type(self, value: Any) -> bool:
        return any(validator.matches_type(value) for validator in self.validators)

    def clone(self):
        cloned = super().clone()
        union = next((rule for rule in cloned.rules if rule.rule is union_rule), None)
        cloned.validators = union.options["validators"] if union else []
        return cloned
