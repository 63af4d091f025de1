"""Boolean validator.
"""

from __future__ import annotations

from typing import Any

from ..rules.types import boolean_rule
from .base import BaseValidator
from .scalar import ScalarCapable


class BooleanValidator(ScalarCapable, BaseValidator):
    def __init__(self, error_message: str | None = None) -> None:
        super().__init__()
        self.add_rule(boolean_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, bool)

    def must_be_true(self, error_message: str | None = None):
        """Value must be exactly ``True``; use ``accepted`` for "yes"/"on"/1."""
        return self.equal(True, error_message)

    def must_be_false(self, error_message: str | None = None):
        return self.equal(False, error_message)
