"""Object validator.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from ..context import SchemaContext
from ..helpers import MISSING, remove_missing_values
from ..mutators.object import object_trim_mutator, strip_unknown_mutator
from ..result import FieldError, ValidationResult
from ..rules.base import ContextualRule
from ..rules.common import unknown_keys_rule
from ..rules.types import object_rule
from .base import BaseValidator
from .computed import ComputedValidator

Schema = dict[str, BaseValidator]


class ObjectValidator(BaseValidator):
    """Validates a mapping against a per-key schema.

    Keys that are absent from the input are skipped unless their validator
    has a default, checks presence (``required``, ``present``, ...) or
    computes its own value. Keys not in the schema are rejected unless
    ``allow_unknown()`` is set or they were listed with ``allow()``.

    Example:
        ```python
        user = v.object({
            "name": v.string().required(),
            "email": v.string().email(),
            "password": v.string().required().min_length(8),
            "password_confirmation": v.string().same_as("password").omit(),
        })
        result = await v.validate(user, payload)
        ```
    """

    def __init__(self, schema: Mapping[str, BaseValidator], error_message: str | None = None) -> None:
        super().__init__()
        self.schema: Schema = dict(schema)
        self.should_allow_unknown = False
        self.allowed_keys: list[str] = []
        self.add_rule(object_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    # ==================== Builder ====================

    def allow(self, *keys: str):
        """Accept these extra keys without validating them."""
        self.allowed_keys.extend(keys)
        return self

    def allow_unknown(self, allow: bool = True):
        """Accept any extra key; extra keys are copied to the output."""
        self.should_allow_unknown = allow
        return self

    def strip_unknown(self):
        """Drop keys that are neither in the schema nor allowed."""
        return self.add_mutator(strip_unknown_mutator, {"allowedKeys": self.allowed_keys})

    def trim(self, recursive: bool = True):
        return self.add_mutator(object_trim_mutator, {"recursive": recursive})

    def clone(self):
        cloned = super().clone()
        cloned.schema = {key: validator.clone() for key, validator in self.schema.items()}
        cloned.allowed_keys = list(self.allowed_keys)
        cloned._bind_allowed_keys()
        return cloned

    def _bind_allowed_keys(self) -> None:
        # strip_unknown reads the live allowed-keys list of its own validator
        for mutator in self.mutators:
            if mutator.mutate is strip_unknown_mutator:
                mutator.options["allowedKeys"] = self.allowed_keys

    def extend(self, schema: Mapping[str, BaseValidator] | ObjectValidator) -> ObjectValidator:
        """Return a copy with more keys; later keys replace earlier ones."""
        extended = self.clone()
        additions = schema.schema if isinstance(schema, ObjectValidator) else schema
        for key, validator in additions.items():
            extended.schema[key] = validator.clone()
        return extended

    def merge(self, other: ObjectValidator) -> ObjectValidator:
        """Return a copy combining both schemas, rules, mutators and labels.

        ``other`` wins on key collisions and on the unknown-key policy.
        """
        merged = self.extend(other)
        merged.should_allow_unknown = other.should_allow_unknown
        merged.allowed_keys.extend(other.allowed_keys)

        borrowed = other.clone()
        merged.rules.extend(rule for rule in borrowed.rules if rule.rule is not object_rule)
        merged.mutators.extend(borrowed.mutators)
        merged.transformers.extend(borrowed.transformers)
        merged.attributes_text = {**merged.attributes_text, **borrowed.attributes_text}
        merged._bind_allowed_keys()
        return merged

    def pick(self, *keys: str) -> ObjectValidator:
        picked = self.clone()
        picked.schema = {key: picked.schema[key] for key in keys if key in picked.schema}
        return picked

    def without(self, *keys: str) -> ObjectValidator:
        filtered = self.clone()
        filtered.schema = {
            key: validator for key, validator in filtered.schema.items() if key not in keys
        }
        return filtered

    # ==================== Validation ====================

    async def mutate(self, data: Any, context: SchemaContext) -> Any:
        if not isinstance(data, Mapping):
            return await super().mutate(data, context)
        return await super().mutate(dict(data), context)

    def _unknown_keys_rule(self) -> ContextualRule:
        # Built per call so concurrent validations never share it
        return ContextualRule(
            rule=unknown_keys_rule,
            options={"schema": list(self.schema), "allowedKeys": list(self.allowed_keys)},
            sort_order=len(self.rules) + 1,
        )

    def _should_validate(self, key: str, validator: BaseValidator, data: Any, mutated: Any) -> bool:
        if key in mutated or (isinstance(data, Mapping) and key in data):
            return True
        return (
            validator.has_default
            or validator.checks_presence
            or isinstance(validator, ComputedValidator)
        )

    async def validate(self, data: Any, context: SchemaContext) -> ValidationResult:
        context = context.with_schema(self.schema)
        mutated = await self.mutate(self.apply_default(data), context)

        rules = list(self.rules)
        if not self.should_allow_unknown:
            rules.append(self._unknown_keys_rule())

        errors = await self.run_rules(data, mutated, context, rules)
        if errors or not isinstance(mutated, Mapping):
            return ValidationResult.from_errors(mutated, errors)

        keys = [
            key
            for key, validator in self.schema.items()
            if self._should_validate(key, validator, data, mutated)
        ]

        async def validate_key(key: str) -> ValidationResult:
            validator = self.schema[key]
            value = mutated.get(key, MISSING)
            return await validator.validate(value, context.child(mutated, key, value))

        results = await asyncio.gather(*(validate_key(key) for key in keys))

        output: dict[str, Any] = {}
        child_errors: list[FieldError] = []
        for key, result in zip(keys, results):
            if not self.schema[key].is_omitted():
                output[key] = result.data
            child_errors.extend(result.errors)

        output = remove_missing_values(output)
        output = await self.start_transformation_pipeline(output, context)

        if self.should_allow_unknown and isinstance(output, dict):
            for key, value in mutated.items():
                if key not in self.schema and key not in output:
                    output[key] = value

        return ValidationResult.from_errors(output, child_errors)
