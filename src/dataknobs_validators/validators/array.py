"""Array, tuple and record validators.

All three validate their elements concurrently and write each element's
result back into its own slot, so output order follows input order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any

from ..context import SchemaContext
from ..exceptions import SchemaDefinitionError
from ..mutators.array import flip_mutator, remove_empty_mutator, sort_mutator, unique_mutator
from ..result import FieldError, ValidationResult
from ..rules.array import sorted_array_rule, unique_array_rule
from ..rules.length import between_length_rule, length_rule, max_length_rule, min_length_rule
from ..rules.types import array_rule, object_rule
from .base import BaseValidator


async def _gather_children(
    validators: Sequence[BaseValidator],
    container: Any,
    keys: Sequence[Any],
    context: SchemaContext,
) -> tuple[list[ValidationResult], list[FieldError]]:
    async def validate_slot(validator: BaseValidator, key: Any) -> ValidationResult:
        value = container[key]
        return await validator.validate(value, context.child(container, str(key), value))

    results = await asyncio.gather(
        *(validate_slot(validator, key) for validator, key in zip(validators, keys))
    )
    errors = [error for result in results for error in result.errors]
    return list(results), errors


class ArrayValidator(BaseValidator):
    """Validates a list whose items all match one validator.

    Example:
        ```python
        tags = v.array(v.string().trim().lowercase()).min_length(1).only_unique()
        ```
    """

    def __init__(self, validator: BaseValidator, error_message: str | None = None) -> None:
        super().__init__()
        self.validator = validator
        self.add_rule(array_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, list)

    def clone(self):
        cloned = super().clone()
        cloned.validator = self.validator.clone()
        return cloned

    # ==================== Mutators ====================

    def flip(self):
        """Reverse the item order."""
        return self.add_mutator(flip_mutator)

    def reverse(self):
        return self.flip()

    def only_unique(self):
        """Drop repeated items instead of rejecting them."""
        return self.add_mutator(unique_mutator)

    def remove_empty(self):
        return self.add_mutator(remove_empty_mutator)

    def sort(self, direction: str = "asc", key: str | None = None):
        return self.add_mutator(sort_mutator, {"direction": direction, "key": key})

    # ==================== Rules ====================

    def min_length(self, length: int, error_message: str | None = None):
        self.add_rule(min_length_rule, error_message).options["minLength"] = length
        return self

    def max_length(self, length: int, error_message: str | None = None):
        self.add_rule(max_length_rule, error_message).options["maxLength"] = length
        return self

    def length(self, length: int, error_message: str | None = None):
        self.add_rule(length_rule, error_message).options["length"] = length
        return self

    def between(self, min_: int, max_: int, error_message: str | None = None):
        rule = self.add_rule(between_length_rule, error_message)
        rule.options.update(minLength=min_, maxLength=max_)
        return self

    def length_between(self, min_: int, max_: int, error_message: str | None = None):
        return self.between(min_, max_, error_message)

    def unique(self, error_message: str | None = None):
        self.add_rule(unique_array_rule, error_message)
        return self

    def sorted(self, direction: str = "asc", error_message: str | None = None):
        self.add_rule(sorted_array_rule, error_message).options["direction"] = direction
        return self

    # ==================== Validation ====================

    async def mutate(self, data: Any, context: SchemaContext) -> Any:
        if not isinstance(data, list):
            return await super().mutate(data, context)
        return await super().mutate(list(data), context)

    async def validate(self, data: Any, context: SchemaContext) -> ValidationResult:
        mutated = await self.mutate(self.apply_default(data), context)
        errors = await self.run_rules(data, mutated, context)
        if errors or not isinstance(mutated, list):
            return ValidationResult.from_errors(mutated, errors)

        indices = range(len(mutated))
        results, errors = await _gather_children(
            [self.validator] * len(mutated), mutated, indices, context
        )
        output = [result.data for result in results]
        output = await self.start_transformation_pipeline(output, context)
        return ValidationResult.from_errors(output, errors)


class TupleValidator(BaseValidator):
    """Validates a fixed-length list with one validator per position."""

    def __init__(self, validators: Sequence[BaseValidator], error_message: str | None = None) -> None:
        super().__init__()
        if not validators:
            raise SchemaDefinitionError("A tuple needs at least one position validator")
        self.validators = list(validators)
        self.add_rule(array_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, list)

    def clone(self):
        cloned = super().clone()
        cloned.validators = [validator.clone() for validator in self.validators]
        return cloned

    async def mutate(self, data: Any, context: SchemaContext) -> Any:
        if not isinstance(data, list):
            return await super().mutate(data, context)
        return await super().mutate(list(data), context)

    async def validate(self, data: Any, context: SchemaContext) -> ValidationResult:
        mutated = await self.mutate(self.apply_default(data), context)
        errors = await self.run_rules(data, mutated, context)
        if errors or not isinstance(mutated, list):
            return ValidationResult.from_errors(mutated, errors)

        if len(mutated) != len(self.validators):
            error = FieldError(
                type="tuple",
                error=f"Expected exactly {len(self.validators)} items, but got {len(mutated)}",
                input=context.key or "value",
            )
            return ValidationResult.failure(mutated, [error])

        results, errors = await _gather_children(
            self.validators, mutated, range(len(mutated)), context
        )
        output = [result.data for result in results]
        output = await self.start_transformation_pipeline(output, context)
        return ValidationResult.from_errors(output, errors)


class RecordValidator(BaseValidator):
    """Validates a mapping with arbitrary keys whose values share one validator."""

    def __init__(self, validator: BaseValidator, error_message: str | None = None) -> None:
        super().__init__()
        self.validator = validator
        self.add_rule(object_rule, error_message)

    def matches_type(self, value: Any) -> bool:
        return isinstance(value, Mapping)

    def clone(self):
        cloned = super().clone()
        cloned.validator = self.validator.clone()
        return cloned

    async def mutate(self, data: Any, context: SchemaContext) -> Any:
        if not isinstance(data, Mapping):
            return await super().mutate(data, context)
        return await super().mutate(dict(data), context)

    async def validate(self, data: Any, context: SchemaContext) -> ValidationResult:
        mutated = await self.mutate(self.apply_default(data), context)
        errors = await self.run_rules(data, mutated, context)
        if errors or not isinstance(mutated, Mapping):
            return ValidationResult.from_errors(mutated, errors)

        keys = list(mutated)
        results, errors = await _gather_children(
            [self.validator] * len(keys), mutated, keys, context
        )
        output = {key: result.data for key, result in zip(keys, results)}
        output = await self.start_transformation_pipeline(output, context)
        return ValidationResult.from_errors(output, errors)
