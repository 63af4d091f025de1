"""Computed and managed validators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..context import SchemaContext
from ..helpers import MISSING, maybe_await
from ..result import FieldError, ValidationResult
from .base import BaseValidator

logger = logging.getLogger(__name__)

ComputedCallback = Callable[[Any, SchemaContext], Any]
ManagedCallback = Callable[[SchemaContext], Any]


class ComputedValidator(BaseValidator):
    """Produces a field's value from the rest of the validated data.

    The callback receives the enclosing object's mutated data and the
    context; it may be sync or async. Whatever the input held for this key
    is ignored. An exception raised by the callback becomes a ``computed``
    validation error.

    Example:
        ```python
        v.object({
            "title": v.string().required(),
            "slug": v.computed(lambda data, ctx: slugify(data["title"]), v.string().min(3)),
        })
        ```
    """

    def __init__(
        self,
        callback: ComputedCallback,
        result_validator: BaseValidator | None = None,
    ) -> None:
        super().__init__()
        self.callback = callback
        self.result_validator = result_validator

    def matches_type(self, value: Any) -> bool:
        return True

    def clone(self):
        cloned = super().clone()
        if self.result_validator is not None:
            cloned.result_validator = self.result_validator.clone()
        return cloned

    async def compute(self, data: Any, context: SchemaContext) -> Any:
        source = context.parent if context.parent is not None else data
        return await maybe_await(self.callback(source, context))

    async def validate(self, data: Any, context: SchemaContext) -> ValidationResult:
        try:
            value = await self.compute(data, context)
        except Exception as e:
            logger.debug(f"Computed field '{context.path}' failed: {e}")
            message = str(e) or "Computed field callback failed"
            error = FieldError(type="computed", error=message, input=context.path)
            return ValidationResult.failure(MISSING, [error])

        if self.result_validator is None:
            return ValidationResult.success(value)

        result = await self.result_validator.validate(value, context)
        if not result.is_valid:
            return ValidationResult.failure(MISSING, result.errors)
        return ValidationResult.success(result.data)


class ManagedValidator(ComputedValidator):
    """Produces a value from the context alone, e.g. timestamps or ids."""

    def __init__(
        self,
        callback: ManagedCallback,
        result_validator: BaseValidator | None = None,
    ) -> None:
        super().__init__(lambda _data, context: callback(context), result_validator)
        self.managed_callback = callback
