"""Builder namespace and the top-level ``validate`` entry point.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .config import ValidatorConfig
from .context import SchemaContext
from .helpers import MISSING
from .result import ValidationResult
from .validators import (
    AnyValidator,
    ArrayValidator,
    BaseValidator,
    BooleanValidator,
    ComputedValidator,
    DateValidator,
    FloatValidator,
    IntValidator,
    ManagedValidator,
    NumberValidator,
    NumericValidator,
    ObjectValidator,
    RecordValidator,
    ScalarValidator,
    StringValidator,
    TupleValidator,
    UnionValidator,
)
from .validators.computed import ComputedCallback, ManagedCallback

logger = logging.getLogger(__name__)


async def validate(
    schema: BaseValidator,
    data: Any,
    config: ValidatorConfig | Mapping[str, Any] | None = None,
    *,
    context: dict[str, Any] | None = None,
) -> ValidationResult:
    """Validate ``data`` against a validator tree.

    Args:
        schema: Root validator
        data: Input to validate; ``MISSING`` is accepted for "no input"
        config: A ValidatorConfig, a settings dict, or None for defaults
        context: Caller data exposed to rules and callbacks as ``context.extra``

    Returns:
        ValidationResult for the whole tree

    Example:
        ```python
        result = await validate(
            v.object({"age": v.int().min(18)}),
            {"age": 16},
            {"first_error_only": False},
        )
        result.errors[0].to_dict()
        # {'type': 'min', 'error': 'The age must be at least 18', 'input': 'age'}
        ```
    """
    configurations = ValidatorConfig.coerce(config)
    root = SchemaContext(
        all_values=data,
        parent=None,
        value=data,
        key="",
        path="",
        configurations=configurations,
        extra=context,
    )

    logger.debug(f"Validating with {schema!r} (first_error_only={configurations.first_error_only})")
    result = await schema.validate(data, root)
    if result.data is MISSING:
        result.data = None
    logger.debug(f"Validation finished: valid={result.is_valid}, errors={len(result.errors)}")
    return result


class _Factory:
    """Namespace of validator constructors, exposed as ``v``."""

    validate = staticmethod(validate)

    @staticmethod
    def object(schema: Mapping[str, BaseValidator], error_message: str | None = None) -> ObjectValidator:
        return ObjectValidator(schema, error_message)

    @staticmethod
    def array(validator: BaseValidator, error_message: str | None = None) -> ArrayValidator:
        return ArrayValidator(validator, error_message)

    @staticmethod
    def tuple(validators: Sequence[BaseValidator], error_message: str | None = None) -> TupleValidator:
        return TupleValidator(validators, error_message)

    @staticmethod
    def record(validator: BaseValidator, error_message: str | None = None) -> RecordValidator:
        return RecordValidator(validator, error_message)

    @staticmethod
    def union(validators: Sequence[BaseValidator], error_message: str | None = None) -> UnionValidator:
        return UnionValidator().union(validators, error_message)

    @staticmethod
    def string(error_message: str | None = None) -> StringValidator:
        return StringValidator(error_message)

    @staticmethod
    def number(error_message: str | None = None) -> NumberValidator:
        return NumberValidator(error_message)

    @staticmethod
    def int(error_message: str | None = None) -> IntValidator:
        return IntValidator(error_message)

    @staticmethod
    def float(error_message: str | None = None) -> FloatValidator:
        return FloatValidator(error_message)

    @staticmethod
    def numeric(error_message: str | None = None) -> NumericValidator:
        return NumericValidator(error_message)

    @staticmethod
    def boolean(error_message: str | None = None) -> BooleanValidator:
        return BooleanValidator(error_message)

    @staticmethod
    def date(error_message: str | None = None) -> DateValidator:
        return DateValidator(error_message)

    @staticmethod
    def scalar(error_message: str | None = None) -> ScalarValidator:
        return ScalarValidator(error_message)

    @staticmethod
    def enum(values: Any, error_message: str | None = None) -> ScalarValidator:
        """Scalar restricted to an Enum's (or mapping's, or list's) values."""
        return ScalarValidator().enum(values, error_message)

    @staticmethod
    def any() -> AnyValidator:
        return AnyValidator()

    @staticmethod
    def computed(
        callback: ComputedCallback, result_validator: BaseValidator | None = None
    ) -> ComputedValidator:
        return ComputedValidator(callback, result_validator)

    @staticmethod
    def managed(
        callback: ManagedCallback, result_validator: BaseValidator | None = None
    ) -> ManagedValidator:
        return ManagedValidator(callback, result_validator)


v = _Factory()
