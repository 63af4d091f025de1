"""Tests for results, exceptions and the validate() entry point."""

import asyncio
import logging

import pytest

from dataknobs_validators import (
    MISSING,
    FieldError,
    SchemaContext,
    ValidationFailedError,
    ValidationResult,
    ValidatorsError,
    is_empty,
    v,
    validate,
)


class TestValidationResult:
    """Test result helpers."""

    def test_bool_and_to_dict(self):
        """Test truthiness and dict conversion."""
        error = FieldError(type="required", error="The name is required", input="name")
        result = ValidationResult(is_valid=False, data={}, errors=[error])

        assert not result
        assert result.to_dict() == {
            "isValid": False,
            "data": {},
            "errors": [{"type": "required", "error": "The name is required", "input": "name"}],
        }
        assert ValidationResult(is_valid=True, data=1)

    def test_errors_for(self):
        """Test filtering errors by path."""
        result = ValidationResult(
            is_valid=False,
            errors=[
                FieldError(type="min", error="a", input="items.0.qty"),
                FieldError(type="max", error="b", input="items.1.qty"),
            ],
        )
        assert [error.type for error in result.errors_for("items.1.qty")] == ["max"]
        assert result.first_error().type == "min"

    def test_raise_for_errors(self):
        """Test converting an invalid result to an exception."""
        error = FieldError(type="required", error="The name is required", input="name")
        result = ValidationResult(is_valid=False, errors=[error])

        with pytest.raises(ValidationFailedError) as exc_info:
            result.raise_for_errors()

        assert isinstance(exc_info.value, ValidatorsError)
        assert str(exc_info.value) == "The name is required"
        assert exc_info.value.context["errors"] == [error.to_dict()]

        valid = ValidationResult(is_valid=True, data=1)
        assert valid.raise_for_errors() is valid

    def test_success_and_failure(self):
        """Test the constructors."""
        error = FieldError(type="min", error="too small", input="qty")

        assert ValidationResult.success(3) == ValidationResult(is_valid=True, data=3)
        failed = ValidationResult.failure(0, [error])
        assert not failed
        assert failed.errors == [error]

        assert ValidationResult.from_errors(3, []).is_valid
        assert ValidationResult.from_errors(0, [error]) == failed

    def test_merge(self):
        """Test combining results."""
        first = FieldError(type="min", error="a", input="a")
        second = FieldError(type="max", error="b", input="b")

        merged = ValidationResult.failure(1, [first]).merge(ValidationResult.failure(2, [second]))
        assert not merged
        assert merged.data == 2
        assert merged.errors == [first, second]

        merged = ValidationResult.success(1).merge(ValidationResult.success(2))
        assert merged.is_valid
        assert merged.data == 2


class TestEmptiness:
    """Test the empty-value predicate."""

    @pytest.mark.parametrize("value", [MISSING, None, "", [], ()])
    def test_empty(self, value):
        """Test values counted as empty."""
        assert is_empty(value)

    @pytest.mark.parametrize("value", [0, False, " ", {}, [None]])
    def test_not_empty(self, value):
        """Test values counted as present."""
        assert not is_empty(value)


class TestValidateEntryPoint:
    """Test the top-level validate function."""

    @pytest.mark.asyncio
    async def test_missing_root_becomes_none(self):
        """Test that an absent root value is reported as None."""
        result = await validate(v.string(), MISSING)
        assert result.is_valid
        assert result.data is None

    @pytest.mark.asyncio
    async def test_root_context(self):
        """Test the context handed to the root validator."""
        seen = []

        def capture(value, context):
            seen.append(context)

        await validate(v.any().refine(capture), {"a": 1}, context={"tenant": "acme"})

        context = seen[0]
        assert isinstance(context, SchemaContext)
        assert context.all_values == {"a": 1}
        assert context.parent is None
        assert context.path == ""
        assert context.extra == {"tenant": "acme"}

    @pytest.mark.asyncio
    async def test_schema_reusable_concurrently(self):
        """Test that one schema serves many independent validations."""
        schema = v.object({"n": v.int().min(10)})
        results = await asyncio.gather(*(validate(schema, {"n": n}) for n in range(20)))

        assert [result.is_valid for result in results] == [n >= 10 for n in range(20)]
        assert all(result.data == {"n": n} for n, result in enumerate(results))

    @pytest.mark.asyncio
    async def test_debug_logging(self, caplog):
        """Test that a validation pass is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="dataknobs_validators.factory"):
            await validate(v.string(), "x")
        assert any("Validation finished" in record.message for record in caplog.records)

    @pytest.mark.asyncio
    async def test_mutator_exceptions_propagate(self):
        """Test that programming errors are not turned into validation errors."""

        def broken(value, context):
            raise KeyError("oops")

        with pytest.raises(KeyError):
            await validate(v.string().add_mutator(broken), "x")

    @pytest.mark.asyncio
    async def test_v_validate_alias(self):
        """Test the validate alias on the builder namespace."""
        assert (await v.validate(v.string(), "x")).is_valid
