"""Result types produced by validators and rules.

A validation pass never raises for bad data; it returns a
:class:`ValidationResult` carrying the (mutated, transformed) output and the
list of :class:`FieldError` entries. Rules report through :class:`RuleResult`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ValidationFailedError


@dataclass(frozen=True)
class FieldError:
    """A single reported failure.

    Attributes:
        type: Name of the rule that failed
        error: Resolved, user-facing message
        input: Path (or key) of the failing field
    """

    type: str
    error: str
    input: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "error": self.error, "input": self.input}


@dataclass
class ValidationResult:
    """Outcome of validating a value against a validator.

    ``data`` is always populated, even when the result is invalid, so that
    callers can inspect what was accepted.
    """

    is_valid: bool
    data: Any = None
    errors: list[FieldError] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    @classmethod
    def success(cls, data: Any) -> ValidationResult:
        """Create a passing result for ``data``."""
        return cls(is_valid=True, data=data)

    @classmethod
    def failure(cls, data: Any, errors: list[FieldError]) -> ValidationResult:
        """Create a failing result.

        Args:
            data: The value as far as validation got
            errors: Reported failures

        Returns:
            Failed ValidationResult
        """
        return cls(is_valid=False, data=data, errors=list(errors))

    @classmethod
    def from_errors(cls, data: Any, errors: list[FieldError]) -> ValidationResult:
        """Passing result when ``errors`` is empty, failing otherwise."""
        if errors:
            return cls.failure(data, errors)
        return cls.success(data)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results; ``other`` supplies the data.

        Args:
            other: Result to fold into this one

        Returns:
            New ValidationResult valid only if both are valid
        """
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            data=other.data,
            errors=self.errors + other.errors,
        )

    def first_error(self) -> FieldError | None:
        return self.errors[0] if self.errors else None

    def errors_for(self, path: str) -> list[FieldError]:
        """Return the errors reported for one field path.

        Args:
            path: Dotted field path, e.g. ``"items.0.name"``

        Returns:
            Errors whose ``input`` equals the path
        """
        return [error for error in self.errors if error.input == path]

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "data": self.data,
            "errors": [error.to_dict() for error in self.errors],
        }

    def raise_for_errors(self) -> ValidationResult:
        """Raise ``ValidationFailedError`` if the result is invalid.

        Returns:
            Self, for chaining when the result is valid

        Raises:
            ValidationFailedError: With the error list in its context
        """
        if not self.is_valid:
            first = self.first_error()
            message = first.error if first else "Validation failed"
            raise ValidationFailedError(
                message,
                context={"errors": [error.to_dict() for error in self.errors]},
            )
        return self


@dataclass(frozen=True)
class RuleResult:
    """Outcome of a single rule predicate."""

    is_valid: bool
    error: str = ""
    input: str = ""
    path: str = ""


VALID_RULE = RuleResult(is_valid=True)
