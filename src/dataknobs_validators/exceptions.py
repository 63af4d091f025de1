"""Exception hierarchy for dataknobs_validators.

Validation failures are *data*: they are reported through
``ValidationResult.errors`` and never raised by the engine. The exceptions in
this module cover the other class of problems, the ones caused by the code
using the library rather than by the data being validated:

- Schema misuse (a tuple without positions, a ``when`` without branches)
- Unreadable or unsupported configuration sources
- Plugin installation failures

Example:
    ```python
    from dataknobs_validators import v, validate
    from dataknobs_validators.exceptions import ValidationFailedError

    result = await validate(v.object({"name": v.string().required()}), {})
    try:
        result.raise_for_errors()
    except ValidationFailedError as e:
        logger.error(f"Rejected payload: {e.context['errors']}")
    ```
"""

from typing import Any, Dict


class ValidatorsError(Exception):
    """Base exception for the dataknobs_validators package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported for compatibility)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class SchemaDefinitionError(ValidatorsError):
    """Raised when a validator tree is built with invalid arguments.

    Example:
        ```python
        raise SchemaDefinitionError(
            "Tuple validator needs at least one position",
            context={"validators": []}
        )
        ```
    """

    pass


class ConfigurationError(ValidatorsError):
    """Raised when validator configuration cannot be loaded.

    Common scenarios include:
    - Configuration file not found
    - Unsupported configuration file format
    - Configuration content that is not a mapping
    """

    pass


class PluginError(ValidatorsError):
    """Raised when a plugin fails to install or uninstall."""

    pass


class ValidationFailedError(ValidatorsError):
    """Raised by ``ValidationResult.raise_for_errors()`` for invalid data.

    The engine itself never raises this; it exists for callers that prefer
    exceptions at their API boundary.
    """

    pass


__all__ = [
    "ValidatorsError",
    "SchemaDefinitionError",
    "ConfigurationError",
    "PluginError",
    "ValidationFailedError",
]
