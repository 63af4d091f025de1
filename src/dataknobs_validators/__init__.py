"""Composable, asynchronous data validation for dataknobs.

This package validates arbitrary payloads against declaratively built
validator trees:

- **Validators**: scalar, string, number, boolean, date, object, array,
  tuple, record, union, computed and managed validators
- **Rules**: immutable rule definitions with per-validator bound options
- **Mutators / Transformers**: value rewriting before and after the rules
- **Configuration**: explicit per-call settings loadable from dicts, files
  and environment variables
- **Plugins**: named extensions installed into a registry

Example:
    ```python
    from dataknobs_validators import v, validate

    schema = v.object({
        "name": v.string().trim().required(),
        "age": v.int().min(18),
        "role": v.string().enum(["admin", "user"]).default("user"),
    })

    result = await validate(schema, {"name": " Ada ", "age": 36})
    result.data  # {'name': 'Ada', 'age': 36, 'role': 'user'}
    ```
"""

from dataknobs_validators.config import ValidatorConfig
from dataknobs_validators.context import AttributeTranslation, RuleTranslation, SchemaContext
from dataknobs_validators.exceptions import (
    ConfigurationError,
    PluginError,
    SchemaDefinitionError,
    ValidationFailedError,
    ValidatorsError,
)
from dataknobs_validators.factory import v, validate
from dataknobs_validators.helpers import MISSING, is_empty, is_missing
from dataknobs_validators.plugins import (
    PluginContext,
    PluginRegistry,
    ValidatorPlugin,
    get_installed_plugins,
    has_plugin,
    register_plugin,
    unregister_plugin,
)
from dataknobs_validators.result import VALID_RULE, FieldError, RuleResult, ValidationResult
from dataknobs_validators.rules.base import (
    ContextualRule,
    Rule,
    format_message,
    invalid_rule,
    schema_rule,
)
from dataknobs_validators.validators import (
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
    ScalarCapable,
    ScalarValidator,
    StringValidator,
    TupleValidator,
    UnionValidator,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "v",
    "validate",
    # Configuration and context
    "ValidatorConfig",
    "SchemaContext",
    "RuleTranslation",
    "AttributeTranslation",
    # Results
    "ValidationResult",
    "FieldError",
    "RuleResult",
    "VALID_RULE",
    # Rules
    "Rule",
    "ContextualRule",
    "schema_rule",
    "invalid_rule",
    "format_message",
    # Helpers
    "MISSING",
    "is_missing",
    "is_empty",
    # Exceptions
    "ValidatorsError",
    "SchemaDefinitionError",
    "ConfigurationError",
    "PluginError",
    "ValidationFailedError",
    # Plugins
    "ValidatorPlugin",
    "PluginContext",
    "PluginRegistry",
    "register_plugin",
    "unregister_plugin",
    "has_plugin",
    "get_installed_plugins",
    # Validators
    "BaseValidator",
    "ScalarCapable",
    "ScalarValidator",
    "StringValidator",
    "NumberValidator",
    "IntValidator",
    "FloatValidator",
    "NumericValidator",
    "BooleanValidator",
    "DateValidator",
    "AnyValidator",
    "ObjectValidator",
    "ArrayValidator",
    "TupleValidator",
    "RecordValidator",
    "UnionValidator",
    "ComputedValidator",
    "ManagedValidator",
]
