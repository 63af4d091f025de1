"""Base validator with the fluent builder API shared by every validator kind.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ..context import SchemaContext
from ..exceptions import SchemaDefinitionError
from ..helpers import MISSING, is_empty, maybe_await
from ..mutators.base import (
    BoundMutator,
    BoundTransformer,
    Mutator,
    MutatorContext,
    Transformer,
    TransformerContext,
)
from ..mutators.transformers import to_json_transformer
from ..result import FieldError, ValidationResult
from ..rules.base import ContextualRule, Rule
from ..rules.common import equals_field_rule, not_equals_field_rule
from ..rules.conditional import (
    forbidden_if_empty_rule,
    forbidden_if_in_rule,
    forbidden_if_not_empty_rule,
    forbidden_if_not_in_rule,
    forbidden_if_not_rule,
    forbidden_if_rule,
    present_if_empty_rule,
    present_if_in_rule,
    present_if_not_empty_rule,
    present_if_not_in_rule,
    present_if_rule,
    present_unless_rule,
    present_with_all_rule,
    present_with_any_rule,
    present_with_rule,
    present_without_all_rule,
    present_without_any_rule,
    present_without_rule,
    required_if_empty_rule,
    required_if_in_rule,
    required_if_not_empty_rule,
    required_if_not_in_rule,
    required_if_rule,
    required_unless_rule,
    required_with_all_rule,
    required_with_any_rule,
    required_with_rule,
    required_without_all_rule,
    required_without_any_rule,
    required_without_rule,
)
from ..rules.core import (
    branch_key,
    custom_rule,
    equal_rule,
    forbidden_rule,
    present_rule,
    required_rule,
    when_rule,
)

GLOBAL = "global"
SIBLING = "sibling"

RefineCallback = Callable[[Any, SchemaContext], Any]


class BaseValidator:
    """A node in a validation tree.

    A validator owns three ordered pipelines: mutators rewrite the incoming
    value, rules decide validity, transformers rewrite the outgoing value.
    Builder methods append to those pipelines and return ``self`` so calls can
    be chained:

        ```python
        email = v.string().trim().lowercase().required().email()
        ```

    Validators are built once and may then be validated against concurrently;
    nothing in :meth:`validate` writes to the validator.
    """

    def __init__(self) -> None:
        self.rules: list[ContextualRule] = []
        self.mutators: list[BoundMutator] = []
        self.transformers: list[BoundTransformer] = []
        self.default_value: Any = MISSING
        self.description: str | None = None
        self.should_omit = False
        self.attributes_text: dict[str, Any] = {}

    def __repr__(self) -> str:
        rules = ", ".join(rule.name for rule in self.rules)
        return f"{type(self).__name__}({rules})"

    # ==================== Pipelines ====================

    def add_rule(self, rule: Rule, error_message: str | None = None) -> ContextualRule:
        """Attach a rule and return its per-validator instance.

        Args:
            rule: Rule definition
            error_message: Message used instead of the rule's default template

        Returns:
            The new ContextualRule, whose ``options`` the caller may fill in
        """
        sort_order = rule.sort_order if rule.sort_order is not None else len(self.rules) + 1
        instance = ContextualRule(rule=rule, error_message=error_message, sort_order=sort_order)
        self.rules.append(instance)
        return instance

    def use_rule(self, rule: Rule, error_message: str | None = None, **options: Any):
        """Attach a custom or pre-built rule with options.

        Example:
            ```python
            v.string().use_rule(hex_color_rule, error_message="Invalid color")
            ```
        """
        instance = self.add_rule(rule, error_message)
        instance.options.update(options)
        return self

    def refine(self, callback: RefineCallback):
        """Add an inline rule.

        The callback receives ``(value, context)`` and returns an error message
        to fail, or a falsy value to pass. It may be sync or async.
        """
        self.add_rule(custom_rule).options["callback"] = callback
        return self

    def add_mutator(self, mutator: Mutator, options: dict[str, Any] | None = None):
        self.mutators.append(BoundMutator(mutate=mutator, options=dict(options or {})))
        return self

    def add_transformer(self, transform: Transformer, options: dict[str, Any] | None = None):
        """Add an output transformer.

        Args:
            transform: Callable ``(data, TransformerContext) -> data``, sync or async
            options: Options exposed as ``TransformerContext.options``
        """
        self.transformers.append(BoundTransformer(transform=transform, options=dict(options or {})))
        return self

    def output_as(self, callback: Callable[[Any, SchemaContext], Any]):
        """Transform the output with a ``(data, context)`` callback."""

        async def transform(data, transformer_context):
            return await maybe_await(callback(data, transformer_context.context))

        return self.add_transformer(transform)

    def to_json(self, indent: int | None = None):
        return self.add_transformer(to_json_transformer, {"indent": indent})

    async def mutate(self, data: Any, context: SchemaContext) -> Any:
        """Run the mutators in registration order."""
        for mutator in self.mutators:
            data = await maybe_await(
                mutator.mutate(data, MutatorContext(options=mutator.options, ctx=context))
            )
        return data

    async def start_transformation_pipeline(self, data: Any, context: SchemaContext) -> Any:
        for transformer in self.transformers:
            data = await maybe_await(
                transformer.transform(
                    data, TransformerContext(options=transformer.options, context=context)
                )
            )
        return data

    # ==================== Metadata ====================

    def default(self, value: Any):
        """Use ``value`` when the input is absent or None."""
        self.default_value = value
        return self

    def get_default_value(self) -> Any:
        return self.default_value

    @property
    def has_default(self) -> bool:
        return self.default_value is not MISSING

    def describe(self, description: str):
        self.description = description
        return self

    def label(self, label: str):
        """Set the text used for ``:input`` in this field's messages."""
        self.attributes_text["input"] = label
        return self

    def attributes(self, attributes: Mapping[str, Any]):
        """Replace the labels used when formatting messages.

        A value that is itself a mapping applies only to the rule of that
        name, e.g. ``{"equalsField": {"password": "Password"}}``.
        """
        self.attributes_text = dict(attributes)
        return self

    def omit(self):
        """Validate the field but leave it out of the output."""
        self.should_omit = True
        return self

    def exclude(self):
        return self.omit()

    def is_omitted(self) -> bool:
        return self.should_omit

    def matches_type(self, value: Any) -> bool:
        """Cheap type check used by unions to skip candidates."""
        return True

    @property
    def checks_presence(self) -> bool:
        """True if any rule inspects empty values (required, present, ...)."""
        return any(not rule.requires_value for rule in self.rules)

    # ==================== Presence ====================

    def required(self, error_message: str | None = None):
        self.add_rule(required_rule, error_message)
        return self

    def present(self, error_message: str | None = None):
        """The key must exist; None and empty values are accepted."""
        self.add_rule(present_rule, error_message)
        return self

    def optional(self):
        # Fields are optional unless a presence rule says otherwise
        return self

    def forbidden(self, error_message: str | None = None):
        self.add_rule(forbidden_rule, error_message)
        return self

    def equal(self, value: Any, error_message: str | None = None):
        self.add_rule(equal_rule, error_message).options["value"] = value
        return self

    def _add_scoped(self, rule: Rule, error_message: str | None, scope: str, **options: Any):
        instance = self.add_rule(rule, error_message)
        instance.options.update(options, scope=scope)
        return self

    def same_as(self, field: str, error_message: str | None = None):
        return self._add_scoped(equals_field_rule, error_message, GLOBAL, field=field)

    def same_as_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(equals_field_rule, error_message, SIBLING, field=field)

    def different_from(self, field: str, error_message: str | None = None):
        return self._add_scoped(not_equals_field_rule, error_message, GLOBAL, field=field)

    def different_from_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(not_equals_field_rule, error_message, SIBLING, field=field)

    # ==================== Required: based on another field's value ====================

    def required_if(self, field: str, value: Any, error_message: str | None = None):
        """Required when ``field`` (global scope) equals ``value``."""
        return self._add_scoped(required_if_rule, error_message, GLOBAL, field=field, value=value)

    def required_if_sibling(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(required_if_rule, error_message, SIBLING, field=field, value=value)

    def required_unless(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            required_unless_rule, error_message, GLOBAL, field=field, value=value
        )

    def required_unless_sibling(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            required_unless_rule, error_message, SIBLING, field=field, value=value
        )

    def required_if_empty(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_if_empty_rule, error_message, GLOBAL, field=field)

    def required_if_empty_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_if_empty_rule, error_message, SIBLING, field=field)

    def required_if_not_empty(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_if_not_empty_rule, error_message, GLOBAL, field=field)

    def required_if_not_empty_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_if_not_empty_rule, error_message, SIBLING, field=field)

    def required_if_in(self, field: str, values: Iterable[Any], error_message: str | None = None):
        return self._add_scoped(
            required_if_in_rule, error_message, GLOBAL, field=field, values=list(values)
        )

    def required_if_in_sibling(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            required_if_in_rule, error_message, SIBLING, field=field, values=list(values)
        )

    def required_if_not_in(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            required_if_not_in_rule, error_message, GLOBAL, field=field, values=list(values)
        )

    def required_if_not_in_sibling(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            required_if_not_in_rule, error_message, SIBLING, field=field, values=list(values)
        )

    # ==================== Required: based on presence of other fields ====================

    def required_with(self, field: str, error_message: str | None = None):
        """Required when ``field`` is present in the input."""
        return self._add_scoped(required_with_rule, error_message, GLOBAL, field=field)

    def required_with_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_with_rule, error_message, SIBLING, field=field)

    def required_without(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_without_rule, error_message, GLOBAL, field=field)

    def required_without_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(required_without_rule, error_message, SIBLING, field=field)

    def required_with_all(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            required_with_all_rule, error_message, GLOBAL, fields=list(fields)
        )

    def required_with_all_siblings(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            required_with_all_rule, error_message, SIBLING, fields=list(fields)
        )

    def required_without_all(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            required_without_all_rule, error_message, GLOBAL, fields=list(fields)
        )

    def required_without_all_siblings(
        self, fields: Iterable[str], error_message: str | None = None
    ):
        return self._add_scoped(
            required_without_all_rule, error_message, SIBLING, fields=list(fields)
        )

    def required_with_any(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            required_with_any_rule, error_message, GLOBAL, fields=list(fields)
        )

    def required_with_any_siblings(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            required_with_any_rule, error_message, SIBLING, fields=list(fields)
        )

    def required_without_any(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            required_without_any_rule, error_message, GLOBAL, fields=list(fields)
        )

    def required_without_any_siblings(
        self, fields: Iterable[str], error_message: str | None = None
    ):
        return self._add_scoped(
            required_without_any_rule, error_message, SIBLING, fields=list(fields)
        )

    # ==================== Present ====================

    def present_if(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(present_if_rule, error_message, GLOBAL, field=field, value=value)

    def present_if_sibling(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(present_if_rule, error_message, SIBLING, field=field, value=value)

    def present_unless(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            present_unless_rule, error_message, GLOBAL, field=field, value=value
        )

    def present_unless_sibling(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            present_unless_rule, error_message, SIBLING, field=field, value=value
        )

    def present_if_empty(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_if_empty_rule, error_message, GLOBAL, field=field)

    def present_if_empty_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_if_empty_rule, error_message, SIBLING, field=field)

    def present_if_not_empty(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_if_not_empty_rule, error_message, GLOBAL, field=field)

    def present_if_not_empty_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_if_not_empty_rule, error_message, SIBLING, field=field)

    def present_if_in(self, field: str, values: Iterable[Any], error_message: str | None = None):
        return self._add_scoped(
            present_if_in_rule, error_message, GLOBAL, field=field, values=list(values)
        )

    def present_if_in_sibling(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            present_if_in_rule, error_message, SIBLING, field=field, values=list(values)
        )

    def present_if_not_in(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            present_if_not_in_rule, error_message, GLOBAL, field=field, values=list(values)
        )

    def present_if_not_in_sibling(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            present_if_not_in_rule, error_message, SIBLING, field=field, values=list(values)
        )

    def present_with(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_with_rule, error_message, GLOBAL, field=field)

    def present_with_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_with_rule, error_message, SIBLING, field=field)

    def present_without(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_without_rule, error_message, GLOBAL, field=field)

    def present_without_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(present_without_rule, error_message, SIBLING, field=field)

    def present_with_all(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(present_with_all_rule, error_message, GLOBAL, fields=list(fields))

    def present_with_all_siblings(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            present_with_all_rule, error_message, SIBLING, fields=list(fields)
        )

    def present_without_all(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            present_without_all_rule, error_message, GLOBAL, fields=list(fields)
        )

    def present_without_all_siblings(
        self, fields: Iterable[str], error_message: str | None = None
    ):
        return self._add_scoped(
            present_without_all_rule, error_message, SIBLING, fields=list(fields)
        )

    def present_with_any(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(present_with_any_rule, error_message, GLOBAL, fields=list(fields))

    def present_with_any_siblings(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            present_with_any_rule, error_message, SIBLING, fields=list(fields)
        )

    def present_without_any(self, fields: Iterable[str], error_message: str | None = None):
        return self._add_scoped(
            present_without_any_rule, error_message, GLOBAL, fields=list(fields)
        )

    def present_without_any_siblings(
        self, fields: Iterable[str], error_message: str | None = None
    ):
        return self._add_scoped(
            present_without_any_rule, error_message, SIBLING, fields=list(fields)
        )

    # ==================== Forbidden ====================

    def forbidden_if(self, field: str, value: Any, error_message: str | None = None):
        """Forbid a value when ``field`` equals ``value``."""
        return self._add_scoped(forbidden_if_rule, error_message, GLOBAL, field=field, value=value)

    def forbidden_if_sibling(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            forbidden_if_rule, error_message, SIBLING, field=field, value=value
        )

    def forbidden_if_not(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            forbidden_if_not_rule, error_message, GLOBAL, field=field, value=value
        )

    def forbidden_if_not_sibling(self, field: str, value: Any, error_message: str | None = None):
        return self._add_scoped(
            forbidden_if_not_rule, error_message, SIBLING, field=field, value=value
        )

    def forbidden_if_empty(self, field: str, error_message: str | None = None):
        return self._add_scoped(forbidden_if_empty_rule, error_message, GLOBAL, field=field)

    def forbidden_if_empty_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(forbidden_if_empty_rule, error_message, SIBLING, field=field)

    def forbidden_if_not_empty(self, field: str, error_message: str | None = None):
        return self._add_scoped(forbidden_if_not_empty_rule, error_message, GLOBAL, field=field)

    def forbidden_if_not_empty_sibling(self, field: str, error_message: str | None = None):
        return self._add_scoped(forbidden_if_not_empty_rule, error_message, SIBLING, field=field)

    def forbidden_if_in(self, field: str, values: Iterable[Any], error_message: str | None = None):
        return self._add_scoped(
            forbidden_if_in_rule, error_message, GLOBAL, field=field, values=list(values)
        )

    def forbidden_if_in_sibling(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            forbidden_if_in_rule, error_message, SIBLING, field=field, values=list(values)
        )

    def forbidden_if_not_in(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            forbidden_if_not_in_rule, error_message, GLOBAL, field=field, values=list(values)
        )

    def forbidden_if_not_in_sibling(
        self, field: str, values: Iterable[Any], error_message: str | None = None
    ):
        return self._add_scoped(
            forbidden_if_not_in_rule, error_message, SIBLING, field=field, values=list(values)
        )

    # ==================== Conditional validation ====================

    def when(
        self,
        field: str,
        is_: Mapping[Any, BaseValidator] | None = None,
        otherwise: BaseValidator | None = None,
    ):
        """Validate with a different validator depending on another field.

        Branch keys are matched against the field's value rendered as text,
        so ``True`` matches ``"true"`` and ``None`` matches ``"null"``.

        Example:
            ```python
            v.object({
                "user_type": v.string().in_(["admin", "user"]),
                "role": v.string().when("user_type", is_={
                    "admin": v.string().in_(["super", "moderator"]),
                    "user": v.string().in_(["member", "guest"]),
                }),
            })
            ```

        Args:
            field: Dotted path of the field to branch on (global scope)
            is_: Mapping of field value to validator
            otherwise: Validator used when no branch matches

        Returns:
            Self for chaining

        Raises:
            SchemaDefinitionError: If neither branches nor ``otherwise`` is given
        """
        return self._add_when(field, is_, otherwise, GLOBAL)

    def when_sibling(
        self,
        field: str,
        is_: Mapping[Any, BaseValidator] | None = None,
        otherwise: BaseValidator | None = None,
    ):
        """Like :meth:`when`, reading ``field`` from the enclosing container."""
        return self._add_when(field, is_, otherwise, SIBLING)

    def _add_when(self, field, branches, otherwise, scope):
        if not branches and otherwise is None:
            raise SchemaDefinitionError(
                f"when('{field}') needs at least one branch or an otherwise validator",
                context={"field": field},
            )
        normalized = {
            key if isinstance(key, str) else branch_key(key): validator
            for key, validator in (branches or {}).items()
        }
        return self._add_scoped(
            when_rule, None, scope, field=field, otherwise=otherwise, **{"is": normalized}
        )

    # ==================== Copying ====================

    def clone(self):
        """Copy this validator so the copy can be changed independently.

        Rule options are deep-copied, including validators embedded in them;
        callbacks are shared.
        """
        cloned = copy.copy(self)
        cloned.rules = [rule.clone() for rule in self.rules]
        cloned.mutators = [BoundMutator(m.mutate, dict(m.options)) for m in self.mutators]
        cloned.transformers = [
            BoundTransformer(t.transform, dict(t.options)) for t in self.transformers
        ]
        cloned.attributes_text = {
            key: dict(value) if isinstance(value, Mapping) else value
            for key, value in self.attributes_text.items()
        }
        return cloned

    # ==================== Validation ====================

    def apply_default(self, data: Any) -> Any:
        if (data is MISSING or data is None) and self.has_default:
            return copy.deepcopy(self.default_value)
        return data

    def _attributes_for(self, rule: ContextualRule) -> Mapping[str, Any]:
        specific = self.attributes_text.get(rule.name)
        if isinstance(specific, Mapping):
            return specific
        return self.attributes_text

    async def run_rules(
        self,
        original: Any,
        value: Any,
        context: SchemaContext,
        rules: list[ContextualRule] | None = None,
    ) -> list[FieldError]:
        """Run the rule loop for one node.

        Rules run one at a time in sort order. Rules that need a value are
        skipped when the original (pre-mutation) input is empty.

        Args:
            original: Input before defaults and mutators
            value: Mutated value handed to the rules
            context: Context of this node
            rules: Rules to run; defaults to this validator's rules

        Returns:
            Errors reported, at most one when ``first_error_only`` is set
        """
        errors: list[FieldError] = []
        empty = is_empty(original)

        for rule in sorted(self.rules if rules is None else rules, key=lambda r: r.sort_order):
            if rule.requires_value and empty:
                continue

            result = await rule.validate(value, context, self._attributes_for(rule))
            if not result.is_valid:
                errors.append(
                    FieldError(type=rule.name, error=result.error, input=result.path or context.path)
                )
                if context.first_error_only:
                    break

        return errors

    async def validate(self, data: Any, context: SchemaContext) -> ValidationResult:
        """Validate ``data`` at the node described by ``context``.

        Args:
            data: Input value, ``MISSING`` when the key is absent
            context: Context of this node

        Returns:
            ValidationResult with the transformed, mutated value as ``data``
        """
        mutated = await self.mutate(self.apply_default(data), context)
        errors = await self.run_rules(data, mutated, context)
        output = await self.start_transformation_pipeline(mutated, context)
        return ValidationResult.from_errors(output, errors)
