"""Rule definitions and rule instances.

A :class:`Rule` is an immutable definition: a name, a default error message
template and a coroutine ``(value, rule, context) -> RuleResult``. Every time a
validator adds a rule it wraps the definition in a :class:`ContextualRule`
holding that addition's own options, so two validators built from the same
rule constant never share options.

Rule functions receive their instance explicitly as the ``rule`` argument and
must treat it as read-only. Per-call values that belong in the error message
are passed to :func:`invalid_rule` as keyword arguments.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from ..context import AttributeTranslation, RuleTranslation
from ..helpers import MISSING
from ..result import VALID_RULE, RuleResult

if TYPE_CHECKING:
    from ..context import SchemaContext

RuleCallable = Callable[[Any, "ContextualRule", "SchemaContext"], Awaitable[RuleResult]]

_PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True)
class Rule:
    """Immutable rule definition.

    Attributes:
        name: Rule name, reported as the error ``type``
        validate: Coroutine implementing the predicate
        default_error_message: Template with ``:placeholder`` tokens
        requires_value: When True the rule is skipped for empty input
        sort_order: Explicit execution order; presence rules use negatives
        description: Human readable description
    """

    name: str
    validate: RuleCallable
    default_error_message: str = "The :input is invalid"
    requires_value: bool = True
    sort_order: int | None = None
    description: str | None = None


def schema_rule(
    name: str,
    default_error_message: str = "The :input is invalid",
    *,
    requires_value: bool = True,
    sort_order: int | None = None,
    description: str | None = None,
) -> Callable[[RuleCallable], Rule]:
    """Decorator turning a rule coroutine into a :class:`Rule`.

    Example:
        ```python
        @schema_rule("even", "The :input must be even")
        async def even_rule(value, rule, context):
            if value % 2 == 0:
                return VALID_RULE
            return invalid_rule(rule, context)
        ```
    """

    def decorator(func: RuleCallable) -> Rule:
        return Rule(
            name=name,
            validate=func,
            default_error_message=default_error_message,
            requires_value=requires_value,
            sort_order=sort_order,
            description=description or (func.__doc__ or "").strip() or None,
        )

    return decorator


@dataclass
class ContextualRule:
    """A rule as attached to one validator.

    Attributes:
        rule: The shared immutable definition
        options: Options bound by this particular addition
        error_message: Message bound by this addition, if any
        sort_order: Resolved execution order
        attributes_list: Labels used when formatting this rule's message
    """

    rule: Rule
    options: dict[str, Any] = field(default_factory=dict)
    error_message: str | None = None
    sort_order: int = 0
    attributes_list: Mapping[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.rule.name

    @property
    def requires_value(self) -> bool:
        return self.rule.requires_value

    async def validate(
        self,
        value: Any,
        context: SchemaContext,
        attributes_list: Mapping[str, Any] | None = None,
    ) -> RuleResult:
        """Run the predicate.

        The attributes list is bound onto a shallow per-call copy so that
        concurrent validations never observe each other's labels.
        """
        bound = self if attributes_list is None else replace(self, attributes_list=attributes_list)
        return await self.rule.validate(value, bound, context)

    def clone(self) -> ContextualRule:
        return replace(
            self,
            options={key: _clone_option(value) for key, value in self.options.items()},
            attributes_list=dict(self.attributes_list),
        )


def _clone_option(value: Any) -> Any:
    # Validators embedded as options (when branches, union candidates) are owned
    from ..validators.base import BaseValidator

    if isinstance(value, BaseValidator):
        return value.clone()
    if isinstance(value, dict):
        return {key: _clone_option(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_clone_option(item) for item in value]
    return value


def _stringify(value: Any) -> str:
    if isinstance(value, (list, tuple, set)):
        return ", ".join(_stringify(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or value is MISSING:
        return ""
    return str(value)


def format_message(template: str, attributes: Mapping[str, Any]) -> str:
    """Replace ``:name`` tokens with attribute values.

    Tokens without a matching attribute are left untouched.
    """

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in attributes:
            return _stringify(attributes[name])
        return match.group(0)

    return _PLACEHOLDER.sub(substitute, template)


def _label(attributes_list: Mapping[str, Any], value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    label = attributes_list.get(value)
    if isinstance(label, (str, int, float)) and not isinstance(label, bool):
        return str(label)
    return None


def build_attributes(
    rule: ContextualRule,
    context: SchemaContext,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Collect the values available to a message template.

    Sibling values come first, then the rule's options, then per-call extras,
    then ``input``/``path``/``key``/``value``. String values are passed through
    the field's attribute labels and, if configured, ``translate_attribute``.
    """
    attributes: dict[str, Any] = {}
    if isinstance(context.parent, Mapping):
        attributes.update(context.parent)
    attributes.update(rule.options)
    if extra:
        attributes.update(extra)

    attributes["input"] = context.path or context.key or "data"
    attributes["path"] = context.path
    attributes["key"] = context.key
    if "value" not in rule.options and not (extra and "value" in extra):
        attributes["value"] = context.value

    labels = rule.attributes_list
    translate = context.can_translate_attributes

    for name, value in list(attributes.items()):
        if name == "input":
            label = _label(labels, "input")
            if label is None and translate:
                translation = context.translate_attribute(
                    AttributeTranslation(attribute="input", context=context, rule=rule)
                )
                if translation and translation != "input":
                    label = translation
            if label is not None:
                attributes["input"] = label
                continue

        if not isinstance(value, str):
            continue

        label = _label(labels, value)
        if label is None and translate:
            label = context.translate_attribute(
                AttributeTranslation(attribute=value, context=context, rule=rule)
            ) or None
        attributes[name] = label or value

    return attributes


def invalid_rule(
    rule: ContextualRule,
    context: SchemaContext,
    error: str | None = None,
    **extra: Any,
) -> RuleResult:
    """Build the failing result for a rule.

    Message resolution order: the per-call ``error`` argument, the message
    bound when the rule was added, the ``translate_rule`` hook, and finally
    the rule's default template.

    Args:
        rule: The failing rule instance
        context: Current context
        error: Per-call message override
        **extra: Additional template attributes for this failure

    Returns:
        Invalid RuleResult addressed at the current key/path
    """
    attributes = build_attributes(rule, context, extra)

    message = error
    if not message and rule.error_message:
        message = format_message(rule.error_message, attributes)
    if not message:
        message = context.translate_rule(
            RuleTranslation(rule=rule, context=context, attributes=attributes)
        )
    if not message:
        message = format_message(rule.rule.default_error_message, attributes)

    return RuleResult(is_valid=False, error=message, input=context.key, path=context.path)


__all__ = [
    "Rule",
    "ContextualRule",
    "RuleCallable",
    "schema_rule",
    "invalid_rule",
    "format_message",
    "build_attributes",
    "VALID_RULE",
    "RuleResult",
]
