"""Per-node evaluation context.

A :class:`SchemaContext` is created once by :func:`validate` for the root and
then shallow-copied with a few fields overridden at every descent into an
object key, array index, tuple position or record key. Children only ever read
``all_values`` and ``parent``; they never write back into them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .config import ValidatorConfig
from .helpers import set_key_path

if TYPE_CHECKING:
    from .rules.base import ContextualRule
    from .validators.base import BaseValidator


@dataclass
class RuleTranslation:
    """Argument passed to the ``translate_rule`` hook."""

    rule: ContextualRule
    context: SchemaContext
    attributes: dict[str, Any]


@dataclass
class AttributeTranslation:
    """Argument passed to the ``translate_attribute`` hook."""

    attribute: Any
    context: SchemaContext
    rule: ContextualRule


@dataclass
class SchemaContext:
    """Environment of the node currently being validated.

    Attributes:
        all_values: The root input, unchanged for the whole pass
        parent: Post-mutation data of the nearest enclosing container
        value: Current node's value
        key: Current node's key (indices are stringified)
        path: Dot-joined keys from the root to the current node
        configurations: Settings for this pass
        schema: Key to validator mapping when inside an object validator
        extra: Caller-supplied context passed to ``validate``
    """

    all_values: Any
    parent: Any = None
    value: Any = None
    key: str = ""
    path: str = ""
    configurations: ValidatorConfig = field(default_factory=ValidatorConfig)
    schema: dict[str, BaseValidator] | None = None
    extra: dict[str, Any] | None = None

    @property
    def first_error_only(self) -> bool:
        return self.configurations.first_error_only

    def child(self, parent: Any, key: str, value: Any) -> SchemaContext:
        """Derive the context for a child element.

        Args:
            parent: Mutated data of the container being descended into
            key: Child key or stringified index
            value: Child value

        Returns:
            New context sharing ``all_values`` and configuration
        """
        return replace(
            self,
            parent=parent,
            value=value,
            key=key,
            path=set_key_path(self.path, key),
        )

    def with_schema(self, schema: dict[str, BaseValidator]) -> SchemaContext:
        return replace(self, schema=schema)

    def translate_rule(self, translation: RuleTranslation) -> str:
        """Run the configured rule translator, or return an empty string."""
        translator = self.configurations.translate_rule
        if translator is None:
            return ""
        return translator(translation) or ""

    def translate_attribute(self, translation: AttributeTranslation) -> str:
        translator = self.configurations.translate_attribute
        if translator is None:
            return ""
        return translator(translation) or ""

    @property
    def can_translate_attributes(self) -> bool:
        return self.configurations.translate_attribute is not None
