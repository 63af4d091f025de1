"""Mutator and transformer plumbing.

Mutators rewrite a node's input before its rules run; transformers rewrite the
node's output after validation. Both receive the value and a small context
object carrying the options bound when they were added plus the current
:class:`~dataknobs_validators.context.SchemaContext`. Either kind of callable
may be a plain function or a coroutine function.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..context import SchemaContext


@dataclass
class MutatorContext:
    """Argument passed to every mutator.

    Attributes:
        options: Options bound when the mutator was added
        ctx: Context of the node being mutated
    """

    options: dict[str, Any]
    ctx: SchemaContext


@dataclass
class TransformerContext:
    """Argument passed to every transformer."""

    options: dict[str, Any]
    context: SchemaContext


Mutator = Callable[[Any, MutatorContext], Any]
Transformer = Callable[[Any, TransformerContext], Any]


@dataclass
class BoundMutator:
    """A mutator together with the options it was added with."""

    mutate: Mutator
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class BoundTransformer:
    transform: Transformer
    options: dict[str, Any] = field(default_factory=dict)
