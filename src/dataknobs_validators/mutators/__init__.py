"""Mutators (input rewriting) and transformers (output rewriting).
"""

from .array import flip_mutator, remove_empty_mutator, sort_mutator, unique_mutator
from .base import (
    BoundMutator,
    BoundTransformer,
    Mutator,
    MutatorContext,
    Transformer,
    TransformerContext,
)
from .date import (
    add_days_mutator,
    add_hours_mutator,
    end_of_day_mutator,
    start_of_day_mutator,
    to_date_mutator,
)
from .number import (
    as_string_mutator,
    boolean_mutator,
    number_mutator,
    numeric_mutator,
    round_mutator,
)
from .object import object_trim_mutator, strip_unknown_mutator
from .string import (
    append_mutator,
    camel_case_mutator,
    capitalize_mutator,
    kebab_case_mutator,
    lowercase_mutator,
    ltrim_mutator,
    mask_mutator,
    pascal_case_mutator,
    prepend_mutator,
    replace_all_mutator,
    replace_mutator,
    rtrim_mutator,
    slug_mutator,
    snake_case_mutator,
    title_case_mutator,
    to_string_mutator,
    trim_multiple_whitespace_mutator,
    trim_mutator,
    truncate_mutator,
    uppercase_mutator,
)
from .transformers import (
    to_format_transformer,
    to_iso_string_transformer,
    to_json_transformer,
    to_timestamp_transformer,
)

__all__ = [name for name in dir() if name.endswith(("_mutator", "_transformer"))] + [
    "BoundMutator",
    "BoundTransformer",
    "Mutator",
    "MutatorContext",
    "Transformer",
    "TransformerContext",
]
