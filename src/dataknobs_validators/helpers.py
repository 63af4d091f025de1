"""Small helpers shared by rules, mutators and validators.
"""

from __future__ import annotations

import inspect
import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .context import SchemaContext
    from .rules.base import ContextualRule


class _Missing:
    """Marker for a key that is absent from the input."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self


MISSING: Any = _Missing()


def is_missing(value: Any) -> bool:
    return value is MISSING


def is_empty(value: Any) -> bool:
    """Check whether a value counts as "no value".

    Empty values are ``MISSING``, ``None``, the empty string and empty
    lists/tuples. Mappings are never empty values, ``0`` and ``False`` are
    real values.

    Args:
        value: Value to check

    Returns:
        True if the value is empty
    """
    if value is MISSING or value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def is_number(value: Any) -> bool:
    """True for int/float values; bools are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    """True for numbers and strings that parse as finite numbers."""
    if is_number(value):
        return not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str) and value.strip():
        try:
            return math.isfinite(float(value))
        except ValueError:
            return False
    return False


def to_number(value: Any) -> Any:
    """Convert a numeric string to int or float, leaving anything else as is."""
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return value
    return value


def sort_key(value: Any) -> tuple:
    """Ordering key that never raises on mixed or missing values.

    Numbers, strings, dates and datetimes sort among their own kind.
    Other values sort after them by type name and ``repr``, and
    ``MISSING``/``None`` always sort last.
    """
    if value is MISSING or value is None:
        return (2, "", 0)
    if is_number(value):
        return (0, "number", value)
    if isinstance(value, (str, bool)):
        return (0, type(value).__name__, value)
    if isinstance(value, datetime):
        return (0, "datetime", value.replace(tzinfo=None))
    if isinstance(value, date):
        return (0, "date", value)
    return (1, type(value).__name__, repr(value))


def set_key_path(path: str, key: str) -> str:
    """Append a key to a dotted path."""
    if not path:
        return key
    return f"{path}.{key}"


def get_path(source: Any, path: str, default: Any = MISSING) -> Any:
    """Read a dotted path from nested mappings and sequences.

    Args:
        source: Root mapping or sequence
        path: Dotted path such as ``"user.emails.0"``
        default: Returned when any segment is absent

    Returns:
        The value at the path, or ``default``
    """
    if source is None or source is MISSING:
        return default

    current = source
    for segment in str(path).split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, (list, tuple)) and segment.lstrip("-").isdigit():
            index = int(segment)
            if not -len(current) <= index < len(current):
                return default
            current = current[index]
        else:
            return default
    return current


def scope_source(context: SchemaContext, scope: str | None) -> Any:
    """Pick the lookup root for a cross-field rule."""
    return context.parent if scope == "sibling" else context.all_values


def get_field_value(
    rule: ContextualRule,
    context: SchemaContext,
    field_key: str = "field",
) -> Any:
    """Get the value of the field named in ``rule.options[field_key]``.

    Global scope reads from the whole input, sibling scope reads from the
    nearest parent container.
    """
    field_name = rule.options[field_key]
    source = scope_source(context, rule.options.get("scope", "global"))
    return get_path(source, field_name)


def get_fields_values(rule: ContextualRule, context: SchemaContext) -> list[Any]:
    source = scope_source(context, rule.options.get("scope", "global"))
    return [get_path(source, field_name) for field_name in rule.options["fields"]]


async def maybe_await(value: Any) -> Any:
    """Await the value if a sync-or-async callback returned an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


def remove_missing_values(value: Any, _visited: dict[int, Any] | None = None) -> Any:
    """Recursively drop ``MISSING`` entries from plain mappings.

    Lists are walked element by element; other objects are returned untouched.
    """
    if _visited is None:
        _visited = {}

    if isinstance(value, list):
        return [remove_missing_values(item, _visited) for item in value]

    if not isinstance(value, dict):
        return value

    if id(value) in _visited:
        return _visited[id(value)]

    result: dict[str, Any] = {}
    _visited[id(value)] = result
    for key, item in value.items():
        if item is not MISSING:
            result[key] = remove_missing_values(item, _visited)
    return result
