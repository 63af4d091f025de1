"""Object mutators.
"""

from __future__ import annotations

from collections.abc import Mapping


async def strip_unknown_mutator(value, context):
    """Keep only keys declared in the schema or explicitly allowed."""
    if not isinstance(value, Mapping):
        return value

    allowed = set(context.ctx.schema or ()) | set(context.options.get("allowedKeys") or ())
    return {key: item for key, item in value.items() if key in allowed}


def _trim(item, recursive: bool):
    if isinstance(item, str):
        return item.strip()
    if not recursive:
        return item
    if isinstance(item, Mapping):
        return {key: _trim(child, recursive) for key, child in item.items()}
    if isinstance(item, list):
        return [_trim(child, recursive) for child in item]
    return item


async def object_trim_mutator(value, context):
    """Trim string values, descending into nested containers when recursive."""
    if not isinstance(value, Mapping):
        return value
    recursive = context.options.get("recursive", False)
    return {key: _trim(item, recursive) for key, item in value.items()}
