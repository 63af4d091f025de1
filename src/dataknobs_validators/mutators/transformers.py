"""Output transformers.
"""

from __future__ import annotations

import json
from datetime import date, datetime

from ..dates import to_timestamp


def _json_default(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


async def to_json_transformer(value, context):
    """Serialize the output; dates become ISO strings."""
    indent = context.options.get("indent") or None
    return json.dumps(value, indent=indent, default=_json_default)


async def to_iso_string_transformer(value, context):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


async def to_timestamp_transformer(value, context):
    """POSIX timestamp in seconds; naive datetimes are taken as UTC."""
    if isinstance(value, datetime):
        return to_timestamp(value)
    return value


async def to_format_transformer(value, context):
    """Format with ``strftime`` directives, e.g. ``"%Y-%m-%d"``."""
    if isinstance(value, (date, datetime)):
        return value.strftime(context.options.get("format", "%Y-%m-%d"))
    return value
