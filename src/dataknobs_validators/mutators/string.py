"""String mutators.

Every mutator except :func:`to_string_mutator` leaves non-string values
unchanged so that the string type rule reports them.
"""

from __future__ import annotations

import re

from ..helpers import is_number


def _split_words(value: str) -> list[str]:
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", value)
    return [word for word in re.split(r"[^A-Za-z0-9]+", spaced) if word]


def _strip(value: str, needle: str | None, left: bool, right: bool) -> str:
    if needle is None or needle == " ":
        if left and right:
            return value.strip()
        return value.lstrip() if left else value.rstrip()
    if left:
        while needle and value.startswith(needle):
            value = value[len(needle):]
    if right:
        while needle and value.endswith(needle):
            value = value[: -len(needle)]
    return value


async def to_string_mutator(value, context):
    """Convert numbers and booleans to strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return str(value)
    return value


async def lowercase_mutator(value, context):
    return value.lower() if isinstance(value, str) else value


async def uppercase_mutator(value, context):
    return value.upper() if isinstance(value, str) else value


async def capitalize_mutator(value, context):
    """Upper-case the first letter and lower-case the rest."""
    return value.capitalize() if isinstance(value, str) else value


async def title_case_mutator(value, context):
    if not isinstance(value, str):
        return value
    return " ".join(word[:1].upper() + word[1:] for word in value.split(" "))


async def snake_case_mutator(value, context):
    if not isinstance(value, str):
        return value
    return "_".join(word.lower() for word in _split_words(value))


async def kebab_case_mutator(value, context):
    if not isinstance(value, str):
        return value
    return "-".join(word.lower() for word in _split_words(value))


async def camel_case_mutator(value, context):
    if not isinstance(value, str):
        return value
    words = _split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


async def pascal_case_mutator(value, context):
    if not isinstance(value, str):
        return value
    return "".join(word.capitalize() for word in _split_words(value))


async def trim_mutator(value, context):
    if not isinstance(value, str):
        return value
    return _strip(value, context.options.get("needle"), left=True, right=True)


async def ltrim_mutator(value, context):
    if not isinstance(value, str):
        return value
    return _strip(value, context.options.get("needle"), left=True, right=False)


async def rtrim_mutator(value, context):
    if not isinstance(value, str):
        return value
    return _strip(value, context.options.get("needle"), left=False, right=True)


async def trim_multiple_whitespace_mutator(value, context):
    """Collapse runs of whitespace into a single space."""
    if not isinstance(value, str):
        return value
    return re.sub(r"\s+", " ", value)


async def slug_mutator(value, context):
    if not isinstance(value, str):
        return value
    slug = re.sub(r"[^\w\s-]", "", value.lower().strip())
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"--+", "-", slug)
    return slug.strip("-")


async def append_mutator(value, context):
    if not isinstance(value, str):
        return value
    return value + context.options.get("suffix", "")


async def prepend_mutator(value, context):
    if not isinstance(value, str):
        return value
    return context.options.get("prefix", "") + value


async def replace_mutator(value, context):
    """Replace the first match of ``search`` (a string or compiled pattern)."""
    if not isinstance(value, str):
        return value
    search = context.options.get("search")
    replacement = context.options.get("replace") or ""
    if not search:
        return value
    if isinstance(search, re.Pattern):
        return search.sub(replacement, value, count=1)
    return value.replace(search, replacement, 1)


async def replace_all_mutator(value, context):
    if not isinstance(value, str):
        return value
    search = context.options.get("search")
    replacement = context.options.get("replace") or ""
    if not search:
        return value
    if isinstance(search, re.Pattern):
        return search.sub(replacement, value)
    return value.replace(search, replacement)


async def truncate_mutator(value, context):
    if not isinstance(value, str):
        return value
    max_length = context.options.get("maxLength", 100)
    suffix = context.options.get("suffix", "...")
    if len(value) <= max_length:
        return value
    return value[:max_length] + suffix


async def mask_mutator(value, context):
    """Replace ``value[start:end]`` with the mask character."""
    if not isinstance(value, str):
        return value
    char = context.options.get("char") or "*"
    start = context.options.get("start") or 0
    end = context.options.get("end")
    if end is None:
        end = len(value)
    masked = max(end - start, 0)
    return value[:start] + char * masked + value[end:]
