"""Compact type signatures for property schemas."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any

from .schema_kinds import SchemaKind, classify_schema


def format_type(schema: Mapping[str, Any], *, link: bool = False) -> str:
    """Return the type signature of a property schema.

    Examples: `string`, `[integer]`, `EventContent`, `{string: boolean}`,
    `string|null`. With `link`, titled objects that carry an anchor are
    rendered as HTML links and titles are escaped.
    """
    kind = classify_schema(schema)
    if kind == SchemaKind.OBJECT:
        return resolve_object_title(schema, link=link)
    if kind == SchemaKind.ARRAY:
        items = schema.get("items")
        inner = format_type(items, link=link) if isinstance(items, Mapping) else ""
        return f"[{inner}]"
    if kind == SchemaKind.UNION:
        return "|".join(_union_members(schema, link=link))
    if kind == SchemaKind.PRIMITIVE:
        return schema["type"]
    return ""


def resolve_object_title(schema: Mapping[str, Any], *, link: bool = False) -> str:
    """Return the display name of an object schema."""
    title = schema.get("title")
    if title:
        return _render_title(str(title), schema.get("anchor"), link=link)

    additional = schema.get("additionalProperties")
    if isinstance(additional, Mapping):
        return f"{{string: {format_type(additional, link=link)}}}"

    patterns = schema.get("patternProperties")
    if isinstance(patterns, Mapping) and patterns:
        value_types = "|".join(
            format_type(value_schema, link=link) for value_schema in patterns.values()
        )
        return f"{{string: {value_types}}}"

    return "object"


def _union_members(schema: Mapping[str, Any], *, link: bool) -> list[str]:
    schema_type = schema.get("type")
    if isinstance(schema_type, list | tuple):
        return [str(member) for member in schema_type]
    return [format_type(alternative, link=link) for alternative in schema["oneOf"]]


def _render_title(title: str, anchor: Any, *, link: bool) -> str:
    if not link:
        return title
    escaped = html.escape(title)
    if anchor:
        return f'<a href="#{html.escape(str(anchor), quote=True)}">{escaped}</a>'
    return escaped
