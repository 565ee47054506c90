"""HTML tables for flattened object schemas."""

from __future__ import annotations

import html
from collections.abc import Mapping, Sequence
from typing import Any

from api_doc_tables.description_rendering import (
    is_property_required,
    render_property_description,
)
from api_doc_tables.schema_flattening import ObjectDescriptor
from api_doc_tables.type_formatting import format_type

TABLE_HEADER = "<thead><tr><th>Name</th><th>Type</th><th>Description</th></tr></thead>"


def render_object_table(descriptor: ObjectDescriptor, caption: str | None = None) -> str:
    """Render one object descriptor as a Name/Type/Description table.

    Descriptors without properties have nothing to tabulate and render as an
    empty string.
    """
    if not descriptor.properties:
        return ""
    table_id = f' id="{html.escape(descriptor.anchor, quote=True)}"' if descriptor.anchor else ""
    title = descriptor.title or caption
    caption_html = f"<caption>{html.escape(title)}</caption>" if title else ""
    rows = "".join(
        _render_property_row(name, schema, descriptor.required)
        for name, schema in descriptor.properties.items()
    )
    return (
        f'<table class="object-table"{table_id}>{caption_html}{TABLE_HEADER}'
        f"<tbody>{rows}</tbody></table>"
    )


def render_type_summary(schema: Mapping[str, Any]) -> str:
    """Render the one-line summary used for bodies that are not plain objects."""
    if schema.get("type") == "array":
        items = schema.get("items")
        inner = format_type(items, link=True) if isinstance(items, Mapping) else ""
        if not inner:
            # items.anyOf alternatives have no single item type.
            return "<p>Array of items.</p>"
        return f"<p>Array of <code>{inner}</code>.</p>"
    return f"<p><code>{format_type(schema, link=True)}</code></p>"


def _render_property_row(name: str, schema: Any, parent_required: Sequence[str] | None) -> str:
    property_schema = schema if isinstance(schema, Mapping) else {}
    required = is_property_required(name, property_schema, parent_required)
    return (
        f"<tr><td><code>{html.escape(name)}</code></td>"
        f"<td><code>{format_type(property_schema, link=True)}</code></td>"
        f"<td>{render_property_description(property_schema, required=required)}</td></tr>"
    )
