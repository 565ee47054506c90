"""Property description rendering service."""

from __future__ import annotations

import html
from collections.abc import Mapping, Sequence
from typing import Any

from .markdown_text import markdownify
from .version_annotations import render_version_annotations

REQUIRED_MARKER = "<strong>Required: </strong>"


def is_property_required(
    property_name: str,
    property_schema: Mapping[str, Any],
    parent_required: Sequence[str] | None,
) -> bool:
    """Return True when the parent lists the property as required or it marks itself required."""
    listed = parent_required is not None and property_name in parent_required
    return listed or property_schema.get("required") is True


def render_property_description(property_schema: Mapping[str, Any], *, required: bool) -> str:
    """Render the description cell of a property row.

    The cell holds the required marker, the markdown description, the list of
    allowed values for enums and any version annotations, in that order.
    """
    parts: list[str] = []
    if required:
        parts.append(REQUIRED_MARKER)
    parts.append(markdownify(property_schema.get("description")))

    enum = property_schema.get("enum")
    if isinstance(enum, Sequence) and not isinstance(enum, str) and enum:
        values = ", ".join(html.escape(_format_enum_value(value)) for value in enum)
        parts.append(f"<p>One of: <code>[{values}]</code>.</p>")

    parts.append(render_version_annotations(property_schema))
    return "".join(parts)


def _format_enum_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
