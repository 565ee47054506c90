"""Added-in and changed-in version annotations."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any

from .markdown_text import markdownify

ADDED_IN_KEY = "x-addedInMatrixVersion"
CHANGED_IN_KEY = "x-changedInMatrixVersion"


def render_added_in(version: Any) -> str:
    return f"<strong>[Added in <code>{_format_version(version)}</code>]</strong>"


def render_changed_in(changes: Mapping[Any, Any]) -> str:
    """Render one paragraph per changed version, in mapping order."""
    paragraphs = [
        f"<p><strong>[Changed in <code>{_format_version(version)}</code>]</strong> "
        f"{markdownify(description)}</p>"
        for version, description in changes.items()
    ]
    return "".join(paragraphs)


def render_version_annotations(schema: Mapping[str, Any]) -> str:
    parts: list[str] = []
    added_in = schema.get(ADDED_IN_KEY)
    if added_in:
        parts.append(render_added_in(added_in))
    changed_in = schema.get(CHANGED_IN_KEY)
    if isinstance(changed_in, Mapping) and changed_in:
        parts.append(render_changed_in(changed_in))
    return "".join(parts)


def _format_version(version: Any) -> str:
    text = str(version).strip()
    if not text.startswith("v"):
        text = f"v{text}"
    return html.escape(text)
