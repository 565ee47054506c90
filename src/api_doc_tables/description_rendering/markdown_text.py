"""Markdown to HTML conversion for schema and operation descriptions."""

from __future__ import annotations

import markdown

_PARAGRAPH_OPEN = "<p>"
_PARAGRAPH_CLOSE = "</p>"


def markdownify(text: str | None) -> str:
    """Render markdown text to HTML, unwrapping a lone paragraph."""
    if not text:
        return ""
    rendered = markdown.markdown(str(text), extensions=["tables", "fenced_code"]).strip()
    if (
        rendered.startswith(_PARAGRAPH_OPEN)
        and rendered.endswith(_PARAGRAPH_CLOSE)
        and rendered.count(_PARAGRAPH_OPEN) == 1
    ):
        return rendered[len(_PARAGRAPH_OPEN) : -len(_PARAGRAPH_CLOSE)]
    return rendered
