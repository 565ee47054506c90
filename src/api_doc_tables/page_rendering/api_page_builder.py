"""Whole-page rendering of an API document."""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from api_doc_tables.configuration.runtime_settings import RenderingSettings
from api_doc_tables.description_rendering import markdownify
from api_doc_tables.schema_resolution import SchemaResolutionError, resolve_references

from .api_document import PageRenderingError
from .operation_sections import render_operation

_LOGGER = logging.getLogger(__name__)

HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch")
DEFAULT_PAGE_TITLE = "API reference"


def build_api_page(document: Mapping[str, Any], settings: RenderingSettings) -> str:
    """Render every operation of `document` into one HTML page."""
    if settings.resolve_references:
        try:
            document = resolve_references(document)
        except SchemaResolutionError as exc:
            raise PageRenderingError(str(exc)) from exc

    info = document.get("info")
    info = info if isinstance(info, Mapping) else {}
    title = settings.page_title or info.get("title") or DEFAULT_PAGE_TITLE

    sections: list[str] = []
    paths = document.get("paths")
    if isinstance(paths, Mapping):
        for path, path_item in paths.items():
            if not isinstance(path_item, Mapping):
                continue
            for method, operation in path_item.items():
                if method not in HTTP_METHODS or not isinstance(operation, Mapping):
                    continue
                sections.append(render_operation(method, str(path), operation, settings))
    _LOGGER.debug("Rendered %d operation(s) for %s", len(sections), title)

    description = markdownify(info.get("description"))
    intro = f"<div>{description}</div>" if description else ""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{html.escape(str(title))}</title></head>"
        f"<body><h1>{html.escape(str(title))}</h1>{intro}{''.join(sections)}</body></html>\n"
    )


def write_api_page(
    document: Mapping[str, Any],
    settings: RenderingSettings,
    output_path: Path | str,
) -> Path:
    """Render `document` and write the page, returning the resolved output path."""
    page = build_api_page(document, settings)
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page, encoding="utf-8")
    return output.resolve()
