"""Rendering of one API operation: parameters, request body and responses."""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from api_doc_tables.configuration.runtime_settings import RenderingSettings
from api_doc_tables.description_rendering import (
    is_property_required,
    markdownify,
    render_property_description,
)
from api_doc_tables.schema_flattening import SchemaFlatteningError, flatten_schema, slugify
from api_doc_tables.type_formatting import format_type

from .api_document import PageRenderingError
from .object_tables import TABLE_HEADER, render_object_table, render_type_summary

_LOGGER = logging.getLogger(__name__)

PARAMETER_LOCATIONS: tuple[tuple[str, str], ...] = (
    ("path", "Path parameters"),
    ("query", "Query parameters"),
    ("header", "Request headers"),
)
JSON_MEDIA_TYPE = "application/json"


def operation_anchor(method: str, path: str) -> str:
    """Return the anchor shared by every section of one operation."""
    return slugify(f"{method} {path}")


def render_operation(
    method: str,
    path: str,
    operation: Mapping[str, Any],
    settings: RenderingSettings,
) -> str:
    """Render the documentation section for one operation."""
    anchor = operation_anchor(method, path)
    label = f"{method.upper()} {path}"
    _LOGGER.debug("Rendering operation %s", label)

    parts = [
        f'<section class="operation" id="{anchor}">',
        f"<h2><code>{html.escape(label)}</code></h2>",
    ]
    summary = operation.get("summary")
    if summary:
        parts.append(f"<p><strong>{html.escape(str(summary))}</strong></p>")
    description = markdownify(operation.get("description"))
    if description:
        parts.append(f"<div>{description}</div>")

    try:
        parts.append("<h3>Request</h3>")
        parts.append(render_parameters(operation.get("parameters") or ()))
        request_body = operation.get("requestBody")
        if isinstance(request_body, Mapping):
            parts.append(
                _render_content(
                    request_body,
                    anchor_prefix=f"{anchor}_request" if settings.anchor_links else None,
                    label=f"{label} request body",
                    settings=settings,
                )
            )
        parts.append(render_responses(operation.get("responses") or {}, anchor, label, settings))
    except SchemaFlatteningError as exc:
        raise PageRenderingError(f"Failed to render {label}: {exc}") from exc

    parts.append("</section>")
    return "".join(parts)


def render_parameters(parameters: Sequence[Any]) -> str:
    """Render one table per parameter location, in path/query/header order."""
    sections: list[str] = []
    for location, heading in PARAMETER_LOCATIONS:
        located = [
            parameter
            for parameter in parameters
            if isinstance(parameter, Mapping) and parameter.get("in") == location
        ]
        if not located:
            continue
        rows = "".join(_render_parameter_row(parameter) for parameter in located)
        sections.append(
            f"<h4>{heading}</h4>"
            f'<table class="parameter-table">{TABLE_HEADER}<tbody>{rows}</tbody></table>'
        )
    if not sections:
        return "<p>No request parameters.</p>"
    return "".join(sections)


def render_responses(
    responses: Mapping[str, Any],
    anchor: str,
    label: str,
    settings: RenderingSettings,
) -> str:
    """Render the status code table followed by one section per response."""
    parts = ["<h3>Responses</h3>"]
    if not responses:
        parts.append("<p>No responses documented.</p>")
        return "".join(parts)

    code_rows = "".join(
        f"<tr><td><code>{html.escape(str(status))}</code></td>"
        f"<td>{markdownify(_response_description(response))}</td></tr>"
        for status, response in responses.items()
    )
    parts.append(
        '<table class="response-table"><thead><tr><th>Code</th><th>Description</th></tr></thead>'
        f"<tbody>{code_rows}</tbody></table>"
    )

    for status, response in responses.items():
        if not isinstance(response, Mapping):
            continue
        anchor_prefix = f"{anchor}_{slugify(str(status))}_response"
        body = _render_content(
            response,
            anchor_prefix=anchor_prefix if settings.anchor_links else None,
            label=f"{label} {status} response",
            settings=settings,
        )
        if body:
            parts.append(f"<h4>{html.escape(str(status))} response</h4>{body}")
    return "".join(parts)


def render_body_section(schema: Mapping[str, Any], anchor_prefix: str | None, label: str) -> str:
    """Flatten a body schema and render its summary and object tables."""
    flattened = flatten_schema(schema, anchor_prefix, label)
    parts: list[str] = []
    if flattened.schema.get("type") != "object":
        parts.append(render_type_summary(flattened.schema))
    for index, descriptor in enumerate(flattened.objects):
        caption = label if index == 0 and flattened.schema.get("type") == "object" else None
        parts.append(render_object_table(descriptor, caption))
    _LOGGER.debug("Rendered %d object table(s) for %s", len(flattened.objects), label)
    return "".join(parts)


def render_example(value: Any) -> str:
    """Render an example body as a JSON code block."""
    if isinstance(value, str):
        text = value
    else:
        text = json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return f'<pre><code class="language-json">{html.escape(text)}</code></pre>'


def _render_content(
    container: Mapping[str, Any],
    *,
    anchor_prefix: str | None,
    label: str,
    settings: RenderingSettings,
) -> str:
    media = _select_media_type(container.get("content"))
    if media is None:
        return ""
    parts: list[str] = []
    schema = media.get("schema")
    if isinstance(schema, Mapping):
        parts.append(render_body_section(schema, anchor_prefix, label))
    if settings.include_examples:
        parts.extend(render_example(example) for example in _collect_examples(media))
    return "".join(parts)


def _select_media_type(content: Any) -> Mapping[str, Any] | None:
    if not isinstance(content, Mapping) or not content:
        return None
    preferred = content.get(JSON_MEDIA_TYPE)
    if isinstance(preferred, Mapping):
        return preferred
    for media in content.values():
        if isinstance(media, Mapping) and "schema" in media:
            return media
    return None


def _collect_examples(media: Mapping[str, Any]) -> list[Any]:
    if "example" in media:
        return [media["example"]]
    examples = media.get("examples")
    if not isinstance(examples, Mapping):
        return []
    return [
        example["value"]
        for example in examples.values()
        if isinstance(example, Mapping) and "value" in example
    ]


def _render_parameter_row(parameter: Mapping[str, Any]) -> str:
    schema = parameter.get("schema")
    property_schema = dict(schema) if isinstance(schema, Mapping) else {}
    for key, value in parameter.items():
        if key not in ("name", "in", "schema"):
            property_schema[key] = value
    name = str(parameter.get("name", ""))
    required = is_property_required(name, property_schema, None)
    return (
        f"<tr><td><code>{html.escape(name)}</code></td>"
        f"<td><code>{format_type(property_schema, link=True)}</code></td>"
        f"<td>{render_property_description(property_schema, required=required)}</td></tr>"
    )


def _response_description(response: Any) -> str:
    if isinstance(response, Mapping):
        return str(response.get("description") or "")
    return ""
