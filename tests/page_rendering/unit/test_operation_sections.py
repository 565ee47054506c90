"""Operation section rendering tests."""

from __future__ import annotations

import pytest
import yaml
from api_doc_tables.configuration import RenderingSettings
from api_doc_tables.page_rendering import (
    PageRenderingError,
    operation_anchor,
    render_body_section,
    render_example,
    render_operation,
    render_parameters,
)


def _operation() -> dict:
    return {
        "summary": "Get an event",
        "description": "Returns a **single** event.",
        "parameters": [
            {
                "name": "roomId",
                "in": "path",
                "required": True,
                "description": "The room.",
                "schema": {"type": "string"},
            },
            {
                "name": "limit",
                "in": "query",
                "schema": {"type": "integer", "enum": [10, 20]},
            },
        ],
        "responses": {
            "200": {
                "description": "The event.",
                "content": {
                    "application/json": {
                        "schema": {
                            "type": "object",
                            "title": "Event",
                            "properties": {
                                "content": {
                                    "type": "object",
                                    "title": "EventContent",
                                    "properties": {"body": {"type": "string"}},
                                }
                            },
                        },
                        "example": {"content": {"body": "hi"}},
                    }
                },
            },
            "404": {"description": "Not found."},
        },
    }


def test_operation_anchor_is_slug_of_method_and_path() -> None:
    assert operation_anchor("get", "/rooms/{roomId}/event") == "get-rooms-roomid-event"


def test_render_operation_includes_parameters_responses_tables_and_examples() -> None:
    section = render_operation("get", "/rooms/{roomId}/event", _operation(), RenderingSettings())

    assert section.startswith('<section class="operation" id="get-rooms-roomid-event">')
    assert "<h2><code>GET /rooms/{roomId}/event</code></h2>" in section
    assert "Returns a <strong>single</strong> event." in section
    assert "<h4>Path parameters</h4>" in section
    assert "<h4>Query parameters</h4>" in section
    assert "<strong>Required: </strong>The room." in section
    assert "<p>One of: <code>[10, 20]</code>.</p>" in section
    assert "<tr><td><code>404</code></td><td>Not found.</td></tr>" in section
    assert 'id="get-rooms-roomid-event_200_response_event"' in section
    assert '<a href="#get-rooms-roomid-event_200_response_eventcontent">EventContent</a>' in section
    assert '<pre><code class="language-json">{\n  &quot;content&quot;' in section
    assert section.endswith("</section>")


def test_render_operation_without_anchor_links_or_examples() -> None:
    settings = RenderingSettings(anchor_links=False, include_examples=False)

    section = render_operation("get", "/rooms/{roomId}/event", _operation(), settings)

    assert "_response_" not in section
    assert "<a href=" not in section
    assert "language-json" not in section


def test_render_operation_wraps_flattening_errors() -> None:
    operation = {
        "responses": {
            "200": {
                "description": "Broken",
                "content": {"application/json": {"schema": {"type": "array"}}},
            }
        }
    }

    with pytest.raises(PageRenderingError, match=r"GET /broken.*200 response"):
        render_operation("get", "/broken", operation, RenderingSettings())


def test_render_parameters_without_parameters() -> None:
    assert render_parameters([]) == "<p>No request parameters.</p>"


def test_array_body_section_has_summary_and_item_tables() -> None:
    schema = {
        "type": "array",
        "items": {"type": "object", "title": "Room", "properties": {"id": {"type": "string"}}},
    }

    section = render_body_section(schema, "rooms", "Rooms")

    assert section.startswith('<p>Array of <code><a href="#rooms_room">Room</a></code>.</p>')
    assert '<table class="object-table" id="rooms_room"><caption>Room</caption>' in section


def test_untitled_object_body_uses_label_as_caption() -> None:
    schema = {"type": "object", "properties": {"id": {"type": "string"}}}

    section = render_body_section(schema, None, "GET /x 200 response")

    assert "<caption>GET /x 200 response</caption>" in section


def test_render_example_keeps_string_examples_verbatim() -> None:
    assert render_example('{"a": 1}') == (
        '<pre><code class="language-json">{&quot;a&quot;: 1}</code></pre>'
    )


def test_render_example_writes_yaml_dates_as_strings() -> None:
    example = yaml.safe_load("d: 2021-01-01")

    assert render_example(example) == (
        '<pre><code class="language-json">{\n  &quot;d&quot;: &quot;2021-01-01&quot;\n}'
        "</code></pre>"
    )
