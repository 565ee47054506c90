"""Page rendering exports."""

from .api_document import PageRenderingError, load_api_document
from .api_page_builder import build_api_page, write_api_page
from .object_tables import render_object_table, render_type_summary
from .operation_sections import (
    operation_anchor,
    render_body_section,
    render_example,
    render_operation,
    render_parameters,
    render_responses,
)

__all__ = [
    "PageRenderingError",
    "build_api_page",
    "load_api_document",
    "operation_anchor",
    "render_body_section",
    "render_example",
    "render_object_table",
    "render_operation",
    "render_parameters",
    "render_responses",
    "render_type_summary",
    "write_api_page",
]
