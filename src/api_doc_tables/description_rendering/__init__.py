"""Description rendering exports."""

from .markdown_text import markdownify
from .property_descriptions import (
    REQUIRED_MARKER,
    is_property_required,
    render_property_description,
)
from .version_annotations import render_added_in, render_changed_in, render_version_annotations

__all__ = [
    "REQUIRED_MARKER",
    "is_property_required",
    "markdownify",
    "render_added_in",
    "render_changed_in",
    "render_property_description",
    "render_version_annotations",
]
