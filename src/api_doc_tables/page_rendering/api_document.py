"""API document loading."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from api_doc_tables.configuration.runtime_settings import ApiSource


class PageRenderingError(Exception):
    """Raised when an API document cannot be rendered."""


def load_api_document(source: ApiSource) -> dict[str, Any]:
    """Parse YAML or JSON API document text into a mapping."""
    label = str(source.source_path) if source.source_path else "inline API document"
    try:
        parsed = yaml.safe_load(source.text)
    except yaml.YAMLError as exc:
        raise PageRenderingError(f"Invalid API document {label}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise PageRenderingError(f"API document root must be a mapping: {label}")
    return dict(parsed)
