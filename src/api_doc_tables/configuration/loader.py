"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ApiSource, Configuration, RenderingSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    api = _parse_api_section(parsed.get("api"), path.parent)
    rendering = _parse_rendering_section(parsed.get("rendering"))
    return Configuration(path=path, api=api, rendering=rendering)


def _parse_api_section(value: Any, base_path: Path) -> ApiSource:
    section = _require_mapping(value, "api")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("API definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("api.inline must be a string.")
        return ApiSource(text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("api.path must be a string.")
        api_path = _resolve_path(base_path, path_value)
        if not api_path.exists():
            raise ConfigurationError(f"API document not found: {api_path}")
        text = api_path.read_text(encoding="utf-8")
        if not text.strip():
            raise ConfigurationError("API document cannot be empty.")
        return ApiSource(text=text, source_path=api_path)
    raise ConfigurationError("API definition requires either inline or path.")


def _parse_rendering_section(value: Any) -> RenderingSettings:
    if value is None:
        return RenderingSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("rendering must be a mapping.")
    return RenderingSettings(
        page_title=_optional_string(value.get("page_title"), "rendering.page_title"),
        anchor_links=_optional_bool(value.get("anchor_links"), "rendering.anchor_links", True),
        include_examples=_optional_bool(
            value.get("include_examples"), "rendering.include_examples", True
        ),
        resolve_references=_optional_bool(
            value.get("resolve_references"), "rendering.resolve_references", True
        ),
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
