"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from api_doc_tables.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
api:
  inline: |
    openapi: 3.1.0
    info:
      title: Events API
    paths: {}
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.api.text.startswith("openapi: 3.1.0")
    assert configuration.api.source_path is None
    assert configuration.rendering.page_title is None
    assert configuration.rendering.anchor_links is True
    assert configuration.rendering.include_examples is True
    assert configuration.rendering.resolve_references is True


def test_loads_json_configuration_with_relative_api_path(tmp_path: Path) -> None:
    api_path = _write_file(
        tmp_path / "openapi.json",
        json.dumps({"openapi": "3.1.0", "info": {"title": "Events API"}, "paths": {}}),
    )
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "api": {"path": api_path.name},
                "rendering": {
                    "page_title": "  Events  ",
                    "anchor_links": False,
                    "include_examples": False,
                },
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.api.source_path == api_path
    assert configuration.api.text == api_path.read_text(encoding="utf-8")
    assert configuration.rendering.page_title == "Events"
    assert configuration.rendering.anchor_links is False
    assert configuration.rendering.include_examples is False
    assert configuration.rendering.resolve_references is True


@pytest.mark.parametrize(
    "api_section",
    [
        None,
        {},
        {"inline": "openapi: 3.1.0", "path": "./openapi.yaml"},
        {"inline": 7},
        {"path": ["openapi.yaml"]},
    ],
)
def test_errors_when_api_definition_invalid(tmp_path: Path, api_section: dict | None) -> None:
    config_path = _write_file(tmp_path / "config.yaml", yaml_dump({"api": api_section}))

    with pytest.raises(ConfigurationError):
        load_configuration(config_path)


def test_errors_when_configuration_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "[]")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_configuration(config_path)


def test_errors_when_api_path_does_not_exist(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "api:\n  path: ./missing.yaml\n")

    with pytest.raises(ConfigurationError, match="API document not found"):
        load_configuration(config_path)


def test_errors_when_api_document_is_empty(tmp_path: Path) -> None:
    _write_file(tmp_path / "openapi.yaml", "   \n")
    config_path = _write_file(tmp_path / "config.yaml", "api:\n  path: openapi.yaml\n")

    with pytest.raises(ConfigurationError, match="API document cannot be empty"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("rendering", "message"),
    [
        ("yes", "rendering must be a mapping"),
        ({"anchor_links": "yes"}, "rendering.anchor_links must be a boolean"),
        ({"page_title": 3}, "rendering.page_title must be a string"),
    ],
)
def test_errors_when_rendering_section_invalid(
    tmp_path: Path, rendering: object, message: str
) -> None:
    config = {"api": {"inline": "openapi: 3.1.0"}, "rendering": rendering}
    config_path = _write_file(tmp_path / "config.yaml", yaml_dump(config))

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_errors_when_yaml_is_malformed(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "api: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


def yaml_dump(value: object) -> str:
    """Local helper to avoid importing yaml in tests."""
    return json.dumps(value)
