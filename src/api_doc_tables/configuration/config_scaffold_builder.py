"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "api-doc-tables.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for api-doc-tables.
# Replace the <REQUIRED> placeholder before running render.

api:
  # Provide either an API document path (YAML or JSON) or inline document text.
  path: "<REQUIRED>"
  # inline: |
  #   openapi: 3.1.0
  #   ...

rendering:
  # Page title. Defaults to info.title of the API document.
  # page_title: "API reference"
  # Link titled object types to their tables.
  anchor_links: true
  # Render example request and response bodies.
  include_examples: true
  # Inline local $ref pointers and merge allOf before rendering.
  resolve_references: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
