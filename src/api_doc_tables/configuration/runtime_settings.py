"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ApiSource:
    """Normalized API document source."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class RenderingSettings:
    """Options controlling the generated page."""

    page_title: str | None = None
    anchor_links: bool = True
    include_examples: bool = True
    resolve_references: bool = True


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    api: ApiSource
    rendering: RenderingSettings
