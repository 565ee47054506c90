"""Anchor generation for nameable object schemas."""

from __future__ import annotations

import re

_NON_ALPHANUMERIC_RUN = re.compile(r"[\W_]+")


def slugify(text: str) -> str:
    """Return a lowercase URL-fragment slug with non-alphanumeric runs collapsed to '-'."""
    return _NON_ALPHANUMERIC_RUN.sub("-", text.strip().lower()).strip("-")


def build_anchor(anchor_prefix: str, title: str) -> str:
    """Return the anchor for a titled object rendered under `anchor_prefix`."""
    return f"{anchor_prefix}_{slugify(title)}"
