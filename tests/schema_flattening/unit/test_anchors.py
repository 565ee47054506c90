"""Anchor slug tests."""

from __future__ import annotations

import pytest
from api_doc_tables.schema_flattening import build_anchor, slugify


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Event", "event"),
        ("  Event Content  ", "event-content"),
        ("m.room.message  event", "m-room-message-event"),
        ("Unsigned_Data (v2)", "unsigned-data-v2"),
        ("--Leading and trailing--", "leading-and-trailing"),
    ],
)
def test_slugify_lowercases_and_collapses_non_alphanumeric_runs(title: str, expected: str) -> None:
    assert slugify(title) == expected


def test_build_anchor_joins_prefix_and_slug() -> None:
    assert build_anchor("get-rooms_200_response", "Room Summary") == (
        "get-rooms_200_response_room-summary"
    )
