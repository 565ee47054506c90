"""Schema node classification."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class SchemaKind(str, Enum):
    """Shape used to render the type of a schema node."""

    OBJECT = "object"
    ARRAY = "array"
    UNION = "union"
    PRIMITIVE = "primitive"
    UNTYPED = "untyped"


def classify_schema(schema: Mapping[str, Any]) -> SchemaKind:
    """Return the kind that decides how the node's type is rendered."""
    schema_type = schema.get("type")
    if schema_type == "object":
        return SchemaKind.OBJECT
    if schema_type == "array":
        return SchemaKind.ARRAY
    if _is_type_list(schema_type) or schema.get("oneOf"):
        return SchemaKind.UNION
    if isinstance(schema_type, str):
        return SchemaKind.PRIMITIVE
    return SchemaKind.UNTYPED


def is_nameable_object(schema: Mapping[str, Any]) -> bool:
    """Return True for an object schema that has both a title and properties."""
    return (
        schema.get("type") == "object"
        and bool(schema.get("title"))
        and bool(schema.get("properties"))
    )


def _is_type_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)
