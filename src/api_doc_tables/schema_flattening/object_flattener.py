"""Object schema discovery, anchoring and deduplication service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from api_doc_tables.type_formatting.schema_kinds import is_nameable_object

from .anchors import build_anchor
from .object_descriptors import (
    UNTITLED_OBJECT_NAME,
    FlattenedSchema,
    InvalidSchemaInputError,
    MalformedSchemaError,
    ObjectDescriptor,
)

_LOGGER = logging.getLogger(__name__)


def flatten_schema(
    schema: Any,
    anchor_prefix: str | None = None,
    name: str | None = None,
) -> FlattenedSchema:
    """Return every object schema reachable from `schema`, root first, without duplicates.

    The returned schema is an updated copy of the input with anchors injected
    into nameable objects. The caller's tree is left untouched.

    Args:
      schema: Root schema, with references and `allOf` already resolved.
      anchor_prefix: Prefix for generated anchors. No anchors are generated when omitted.
      name: Label used in error messages. Defaults to the schema title.

    Raises:
      InvalidSchemaInputError: If a schema node is not a mapping.
      MalformedSchemaError: If an array schema has no usable items.
    """
    if name is None:
        title = schema.get("title") if isinstance(schema, Mapping) else None
        name = title if isinstance(title, str) and title else UNTITLED_OBJECT_NAME

    objects, updated = collect_object_schemas(schema, anchor_prefix=anchor_prefix, name=name)
    descriptors = _deduplicate([clean_object(item) for item in objects])
    _LOGGER.debug("Flattened %s into %d object(s)", name, len(descriptors))
    return FlattenedSchema(objects=tuple(descriptors), schema=updated)


def clean_object(schema: Mapping[str, Any] | ObjectDescriptor) -> ObjectDescriptor:
    """Project an object schema onto the keys relevant for rendering and dedup."""
    if isinstance(schema, ObjectDescriptor):
        return schema
    properties = schema.get("properties")
    return ObjectDescriptor(
        title=schema.get("title"),
        properties=dict(properties) if isinstance(properties, Mapping) else None,
        required=_as_tuple(schema.get("required")),
        enum=_as_tuple(schema.get("enum")),
        anchor=schema.get("anchor"),
    )


def collect_object_schemas(
    schema: Any,
    *,
    anchor_prefix: str | None,
    name: str,
) -> tuple[list[Any], dict[str, Any]]:
    """Recursive flattening step.

    Returns the discovered objects and the updated copy of `schema`. The first
    entry is the updated node itself in full shape when it is an object; every
    descendant entry is already a clean `ObjectDescriptor`.
    """
    if not isinstance(schema, Mapping):
        raise InvalidSchemaInputError(
            f"Invalid schema node at {name}: expected a mapping, got {type(schema).__name__}.",
            name,
        )

    updated = dict(schema)
    objects: list[Any] = []
    schema_type = updated.get("type")

    if schema_type == "object":
        _flatten_object_members(updated, objects, anchor_prefix=anchor_prefix, name=name)
        objects.insert(0, updated)
    elif schema_type == "array":
        _flatten_array_items(updated, objects, anchor_prefix=anchor_prefix, name=name)

    alternatives = updated.get("oneOf")
    if isinstance(alternatives, Sequence) and not isinstance(alternatives, str):
        for index, alternative in enumerate(alternatives):
            nested, _ = collect_object_schemas(
                alternative, anchor_prefix=anchor_prefix, name=f"{name}.oneOf[{index}]"
            )
            _append_cleaned(objects, nested)

    return _deduplicate(objects), updated


def _flatten_object_members(
    node: dict[str, Any],
    objects: list[Any],
    *,
    anchor_prefix: str | None,
    name: str,
) -> None:
    if anchor_prefix and is_nameable_object(node):
        node["anchor"] = build_anchor(anchor_prefix, str(node["title"]))

    additional = node.get("additionalProperties")
    if isinstance(additional, Mapping):
        nested, node["additionalProperties"] = collect_object_schemas(
            additional, anchor_prefix=anchor_prefix, name=f"{name}.additionalProperties"
        )
        _append_cleaned(objects, nested)

    patterns = node.get("patternProperties")
    if isinstance(patterns, Mapping):
        updated_patterns: dict[str, Any] = {}
        for pattern, value_schema in patterns.items():
            nested, updated_patterns[pattern] = collect_object_schemas(
                value_schema,
                anchor_prefix=anchor_prefix,
                name=f"{name}.patternProperties[{pattern}]",
            )
            _append_cleaned(objects, nested)
        node["patternProperties"] = updated_patterns

    properties = node.get("properties")
    if isinstance(properties, Mapping):
        updated_properties: dict[str, Any] = {}
        for property_name, property_schema in properties.items():
            nested, updated_properties[property_name] = collect_object_schemas(
                property_schema, anchor_prefix=anchor_prefix, name=f"{name}.{property_name}"
            )
            _append_cleaned(objects, nested)
        node["properties"] = updated_properties


def _flatten_array_items(
    node: dict[str, Any],
    objects: list[Any],
    *,
    anchor_prefix: str | None,
    name: str,
) -> None:
    items = node.get("items")
    alternatives = items.get("anyOf") if isinstance(items, Mapping) else None
    if isinstance(alternatives, Sequence) and not isinstance(alternatives, str):
        # anyOf alternatives are harvested only; items is not rewritten here.
        for index, alternative in enumerate(alternatives):
            nested, _ = collect_object_schemas(
                alternative, anchor_prefix=anchor_prefix, name=f"{name}.items.anyOf[{index}]"
            )
            _append_cleaned(objects, nested)
        return
    if isinstance(items, Mapping):
        nested, node["items"] = collect_object_schemas(
            items, anchor_prefix=anchor_prefix, name=f"{name}.items"
        )
        _append_cleaned(objects, nested)
        return
    raise MalformedSchemaError(f"Type is array but no usable items found: {name}", name)


def _append_cleaned(objects: list[Any], nested: Sequence[Any]) -> None:
    objects.extend(clean_object(item) for item in nested)


def _as_tuple(value: Any) -> tuple[Any, ...] | None:
    # A boolean `required` on a property node is not part of the object projection.
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(value)
    return None


def _deduplicate(objects: Sequence[Any]) -> list[Any]:
    unique: list[Any] = []
    for item in objects:
        if item not in unique:
            unique.append(item)
    return unique
