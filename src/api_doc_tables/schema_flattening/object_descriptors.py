"""Schema flattening entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

UNTITLED_OBJECT_NAME = "<untitled object>"


class SchemaFlatteningError(Exception):
    """Raised when a schema tree cannot be flattened."""

    def __init__(self, message: str, schema_name: str) -> None:
        super().__init__(message)
        self.schema_name = schema_name


class MalformedSchemaError(SchemaFlatteningError):
    """Raised for an array schema without usable items."""


class InvalidSchemaInputError(SchemaFlatteningError):
    """Raised when a schema node is not a mapping."""


@dataclass(frozen=True)
class ObjectDescriptor:
    """Clean projection of an object schema used for table rendering and dedup.

    Only the fields are frozen. `properties` holds the nested schema tree as a
    plain mapping, so descriptors compare by value but are not hashable.
    """

    title: str | None = None
    properties: Mapping[str, Any] | None = None
    required: Sequence[str] | None = None
    enum: Sequence[Any] | None = None
    anchor: str | None = None

    def as_mapping(self) -> dict[str, Any]:
        """Return the projection as a schema mapping holding only the present keys."""
        return {
            key: value
            for key, value in (
                ("title", self.title),
                ("properties", self.properties),
                ("required", self.required),
                ("enum", self.enum),
                ("anchor", self.anchor),
            )
            if value is not None
        }


@dataclass(frozen=True)
class FlattenedSchema:
    """Result of flattening one root schema."""

    objects: tuple[ObjectDescriptor, ...]
    schema: dict[str, Any]
