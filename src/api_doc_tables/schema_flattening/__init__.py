"""Schema flattening exports."""

from .anchors import build_anchor, slugify
from .object_descriptors import (
    UNTITLED_OBJECT_NAME,
    FlattenedSchema,
    InvalidSchemaInputError,
    MalformedSchemaError,
    ObjectDescriptor,
    SchemaFlatteningError,
)
from .object_flattener import clean_object, collect_object_schemas, flatten_schema

__all__ = [
    "UNTITLED_OBJECT_NAME",
    "FlattenedSchema",
    "InvalidSchemaInputError",
    "MalformedSchemaError",
    "ObjectDescriptor",
    "SchemaFlatteningError",
    "build_anchor",
    "clean_object",
    "collect_object_schemas",
    "flatten_schema",
    "slugify",
]
