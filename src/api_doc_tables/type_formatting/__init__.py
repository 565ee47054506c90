"""Type formatting exports."""

from .schema_kinds import SchemaKind, classify_schema, is_nameable_object
from .type_formatter import format_type, resolve_object_title

__all__ = [
    "SchemaKind",
    "classify_schema",
    "format_type",
    "is_nameable_object",
    "resolve_object_title",
]
