"""Local `$ref` resolution and `allOf` merging for API documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import jsonpointer


class SchemaResolutionError(Exception):
    """Raised when a `$ref` cannot be resolved."""


def resolve_references(document: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of `document` with local references inlined and `allOf` merged."""
    if not isinstance(document, Mapping):
        raise SchemaResolutionError("API document root must be a mapping.")
    return _resolve_node(document, document, ())


def merge_all_of(schema: Mapping[str, Any]) -> dict[str, Any]:
    """Merge the `allOf` members of an already resolved schema into one object schema.

    Properties are merged in order with later members winning, `required`
    lists are unioned, other keys keep their first value. Keys set on the
    schema itself override everything merged from `allOf`.
    """
    merged: dict[str, Any] = {}
    properties: dict[str, Any] = {}
    required: list[str] = []

    for member in schema.get("allOf") or ():
        if not isinstance(member, Mapping):
            raise SchemaResolutionError("allOf members must be mappings.")
        _merge_member(member, merged, properties, required)

    own = {key: value for key, value in schema.items() if key != "allOf"}
    _merge_member(own, merged, properties, required, override=True)

    if properties:
        merged["properties"] = properties
    if required:
        merged["required"] = required
    return merged


def _merge_member(
    member: Mapping[str, Any],
    merged: dict[str, Any],
    properties: dict[str, Any],
    required: list[str],
    *,
    override: bool = False,
) -> None:
    for key, value in member.items():
        if key == "properties" and isinstance(value, Mapping):
            properties.update(value)
        elif key == "required" and isinstance(value, Sequence) and not isinstance(value, str):
            required.extend(name for name in value if name not in required)
        elif override or key not in merged:
            merged[key] = value


def _resolve_node(node: Any, document: Mapping[str, Any], active_refs: tuple[str, ...]) -> Any:
    if isinstance(node, Mapping):
        ref = node.get("$ref")
        if isinstance(ref, str):
            return _resolve_ref(ref, node, document, active_refs)
        resolved = {
            key: _resolve_node(value, document, active_refs) for key, value in node.items()
        }
        if "allOf" in resolved:
            return merge_all_of(resolved)
        return resolved
    if isinstance(node, list):
        return [_resolve_node(item, document, active_refs) for item in node]
    return node


def _resolve_ref(
    ref: str,
    node: Mapping[str, Any],
    document: Mapping[str, Any],
    active_refs: tuple[str, ...],
) -> Any:
    if not ref.startswith("#"):
        raise SchemaResolutionError(f"Only local references are supported: {ref}")
    if ref in active_refs:
        chain = " -> ".join(active_refs + (ref,))
        raise SchemaResolutionError(f"Cyclic reference detected: {chain}")
    try:
        target = jsonpointer.resolve_pointer(document, ref[1:])
    except jsonpointer.JsonPointerException as exc:
        raise SchemaResolutionError(f"Unresolvable reference {ref}: {exc}") from exc

    resolved = _resolve_node(target, document, active_refs + (ref,))
    siblings = {key: value for key, value in node.items() if key != "$ref"}
    if siblings and isinstance(resolved, Mapping):
        # Keys next to a `$ref` (e.g. a description) override the target.
        resolved = {**resolved, **_resolve_node(siblings, document, active_refs)}
    return resolved
