"""Schema resolution exports."""

from .reference_resolver import SchemaResolutionError, merge_all_of, resolve_references

__all__ = ["SchemaResolutionError", "merge_all_of", "resolve_references"]
