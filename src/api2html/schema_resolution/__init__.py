"""Schema resolution exports."""

from .reference_resolver import reference_to_id, resolve_reference
from .schema_models import (
    SCHEMA_REFERENCE_PREFIX,
    DanglingReferenceError,
    InvalidReferenceError,
    RawSchema,
    Schema,
    SchemaKind,
    SchemaReference,
    SchemaResolutionError,
    UnresolvableReferenceError,
)
from .schema_normalizer import normalize_schema, resolve_all, resolve_named_schemas
from .schema_titles import assign_title, capitalize, uncapitalize

__all__ = [
    "SCHEMA_REFERENCE_PREFIX",
    "DanglingReferenceError",
    "InvalidReferenceError",
    "RawSchema",
    "Schema",
    "SchemaKind",
    "SchemaReference",
    "SchemaResolutionError",
    "UnresolvableReferenceError",
    "assign_title",
    "capitalize",
    "normalize_schema",
    "reference_to_id",
    "resolve_all",
    "resolve_named_schemas",
    "resolve_reference",
    "uncapitalize",
]
