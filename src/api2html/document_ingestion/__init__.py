"""Document ingestion exports."""

from .openapi_reader import (
    DocumentError,
    classify_schema,
    load_api_document,
    parse_schema_node,
    read_schema_definitions,
)

__all__ = [
    "DocumentError",
    "classify_schema",
    "load_api_document",
    "parse_schema_node",
    "read_schema_definitions",
]
