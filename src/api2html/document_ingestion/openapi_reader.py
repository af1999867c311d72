"""OpenAPI document loading and schema definition extraction."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from api2html.schema_resolution.schema_models import RawSchema, SchemaKind, SchemaReference

_COMPOSITION_KEYS = ("oneOf", "anyOf", "allOf")
_BOOL_TAG = "tag:yaml.org,2002:bool"


class _DocumentLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """Safe loader resolving only `true`/`false` as booleans, as YAML 1.2 does."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_DocumentLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class DocumentError(Exception):
    """Raised when the API document cannot be read."""


def load_api_document(document_path: Path | str) -> Mapping[str, Any]:
    """Parse a YAML or JSON API document."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"API document not found: {path}")
    try:
        parsed = yaml.load(path.read_text(encoding="utf-8"), Loader=_DocumentLoader)
    except yaml.YAMLError as exc:
        raise DocumentError(f"Failed to parse API document {path}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise DocumentError(f"API document root must be a mapping: {path}")
    return parsed


def read_schema_definitions(
    document: Mapping[str, Any],
) -> dict[str, RawSchema | SchemaReference]:
    """Return `components.schemas` in document order; empty when absent."""
    components = document.get("components") or {}
    if not isinstance(components, Mapping):
        raise DocumentError("components must be a mapping.")
    schemas = components.get("schemas") or {}
    if not isinstance(schemas, Mapping):
        raise DocumentError("components.schemas must be a mapping.")
    return {str(name): parse_schema_node(node, str(name)) for name, node in schemas.items()}


def parse_schema_node(node: Any, location: str) -> RawSchema | SchemaReference:
    """Convert one schema object (or `$ref` pointer) into its raw entity."""
    if not isinstance(node, Mapping):
        raise DocumentError(f"Schema {location} must be a mapping.")

    ref = node.get("$ref")
    if ref is not None:
        if not isinstance(ref, str):
            raise DocumentError(f"Schema {location} has a non-string $ref.")
        return SchemaReference(ref=ref)

    kind = classify_schema(node)
    items = None
    if kind is SchemaKind.ARRAY and node.get("items") is not None:
        items = parse_schema_node(node["items"], f"{location}.items")

    return RawSchema(
        kind=kind,
        schema_id=_optional_string(node.get("$id")),
        title=_optional_string(node.get("title")),
        description=_optional_string(node.get("description")),
        enum=tuple(_sequence(node.get("enum"), f"{location}.enum")),
        items=items,
        properties=_parse_properties(node.get("properties"), location),
        one_of=tuple(
            parse_schema_node(child, f"{location}.oneOf[{index}]")
            for index, child in enumerate(_sequence(node.get("oneOf"), f"{location}.oneOf"))
        ),
        required=tuple(str(name) for name in _sequence(node.get("required"), location)),
    )


def classify_schema(node: Mapping[str, Any]) -> SchemaKind:
    """Decide the schema kind; composition keywords win over a declared type."""
    if any(key in node for key in _COMPOSITION_KEYS):
        return SchemaKind.COMPOSED
    declared = _declared_types(node)
    if declared:
        try:
            return SchemaKind(declared[0])
        except ValueError as exc:
            raise DocumentError(f"Unsupported schema type: {declared[0]}") from exc
    if "properties" in node:
        return SchemaKind.OBJECT
    if "items" in node:
        return SchemaKind.ARRAY
    if "enum" in node:
        return SchemaKind.STRING
    return SchemaKind.OBJECT


def _declared_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    node_type = node.get("type")
    if isinstance(node_type, list):
        return tuple(value for value in node_type if isinstance(value, str) and value != "null")
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def _parse_properties(value: Any, location: str) -> dict[str, RawSchema | SchemaReference]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise DocumentError(f"Schema {location} properties must be a mapping.")
    return {
        str(name): parse_schema_node(child, f"{location}.{name}") for name, child in value.items()
    }


def _sequence(value: Any, location: str) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise DocumentError(f"{location} must be a list.")
    return value


def _optional_string(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
