"""Schema resolution pass: reference resolution, normalization and re-keying."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .reference_resolver import resolve_reference
from .schema_models import (
    DanglingReferenceError,
    RawSchema,
    Schema,
    SchemaKind,
    SchemaReference,
    UnresolvableReferenceError,
)
from .schema_titles import assign_title, capitalize, uncapitalize

LOGGER = logging.getLogger(__name__)

Registry = Mapping[str, Schema | SchemaReference]


def resolve_all(
    raw_schemas: Mapping[str, RawSchema | SchemaReference], for_fields: bool = False
) -> dict[str, Schema]:
    """Build the closed, canonically keyed schema mapping for one run.

    Args:
      raw_schemas: Schema definitions keyed by their document name.
      for_fields: Key the result by un-capitalized names instead of capitalized ones.

    Returns:
      A key-sorted mapping whose reachable schemas carry no unresolved reference.

    Raises:
      InvalidReferenceError: If a reference does not point into the schema components.
      DanglingReferenceError: If a nested reference names an unknown schema.
      UnresolvableReferenceError: If a top-level alias names an unknown schema.
    """
    registry = build_registry(raw_schemas)
    for name, entry in registry.items():
        if isinstance(entry, Schema):
            assign_title(name, entry)

    resolved = resolve_named_schemas(
        registry, registry, for_fields=for_fields, normalized=set(), top_level=True
    )
    LOGGER.debug("Resolved %d schemas from %d definitions", len(resolved), len(registry))
    return resolved


def build_registry(
    raw_schemas: Mapping[str, RawSchema | SchemaReference],
) -> dict[str, Schema | SchemaReference]:
    """Create one fresh schema per definition; a missing `$id` defaults to its name."""
    registry: dict[str, Schema | SchemaReference] = {}
    for name, raw in raw_schemas.items():
        if isinstance(raw, SchemaReference):
            registry[name] = raw
        else:
            registry[name] = build_schema(raw.schema_id or name, raw)
    return registry


def build_schema(schema_id: str, raw: RawSchema) -> Schema:
    """Copy a raw definition into a new schema, inline children included."""
    schema = Schema(
        id=schema_id,
        kind=raw.kind,
        title=raw.title,
        description=raw.description,
        enum_members=raw.enum,
        required=raw.required,
    )
    if raw.kind is SchemaKind.ARRAY and raw.items is not None:
        schema.items = _build_child(f"{schema_id}/items", raw.items)
    elif raw.kind is SchemaKind.OBJECT:
        schema.properties = {
            name: _build_child(f"{schema_id}/{name}", child)
            for name, child in raw.properties.items()
        }
    elif raw.kind is SchemaKind.COMPOSED:
        schema.alternatives = [
            _build_child(f"{schema_id}/oneOf/{index}", child)
            for index, child in enumerate(raw.one_of)
        ]
    return schema


def _build_child(path: str, raw: RawSchema | SchemaReference) -> Schema | SchemaReference:
    if isinstance(raw, SchemaReference):
        return raw
    return build_schema(raw.schema_id or path, raw)


def resolve_named_schemas(
    entries: Mapping[str, Schema | SchemaReference],
    registry: Registry,
    *,
    for_fields: bool,
    normalized: set[int],
    top_level: bool = False,
) -> dict[str, Schema]:
    """Resolve and normalize a named collection, re-keyed by casing convention.

    Top-level entries use capitalized type names, object properties use
    un-capitalized field names. `top_level` marks the registered entries,
    whose unknown aliases are unresolvable rather than dangling.
    """
    target: dict[str, Schema] = {}
    for name, entry in entries.items():
        if isinstance(entry, SchemaReference):
            schema = _resolve_named_reference(entry, registry, top_level=top_level)
        else:
            normalize_schema(name, entry, registry, normalized)
            schema = entry

        key = uncapitalize(name) if for_fields else capitalize(name)
        if key in target:
            LOGGER.warning("Schema name %s collides with another entry after re-casing", name)
        target[key] = schema
    return dict(sorted(target.items()))


def _resolve_named_reference(
    entry: SchemaReference, registry: Registry, *, top_level: bool
) -> Schema:
    if not top_level:
        return resolve_reference(entry.ref, registry)
    try:
        return resolve_reference(entry.ref, registry)
    except DanglingReferenceError as exc:
        raise UnresolvableReferenceError(str(exc)) from exc


def normalize_schema(
    name: str, schema: Schema, registry: Registry, normalized: set[int]
) -> None:
    """Replace the nested references of `schema` by their targets and title it.

    Referenced schemas are normalized through their own registration only.
    """
    marker = id(schema)
    if marker in normalized:
        return
    normalized.add(marker)

    kind = schema.kind
    if kind is SchemaKind.ARRAY:
        if schema.items is not None:
            schema.items = _resolve_child(name, schema.items, registry, normalized)
        assign_title(name, schema)
    elif kind is SchemaKind.COMPOSED and schema.alternatives:
        schema.alternatives = [
            _resolve_child(f"{name}OneOf{index}", alternative, registry, normalized)
            for index, alternative in enumerate(schema.alternatives)
        ]
    elif kind is SchemaKind.OBJECT and schema.properties:
        properties: dict[str, Schema | SchemaReference] = dict(
            resolve_named_schemas(
                schema.properties, registry, for_fields=True, normalized=normalized
            )
        )
        schema.properties = properties
        assign_title(name, schema)
    elif kind in (
        SchemaKind.STRING,
        SchemaKind.BOOLEAN,
        SchemaKind.INTEGER,
        SchemaKind.NUMBER,
        SchemaKind.OBJECT,
        SchemaKind.COMPOSED,
    ):
        assign_title(name, schema)
    else:  # pragma: no cover
        raise ValueError(f"Unsupported schema kind: {kind}")


def _resolve_child(
    name: str, child: Schema | SchemaReference, registry: Registry, normalized: set[int]
) -> Schema:
    if isinstance(child, SchemaReference):
        return resolve_reference(child.ref, registry)
    normalize_schema(name, child, registry, normalized)
    return child
