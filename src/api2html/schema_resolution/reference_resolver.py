"""Schema reference lookup."""

from __future__ import annotations

from collections.abc import Mapping

from .schema_models import (
    SCHEMA_REFERENCE_PREFIX,
    DanglingReferenceError,
    InvalidReferenceError,
    Schema,
    SchemaReference,
)


def reference_to_id(ref: str) -> str:
    """Strip the component prefix from a reference string."""
    if not ref.startswith(SCHEMA_REFERENCE_PREFIX):
        raise InvalidReferenceError(f'Value "{ref}" is not a ref')
    return ref[len(SCHEMA_REFERENCE_PREFIX) :]


def resolve_reference(
    ref: str, registry: Mapping[str, Schema | SchemaReference]
) -> Schema:
    """Return the registered schema named by `ref`.

    Alias entries (a registered name that is itself only a reference) are
    followed until a schema is reached.
    """
    visited: list[str] = []
    current = ref
    while True:
        schema_id = reference_to_id(current)
        if schema_id in visited:
            raise DanglingReferenceError(f"Reference cycle without a schema: {ref}")
        visited.append(schema_id)
        target = registry.get(schema_id)
        if target is None:
            raise DanglingReferenceError(f"Cannot find reference {current}")
        if isinstance(target, SchemaReference):
            current = target.ref
            continue
        return target


def resolve_entry(
    entry: Schema | SchemaReference, registry: Mapping[str, Schema | SchemaReference]
) -> Schema:
    """Return `entry` itself, or its target when it is a reference."""
    if isinstance(entry, SchemaReference):
        return resolve_reference(entry.ref, registry)
    return entry
