"""Display name assignment for schemas."""

from __future__ import annotations

from collections.abc import Iterable

from .schema_models import Schema, SchemaKind

STRING_TITLE = "String"
BOOLEAN_TITLE = "boolean"
ENUM_SUFFIX = "Enum"


def capitalize(value: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return value[:1].upper() + value[1:]


def uncapitalize(value: str) -> str:
    """Lower-case the first character and leave the rest untouched."""
    return value[:1].lower() + value[1:]


def assign_title(name: str, schema: Schema) -> None:
    """Set the display title of `schema`, deriving it from `name` where needed.

    String and boolean titles are always recomputed. Other kinds keep a title
    that is already present.
    """
    kind = schema.kind
    if kind is SchemaKind.STRING:
        if schema.enum_members:
            _assign_enum_title(name, schema)
        else:
            schema.title = STRING_TITLE
    elif kind is SchemaKind.BOOLEAN:
        schema.title = BOOLEAN_TITLE
    elif kind in (
        SchemaKind.INTEGER,
        SchemaKind.NUMBER,
        SchemaKind.ARRAY,
        SchemaKind.OBJECT,
        SchemaKind.COMPOSED,
    ):
        if not schema.title:
            schema.title = capitalize(name).replace("-", "").replace("_", "")
    else:  # pragma: no cover
        raise ValueError(f"Unsupported schema kind: {kind}")


def _assign_enum_title(name: str, schema: Schema) -> None:
    enum_type = capitalize(name) + ENUM_SUFFIX
    values = _enum_values(schema.enum_members)
    if all(is_bare_identifier(value) for value in values):
        schema.title = enum_type
    else:
        schema.title = f"ValuedEnum<{enum_type}>"
    schema.enum_values = values
    schema.enum_label = ", ".join(values)


def _enum_values(members: Iterable[object]) -> tuple[str, ...]:
    values: list[str] = []
    for member in members:
        if member is None:
            continue
        stripped = str(member).strip()
        if stripped and stripped != "null":
            values.append(stripped)
    return tuple(values)


def is_bare_identifier(value: str) -> bool:
    """Return whether `value` can be used as a plain symbolic constant name."""
    return bool(value) and value.isidentifier() and not value.startswith("_")
