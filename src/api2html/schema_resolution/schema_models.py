"""Schema resolution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

SCHEMA_REFERENCE_PREFIX = "#/components/schemas/"


class SchemaKind(str, Enum):
    """Shape of a schema definition."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"
    COMPOSED = "composed"


class SchemaResolutionError(Exception):
    """Raised when the schema mapping cannot be resolved."""


class InvalidReferenceError(SchemaResolutionError):
    """Raised when a reference does not point into the schema components."""


class DanglingReferenceError(SchemaResolutionError):
    """Raised when a reference names a schema absent from the mapping."""


class UnresolvableReferenceError(DanglingReferenceError):
    """Raised when a top-level alias entry cannot be resolved."""


@dataclass(frozen=True)
class SchemaReference:
    """Unresolved `$ref` pointer as found in the source document."""

    ref: str


@dataclass(frozen=True)
class RawSchema:  # pylint: disable=too-many-instance-attributes
    """Immutable schema definition as read from the source document."""

    kind: SchemaKind
    schema_id: str | None = None
    title: str | None = None
    description: str | None = None
    enum: tuple[object, ...] = ()
    items: RawSchema | SchemaReference | None = None
    properties: Mapping[str, RawSchema | SchemaReference] = field(default_factory=dict)
    one_of: tuple[RawSchema | SchemaReference, ...] = ()
    required: tuple[str, ...] = ()


@dataclass(eq=False)
class Schema:  # pylint: disable=too-many-instance-attributes
    """Schema being resolved; fully normalized once the resolution pass ends.

    Children hold `SchemaReference` values only while the pass is running.
    """

    id: str
    kind: SchemaKind
    title: str | None = None
    description: str | None = None
    properties: dict[str, Schema | SchemaReference] = field(default_factory=dict)
    items: Schema | SchemaReference | None = None
    alternatives: list[Schema | SchemaReference] = field(default_factory=list)
    enum_members: tuple[object, ...] = ()
    enum_values: tuple[str, ...] = ()
    enum_label: str | None = None
    required: tuple[str, ...] = ()

    @property
    def is_compound(self) -> bool:
        """True when the schema is rendered as its own unit."""
        if self.kind is SchemaKind.OBJECT:
            return bool(self.properties)
        if self.kind is SchemaKind.COMPOSED:
            return bool(self.alternatives)
        return False
