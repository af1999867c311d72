"""Reference resolver tests."""

from __future__ import annotations

import pytest
from api2html.schema_resolution.reference_resolver import (
    reference_to_id,
    resolve_entry,
    resolve_reference,
)
from api2html.schema_resolution.schema_models import (
    DanglingReferenceError,
    InvalidReferenceError,
    Schema,
    SchemaKind,
    SchemaReference,
)


def test_reference_to_id_strips_component_prefix() -> None:
    assert reference_to_id("#/components/schemas/Pet") == "Pet"


@pytest.mark.parametrize(
    "ref",
    ["#/components/responses/Pet", "Pet", "other.yaml#/components/schemas/Pet", ""],
)
def test_reference_outside_schema_components_is_rejected(ref: str) -> None:
    with pytest.raises(InvalidReferenceError, match="is not a ref"):
        reference_to_id(ref)


def test_resolve_returns_the_registered_object() -> None:
    pet = Schema(id="Pet", kind=SchemaKind.OBJECT)

    assert resolve_reference("#/components/schemas/Pet", {"Pet": pet}) is pet


def test_missing_target_is_a_dangling_reference() -> None:
    with pytest.raises(DanglingReferenceError, match="Cannot find reference"):
        resolve_reference("#/components/schemas/Missing", {})


def test_alias_entries_are_followed_to_a_schema() -> None:
    pet = Schema(id="Pet", kind=SchemaKind.OBJECT)
    registry = {
        "Pet": pet,
        "Animal": SchemaReference("#/components/schemas/Pet"),
    }

    assert resolve_reference("#/components/schemas/Animal", registry) is pet


def test_alias_loop_without_schema_is_dangling() -> None:
    registry = {
        "A": SchemaReference("#/components/schemas/B"),
        "B": SchemaReference("#/components/schemas/A"),
    }

    with pytest.raises(DanglingReferenceError):
        resolve_reference("#/components/schemas/A", registry)


def test_resolve_entry_passes_schemas_through() -> None:
    pet = Schema(id="Pet", kind=SchemaKind.OBJECT)

    assert resolve_entry(pet, {}) is pet
    assert resolve_entry(SchemaReference("#/components/schemas/Pet"), {"Pet": pet}) is pet
