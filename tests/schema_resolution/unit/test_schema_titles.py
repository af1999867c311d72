"""Title assignment tests."""

from __future__ import annotations

import pytest
from api2html.schema_resolution.schema_models import Schema, SchemaKind
from api2html.schema_resolution.schema_titles import (
    assign_title,
    capitalize,
    is_bare_identifier,
    uncapitalize,
)


def test_enum_with_identifier_members_is_named_after_id() -> None:
    schema = Schema(id="Status", kind=SchemaKind.STRING, enum_members=("A", "B"))

    assign_title("Status", schema)

    assert schema.title == "StatusEnum"
    assert schema.enum_values == ("A", "B")
    assert schema.enum_label == "A, B"


def test_enum_with_non_identifier_member_is_wrapped_as_valued_enum() -> None:
    schema = Schema(id="weird", kind=SchemaKind.STRING, enum_members=("a-b", "c"))

    assign_title("weird", schema)

    assert schema.title == "ValuedEnum<WeirdEnum>"
    assert schema.enum_label == "a-b, c"


def test_enum_members_are_trimmed_and_null_members_dropped() -> None:
    schema = Schema(
        id="Color",
        kind=SchemaKind.STRING,
        enum_members=(" red ", "", "null", None, "green"),
    )

    assign_title("Color", schema)

    assert schema.title == "ColorEnum"
    assert schema.enum_values == ("red", "green")
    assert schema.enum_label == "red, green"


@pytest.mark.parametrize("member", ["_private", "1st", "with space", "a.b"])
def test_members_that_are_not_bare_identifiers_force_valued_enum(member: str) -> None:
    schema = Schema(id="mode", kind=SchemaKind.STRING, enum_members=("ok", member))

    assign_title("mode", schema)

    assert schema.title == "ValuedEnum<ModeEnum>"


def test_plain_string_is_titled_string_even_with_explicit_title() -> None:
    schema = Schema(id="Name", kind=SchemaKind.STRING, title="Customer name")

    assign_title("Name", schema)

    assert schema.title == "String"
    assert schema.enum_label is None


def test_boolean_is_always_titled_boolean() -> None:
    schema = Schema(id="Flag", kind=SchemaKind.BOOLEAN, title="Some flag")

    assign_title("Flag", schema)

    assert schema.title == "boolean"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("order-line", "Orderline"),
        ("order_line", "Orderline"),
        ("orderLine", "OrderLine"),
    ],
)
def test_compound_title_is_derived_from_name(name: str, expected: str) -> None:
    schema = Schema(id=name, kind=SchemaKind.OBJECT)

    assign_title(name, schema)

    assert schema.title == expected


def test_explicit_compound_title_is_kept() -> None:
    schema = Schema(id="pet", kind=SchemaKind.COMPOSED, title="Any pet")

    assign_title("pet", schema)
    assign_title("other", schema)

    assert schema.title == "Any pet"


def test_case_helpers_only_touch_first_character() -> None:
    assert capitalize("petStore") == "PetStore"
    assert uncapitalize("PetStore") == "petStore"
    assert capitalize("") == ""
    assert uncapitalize("") == ""


def test_bare_identifier_check() -> None:
    assert is_bare_identifier("ACTIVE")
    assert is_bare_identifier("inProgress")
    assert not is_bare_identifier("")
    assert not is_bare_identifier("_hidden")
    assert not is_bare_identifier("a-b")
