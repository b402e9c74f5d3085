# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the descriptor and field description models."""

import pydantic
import pytest

from typegraph.errors import DuplicateFieldNameError, InvalidTypeNameError, SchemaBuildError
from typegraph.model import (
    ArrayType,
    EnumType,
    ExternalField,
    Int,
    InterfaceType,
    InternalField,
    ObjectType,
    String,
    duplicate_field_names,
)

# ###############
# Helpers
# ###############


def _bind(type_: object, is_optional: bool) -> tuple[object, bool]:
    """Binding that returns its configuration as the handle."""
    return (type_, is_optional)


# ###############
# Descriptors
# ###############


def test_descriptor_kinds() -> None:
    """Every descriptor variant carries its own kind tag."""
    assert Int.kind == "scalar"
    assert InterfaceType(name="Node", fields={}).kind == "interface"
    assert ObjectType(name="X").kind == "object"
    assert ArrayType(name="Ints", item_type=Int).kind == "array"
    assert EnumType(name="Color", items={"RED": None}).kind == "enum"


def test_empty_name_is_rejected() -> None:
    """A descriptor cannot be built with an empty name."""
    with pytest.raises(InvalidTypeNameError):
        EnumType(name="", items={"A": None})


def test_descriptors_are_frozen() -> None:
    """Descriptors expose no way to reassign their attributes."""
    enum = EnumType(name="Color", items={"RED": None})
    with pytest.raises(pydantic.ValidationError):
        enum.name = "Colour"  # type: ignore[misc]


def test_array_defaults_to_required() -> None:
    """An array is not nullable unless declared so."""
    assert ArrayType(name="Ints", item_type=Int).is_optional is False


def test_enum_values_follow_items() -> None:
    """An enum's value set is exactly the keys of its items, in order."""
    enum = EnumType(name="Color", items={"RED": "warm", "BLUE": None})
    assert enum.values == ("RED", "BLUE")
    assert enum.items["RED"] == "warm"


def test_nested_descriptor_is_shared_not_copied() -> None:
    """Referenced descriptors are kept by reference."""
    field = ExternalField(type=String)
    assert field.type is String


def test_field_maps_accept_plain_mappings() -> None:
    """Field descriptions given as mappings are validated into field models."""
    iface = InterfaceType(name="Named", fields={"name": {"type": String, "description": "Display name"}})
    assert isinstance(iface.fields["name"], ExternalField)
    assert iface.fields["name"].is_optional is False
    assert iface.fields["name"].description == "Display name"


def test_non_descriptor_field_type_is_rejected() -> None:
    """A field type must be one of the descriptor variants."""
    with pytest.raises(pydantic.ValidationError):
        ExternalField(type="Int")  # type: ignore[arg-type]


# ###############
# Objects
# ###############


def test_object_with_disjoint_fields() -> None:
    """An object keeps both field maps and lists external names first."""
    c = InternalField(type=Int, bind=_bind)
    obj = ObjectType(
        name="X",
        external_fields={"a": ExternalField(type=Int)},
        internal_fields={"c": c},
    )
    assert obj.field_names == ("a", "c")
    assert obj.internal_fields["c"] is c


def test_object_model_rejects_overlap() -> None:
    """The disjointness invariant holds even when the model is built directly."""
    with pytest.raises(DuplicateFieldNameError) as exc_info:
        ObjectType(
            name="X",
            external_fields={"c": ExternalField(type=Int)},
            internal_fields={"c": InternalField(type=Int, bind=_bind)},
        )
    assert exc_info.value.names == ("c",)
    assert isinstance(exc_info.value, SchemaBuildError)


def test_internal_field_handle_receives_configuration() -> None:
    """The binding is called with the field's declared type and optionality."""
    field = InternalField(type=String, bind=_bind, is_optional=True)
    assert field.make_handle() == (String, True)


def test_bind_internal_fields() -> None:
    """Binding an object yields one handle per internal field."""
    obj = ObjectType(
        name="X",
        external_fields={"a": ExternalField(type=Int)},
        internal_fields={
            "c": InternalField(type=Int, bind=_bind),
            "d": InternalField(type=String, bind=_bind, is_optional=True),
        },
    )
    assert obj.bind_internal_fields() == {"c": (Int, False), "d": (String, True)}


# ###############
# Duplicate detection
# ###############


def test_duplicate_field_names_across_maps() -> None:
    """Names present in more than one map are reported, sorted."""
    assert duplicate_field_names({"b": 1, "a": 1}, {"a": 2, "b": 2, "c": 2}) == ["a", "b"]


def test_duplicate_field_names_none() -> None:
    """Disjoint maps have no duplicates."""
    assert duplicate_field_names({"a": 1}, {"b": 2}) == []
    assert duplicate_field_names({}, {}) == []


# ###############
# Immutability
# ###############


def test_object_field_maps_are_read_only() -> None:
    """Neither field map of an object can gain a key after construction."""
    obj = ObjectType(name="X", external_fields={"a": ExternalField(type=Int)})

    with pytest.raises(TypeError):
        obj.internal_fields["a"] = InternalField(type=Int, bind=_bind, is_optional=True)  # type: ignore[index]
    with pytest.raises(TypeError):
        obj.external_fields["b"] = ExternalField(type=String)  # type: ignore[index]
    assert list(obj.internal_fields) == []
    assert obj.field_names == ("a",)


def test_interface_and_enum_maps_are_read_only() -> None:
    """Interface fields and enum items are read-only views."""
    iface = InterfaceType(name="Node", fields={"id": ExternalField(type=Int)})
    enum = EnumType(name="Color", items={"RED": None})

    with pytest.raises(TypeError):
        iface.fields["name"] = ExternalField(type=String)  # type: ignore[index]
    with pytest.raises(TypeError):
        enum.items["BLUE"] = None  # type: ignore[index]
    assert enum.values == ("RED",)


def test_default_field_maps_are_read_only() -> None:
    """Omitted field maps are empty read-only views too."""
    obj = ObjectType(name="X")
    with pytest.raises(TypeError):
        obj.internal_fields["a"] = InternalField(type=Int, bind=_bind)  # type: ignore[index]


def test_caller_dict_is_copied() -> None:
    """Changing the mapping passed in does not change the descriptor."""
    items: dict[str, str | None] = {"RED": None}
    enum = EnumType(name="Color", items=items)
    items["BLUE"] = None
    assert enum.values == ("RED",)


def test_descriptors_are_hashable() -> None:
    """Every descriptor variant can be used in sets and as a mapping key."""
    enum = EnumType(name="E", items={"A": None})
    iface = InterfaceType(name="Node", fields={"id": ExternalField(type=Int)})
    obj = ObjectType(
        name="X",
        external_fields={"a": ExternalField(type=enum)},
        internal_fields={"c": InternalField(type=iface, bind=_bind)},
    )
    array = ArrayType(name="Xs", item_type=obj)

    descriptors = {Int, enum, iface, obj, array}
    assert len(descriptors) == 5
    assert hash(EnumType(name="E", items={"A": None})) == hash(enum)
    assert {obj: "object"}[obj] == "object"
