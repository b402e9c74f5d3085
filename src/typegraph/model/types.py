# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors and field descriptions for the typegraph schema model.

Descriptors are frozen and their field maps are read-only views, so a
descriptor cannot change once built. Descriptors hash by kind and name.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import Field as _Field

from typegraph.errors import DuplicateFieldNameError, InvalidTypeNameError

_V = TypeVar("_V")

# ###############
# Public Interface
# ###############


class TypeBase(BaseModel):
    """Attributes shared by every type descriptor."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise InvalidTypeNameError(f"{cls.__name__} requires a non-empty name")
        return value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))


class ScalarType(TypeBase):
    """A leaf type converting between a wire and an internal representation.

    ``serialize`` maps an internal value to its wire value, ``parse_value``
    maps a wire value supplied through variables to the internal value, and
    ``parse_literal`` does the same for a literal ``graphql.ValueNode``.
    Failures are signalled with ``ConversionError`` / ``SerializationError``.
    """

    kind: Literal["scalar"] = "scalar"
    serialize: Callable[[Any], Any]
    parse_value: Callable[[Any], Any]
    parse_literal: Callable[..., Any]
    internal_type: type[Any] = object


class InterfaceType(TypeBase):
    """A named set of external fields without a server-computed half."""

    kind: Literal["interface"] = "interface"
    fields: Mapping[str, ExternalField] = _Field(default_factory=dict, validate_default=True)

    @field_validator("fields")
    @classmethod
    def _freeze_fields(cls, value: Mapping[str, ExternalField]) -> Mapping[str, ExternalField]:
        return read_only_mapping(value)


class ObjectType(TypeBase):
    """A named type composed of caller-supplied and server-computed fields.

    The two field maps must not share a name; this is checked when the
    descriptor is built and raises :class:`DuplicateFieldNameError`.
    """

    kind: Literal["object"] = "object"
    external_fields: Mapping[str, ExternalField] = _Field(default_factory=dict, validate_default=True)
    internal_fields: Mapping[str, InternalField] = _Field(default_factory=dict, validate_default=True)

    @field_validator("external_fields", "internal_fields")
    @classmethod
    def _freeze_fields(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return read_only_mapping(value)

    @model_validator(mode="after")
    def _check_disjoint_fields(self) -> ObjectType:
        duplicates = duplicate_field_names(self.external_fields, self.internal_fields)
        if duplicates:
            raise DuplicateFieldNameError(self.name, duplicates)
        return self

    @property
    def field_names(self) -> tuple[str, ...]:
        """All field names, external ones first."""
        return (*self.external_fields, *self.internal_fields)

    def bind_internal_fields(self) -> dict[str, Any]:
        """Invoke every internal field's binding and return the handles by field name."""
        return {name: f.make_handle() for name, f in self.internal_fields.items()}


class ArrayType(TypeBase):
    """An ordered sequence of ``item_type`` values, itself nullable when ``is_optional``."""

    kind: Literal["array"] = "array"
    item_type: TypeDescriptor
    is_optional: bool = False


class EnumType(TypeBase):
    """A closed set of named literal values with optional per-value documentation."""

    kind: Literal["enum"] = "enum"
    items: Mapping[str, str | None] = _Field(default_factory=dict, validate_default=True)

    @field_validator("items")
    @classmethod
    def _freeze_items(cls, value: Mapping[str, str | None]) -> Mapping[str, str | None]:
        return read_only_mapping(value)

    @property
    def values(self) -> tuple[str, ...]:
        return tuple(self.items)


class ExternalField(BaseModel):
    """A field whose value is supplied by the caller."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: TypeDescriptor
    is_optional: bool = False
    description: str | None = None


class InternalField(BaseModel):
    """A field whose value is computed by server-side logic.

    ``bind`` receives the declared type and optionality flag and returns an
    opaque handle that the execution engine later uses to produce the value.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: TypeDescriptor
    bind: Callable[[Any, bool], Any]
    is_optional: bool = False
    description: str | None = None

    def make_handle(self) -> Any:
        return self.bind(self.type, self.is_optional)


# Any type descriptor. The `kind` discriminator keeps the variants closed.
TypeDescriptor = Annotated[
    ScalarType | InterfaceType | ObjectType | ArrayType | EnumType,
    _Field(discriminator="kind"),
]


def duplicate_field_names(*field_maps: Mapping[str, object]) -> list[str]:
    """Return the sorted names that occur in more than one of *field_maps*."""
    counts = Counter(name for field_map in field_maps for name in field_map)
    return sorted(name for name, count in counts.items() if count > 1)


def read_only_mapping(value: Mapping[str, _V]) -> Mapping[str, _V]:
    """Return a read-only copy of *value* that keeps its insertion order."""
    return MappingProxyType(dict(value))


# Resolve forward references for models that use TypeDescriptor.
InterfaceType.model_rebuild()
ObjectType.model_rebuild()
ArrayType.model_rebuild()
ExternalField.model_rebuild()
InternalField.model_rebuild()
