# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Projection of type descriptors onto the value shapes they denote.

A shape is the structural type of the values a descriptor admits: which
entries a record requires, which are optional, what a sequence contains and
which literals an enum allows. Projection is a pure function of the
descriptor and is what documentation output and any value validator build on.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from typegraph.model.types import (
    ArrayType,
    EnumType,
    ExternalField,
    InterfaceType,
    InternalField,
    ObjectType,
    ScalarType,
    TypeDescriptor,
    read_only_mapping,
)

# ###############
# Public Interface
# ###############


class ScalarShape(BaseModel):
    """A scalar's internal representation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["scalar"] = "scalar"
    name: str
    internal_type: type[Any] = object


class ShapeField(BaseModel):
    """One entry of a record shape."""

    model_config = ConfigDict(frozen=True)

    shape: Shape
    required: bool = True
    origin: Literal["external", "internal"] = "external"


class RecordShape(BaseModel):
    """A mapping of named entries, each required or optional."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["record"] = "record"
    name: str
    fields: Mapping[str, ShapeField] = _Field(default_factory=dict, validate_default=True)

    @field_validator("fields")
    @classmethod
    def _freeze_fields(cls, value: Mapping[str, ShapeField]) -> Mapping[str, ShapeField]:
        return read_only_mapping(value)

    def __hash__(self) -> int:
        return hash((self.kind, self.name, tuple(self.fields.items())))


class SequenceShape(BaseModel):
    """An ordered sequence of ``item``; the whole sequence may be absent when ``optional``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sequence"] = "sequence"
    item: Shape
    optional: bool = False


class LiteralShape(BaseModel):
    """A choice among a closed set of string literals."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    name: str
    values: tuple[str, ...] = ()


Shape = Annotated[
    ScalarShape | RecordShape | SequenceShape | LiteralShape,
    _Field(discriminator="kind"),
]


def project(descriptor: TypeDescriptor) -> Shape:
    """Compute the value shape denoted by *descriptor*.

    - scalar: its internal representation type.
    - interface: a record with one entry per external field, required unless
      the field is declared optional.
    - object: the union of the external record and the internal record, the
      latter required unless the internal field is declared optional.
    - array: a sequence of the item type's shape, optional when the array is.
    - enum: a literal choice among the declared value names.

    Raises:
        TypeError: If *descriptor* is not a type descriptor.
    """
    if isinstance(descriptor, ScalarType):
        return ScalarShape(name=descriptor.name, internal_type=descriptor.internal_type)
    if isinstance(descriptor, InterfaceType):
        return RecordShape(name=descriptor.name, fields=_project_fields(descriptor.fields, "external"))
    if isinstance(descriptor, ObjectType):
        fields = _project_fields(descriptor.external_fields, "external")
        fields.update(_project_fields(descriptor.internal_fields, "internal"))
        return RecordShape(name=descriptor.name, fields=fields)
    if isinstance(descriptor, ArrayType):
        return SequenceShape(item=project(descriptor.item_type), optional=descriptor.is_optional)
    if isinstance(descriptor, EnumType):
        return LiteralShape(name=descriptor.name, values=descriptor.values)
    raise TypeError(f"Cannot project {type(descriptor).__name__!r}: not a type descriptor")


def required_fields(shape: RecordShape) -> tuple[str, ...]:
    """Return the names of the entries *shape* requires, in declaration order."""
    return tuple(name for name, entry in shape.fields.items() if entry.required)


def render_shape(shape: Shape) -> str:
    """Render *shape* as compact text, e.g. ``{a: int, b?: list[str] | None}``."""
    if isinstance(shape, ScalarShape):
        return shape.internal_type.__name__ if shape.internal_type is not object else "Any"
    if isinstance(shape, RecordShape):
        entries = ", ".join(
            f"{name}{'' if entry.required else '?'}: {render_shape(entry.shape)}"
            for name, entry in shape.fields.items()
        )
        return f"{{{entries}}}"
    if isinstance(shape, SequenceShape):
        text = f"list[{render_shape(shape.item)}]"
        return f"{text} | None" if shape.optional else text
    if isinstance(shape, LiteralShape):
        if not shape.values:
            return "Never"
        return f"Literal[{', '.join(repr(v) for v in shape.values)}]"
    raise TypeError(f"Cannot render {type(shape).__name__!r}: not a shape")


# ################
# Implementation
# ################


def _project_fields(
    fields: Mapping[str, ExternalField] | Mapping[str, InternalField],
    origin: Literal["external", "internal"],
) -> dict[str, ShapeField]:
    return {
        name: ShapeField(shape=project(f.type), required=not f.is_optional, origin=origin)
        for name, f in fields.items()
    }


# Resolve forward references for recursive shapes.
ShapeField.model_rebuild()
RecordShape.model_rebuild()
SequenceShape.model_rebuild()
