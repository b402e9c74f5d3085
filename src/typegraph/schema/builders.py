# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builder functions used by schema authors to declare descriptors.

Every builder takes keyword arguments only and returns a frozen descriptor.
Field maps may contain model instances or plain mappings such as
``{"type": Int, "is_optional": True}``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from typegraph.errors import DuplicateFieldNameError
from typegraph.logger import get_logger
from typegraph.model.resolvers import FieldResolver, TypeResolvers
from typegraph.model.types import (
    ArrayType,
    EnumType,
    ExternalField,
    InterfaceType,
    InternalField,
    ObjectType,
    ScalarType,
    TypeDescriptor,
    duplicate_field_names,
)

log = get_logger(__name__)

# ###############
# Public Interface
# ###############


def scalar_type(
    *,
    name: str,
    description: str | None = None,
    serialize: Callable[[Any], Any],
    parse_value: Callable[[Any], Any],
    parse_literal: Callable[..., Any],
    internal_type: type[Any] = object,
) -> ScalarType:
    """Declare a custom scalar.

    The three conversion functions are stored as given and never inspected.
    """
    scalar = ScalarType(
        name=name,
        description=description,
        serialize=serialize,
        parse_value=parse_value,
        parse_literal=parse_literal,
        internal_type=internal_type,
    )
    log.debug("Declared scalar type %s", name)
    return scalar


def interface_type(
    *,
    name: str,
    description: str | None = None,
    fields: Mapping[str, ExternalField | Mapping[str, Any]],
) -> InterfaceType:
    """Declare an interface from its external fields."""
    interface = InterfaceType(name=name, description=description, fields=dict(fields))
    log.debug("Declared interface type %s with %d field(s)", name, len(interface.fields))
    return interface


def object_type(
    *,
    name: str,
    description: str | None = None,
    external_fields: Mapping[str, ExternalField | Mapping[str, Any]],
    internal_fields: Mapping[str, InternalField | Mapping[str, Any]],
) -> ObjectType:
    """Declare an object from its external and internal field maps.

    Raises:
        DuplicateFieldNameError: If a field name appears in both maps. The
            error lists every colliding name.
    """
    duplicates = duplicate_field_names(external_fields, internal_fields)
    if duplicates:
        log.error("Object type %s declares duplicate field names: %s", name, ", ".join(duplicates))
        raise DuplicateFieldNameError(name, duplicates)

    obj = ObjectType(
        name=name,
        description=description,
        external_fields=dict(external_fields),
        internal_fields=dict(internal_fields),
    )
    log.debug(
        "Declared object type %s with %d external and %d internal field(s)",
        name,
        len(obj.external_fields),
        len(obj.internal_fields),
    )
    return obj


def array_type(
    *,
    name: str,
    description: str | None = None,
    is_optional: bool = False,
    item_type: TypeDescriptor,
) -> ArrayType:
    """Declare an array of *item_type*; ``is_optional`` makes the array itself nullable."""
    array = ArrayType(name=name, description=description, is_optional=is_optional, item_type=item_type)
    log.debug("Declared array type %s of %s", name, item_type.name)
    return array


def enum_type(
    *,
    name: str,
    description: str | None = None,
    items: Mapping[str, str | None],
) -> EnumType:
    """Declare an enum whose value set is exactly the keys of *items*."""
    enum = EnumType(name=name, description=description, items=dict(items))
    log.debug("Declared enum type %s with values %s", name, ", ".join(enum.values))
    return enum


def external_field(
    type: TypeDescriptor,
    *,
    is_optional: bool = False,
    description: str | None = None,
) -> ExternalField:
    """Describe a caller-supplied field."""
    return ExternalField(type=type, is_optional=is_optional, description=description)


def internal_field(
    type: TypeDescriptor,
    bind: Callable[[Any, bool], Any],
    *,
    is_optional: bool = False,
    description: str | None = None,
) -> InternalField:
    """Describe a server-computed field bound through *bind*."""
    return InternalField(type=type, bind=bind, is_optional=is_optional, description=description)


def field_resolver(
    *,
    return_type: TypeDescriptor,
    description: str | None = None,
    func: Callable[..., Any],
) -> FieldResolver:
    """Bind *func* as the resolver of a field returning *return_type*."""
    return FieldResolver(return_type=return_type, description=description, func=func)


def type_resolvers(
    *,
    type: TypeDescriptor,
    fields: Mapping[str, FieldResolver],
) -> TypeResolvers:
    """Group the resolver bindings of one type's fields."""
    return TypeResolvers(type=type, fields=dict(fields))
