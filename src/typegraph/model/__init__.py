# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor model for typegraph (types, fields, scalars, resolvers)."""

from typegraph.model.resolvers import FieldResolver, TypeResolvers
from typegraph.model.scalars import BUILTIN_SCALARS, ID, Boolean, Float, Int, String, graphql_scalar
from typegraph.model.types import (
    ArrayType,
    EnumType,
    ExternalField,
    InterfaceType,
    InternalField,
    ObjectType,
    ScalarType,
    TypeBase,
    TypeDescriptor,
    duplicate_field_names,
)

__all__ = [
    # Descriptors
    "TypeBase",
    "ScalarType",
    "InterfaceType",
    "ObjectType",
    "ArrayType",
    "EnumType",
    "TypeDescriptor",
    # Fields
    "ExternalField",
    "InternalField",
    "duplicate_field_names",
    # Scalars
    "graphql_scalar",
    "Int",
    "Float",
    "String",
    "ID",
    "Boolean",
    "BUILTIN_SCALARS",
    # Resolvers
    "FieldResolver",
    "TypeResolvers",
]
