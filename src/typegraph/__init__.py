# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors, field shapes and resolver bindings for typed API graphs."""

from typegraph.errors import (
    ConfigError,
    ConversionError,
    DuplicateFieldNameError,
    DuplicateTypeNameError,
    InvalidTypeNameError,
    SchemaBuildError,
    SerializationError,
    TypegraphError,
    UnknownFieldError,
)
from typegraph.model import (
    ID,
    ArrayType,
    Boolean,
    EnumType,
    ExternalField,
    FieldResolver,
    Float,
    Int,
    InterfaceType,
    InternalField,
    ObjectType,
    ScalarType,
    String,
    TypeDescriptor,
    TypeResolvers,
    graphql_scalar,
)
from typegraph.schema import (
    TypeRegistry,
    array_type,
    build_registry,
    enum_type,
    external_field,
    field_resolver,
    interface_type,
    internal_field,
    object_type,
    scalar_type,
    type_resolvers,
)
from typegraph.shape import Shape, project, render_shape

__version__ = "0.1.0"

__all__ = [
    # Errors
    "TypegraphError",
    "SchemaBuildError",
    "DuplicateFieldNameError",
    "DuplicateTypeNameError",
    "InvalidTypeNameError",
    "ConversionError",
    "SerializationError",
    "UnknownFieldError",
    "ConfigError",
    # Descriptors
    "TypeDescriptor",
    "ScalarType",
    "InterfaceType",
    "ObjectType",
    "ArrayType",
    "EnumType",
    "ExternalField",
    "InternalField",
    "FieldResolver",
    "TypeResolvers",
    # Scalars
    "graphql_scalar",
    "Int",
    "Float",
    "String",
    "ID",
    "Boolean",
    # Builders
    "scalar_type",
    "interface_type",
    "object_type",
    "array_type",
    "enum_type",
    "external_field",
    "internal_field",
    "field_resolver",
    "type_resolvers",
    # Registry and shapes
    "TypeRegistry",
    "build_registry",
    "Shape",
    "project",
    "render_shape",
]
