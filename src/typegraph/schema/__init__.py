# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema construction: descriptor builders and the type registry."""

from typegraph.schema.builders import (
    array_type,
    enum_type,
    external_field,
    field_resolver,
    interface_type,
    internal_field,
    object_type,
    scalar_type,
    type_resolvers,
)
from typegraph.schema.registry import TypeRegistry, build_registry

__all__ = [
    "scalar_type",
    "interface_type",
    "object_type",
    "array_type",
    "enum_type",
    "external_field",
    "internal_field",
    "field_resolver",
    "type_resolvers",
    "TypeRegistry",
    "build_registry",
]
