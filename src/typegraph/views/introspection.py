# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Introspection documents for type descriptors.

Descriptors are rendered as JSON-compatible dictionaries for documentation
and tooling. The documents describe structure only; conversion functions and
bindings are not serializable and are left out. The format is versioned so
consumers can detect changes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typegraph.model.types import (
    ArrayType,
    EnumType,
    ExternalField,
    InterfaceType,
    InternalField,
    ObjectType,
    ScalarType,
    TypeDescriptor,
)
from typegraph.schema.registry import TypeRegistry
from typegraph.shape.projection import project, render_shape

# ###############
# Public Interface
# ###############

INTROSPECTION_FORMAT_VERSION = "1"


def describe_type(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Describe a single descriptor as a JSON-compatible dictionary."""
    d: dict[str, Any] = {"kind": descriptor.kind, "name": descriptor.name}
    if descriptor.description is not None:
        d["description"] = descriptor.description

    if isinstance(descriptor, ScalarType):
        d["internalType"] = descriptor.internal_type.__name__
    elif isinstance(descriptor, InterfaceType):
        d["fields"] = [_field_to_dict(name, f, "external") for name, f in descriptor.fields.items()]
    elif isinstance(descriptor, ObjectType):
        d["fields"] = [_field_to_dict(name, f, "external") for name, f in descriptor.external_fields.items()] + [
            _field_to_dict(name, f, "internal") for name, f in descriptor.internal_fields.items()
        ]
    elif isinstance(descriptor, ArrayType):
        d["itemType"] = descriptor.item_type.name
        d["isOptional"] = descriptor.is_optional
    elif isinstance(descriptor, EnumType):
        d["values"] = [_enum_value_to_dict(name, doc) for name, doc in descriptor.items.items()]

    d["shape"] = render_shape(project(descriptor))
    return d


def describe_registry(registry: TypeRegistry) -> dict[str, Any]:
    """Describe every type in *registry*, in registry order."""
    return {
        "v": INTROSPECTION_FORMAT_VERSION,
        "types": [describe_type(descriptor) for descriptor in registry.values()],
    }


def dumps(registry: TypeRegistry) -> str:
    """Serialize the introspection document of *registry* to a compact JSON string."""
    return json.dumps(describe_registry(registry), separators=(",", ":"))


def write_introspection(registry: TypeRegistry, path: Path) -> None:
    """Write the introspection document to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(registry), encoding="utf-8")


# ################
# Implementation
# ################


def _field_to_dict(name: str, f: ExternalField | InternalField, origin: str) -> dict[str, Any]:
    d: dict[str, Any] = {
        "name": name,
        "type": f.type.name,
        "isOptional": f.is_optional,
        "origin": origin,
    }
    if f.description is not None:
        d["description"] = f.description
    return d


def _enum_value_to_dict(name: str, doc: str | None) -> dict[str, Any]:
    d: dict[str, Any] = {"name": name}
    if doc is not None:
        d["description"] = doc
    return d
