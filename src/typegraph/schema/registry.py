# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name-indexed registry of every type reachable from a set of root descriptors."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from typegraph.errors import DuplicateTypeNameError
from typegraph.logger import get_logger
from typegraph.model.types import ArrayType, InterfaceType, ObjectType, TypeDescriptor
from typegraph.shape.projection import Shape, project

log = get_logger(__name__)

# ###############
# Public Interface
# ###############


class TypeRegistry(Mapping[str, TypeDescriptor]):
    """Read-only mapping from type name to descriptor.

    Types are kept in discovery order: each root first, then the types it
    references, depth first.
    """

    def __init__(self, types: Mapping[str, TypeDescriptor]) -> None:
        self._types = dict(types)

    def __getitem__(self, name: str) -> TypeDescriptor:
        return self._types[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry({', '.join(self._types)})"

    def shape(self, name: str) -> Shape:
        """Project the type registered under *name*."""
        return project(self._types[name])


def build_registry(*roots: TypeDescriptor) -> TypeRegistry:
    """Collect every type reachable from *roots* into a :class:`TypeRegistry`.

    The same descriptor (or an equal one) may be reached many times; it is
    registered once.

    Raises:
        DuplicateTypeNameError: If two different descriptors share a name.
    """
    types: dict[str, TypeDescriptor] = {}
    for root in roots:
        _collect(root, types)
    log.debug("Registered %d type(s)", len(types))
    return TypeRegistry(types)


# ################
# Implementation
# ################


def _collect(descriptor: TypeDescriptor, types: dict[str, TypeDescriptor]) -> None:
    """Register *descriptor* and everything it references."""
    existing = types.get(descriptor.name)
    if existing is not None:
        if existing is not descriptor and existing != descriptor:
            raise DuplicateTypeNameError(descriptor.name)
        return
    types[descriptor.name] = descriptor

    for child in _referenced_types(descriptor):
        _collect(child, types)


def _referenced_types(descriptor: TypeDescriptor) -> list[TypeDescriptor]:
    """Return the descriptors *descriptor* directly refers to."""
    if isinstance(descriptor, InterfaceType):
        return [f.type for f in descriptor.fields.values()]
    if isinstance(descriptor, ObjectType):
        return [f.type for f in descriptor.external_fields.values()] + [
            f.type for f in descriptor.internal_fields.values()
        ]
    if isinstance(descriptor, ArrayType):
        return [descriptor.item_type]
    return []
