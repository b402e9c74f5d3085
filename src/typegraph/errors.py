# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy shared by all typegraph modules.

Build errors deliberately do not derive from ``ValueError`` so that pydantic
re-raises them unchanged from model validators instead of wrapping them in a
``ValidationError``.
"""

from __future__ import annotations

from collections.abc import Iterable

# ###############
# Public Interface
# ###############


class TypegraphError(Exception):
    """Base class of every error raised by typegraph."""


class SchemaBuildError(TypegraphError):
    """Raised when a descriptor cannot be constructed."""


class DuplicateFieldNameError(SchemaBuildError):
    """Raised when an object declares the same field as external and internal.

    Attributes:
        names: The colliding field names, sorted.
    """

    def __init__(self, type_name: str, names: Iterable[str]) -> None:
        self.type_name = type_name
        self.names: tuple[str, ...] = tuple(sorted(names))
        listed = ", ".join(f"'{n}'" for n in self.names)
        super().__init__(f"Duplicate field names in object type '{type_name}': {listed}")


class InvalidTypeNameError(SchemaBuildError):
    """Raised when a descriptor is given an empty name."""


class DuplicateTypeNameError(SchemaBuildError):
    """Raised when two distinct descriptors share one name within a registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Type name '{name}' is used by two different descriptors")


class ConversionError(TypegraphError):
    """Raised by a scalar's ``parse_value``/``parse_literal`` on inconvertible input."""


class SerializationError(TypegraphError):
    """Raised by a scalar's ``serialize`` when a value has no wire representation."""


class UnknownFieldError(TypegraphError, LookupError):
    """Raised when resolving a field that has no resolver binding."""

    def __init__(self, type_name: str, field_name: str) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"Type '{type_name}' has no resolver for field '{field_name}'")


class ConfigError(TypegraphError):
    """Raised when a configuration file is invalid or cannot be loaded."""
