# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolver bindings that attach value-producing functions to fields."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from typegraph.errors import UnknownFieldError
from typegraph.model.types import TypeDescriptor, read_only_mapping

# ###############
# Public Interface
# ###############


class FieldResolver(BaseModel):
    """A function producing a field's value, annotated with its declared return type.

    ``func`` is called as ``func(context, instance, *args)``. Nothing checks
    that its result matches ``return_type``; that is left to the engine.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    return_type: TypeDescriptor
    func: Callable[..., Any]
    description: str | None = None

    def invoke(self, context: Any, instance: Any, *args: Any) -> Any:
        """Call the bound function; awaitables are returned as-is."""
        return self.func(context, instance, *args)


class TypeResolvers(BaseModel):
    """The resolver bindings for the fields of one type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: TypeDescriptor
    fields: Mapping[str, FieldResolver] = _Field(default_factory=dict, validate_default=True)

    @field_validator("fields")
    @classmethod
    def _freeze_fields(cls, value: Mapping[str, FieldResolver]) -> Mapping[str, FieldResolver]:
        return read_only_mapping(value)

    def __hash__(self) -> int:
        return hash((self.type, tuple(self.fields.items())))

    def resolve(self, field_name: str, context: Any, instance: Any, *args: Any) -> Any:
        """Invoke the resolver bound to *field_name*.

        Raises:
            UnknownFieldError: If no resolver is bound to *field_name*.
        """
        try:
            resolver = self.fields[field_name]
        except KeyError:
            raise UnknownFieldError(self.type.name, field_name) from None
        return resolver.invoke(context, instance, *args)
