# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Built-in scalar descriptors backed by graphql-core's scalar implementations.

``Int``, ``Float``, ``String`` and ``Boolean`` reproduce every representable
wire value when it is parsed and serialized again. ``ID`` accepts strings and
integers on input but always serializes to a string, so an integer ID comes
back as its decimal string.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from graphql import (
    GraphQLBoolean,
    GraphQLError,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLScalarType,
    GraphQLString,
    ValueNode,
)

from typegraph.errors import ConversionError, SerializationError, TypegraphError
from typegraph.model.types import ScalarType

# ###############
# Public Interface
# ###############


def graphql_scalar(
    scalar: GraphQLScalarType,
    internal_type: type[Any] = object,
    description: str | None = None,
) -> ScalarType:
    """Wrap a graphql-core scalar as a :class:`ScalarType` descriptor.

    Errors raised by graphql-core while converting are re-raised as
    :class:`ConversionError` (parsing) or :class:`SerializationError`
    (serializing), chained to the original exception. ``parse_literal``
    takes ``(value_node, variables=None)`` like graphql-core's own method.

    Args:
        scalar: The graphql-core scalar to adapt.
        internal_type: Python type of the scalar's internal representation.
        description: Overrides the scalar's own description when given.

    Returns:
        A scalar descriptor named after *scalar*.
    """
    return ScalarType(
        name=scalar.name,
        description=description if description is not None else scalar.description,
        serialize=_translate_errors(scalar.serialize, SerializationError, scalar.name),
        parse_value=_translate_errors(scalar.parse_value, ConversionError, scalar.name),
        parse_literal=_translate_errors(_literal_parser(scalar), ConversionError, scalar.name),
        internal_type=internal_type,
    )


# ################
# Implementation
# ################


def _translate_errors(
    func: Callable[..., Any],
    error_cls: type[TypegraphError],
    scalar_name: str,
) -> Callable[..., Any]:
    """Return *func* with graphql-core conversion errors mapped to *error_cls*."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (GraphQLError, TypeError, ValueError) as exc:
            raise error_cls(f"{scalar_name}: {exc}") from exc

    return wrapper


def _literal_parser(scalar: GraphQLScalarType) -> Callable[..., Any]:
    """Give *scalar*'s literal parser a uniform ``(value_node, variables=None)`` signature.

    graphql-core's built-in literal parsers name their second parameter
    ``_variables``, so it is always forwarded positionally.
    """

    def parse_literal(value_node: ValueNode, variables: dict[str, Any] | None = None) -> Any:
        return scalar.parse_literal(value_node, variables)

    return parse_literal


# Built-in scalars. Defined last because they are built with the helpers above.
Int = graphql_scalar(GraphQLInt, int)
Float = graphql_scalar(GraphQLFloat, float)
String = graphql_scalar(GraphQLString, str)
ID = graphql_scalar(GraphQLID, str)
Boolean = graphql_scalar(GraphQLBoolean, bool)

BUILTIN_SCALARS: Mapping[str, ScalarType] = MappingProxyType({s.name: s for s in (Int, Float, String, ID, Boolean)})
