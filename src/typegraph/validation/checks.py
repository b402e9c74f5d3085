# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Authoring checks for a registry of type descriptors.

These checks run on top of the descriptor model, which itself only enforces
non-empty names and disjoint object field names. They flag schemas that an
execution engine would reject or that are very likely authoring mistakes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from graphql import GraphQLError, assert_enum_value_name, assert_name

from typegraph.config import TypegraphConfig
from typegraph.logger import get_logger
from typegraph.model.types import EnumType, InterfaceType, ObjectType, TypeDescriptor
from typegraph.schema.registry import TypeRegistry

log = get_logger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue: the schema is usable but probably not what was meant.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal issue: the schema should be corrected before it is served.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the authoring checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal issues found during validation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(registry: TypeRegistry, config: TypegraphConfig | None = None) -> ValidationResult:
    """Run all authoring checks on every type in *registry*.

    Checks performed:

    1. **Names**: type and field names must be valid GraphQL names, and enum
       values valid GraphQL enum value names (not ``true``, ``false`` or
       ``null``). Reported as errors when ``config.strict_names`` is set,
       as warnings otherwise.

    2. **Empty enums**: an enum without values admits no value at all.
       Reported with the ``config.empty_enum`` severity.

    3. **Empty field sets** (warning): interfaces and objects without fields.

    Args:
        registry: The types to check.
        config: Settings controlling severities; defaults apply when omitted.

    Returns:
        A :class:`ValidationResult`. An empty result means no issue was found.
    """
    config = config or TypegraphConfig()
    result = ValidationResult()

    for descriptor in registry.values():
        _check_names(descriptor, config, result)
        _check_empty_enum(descriptor, config, result)
        _check_empty_fields(descriptor, result)

    log.info(
        "Validated %d type(s): %d error(s), %d warning(s)",
        len(registry),
        len(result.errors),
        len(result.warnings),
    )
    return result


# ################
# Implementation
# ################


def _report(result: ValidationResult, severity: str, message: str) -> None:
    """Append *message* to *result* according to *severity*."""
    if severity == "error":
        result.errors.append(ValidationError(message))
    elif severity == "warning":
        result.warnings.append(ValidationWarning(message))


def _check_names(descriptor: TypeDescriptor, config: TypegraphConfig, result: ValidationResult) -> None:
    severity = "error" if config.strict_names else "warning"

    field_names: tuple[str, ...] = ()
    if isinstance(descriptor, InterfaceType):
        field_names = tuple(descriptor.fields)
    elif isinstance(descriptor, ObjectType):
        field_names = descriptor.field_names

    checked = [(descriptor.name, f"type '{descriptor.name}'")]
    checked += [(name, f"field '{name}' of type '{descriptor.name}'") for name in field_names]
    for name, label in checked:
        try:
            assert_name(name)
        except GraphQLError as exc:
            _report(result, severity, f"Invalid name for {label}: {exc.message}")

    if isinstance(descriptor, EnumType):
        for value in descriptor.values:
            try:
                assert_enum_value_name(value)
            except GraphQLError as exc:
                _report(result, severity, f"Invalid value '{value}' in enum '{descriptor.name}': {exc.message}")


def _check_empty_enum(descriptor: TypeDescriptor, config: TypegraphConfig, result: ValidationResult) -> None:
    if isinstance(descriptor, EnumType) and not descriptor.items:
        _report(result, config.empty_enum, f"Enum '{descriptor.name}' declares no values and admits no value")


def _check_empty_fields(descriptor: TypeDescriptor, result: ValidationResult) -> None:
    if isinstance(descriptor, InterfaceType) and not descriptor.fields:
        result.warnings.append(ValidationWarning(f"Interface '{descriptor.name}' declares no fields"))
    elif isinstance(descriptor, ObjectType) and not descriptor.field_names:
        result.warnings.append(ValidationWarning(f"Object '{descriptor.name}' declares no fields"))
