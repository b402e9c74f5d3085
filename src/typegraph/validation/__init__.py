# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Authoring checks for typegraph schemas (invalid names, empty enums, etc.)."""

from typegraph.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
