# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation views over typegraph schemas."""

from typegraph.views.introspection import (
    INTROSPECTION_FORMAT_VERSION,
    describe_registry,
    describe_type,
    dumps,
    write_introspection,
)

__all__ = [
    "INTROSPECTION_FORMAT_VERSION",
    "describe_type",
    "describe_registry",
    "dumps",
    "write_introspection",
]
