# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value shapes denoted by type descriptors."""

from typegraph.shape.projection import (
    LiteralShape,
    RecordShape,
    ScalarShape,
    SequenceShape,
    Shape,
    ShapeField,
    project,
    render_shape,
    required_fields,
)

__all__ = [
    "Shape",
    "ScalarShape",
    "RecordShape",
    "SequenceShape",
    "LiteralShape",
    "ShapeField",
    "project",
    "render_shape",
    "required_fields",
]
