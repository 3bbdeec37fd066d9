"""
figura shapes
=============

Bounded Context: Shape kinds, variants and the kind -> constructor registry.

Architecture:

    figura_shapes/
    ├── kinds.py       # ShapeKind (wire tags)
    ├── variants.py    # ShapeVariant, Circle, Triangle, Square
    ├── factory.py     # ShapeFactory, RegistrationResult
    └── errors.py      # FailureReason

Usage:

    from figura_shapes import default_factory, ShapeKind

    factory = default_factory()
    circle = factory.create(ShapeKind.CIRCLE)
    circle.draw(target, (1.0, 2.0, 3.0))
"""

from figura_shapes.kinds import ShapeKind, kind_name
from figura_shapes.errors import FailureReason
from figura_shapes.variants import (
    ShapeVariant,
    PolygonVariant,
    Circle,
    Triangle,
    Square,
    DEFAULT_VARIANTS,
)
from figura_shapes.factory import ShapeFactory, RegistrationResult, default_factory

__all__ = [
    "ShapeKind",
    "kind_name",
    "FailureReason",
    "ShapeVariant",
    "PolygonVariant",
    "Circle",
    "Triangle",
    "Square",
    "DEFAULT_VARIANTS",
    "ShapeFactory",
    "RegistrationResult",
    "default_factory",
]
