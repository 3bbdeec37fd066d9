"""
Shape Variants Module
=====================

Immutable shape variants - NO per-record state, NO side effects beyond
the render target.

Design:
- Each variant fixes its kind tag and parameter count at class level
- Frozen dataclass pattern (instances carry no data, safe to cache and share)
- Parameters live outside the variant and are passed to draw()
- Two primitives only: circles go to draw_circle, every closed polygon goes
  to draw_polygon with its flattened coordinate list

Adding a polygon kind:

    @dataclass(frozen=True)
    class Pentagon(PolygonVariant):
        KIND: ClassVar[int] = 3
        PARAM_COUNT: ClassVar[int] = 10
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence

from figura_render.base import RenderTarget
from figura_shapes.kinds import ShapeKind


class ShapeVariant(ABC):
    """
    Base class for all shape variants.

    Subclasses declare:
        KIND: integer kind tag
        PARAM_COUNT: exact number of floats the record carries
    """

    KIND: ClassVar[int]
    PARAM_COUNT: ClassVar[int]

    @property
    def kind(self) -> int:
        return self.KIND

    @property
    def param_count(self) -> int:
        return self.PARAM_COUNT

    @abstractmethod
    def draw(self, target: RenderTarget, params: Sequence[float]) -> None:
        """
        Draw this shape on target.

        Called with fewer than PARAM_COUNT values this is a no-op: draw runs
        separately from the read and does not trust it to have checked length.
        """


@dataclass(frozen=True)
class Circle(ShapeVariant):
    """Circle: (center_x, center_y, radius)."""

    KIND: ClassVar[int] = ShapeKind.CIRCLE
    PARAM_COUNT: ClassVar[int] = 3

    def draw(self, target: RenderTarget, params: Sequence[float]) -> None:
        if len(params) < self.PARAM_COUNT:
            return
        target.draw_circle(float(params[0]), float(params[1]), float(params[2]))


@dataclass(frozen=True)
class PolygonVariant(ShapeVariant):
    """
    Closed polygon given as a flattened (x0, y0, x1, y1, ...) list.

    Concrete polygons only set KIND and PARAM_COUNT.
    """

    def draw(self, target: RenderTarget, params: Sequence[float]) -> None:
        if len(params) < self.PARAM_COUNT:
            return
        target.draw_polygon([float(value) for value in params])


@dataclass(frozen=True)
class Triangle(PolygonVariant):
    KIND: ClassVar[int] = ShapeKind.TRIANGLE
    PARAM_COUNT: ClassVar[int] = 6


@dataclass(frozen=True)
class Square(PolygonVariant):
    KIND: ClassVar[int] = ShapeKind.SQUARE
    PARAM_COUNT: ClassVar[int] = 8


# Ordered startup list, registered in this order
DEFAULT_VARIANTS = (Circle, Triangle, Square)
