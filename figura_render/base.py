"""
Render Target Interface
=======================

The two drawing primitives a shape variant may call. Implementations
only draw, they never decide what to draw.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class RenderTarget(ABC):
    """Abstract drawing surface."""

    @abstractmethod
    def draw_circle(self, center_x: float, center_y: float, radius: float) -> None:
        """Draw a circle."""

    @abstractmethod
    def draw_polygon(self, coordinates: Sequence[float]) -> None:
        """Draw a closed polygon from a flattened (x0, y0, x1, y1, ...) list."""
