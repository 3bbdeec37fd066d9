"""
Console Renderer
================

Test double that prints every draw call and keeps a record of it.

Output:
    ConsoleRenderer.draw_circle(): center_x = 1.0 center_y = 2.0 radius = 3.0
    ConsoleRenderer.draw_polygon(): params: { 0.0 0.0 1.0 0.0 0.0 1.0 }
"""

import sys
from typing import Any, List, Optional, Sequence, TextIO, Tuple

from figura_render.base import RenderTarget


class ConsoleRenderer(RenderTarget):
    """
    Printing render target.

    Attributes:
        calls: (primitive name, args tuple) per draw call, in call order
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def draw_circle(self, center_x: float, center_y: float, radius: float) -> None:
        self.calls.append(("draw_circle", (center_x, center_y, radius)))
        print(
            f"ConsoleRenderer.draw_circle():"
            f" center_x = {center_x}"
            f" center_y = {center_y}"
            f" radius = {radius}",
            file=self.stream,
        )

    def draw_polygon(self, coordinates: Sequence[float]) -> None:
        points = list(coordinates)
        self.calls.append(("draw_polygon", (points,)))
        joined = " ".join(str(value) for value in points)
        print(f"ConsoleRenderer.draw_polygon(): params: {{ {joined} }}", file=self.stream)

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()
