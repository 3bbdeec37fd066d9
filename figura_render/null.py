"""Production no-op renderer."""

from typing import Sequence

from figura_render.base import RenderTarget


class NullRenderer(RenderTarget):
    """Accepts every draw call and does nothing."""

    def draw_circle(self, center_x: float, center_y: float, radius: float) -> None:
        pass

    def draw_polygon(self, coordinates: Sequence[float]) -> None:
        pass
