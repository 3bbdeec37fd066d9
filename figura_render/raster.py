"""
Raster Renderer Module
======================

Draws shapes onto an in-memory BGR canvas.

Design:
- Stateless with respect to shapes (only the canvas accumulates)
- Configurable styles
- Polygons through supervision drawing utilities, circles through OpenCV
- Coordinates mapped to pixels as: pixel = origin + value * scale

Dependencies:
- supervision (draw utilities, Color)
- numpy (canvas)
- cv2 (circle primitive, image output)
"""

from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np
import supervision as sv

from figura_render.base import RenderTarget

# OpenCV draws with 32-bit fixed point; keep pixels well inside that range
PIXEL_LIMIT = 2 ** 15


class RasterRenderer(RenderTarget):
    """
    Render target backed by a numpy image.

    Usage:
        renderer = RasterRenderer(resolution_wh=(640, 480), scale=20.0)
        decoder.render(renderer)
        renderer.save("runs/figura/render.png")
    """

    def __init__(
        self,
        resolution_wh: Tuple[int, int] = (640, 480),
        scale: float = 1.0,
        origin: Tuple[float, float] = (0.0, 0.0),
        color: sv.Color = sv.Color(r=0, g=255, b=0),
        background_color: sv.Color = sv.Color(r=0, g=0, b=0),
        thickness: int = 2,
        fill_opacity: float = 0.0,
    ):
        """
        Initialize renderer with canvas and style configuration.

        Args:
            resolution_wh: Canvas (width, height) in pixels
            scale: Pixels per coordinate unit
            origin: Pixel position of coordinate (0, 0)
            color: Outline color
            background_color: Canvas fill color
            thickness: Line thickness
            fill_opacity: Polygon fill opacity (0 disables fill)
        """
        width, height = resolution_wh
        if width <= 0 or height <= 0:
            raise ValueError(f"resolution_wh must be positive, got {resolution_wh}")

        self.resolution_wh = resolution_wh
        self.scale = scale
        self.origin = origin
        self.color = color
        self.background_color = background_color
        self.thickness = thickness
        self.fill_opacity = fill_opacity
        self.frame = self._blank_frame()

    def _blank_frame(self) -> np.ndarray:
        width, height = self.resolution_wh
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:] = self.background_color.as_bgr()
        return frame

    def _to_pixels(self, coordinates: Sequence[float]) -> Optional[np.ndarray]:
        """Flattened coordinates -> Nx2 int32 pixel array, None if any value is not finite."""
        values = np.asarray(coordinates, dtype=np.float64)
        values = values[: len(values) // 2 * 2].reshape(-1, 2)
        with np.errstate(over="ignore", invalid="ignore"):
            pixels = np.asarray(self.origin, dtype=np.float64) + values * self.scale
        if not np.isfinite(pixels).all():
            return None
        return np.rint(np.clip(pixels, -PIXEL_LIMIT, PIXEL_LIMIT)).astype(np.int32)

    def draw_circle(self, center_x: float, center_y: float, radius: float) -> None:
        import cv2

        center = self._to_pixels((center_x, center_y))
        radius_px = float(radius) * self.scale
        if center is None or not np.isfinite(radius_px):
            return

        center = center[0]
        radius_px = int(np.clip(round(radius_px), 0, PIXEL_LIMIT))
        cv2.circle(
            self.frame,
            (int(center[0]), int(center[1])),
            radius_px,
            self.color.as_bgr(),
            self.thickness,
        )

    def draw_polygon(self, coordinates: Sequence[float]) -> None:
        polygon = self._to_pixels(coordinates)
        if polygon is None or len(polygon) < 2:
            return

        if self.fill_opacity > 0:
            self.frame = sv.draw_filled_polygon(
                scene=self.frame,
                polygon=polygon,
                color=self.color,
                opacity=self.fill_opacity,
            )

        self.frame = sv.draw_polygon(
            scene=self.frame,
            polygon=polygon,
            color=self.color,
            thickness=self.thickness,
        )

    def clear(self) -> None:
        """Reset the canvas to the background color."""
        self.frame = self._blank_frame()

    def save(self, path: str | Path) -> Path:
        """
        Write the canvas to an image file.

        Returns:
            Path written

        Raises:
            OSError: If OpenCV could not write the file
        """
        import cv2

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if not cv2.imwrite(str(target), self.frame):
            raise OSError(f"Could not write image: {target}")
        return target
