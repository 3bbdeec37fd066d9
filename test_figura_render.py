"""
Render target tests.

Usage:
    pytest test_figura_render.py
"""

import cv2
import numpy as np
import pytest
import supervision as sv

from figura_render import ConsoleRenderer, NullRenderer, RasterRenderer, RenderTarget


def test_console_renderer_prints_calls(capsys):
    renderer = ConsoleRenderer()

    renderer.draw_circle(1.0, 2.0, 3.0)
    renderer.draw_polygon([0.0, 0.0, 1.0, 0.0, 0.0, 1.0])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "ConsoleRenderer.draw_circle(): center_x = 1.0 center_y = 2.0 radius = 3.0"
    assert out[1] == "ConsoleRenderer.draw_polygon(): params: { 0.0 0.0 1.0 0.0 0.0 1.0 }"
    assert [name for name, _ in renderer.calls] == ["draw_circle", "draw_polygon"]

    renderer.reset()
    assert renderer.calls == []


def test_null_renderer_accepts_calls():
    renderer = NullRenderer()

    assert isinstance(renderer, RenderTarget)
    assert renderer.draw_circle(0.0, 0.0, 1.0) is None
    assert renderer.draw_polygon([0.0, 0.0, 1.0, 1.0]) is None


def test_render_target_is_abstract():
    with pytest.raises(TypeError):
        RenderTarget()


def test_raster_starts_with_background():
    renderer = RasterRenderer(
        resolution_wh=(40, 30),
        background_color=sv.Color(r=10, g=20, b=30),
    )

    assert renderer.frame.shape == (30, 40, 3)
    assert tuple(renderer.frame[0, 0]) == (30, 20, 10)


def test_raster_draws_circle():
    renderer = RasterRenderer(resolution_wh=(100, 100), scale=10.0)

    renderer.draw_circle(5.0, 5.0, 3.0)

    assert renderer.frame.any()
    # outline only: the center stays background
    assert not renderer.frame[50, 50].any()
    assert renderer.frame[50, 80].any()


def test_raster_negative_radius_does_not_raise():
    renderer = RasterRenderer(resolution_wh=(20, 20))

    renderer.draw_circle(10.0, 10.0, -4.0)

    assert renderer.frame.shape == (20, 20, 3)


@pytest.mark.parametrize("radius", [float("inf"), float("nan"), 1e12, -1e12])
def test_raster_skips_or_clamps_extreme_radius(radius):
    renderer = RasterRenderer(resolution_wh=(20, 20))

    renderer.draw_circle(10.0, 10.0, radius)

    assert renderer.frame.shape == (20, 20, 3)


def test_raster_skips_non_finite_center():
    renderer = RasterRenderer(resolution_wh=(20, 20))

    renderer.draw_circle(float("nan"), 10.0, 4.0)
    renderer.draw_circle(10.0, float("-inf"), 4.0)

    assert not renderer.frame.any()


@pytest.mark.parametrize(
    "coordinates",
    [
        [0.0, 0.0, 1e12, 0.0, 0.0, 1e12],
        [-1e300, -1e300, 1e300, 0.0, 0.0, 1e300],
        [0.0, 0.0, float("inf"), 0.0, 0.0, 5.0],
        [0.0, 0.0, float("nan"), 0.0, 0.0, 5.0],
    ],
)
def test_raster_survives_extreme_polygon_coordinates(coordinates):
    renderer = RasterRenderer(resolution_wh=(20, 20), scale=10.0, fill_opacity=0.5)

    renderer.draw_polygon(coordinates)

    assert renderer.frame.shape == (20, 20, 3)


def test_raster_draws_polygon_with_origin():
    renderer = RasterRenderer(resolution_wh=(100, 100), scale=10.0, origin=(50, 50))

    renderer.draw_polygon([0.0, 0.0, 4.0, 0.0, 4.0, 4.0, 0.0, 4.0])

    # top edge of the square runs along y = 50 from x = 50 to x = 90
    assert renderer.frame[50, 70].any()
    assert not renderer.frame[10, 10].any()


def test_raster_ignores_trailing_coordinate_and_degenerate_input():
    renderer = RasterRenderer(resolution_wh=(50, 50))

    renderer.draw_polygon([5.0])
    assert not renderer.frame.any()

    renderer.draw_polygon([5.0, 5.0, 40.0, 5.0, 40.0, 40.0, 99.0])
    assert renderer.frame.any()


def test_raster_fill_and_clear():
    renderer = RasterRenderer(resolution_wh=(60, 60), fill_opacity=1.0)

    renderer.draw_polygon([10.0, 10.0, 50.0, 10.0, 50.0, 50.0, 10.0, 50.0])
    assert renderer.frame[30, 30].any()

    renderer.clear()
    assert not renderer.frame.any()


def test_raster_save_writes_image(tmp_path):
    renderer = RasterRenderer(resolution_wh=(32, 24))
    renderer.draw_polygon([2.0, 2.0, 30.0, 2.0, 16.0, 20.0])

    written = renderer.save(tmp_path / "out" / "render.png")

    image = cv2.imread(str(written))
    assert image.shape == (24, 32, 3)
    assert np.array_equal(image, renderer.frame)


def test_raster_rejects_empty_canvas():
    with pytest.raises(ValueError):
        RasterRenderer(resolution_wh=(0, 10))
