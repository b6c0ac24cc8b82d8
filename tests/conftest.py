"""Shared fixtures for qimg tests."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
import pytest

from qimg.models.image import RasterImage

RGB = tuple[int, int, int]


def _checkerboard(tiles_x: int, tiles_y: int, box_size: int) -> tuple[RasterImage, dict]:
    """Image where every tile alternates between its own dark and light color."""
    pixels = np.zeros((tiles_y * box_size, tiles_x * box_size, 4), dtype=np.uint8)
    pixels[..., 3] = 255
    expected: dict[tuple[int, int], tuple[RGB, RGB]] = {}

    for ty in range(tiles_y):
        for tx in range(tiles_x):
            dark = (tx * 20, ty * 20, 10)
            light = (200 + tx * 10, 220, 200 + ty * 10)
            expected[(tx, ty)] = (light, dark)
            for ly in range(box_size):
                for lx in range(box_size):
                    color = light if (lx + ly) % 2 == 0 else dark
                    pixels[ty * box_size + ly, tx * box_size + lx, :3] = color

    return RasterImage.from_array(pixels), expected


@pytest.fixture
def checkerboard() -> Callable[[int, int, int], tuple[RasterImage, dict]]:
    """Factory: (tiles_x, tiles_y, box_size) -> (image, {(x, y): (light, dark)})."""
    return _checkerboard


@pytest.fixture
def solid_image() -> Callable[..., RasterImage]:
    """Factory for a single-color opaque image."""
    def make(width: int, height: int, color: RGB = (0, 0, 0)) -> RasterImage:
        pixels = np.zeros((height, width, 4), dtype=np.uint8)
        pixels[..., :3] = color
        pixels[..., 3] = 255
        return RasterImage.from_array(pixels)

    return make
