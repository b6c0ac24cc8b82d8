"""Two-tone box quantization (pack) and reconstruction (unpack)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import numpy as np

from ..exceptions import InvalidParameterError
from ..models.image import Box, BoxedImage, Color, PackedBox, PackedImage, RasterImage
from .luminance import luminance_array

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")
_R = TypeVar("_R")

DARK_INDEX = 0
LIGHT_INDEX = 1


def _map_boxes(
    func: Callable[[_T], _R],
    items: Sequence[_T],
    workers: int | None,
) -> list[_R]:
    """Apply func to every item, optionally across a thread pool.

    Results are always returned in input order.
    """
    if workers is not None and workers < 1:
        raise InvalidParameterError(f"workers must be >= 1, got {workers}")

    if workers is None or workers == 1 or len(items) < 2:
        return [func(item) for item in items]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(func, items))


def _mean_color(rgb: np.ndarray) -> Color:
    """Per-channel integer mean (truncated) of an (N, 3) array, N > 0."""
    count = len(rgb)
    r, g, b = (int(total) // count for total in rgb.sum(axis=0))
    return Color(r, g, b)


def pack_box(box: Box) -> PackedBox:
    """Reduce one box to a light and a dark color plus per-pixel indices.

    Pixels whose luminance is at or above the box's mean luminance are light
    (index 1), the rest are dark (index 0). Each color is the truncated mean
    of its partition.

    The mean is clamped to the box's luminance range, so the brightest pixel
    is always light and only the dark partition can be empty. That happens
    when every pixel has the same luminance; the dark color then repeats the
    light color.

    Args:
        box: Box to quantize

    Returns:
        PackedBox with the same coordinates and pixel order
    """
    if not box.pixels:
        return PackedBox(x=box.x, y=box.y, light=Color(), dark=Color(), indices=b"")

    rgb = np.array(
        [(pixel.color.r, pixel.color.g, pixel.color.b) for pixel in box.pixels],
        dtype=np.int64,
    )
    lum = luminance_array(rgb)
    average = min(max(float(lum.mean()), float(lum.min())), float(lum.max()))
    is_light = lum >= average

    light = _mean_color(rgb[is_light])
    dark_pixels = rgb[~is_light]
    dark = _mean_color(dark_pixels) if len(dark_pixels) else light

    return PackedBox(
        x=box.x,
        y=box.y,
        light=light,
        dark=dark,
        indices=np.where(is_light, LIGHT_INDEX, DARK_INDEX).astype(np.uint8).tobytes(),
    )


def pack(boxed: BoxedImage, workers: int | None = None) -> PackedImage:
    """Quantize every box of an image independently.

    Args:
        boxed: Output of :func:`~qimg.encoding.boxify.boxify`
        workers: Thread count for per-box fan-out (None or 1 = sequential)

    Returns:
        PackedImage with boxes in the same order as the input
    """
    packed_boxes = _map_boxes(pack_box, boxed.boxes, workers)

    _LOGGER.debug("Packed %d boxes (workers=%s)", len(packed_boxes), workers)

    return PackedImage(size=boxed.size, box_size=boxed.box_size, boxes=tuple(packed_boxes))


def _render_box(box: PackedBox) -> np.ndarray:
    """Return an (N, 3) uint8 array of resolved colors for a box's indices."""
    indices = np.frombuffer(box.indices, dtype=np.uint8)
    dark = np.array([box.dark.r, box.dark.g, box.dark.b], dtype=np.uint8)
    light = np.array([box.light.r, box.light.g, box.light.b], dtype=np.uint8)
    return np.where((indices == DARK_INDEX)[:, None], dark, light).astype(np.uint8)


def unpack(packed: PackedImage, workers: int | None = None) -> RasterImage:
    """Rebuild a full-resolution RGBA image from packed boxes.

    Each box is placed by its own (x, y); list order does not matter. The
    canvas starts black and opaque. Boxes outside the grid are skipped, and a
    box with fewer than box_size² indices only paints the pixels it covers.

    Args:
        packed: Packed image
        workers: Thread count for per-box color resolution (None or 1 = sequential)

    Returns:
        RasterImage of (size.width * box_size) x (size.height * box_size) pixels
    """
    box_size = packed.box_size
    width = packed.size.width * box_size
    height = packed.size.height * box_size

    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[..., 3] = 255

    rendered = _map_boxes(_render_box, packed.boxes, workers)
    area = box_size * box_size

    for box, colors in zip(packed.boxes, rendered):
        if not (0 <= box.x < packed.size.width and 0 <= box.y < packed.size.height):
            _LOGGER.warning(
                "Skipping box at (%d, %d): outside %dx%d grid",
                box.x,
                box.y,
                packed.size.width,
                packed.size.height,
            )
            continue

        colors = colors[:area]
        offsets = np.arange(len(colors))
        ys = box.y * box_size + offsets // box_size
        xs = box.x * box_size + offsets % box_size
        canvas[ys, xs, :3] = colors

    _LOGGER.debug("Unpacked %d boxes into %dx%d image", len(packed.boxes), width, height)

    return RasterImage.from_array(canvas)
