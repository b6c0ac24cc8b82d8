"""Split a raster image into a grid of fixed-size boxes."""

from __future__ import annotations

import logging
import warnings

from ..exceptions import CroppingWarning, InvalidParameterError
from ..models.image import Box, BoxedImage, Color, Pixel, RasterImage, Size

_LOGGER = logging.getLogger(__name__)


def boxify(image: RasterImage, box_size: int) -> BoxedImage:
    """Partition an image into square boxes of ``box_size`` pixels.

    Boxes are produced in row-major grid order and the pixels of each box in
    row-major local order. Rows and columns beyond the largest multiple of
    ``box_size`` are dropped and a :class:`CroppingWarning` is emitted.

    Args:
        image: Source image (alpha channel is ignored)
        box_size: Edge length of each box in pixels

    Returns:
        BoxedImage whose size is measured in boxes

    Raises:
        InvalidParameterError: If box_size is not a positive integer
    """
    if isinstance(box_size, bool) or not isinstance(box_size, int) or box_size <= 0:
        raise InvalidParameterError(f"Box size must be a positive integer, got {box_size!r}")

    grid = Size(image.width // box_size, image.height // box_size)

    if image.width % box_size or image.height % box_size:
        warnings.warn(
            f"Image size {image.width}x{image.height} is not evenly divisible by "
            f"box size {box_size}, cropping to "
            f"{grid.width * box_size}x{grid.height * box_size}",
            CroppingWarning,
            stacklevel=2,
        )

    pixels = image.to_array()
    boxes = []

    for grid_y in range(grid.height):
        for grid_x in range(grid.width):
            top = grid_y * box_size
            left = grid_x * box_size
            tile = pixels[top:top + box_size, left:left + box_size, :3].tolist()

            boxes.append(Box(
                x=grid_x,
                y=grid_y,
                pixels=tuple(
                    Pixel(local_x, local_y, Color(*tile[local_y][local_x]))
                    for local_y in range(box_size)
                    for local_x in range(box_size)
                ),
            ))

    _LOGGER.debug(
        "Boxified %dx%d image into %dx%d boxes of %dpx",
        image.width,
        image.height,
        grid.width,
        grid.height,
        box_size,
    )

    return BoxedImage(size=grid, box_size=box_size, boxes=tuple(boxes))
