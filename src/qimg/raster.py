"""Raster image codec backed by Pillow."""

from __future__ import annotations

import io
import logging

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .exceptions import InvalidParameterError, UnsupportedRasterFormatError
from .models.enums import RasterFormat
from .models.image import RasterImage

_LOGGER = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 100


def image_from_pil(image: Image.Image) -> RasterImage:
    """Convert a PIL image (any mode) to an RGBA RasterImage."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return RasterImage.from_array(np.asarray(image, dtype=np.uint8))


def image_to_pil(image: RasterImage) -> Image.Image:
    """Convert a RasterImage to a PIL image in RGBA mode."""
    return Image.frombytes("RGBA", (image.width, image.height), image.data)


def decode_raster(data: bytes, fmt: RasterFormat | None = None) -> RasterImage:
    """Decode an encoded raster image.

    Args:
        data: Encoded file contents
        fmt: Restrict decoding to this format (None = let Pillow detect)

    Returns:
        Decoded RGBA image with EXIF orientation applied

    Raises:
        UnsupportedRasterFormatError: If Pillow cannot identify the data
    """
    formats = [fmt.value] if fmt is not None else None
    try:
        with Image.open(io.BytesIO(data), formats=formats) as image:
            _LOGGER.debug("Decoding %s image %dx%d (%s)", image.format, *image.size, image.mode)
            transposed = ImageOps.exif_transpose(image)
            return image_from_pil(transposed)
    except UnidentifiedImageError as err:
        expected = fmt.value if fmt is not None else "raster"
        raise UnsupportedRasterFormatError(f"Cannot decode data as {expected} image") from err


def encode_raster(
    image: RasterImage,
    fmt: RasterFormat,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    """Encode a RasterImage into a raster file format.

    JPEG output drops the alpha channel; PNG keeps it.

    Args:
        image: Image to encode
        fmt: Target format
        quality: JPEG quality (1-100, ignored for PNG)

    Returns:
        Encoded file contents

    Raises:
        InvalidParameterError: If the image is empty or quality is out of range
    """
    if image.width == 0 or image.height == 0:
        raise InvalidParameterError(
            f"Cannot encode empty {image.width}x{image.height} image"
        )

    pil_image = image_to_pil(image)
    options: dict[str, int] = {}

    if fmt == RasterFormat.JPEG:
        if not 1 <= quality <= 100:
            raise InvalidParameterError(f"JPEG quality out of range: {quality} (must be 1-100)")
        pil_image = pil_image.convert("RGB")
        options["quality"] = quality

    buffer = io.BytesIO()
    pil_image.save(buffer, format=fmt.value, **options)
    return buffer.getvalue()
