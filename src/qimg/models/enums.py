"""Enumerations for raster file formats."""

from __future__ import annotations

from enum import Enum
from typing import Final

from ..exceptions import UnsupportedRasterFormatError


class RasterFormat(Enum):
    """Raster formats handled by the Pillow codec.

    Values are Pillow format names.
    """
    JPEG = "JPEG"
    PNG = "PNG"


_FORMAT_BY_EXTENSION: Final[dict[str, RasterFormat]] = {
    ".jpg": RasterFormat.JPEG,
    ".jpeg": RasterFormat.JPEG,
    ".png": RasterFormat.PNG,
}


def get_raster_format(extension: str) -> RasterFormat:
    """Look up a raster format by file extension (case-insensitive).

    Args:
        extension: File extension including the dot (e.g. ".png")

    Returns:
        Matching RasterFormat

    Raises:
        UnsupportedRasterFormatError: If no format handles the extension
    """
    try:
        return _FORMAT_BY_EXTENSION[extension.lower()]
    except KeyError:
        raise UnsupportedRasterFormatError(
            f"Unsupported raster file type: {extension or '<none>'}"
        ) from None


def supported_extensions() -> tuple[str, ...]:
    """Return every extension with a raster codec."""
    return tuple(_FORMAT_BY_EXTENSION)


class ConvertMode(Enum):
    """Direction of a file conversion."""
    COMPRESS = "compress"
    DECOMPRESS = "decompress"
