"""Data models for qimg images."""

from .enums import ConvertMode, RasterFormat, get_raster_format, supported_extensions
from .image import (
    Box,
    BoxedImage,
    Color,
    PackedBox,
    PackedImage,
    Pixel,
    RasterImage,
    Size,
)

__all__ = [
    "Box",
    "BoxedImage",
    "Color",
    "ConvertMode",
    "PackedBox",
    "PackedImage",
    "Pixel",
    "RasterFormat",
    "RasterImage",
    "Size",
    "get_raster_format",
    "supported_extensions",
]
