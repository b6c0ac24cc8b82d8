"""Immutable image models passed between codec stages."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

CHANNELS = 4  # R, G, B, A


def _check_u8(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} out of range: {value} (must be 0-255)")


@dataclass(frozen=True, slots=True)
class Color:
    """8-bit RGB color."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        _check_u8("r", self.r)
        _check_u8("g", self.g)
        _check_u8("b", self.b)

    def to_bytes(self) -> bytes:
        """Serialize to 3 bytes (R, G, B)."""
        return bytes((self.r, self.g, self.b))

    @classmethod
    def from_bytes(cls, data: bytes) -> Color:
        """Parse 3 bytes (R, G, B)."""
        if len(data) != 3:
            raise ValueError(f"Color must be exactly 3 bytes, got {len(data)}")
        return cls(data[0], data[1], data[2])


@dataclass(frozen=True, slots=True)
class Size:
    """Width and height, in pixels or tiles depending on context."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Size must be non-negative, got {self.width}x{self.height}")


@dataclass(frozen=True, slots=True)
class RasterImage:
    """Decoded raster image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Row-major RGBA buffer, 4 bytes per pixel
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image size must be non-negative, got {self.width}x{self.height}")
        expected = self.width * self.height * CHANNELS
        if len(self.data) != expected:
            raise ValueError(
                f"RGBA buffer length mismatch: expected {expected} bytes "
                f"for {self.width}x{self.height}, got {len(self.data)}"
            )

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> RasterImage:
        """Build from a (height, width, 4) uint8 array."""
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise ValueError(f"Expected (height, width, 4) array, got shape {pixels.shape}")
        height, width = pixels.shape[:2]
        return cls(width, height, np.ascontiguousarray(pixels, dtype=np.uint8).tobytes())

    def to_array(self) -> np.ndarray:
        """Return a writable (height, width, 4) uint8 copy of the pixels."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, CHANNELS
        ).copy()

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA value at (x, y)."""
        offset = (y * self.width + x) * CHANNELS
        r, g, b, a = self.data[offset:offset + CHANNELS]
        return r, g, b, a


@dataclass(frozen=True, slots=True)
class Pixel:
    """One pixel of a box: local coordinates and RGB color (alpha dropped)."""

    x: int
    y: int
    color: Color


@dataclass(frozen=True, slots=True)
class Box:
    """Square tile of an image.

    Attributes:
        x: Column in the tile grid
        y: Row in the tile grid
        pixels: Row-major pixels in local coordinates
    """

    x: int
    y: int
    pixels: tuple[Pixel, ...] = ()


@dataclass(frozen=True, slots=True)
class BoxedImage:
    """Image split into a grid of boxes, in row-major grid order."""

    size: Size
    box_size: int
    boxes: tuple[Box, ...] = ()


@dataclass(frozen=True, slots=True)
class PackedBox:
    """Box reduced to two colors and one palette index per pixel.

    Index 0 selects ``dark``, any other value selects ``light``.
    """

    x: int
    y: int
    light: Color
    dark: Color
    indices: bytes = b""

    def color_for(self, index: int) -> Color:
        """Resolve a palette index to its color."""
        return self.dark if index == 0 else self.light


@dataclass(frozen=True, slots=True)
class PackedImage:
    """Fully packed image, ready for serialization."""

    size: Size
    box_size: int
    boxes: tuple[PackedBox, ...] = ()
