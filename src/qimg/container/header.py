"""Container header layout for .qimg files.

Layout (all integers unsigned, big-endian):
    [magic:8][version:2][box_size:1][width:1][height:1][box_count:3][records...]

Each record:
    [x:1][y:1][light_rgb:3][dark_rgb:3][indices:box_size²]
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Final

from ..exceptions import FieldOverflowError, FormatError
from ..models.image import Size

MAGIC: Final[bytes] = bytes([99, 115, 113, 47, 113, 105, 109, 103])  # b"csq/qimg"
VERSION: Final[tuple[int, int]] = (0, 1)

HEADER_SIZE: Final[int] = 16
RECORD_HEADER_SIZE: Final[int] = 8  # x, y, light rgb, dark rgb

MAX_BYTE_FIELD: Final[int] = 0xFF
MAX_BOX_COUNT: Final[int] = 0xFFFFFF  # 24-bit field

_HEADER_STRUCT = struct.Struct(">8sBBBBB")


def check_field(name: str, value: int, maximum: int = MAX_BYTE_FIELD) -> None:
    """Raise FieldOverflowError if value does not fit in [0, maximum]."""
    if not 0 <= value <= maximum:
        raise FieldOverflowError(
            f"{name} is too large to be serialized: {value} (must be 0-{maximum})"
        )


def record_size(box_size: int) -> int:
    """Bytes per box record: 8 header bytes plus one index byte per pixel."""
    return RECORD_HEADER_SIZE + box_size * box_size


@dataclass(frozen=True, slots=True)
class ContainerHeader:
    """Parsed 16-byte container header."""

    box_size: int
    size: Size
    box_count: int
    version: tuple[int, int] = VERSION

    @property
    def record_size(self) -> int:
        """Bytes per box record."""
        return record_size(self.box_size)

    @property
    def expected_length(self) -> int:
        """Total stream length implied by the header."""
        return HEADER_SIZE + self.box_count * self.record_size

    def to_bytes(self) -> bytes:
        """Serialize to 16 bytes.

        Raises:
            FieldOverflowError: If any field exceeds its byte width
        """
        check_field("box size", self.box_size)
        check_field("width", self.size.width)
        check_field("height", self.size.height)
        check_field("box count", self.box_count, MAX_BOX_COUNT)
        major, minor = self.version
        check_field("version major", major)
        check_field("version minor", minor)

        return _HEADER_STRUCT.pack(
            MAGIC,
            major,
            minor,
            self.box_size,
            self.size.width,
            self.size.height,
        ) + self.box_count.to_bytes(3, byteorder="big")

    @classmethod
    def from_bytes(cls, data: bytes) -> ContainerHeader:
        """Parse and validate the header at the start of a stream.

        Raises:
            FormatError: If the magic bytes do not match or the header is truncated
        """
        if bytes(data[:len(MAGIC)]) != MAGIC:
            raise FormatError("Incorrect file type, expecting .qimg file (magic mismatch)")

        if len(data) < HEADER_SIZE:
            raise FormatError(
                f"Header too short: {len(data)} bytes (need {HEADER_SIZE})"
            )

        _, major, minor, box_size, width, height = _HEADER_STRUCT.unpack_from(data)
        box_count = int.from_bytes(data[13:16], byteorder="big")

        return cls(
            box_size=box_size,
            size=Size(width, height),
            box_count=box_count,
            version=(major, minor),
        )


def read_header(data: bytes) -> ContainerHeader:
    """Parse only the header of a .qimg byte stream."""
    return ContainerHeader.from_bytes(data)
