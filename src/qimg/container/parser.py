"""Parse .qimg container bytes into packed images."""

from __future__ import annotations

import logging

from ..exceptions import FormatError
from ..models.image import Color, PackedBox, PackedImage
from .header import HEADER_SIZE, ContainerHeader, read_header

_LOGGER = logging.getLogger(__name__)


def _parse_record(record: bytes) -> PackedBox:
    """Parse one full-length box record."""
    return PackedBox(
        x=record[0],
        y=record[1],
        light=Color.from_bytes(record[2:5]),
        dark=Color.from_bytes(record[5:8]),
        indices=bytes(record[8:]),
    )


def _check_length(header: ContainerHeader, length: int, strict: bool) -> None:
    """Report a mismatch between the declared and actual stream length."""
    expected = header.expected_length
    if length == expected:
        return

    if length < expected:
        message = (
            f"Stream truncated: header declares {header.box_count} boxes "
            f"({expected} bytes), got {length} bytes"
        )
    else:
        message = (
            f"Ignoring {length - expected} trailing bytes after "
            f"{header.box_count} boxes"
        )

    if strict:
        raise FormatError(message)
    _LOGGER.warning(message)


def deserialize(data: bytes, strict: bool = False) -> PackedImage:
    """Decode container bytes into a packed image.

    The version field is logged but not enforced. Exactly box_count records
    of 8 + box_size² bytes are read after the 16-byte header.

    The declared box count is not checked against the stream length unless
    ``strict`` is set. Otherwise a record cut short by the end of the stream
    is zero-padded to full length (missing coordinates, colors and indices
    read as 0), records starting past the end are omitted, and trailing bytes
    are ignored. Both cases are logged as warnings.

    Args:
        data: Complete .qimg byte stream
        strict: Raise FormatError on truncated or over-length streams

    Returns:
        PackedImage

    Raises:
        FormatError: If the magic bytes do not match, the header is
            truncated, or (strict only) the length does not match the header
    """
    data = bytes(data)
    header = read_header(data)

    _LOGGER.info("file version: %d.%d", *header.version)

    _check_length(header, len(data), strict)

    step = header.record_size
    boxes = []

    for i in range(header.box_count):
        start = HEADER_SIZE + i * step
        if start >= len(data):
            break

        record = data[start:start + step]
        if len(record) < step:
            record = record.ljust(step, b"\x00")
        boxes.append(_parse_record(record))

    if len(boxes) < header.box_count:
        _LOGGER.warning(
            "Omitted %d of %d boxes missing from stream",
            header.box_count - len(boxes),
            header.box_count,
        )

    return PackedImage(size=header.size, box_size=header.box_size, boxes=tuple(boxes))
