"""Serialize packed images to the .qimg container format."""

from __future__ import annotations

import logging

from ..exceptions import InvalidParameterError
from ..models.image import PackedImage
from .header import HEADER_SIZE, ContainerHeader, check_field

_LOGGER = logging.getLogger(__name__)


def serialize(packed: PackedImage) -> bytes:
    """Encode a packed image into container bytes.

    The output buffer is allocated once at its final size
    (16 + box_count * (8 + box_size²)).

    Args:
        packed: Packed image

    Returns:
        Complete .qimg byte stream

    Raises:
        FieldOverflowError: If box size, grid size, box coordinates or box
            count do not fit their fields
        InvalidParameterError: If a box does not have exactly box_size² indices
    """
    header = ContainerHeader(
        box_size=packed.box_size,
        size=packed.size,
        box_count=len(packed.boxes),
    )
    header_bytes = header.to_bytes()

    area = packed.box_size * packed.box_size
    step = header.record_size

    output = bytearray(header.expected_length)
    output[:HEADER_SIZE] = header_bytes

    offset = HEADER_SIZE
    for box in packed.boxes:
        check_field("box x", box.x)
        check_field("box y", box.y)
        if len(box.indices) != area:
            raise InvalidParameterError(
                f"Box ({box.x}, {box.y}) has {len(box.indices)} indices, "
                f"expected {area} for box size {packed.box_size}"
            )

        output[offset] = box.x
        output[offset + 1] = box.y
        output[offset + 2:offset + 5] = box.light.to_bytes()
        output[offset + 5:offset + 8] = box.dark.to_bytes()
        output[offset + 8:offset + step] = box.indices
        offset += step

    _LOGGER.debug(
        "Serialized %d boxes (%dx%d grid, box size %d) into %d bytes",
        header.box_count,
        packed.size.width,
        packed.size.height,
        packed.box_size,
        len(output),
    )

    return bytes(output)
