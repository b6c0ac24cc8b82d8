"""File-level conversion between raster images and .qimg containers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .container import deserialize, serialize
from .encoding import boxify, pack, unpack
from .exceptions import InvalidParameterError
from .models.enums import ConvertMode, RasterFormat, get_raster_format
from .models.image import PackedImage
from .raster import DEFAULT_JPEG_QUALITY, decode_raster, encode_raster

_LOGGER = logging.getLogger(__name__)

QIMG_EXTENSION = ".qimg"
DEFAULT_DECOMPRESS_EXTENSION = ".jpeg"


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    """Settings for a file conversion.

    Attributes:
        box_size: Box edge length in pixels (required to compress)
        workers: Thread count for per-box work (None = sequential)
        strict: Reject truncated or over-length .qimg input
        quality: JPEG quality for raster output
    """

    box_size: int | None = None
    workers: int | None = None
    strict: bool = False
    quality: int = DEFAULT_JPEG_QUALITY


def derive_output_path(input_path: str | Path, extension: str) -> Path:
    """Replace the input's extension, keeping its directory and stem."""
    return Path(input_path).with_suffix(extension)


def detect_mode(input_path: str | Path) -> ConvertMode:
    """A .qimg input is decompressed, anything else is compressed."""
    if Path(input_path).suffix.lower() == QIMG_EXTENSION:
        return ConvertMode.DECOMPRESS
    return ConvertMode.COMPRESS


def _write_output(path: Path, payload: bytes) -> Path:
    path.write_bytes(payload)
    _LOGGER.info("wrote file to %s", path)
    return path


def _encode_packed(packed: PackedImage, fmt: RasterFormat, options: ConvertOptions) -> bytes:
    return encode_raster(unpack(packed, workers=options.workers), fmt, quality=options.quality)


def compress_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    options: ConvertOptions = ConvertOptions(),
) -> Path:
    """Compress a raster image file.

    Writes a .qimg container, or, when the output has a raster extension, a
    preview of the quantized image in that format. Nothing is written if any
    step fails.

    Args:
        input_path: JPEG or PNG file
        output_path: Destination (default: input with .qimg extension)
        options: Conversion settings; box_size is required

    Returns:
        Path of the written file

    Raises:
        InvalidParameterError: If no box size is given
        UnsupportedRasterFormatError: If input or output extension is unsupported
        OSError: If reading or writing fails
    """
    if options.box_size is None:
        raise InvalidParameterError("No box size parameter provided")

    input_path = Path(input_path)
    output = (
        Path(output_path)
        if output_path is not None
        else derive_output_path(input_path, QIMG_EXTENSION)
    )

    input_format = get_raster_format(input_path.suffix)
    output_format = (
        None if output.suffix.lower() == QIMG_EXTENSION else get_raster_format(output.suffix)
    )

    image = decode_raster(input_path.read_bytes(), input_format)
    packed = pack(boxify(image, options.box_size), workers=options.workers)

    if output_format is None:
        payload = serialize(packed)
    else:
        payload = _encode_packed(packed, output_format, options)

    return _write_output(output, payload)


def decompress_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    options: ConvertOptions = ConvertOptions(),
) -> Path:
    """Decompress a .qimg file into a raster image file.

    The output format is resolved before the input is read.

    Args:
        input_path: .qimg file
        output_path: Destination (default: input with .jpeg extension)
        options: Conversion settings

    Returns:
        Path of the written file

    Raises:
        UnsupportedRasterFormatError: If the output extension is unsupported
        FormatError: If the input is not a valid container
        OSError: If reading or writing fails
    """
    input_path = Path(input_path)
    output = (
        Path(output_path)
        if output_path is not None
        else derive_output_path(input_path, DEFAULT_DECOMPRESS_EXTENSION)
    )
    output_format = get_raster_format(output.suffix)

    packed = deserialize(input_path.read_bytes(), strict=options.strict)
    return _write_output(output, _encode_packed(packed, output_format, options))


def convert(
    input_path: str | Path,
    output_path: str | Path | None = None,
    options: ConvertOptions = ConvertOptions(),
) -> Path:
    """Compress or decompress depending on the input extension."""
    if detect_mode(input_path) is ConvertMode.DECOMPRESS:
        return decompress_file(input_path, output_path, options)
    return compress_file(input_path, output_path, options)
