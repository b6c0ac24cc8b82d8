"""qimg: boxed two-tone image compression.

  Pure Python codec for the .qimg container format.
  """

from .container import (
    MAGIC,
    VERSION,
    ContainerHeader,
    deserialize,
    read_header,
    serialize,
)
from .converter import (
    ConvertOptions,
    compress_file,
    convert,
    decompress_file,
    derive_output_path,
    detect_mode,
)
from .encoding import boxify, luminance, pack, pack_box, unpack
from .exceptions import (
    CroppingWarning,
    FieldOverflowError,
    FormatError,
    InvalidParameterError,
    QimgError,
    UnsupportedRasterFormatError,
)
from .models.enums import ConvertMode, RasterFormat, get_raster_format
from .models.image import (
    Box,
    BoxedImage,
    Color,
    PackedBox,
    PackedImage,
    Pixel,
    RasterImage,
    Size,
)
from .raster import decode_raster, encode_raster

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "boxify",
    "pack",
    "pack_box",
    "unpack",
    "serialize",
    "deserialize",
    "read_header",
    "luminance",
    # Files
    "ConvertOptions",
    "compress_file",
    "decompress_file",
    "convert",
    "derive_output_path",
    "detect_mode",
    "decode_raster",
    "encode_raster",
    # Exceptions
    "QimgError",
    "InvalidParameterError",
    "FieldOverflowError",
    "FormatError",
    "UnsupportedRasterFormatError",
    "CroppingWarning",
    # Models
    "RasterImage",
    "Color",
    "Size",
    "Pixel",
    "Box",
    "BoxedImage",
    "PackedBox",
    "PackedImage",
    "ContainerHeader",
    # Enums
    "ConvertMode",
    "RasterFormat",
    "get_raster_format",
    # Constants
    "MAGIC",
    "VERSION",
]
