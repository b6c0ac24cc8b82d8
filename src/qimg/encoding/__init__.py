"""Image boxing and two-tone quantization."""

from .boxify import boxify
from .luminance import luminance, luminance_array
from .packing import pack, pack_box, unpack

__all__ = [
    "boxify",
    "luminance",
    "luminance_array",
    "pack",
    "pack_box",
    "unpack",
]
