"""The .qimg binary container format."""

from .header import (
    HEADER_SIZE,
    MAGIC,
    MAX_BOX_COUNT,
    MAX_BYTE_FIELD,
    VERSION,
    ContainerHeader,
    read_header,
    record_size,
)
from .parser import deserialize
from .serializer import serialize

__all__ = [
    "ContainerHeader",
    "HEADER_SIZE",
    "MAGIC",
    "MAX_BOX_COUNT",
    "MAX_BYTE_FIELD",
    "VERSION",
    "deserialize",
    "read_header",
    "record_size",
    "serialize",
]
