"""Exceptions raised by the qimg codec."""

from __future__ import annotations


class QimgError(Exception):
    """Base exception for all qimg errors."""


class InvalidParameterError(QimgError, ValueError):
    """A caller-supplied parameter is out of range (e.g. box size <= 0)."""


class FieldOverflowError(QimgError, ValueError):
    """A value does not fit its field width in the container format."""


class FormatError(QimgError):
    """Byte stream is not a valid qimg container."""


class UnsupportedRasterFormatError(QimgError):
    """No raster decoder/encoder is available for a file extension."""


class CroppingWarning(UserWarning):
    """Image dimensions are not a multiple of the box size; edge pixels were dropped."""
