"""Perceptual luminance estimate used to split boxes into light and dark."""

from __future__ import annotations

import math

import numpy as np

# Channel-squared weights, green dominant
RED_WEIGHT = 0.241
GREEN_WEIGHT = 0.691
BLUE_WEIGHT = 0.068


def luminance(r: int, g: int, b: int) -> float:
    """Return the luminance of one RGB color, normalised to [0, 1]."""
    return math.sqrt(RED_WEIGHT * r * r + GREEN_WEIGHT * g * g + BLUE_WEIGHT * b * b) / 255


def luminance_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorised luminance for an (..., 3) array of RGB values.

    Evaluates the same expression as :func:`luminance` in float64, so both
    agree exactly for identical inputs.
    """
    values = np.asarray(rgb, dtype=np.float64)
    r = values[..., 0]
    g = values[..., 1]
    b = values[..., 2]
    return np.sqrt(RED_WEIGHT * r * r + GREEN_WEIGHT * g * g + BLUE_WEIGHT * b * b) / 255
