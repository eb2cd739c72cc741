# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Grayscale image transforms: nearest-neighbour rotation, histogram equalization."""
import math
from typing import Sequence

import numpy as np

from linsig.domain.numerics import Matrix, as_array

_LEVELS = 256


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5).astype(np.int64)


def rotate_image(image: Sequence[Sequence[float]], angle_deg: float) -> Matrix:
    """Rotate an image about its center by inverse mapping.

    Each destination pixel (x, y) samples the source at (x, y) rotated by
    -angle about (cols/2, rows/2), rounded to the nearest pixel. Pixels that
    map outside the source are 0.
    """
    img = as_array(image, "image")
    rows, cols = img.shape
    angle_rad = math.radians(angle_deg)
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    center_x = cols / 2.0
    center_y = rows / 2.0

    y, x = np.mgrid[0:rows, 0:cols]
    dx = x - center_x
    dy = y - center_y
    src_x = _round_half_up(cos_a * dx + sin_a * dy + center_x)
    src_y = _round_half_up(-sin_a * dx + cos_a * dy + center_y)

    inside = (src_x >= 0) & (src_x < cols) & (src_y >= 0) & (src_y < rows)
    result = np.zeros((rows, cols))
    result[inside] = img[src_y[inside], src_x[inside]]
    return result.tolist()


def equalize_histogram(image: Sequence[Sequence[float]]) -> Matrix:
    """Histogram equalization of an 8-bit grayscale image.

    Pixel values are rounded and clamped into [0, 255] first. Each level v
    maps to round((cdf[v] - cdf_min) * 255 / (total - cdf_min)) where
    cdf_min is the first non-zero CDF value. A single-level image has
    total == cdf_min and is returned with its clamped levels unchanged.
    """
    levels = np.clip(_round_half_up(as_array(image, "image")), 0, _LEVELS - 1)
    total = levels.size

    histogram = np.bincount(levels.ravel(), minlength=_LEVELS)
    cdf = np.cumsum(histogram)
    cdf_min = int(cdf[np.flatnonzero(cdf)[0]])

    if total == cdf_min:
        return levels.astype(np.float64).tolist()

    lookup = _round_half_up((cdf - cdf_min) * (_LEVELS - 1) / (total - cdf_min))
    return lookup[levels].astype(np.float64).tolist()
