# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""1-D and 2-D convolution, Gaussian kernels, and Gaussian blur.

convolve_1d is the "full" convolution (output length len(s) + len(k) - 1).
convolve_2d is "same"-size with zero padding; the kernel is applied
without flipping, which is identical to convolution for the symmetric
Gaussian kernels this module builds.
"""
import logging
import math
from typing import Sequence

import numpy as np

from linsig.domain.numerics import Matrix, ShapeMismatch, Vector, as_array, matrix_shape

logger = logging.getLogger(__name__)


def convolve_1d(signal: Sequence[float], kernel: Sequence[float]) -> Vector:
    """Full 1-D convolution with implicit zero padding.

    result[i] = sum_j kernel[j] * signal[i - j]

    An empty operand contributes nothing, so the result is all zeros of
    length len(signal) + len(kernel) - 1; two empty operands give [].
    """
    if len(signal) == 0 or len(kernel) == 0:
        return [0.0] * max(len(signal) + len(kernel) - 1, 0)
    return np.convolve(
        np.asarray(signal, dtype=np.float64),
        np.asarray(kernel, dtype=np.float64),
        mode="full",
    ).tolist()


def gaussian_kernel(size: int, sigma: float) -> Matrix:
    """Square Gaussian kernel normalized to sum 1.

    Entry (i, j) is exp(-(dx^2 + dy^2) / (2 sigma^2)) with dx, dy measured
    from the center cell size // 2.
    """
    if size < 1:
        raise ValueError(f"kernel size must be >= 1, got {size}")
    if not math.isfinite(sigma) or sigma <= 0.0:
        raise ValueError(f"sigma must be positive, got {sigma}")
    if size % 2 == 0:
        logger.warning("Gaussian kernel size %d is even; the kernel will be off-center", size)

    offsets = np.arange(size) - size // 2
    dx, dy = np.meshgrid(offsets, offsets, indexing="ij")
    kernel = np.exp(-(dx ** 2 + dy ** 2) / (2.0 * sigma * sigma))
    return (kernel / kernel.sum()).tolist()


def convolve_2d(image: Sequence[Sequence[float]], kernel: Sequence[Sequence[float]]) -> Matrix:
    """Same-size 2-D convolution with zero padding at the borders.

    out[i][j] = sum_{ki,kj} image[i + ki - pad][j + kj - pad] * kernel[ki][kj]
    with pad = k // 2 for a k×k kernel.
    """
    rows, cols = matrix_shape(image, "image")
    k_rows, k_cols = matrix_shape(kernel, "kernel")
    if k_rows != k_cols:
        raise ShapeMismatch(f"kernel must be square, got {k_rows}x{k_cols}")
    if k_rows % 2 == 0:
        logger.warning("convolution kernel side %d is even; output is shifted by half a pixel", k_rows)

    img = as_array(image, "image")
    ker = as_array(kernel, "kernel")
    pad = k_rows // 2
    padded = np.pad(img, pad, mode="constant", constant_values=0.0)

    result = np.zeros((rows, cols))
    for ki in range(k_rows):
        for kj in range(k_cols):
            result += ker[ki, kj] * padded[ki:ki + rows, kj:kj + cols]
    return result.tolist()


def gaussian_blur(
    image: Sequence[Sequence[float]],
    kernel_size: int = 5,
    sigma: float = 1.0,
) -> Matrix:
    """Blur an image with a normalized Gaussian kernel."""
    return convolve_2d(image, gaussian_kernel(kernel_size, sigma))
