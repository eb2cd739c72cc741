# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Vector primitives: dot product, Euclidean magnitude, normalization."""
import math
from typing import Sequence

import numpy as np

from linsig.domain.numerics import ShapeMismatch, Vector


def vec_dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two equal-length vectors."""
    if len(a) != len(b):
        raise ShapeMismatch(f"vectors must have the same length, got {len(a)} and {len(b)}")
    return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))


def vec_magnitude(v: Sequence[float]) -> float:
    """Euclidean norm sqrt(sum(v_i^2))."""
    arr = np.asarray(v, dtype=np.float64)
    return math.sqrt(float(np.dot(arr, arr)))


def vec_normalize(v: Sequence[float]) -> Vector:
    """Unit vector in the direction of v.

    The zero vector has no direction; it comes back as zeros of the same
    length instead of dividing by zero.
    """
    mag = vec_magnitude(v)
    if mag == 0.0:
        return [0.0] * len(v)
    return (np.asarray(v, dtype=np.float64) / mag).tolist()
