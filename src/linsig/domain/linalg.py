# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Dense matrix operations backed by NumPy.

Construction, multiply, add, scale, transpose, trace and minor extraction
over row-major list-of-lists matrices. Results are new lists; inputs are
never modified.
"""
from typing import Sequence

import numpy as np

from linsig.domain.numerics import (
    Matrix,
    ShapeMismatch,
    as_array,
    matrix_shape,
    require_square,
)


def mat_zeros(n: int, m: int) -> Matrix:
    """Create an NxM zero matrix."""
    return [[0.0] * m for _ in range(n)]


def mat_identity(n: int) -> Matrix:
    """Create an NxN identity matrix."""
    result = mat_zeros(n, n)
    for i in range(n):
        result[i][i] = 1.0
    return result


def mat_multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Multiply matrices a (NxM) and b (MxK) → NxK."""
    n, m = matrix_shape(a, "a")
    rows_b, _ = matrix_shape(b, "b")
    if m != rows_b:
        raise ShapeMismatch(
            f"cannot multiply {n}x{m} by {rows_b}x{len(b[0])}: inner dimensions differ"
        )
    result = as_array(a, "a") @ as_array(b, "b")
    return result.tolist()


def mat_transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Transpose matrix a."""
    return as_array(a).T.tolist()


def mat_add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Element-wise addition of matrices a and b."""
    shape_a = matrix_shape(a, "a")
    shape_b = matrix_shape(b, "b")
    if shape_a != shape_b:
        raise ShapeMismatch(
            f"cannot add {shape_a[0]}x{shape_a[1]} and {shape_b[0]}x{shape_b[1]}"
        )
    return (as_array(a, "a") + as_array(b, "b")).tolist()


def mat_scale(a: Sequence[Sequence[float]], scalar: float) -> Matrix:
    """Scale all elements of matrix a by scalar."""
    return (as_array(a) * scalar).tolist()


def mat_trace(a: Sequence[Sequence[float]]) -> float:
    """Trace of a square matrix (sum of diagonal elements)."""
    require_square(a)
    return float(np.trace(as_array(a)))


def mat_minor(a: Sequence[Sequence[float]], row: int, col: int) -> Matrix:
    """Copy of a with one row and one column removed."""
    rows, cols = matrix_shape(a)
    if not (0 <= row < rows and 0 <= col < cols):
        raise ShapeMismatch(f"minor ({row}, {col}) is outside a {rows}x{cols} matrix")
    return [
        [float(v) for j, v in enumerate(r) if j != col]
        for i, r in enumerate(a)
        if i != row
    ]
