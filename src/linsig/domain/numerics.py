# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Numerical tolerance, error taxonomy, and matrix shape preconditions.

Every kernel operation validates its inputs here before touching the
numbers, so shape problems surface as ShapeMismatch at the call boundary
rather than as IndexError deep inside a loop.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

Matrix = List[List[float]]
Vector = List[float]

PIVOT_TOLERANCE = 1e-10


@dataclass(frozen=True)
class NumericConfig:
    """Numerical settings shared by pivoting operations.

    tolerance: pivots with magnitude below this are treated as zero
    """
    tolerance: float = PIVOT_TOLERANCE

    def __post_init__(self) -> None:
        if not math.isfinite(self.tolerance) or self.tolerance <= 0.0:
            raise ValueError(f"tolerance must be positive and finite, got {self.tolerance}")


class NumericError(ValueError):
    """Base class for kernel failures."""


class ShapeMismatch(NumericError):
    """Operand dimensions are incompatible with the operation."""


class SingularMatrix(NumericError):
    """Matrix cannot be inverted (pivot below tolerance)."""


class NoUniqueSolution(NumericError):
    """Linear system is singular (pivot below tolerance)."""


class ZeroPivot(NumericError):
    """LU decomposition without pivoting hit a near-zero pivot."""


class InvalidLength(NumericError):
    """FFT input length is not 1 or a power of two."""


def _length(value, what: str) -> int:
    try:
        return len(value)
    except TypeError:
        raise ShapeMismatch(
            f"{what} must be a sequence, got {type(value).__name__}"
        ) from None


def matrix_shape(a: Sequence[Sequence[float]], name: str = "matrix") -> tuple[int, int]:
    """Return (rows, cols) of a non-empty rectangular matrix."""
    rows = _length(a, name)
    if rows == 0:
        raise ShapeMismatch(f"{name} must have at least one row")
    cols = _length(a[0], f"{name} row 0")
    if cols == 0:
        raise ShapeMismatch(f"{name} must have at least one column")
    for i, row in enumerate(a):
        if _length(row, f"{name} row {i}") != cols:
            raise ShapeMismatch(
                f"{name} is ragged: row {i} has {len(row)} columns, expected {cols}"
            )
    return rows, cols


def as_array(a: Sequence[Sequence[float]], name: str = "matrix") -> np.ndarray:
    """Validated float64 copy of a matrix."""
    matrix_shape(a, name)
    return np.array(a, dtype=np.float64)


def require_square(a: Sequence[Sequence[float]], name: str = "matrix") -> int:
    """Return n for an n×n matrix, ShapeMismatch otherwise."""
    rows, cols = matrix_shape(a, name)
    if rows != cols:
        raise ShapeMismatch(f"{name} must be square, got {rows}x{cols}")
    return rows
