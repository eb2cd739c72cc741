# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Gaussian elimination with partial pivoting.

The pivot step is shared by Gauss-Jordan inversion and by the forward
elimination that feeds back-substitution in the linear solver. Each
caller passes the exception class to raise when a pivot falls below
tolerance, so inversion reports SingularMatrix and solving reports
NoUniqueSolution from the same code path.
"""
from typing import Sequence, Type

import numpy as np

from linsig.domain.numerics import (
    PIVOT_TOLERANCE,
    Matrix,
    NumericError,
    SingularMatrix,
    as_array,
    require_square,
)


def pivot_column(
    aug: np.ndarray,
    col: int,
    tolerance: float,
    error: Type[NumericError],
) -> float:
    """Swap the largest-magnitude candidate into row col and return it.

    Candidates are rows col..n-1 of column col. Raises error when the
    chosen pivot is below tolerance.
    """
    max_row = col + int(np.argmax(np.abs(aug[col:, col])))
    if max_row != col:
        aug[[col, max_row]] = aug[[max_row, col]]
    pivot = float(aug[col, col])
    if abs(pivot) < tolerance:
        raise error(
            f"pivot {pivot:.3e} in column {col} is below tolerance {tolerance:.1e}"
        )
    return pivot


def forward_eliminate(
    aug: np.ndarray,
    tolerance: float,
    error: Type[NumericError],
) -> None:
    """Reduce the leading n×n block of aug to upper-triangular form in place."""
    n = aug.shape[0]
    for col in range(n):
        pivot = pivot_column(aug, col, tolerance, error)
        factors = aug[col + 1:, col] / pivot
        aug[col + 1:, col:] -= np.outer(factors, aug[col, col:])


def back_substitute(aug: np.ndarray) -> np.ndarray:
    """Solve an upper-triangular augmented system [U | c] from the last row up."""
    n = aug.shape[0]
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (aug[i, n] - aug[i, i + 1:n] @ x[i + 1:]) / aug[i, i]
    return x


def mat_inverse(a: Sequence[Sequence[float]], tolerance: float = PIVOT_TOLERANCE) -> Matrix:
    """Inverse of an NxN matrix via Gauss-Jordan elimination.

    Raises SingularMatrix if any pivot magnitude is below tolerance.
    """
    n = require_square(a)
    # Augmented matrix [A | I]
    aug = np.hstack([as_array(a), np.eye(n)])

    for col in range(n):
        pivot = pivot_column(aug, col, tolerance, SingularMatrix)
        aug[col] /= pivot

        # Eliminate above and below the pivot in one step
        factors = aug[:, col].copy()
        factors[col] = 0.0
        aug -= np.outer(factors, aug[col])

    return aug[:, n:].tolist()
