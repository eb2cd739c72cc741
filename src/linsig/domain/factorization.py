# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Determinants and LU factorization.

mat_determinant uses cofactor expansion along the first row. It is O(n!)
and intended for small matrices; mat_determinant_pivoted gives the same
value in O(n^3) through elimination with partial pivoting.

lu_decompose is the Doolittle scheme without pivoting, so it is defined
only for matrices whose leading principal minors are nonsingular.
"""
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from linsig.domain.linalg import mat_minor
from linsig.domain.numerics import (
    PIVOT_TOLERANCE,
    ZeroPivot,
    as_array,
    require_square,
)


@dataclass(frozen=True)
class LUDecomposition:
    """Unit lower-triangular L and upper-triangular U with L·U = A."""
    lower: list
    upper: list


def mat_determinant(a: Sequence[Sequence[float]]) -> float:
    """Determinant of an NxN matrix via cofactor expansion."""
    n = require_square(a)
    if n == 1:
        return float(a[0][0])
    if n == 2:
        return float(a[0][0] * a[1][1] - a[0][1] * a[1][0])

    det = 0.0
    for col in range(n):
        sign = 1.0 if col % 2 == 0 else -1.0
        det += sign * a[0][col] * mat_determinant(mat_minor(a, 0, col))
    return det


def mat_determinant_pivoted(
    a: Sequence[Sequence[float]],
    tolerance: float = PIVOT_TOLERANCE,
) -> float:
    """Determinant of an NxN matrix via elimination with partial pivoting."""
    n = require_square(a)
    lu = as_array(a)
    det = 1.0

    for col in range(n):
        max_row = col + int(np.argmax(np.abs(lu[col:, col])))
        if max_row != col:
            lu[[col, max_row]] = lu[[max_row, col]]
            det = -det

        pivot = lu[col, col]
        if abs(pivot) < tolerance:
            return 0.0
        det *= pivot

        factors = lu[col + 1:, col] / pivot
        lu[col + 1:, col + 1:] -= np.outer(factors, lu[col, col + 1:])

    return float(det)


def lu_decompose(
    a: Sequence[Sequence[float]],
    tolerance: float = PIVOT_TOLERANCE,
) -> LUDecomposition:
    """Doolittle LU decomposition.

    U[i][j] = A[i][j] - sum_{k<i} L[i][k] U[k][j]             (i <= j)
    L[i][j] = (A[i][j] - sum_{k<j} L[i][k] U[k][j]) / U[j][j]  (i > j)

    Raises ZeroPivot when a diagonal entry of U that still has rows below
    it falls under tolerance.
    """
    n = require_square(a)
    arr = as_array(a)
    lower = np.eye(n)
    upper = np.zeros((n, n))

    for j in range(n):
        for i in range(j + 1):
            upper[i, j] = arr[i, j] - lower[i, :i] @ upper[:i, j]

        for i in range(j + 1, n):
            if abs(upper[j, j]) < tolerance:
                raise ZeroPivot(
                    f"pivot U[{j}][{j}] = {upper[j, j]:.3e} is below tolerance {tolerance:.1e}"
                )
            lower[i, j] = (arr[i, j] - lower[i, :j] @ upper[:j, j]) / upper[j, j]

    return LUDecomposition(lower=lower.tolist(), upper=upper.tolist())
