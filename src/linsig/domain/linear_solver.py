# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Linear system solver Ax = b by Gaussian elimination and back-substitution."""
from typing import Sequence

import numpy as np

from linsig.domain.elimination import back_substitute, forward_eliminate
from linsig.domain.numerics import (
    PIVOT_TOLERANCE,
    NoUniqueSolution,
    ShapeMismatch,
    Vector,
    as_array,
    require_square,
)


def solve_linear_system(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    tolerance: float = PIVOT_TOLERANCE,
) -> Vector:
    """Solve Ax = b for square A.

    Args:
        a: n×n coefficient matrix.
        b: Right-hand side of length n.
        tolerance: Pivot magnitude below which the system is singular.

    Returns:
        Solution vector x of length n.

    Raises:
        ShapeMismatch: a is not square or len(b) != n.
        NoUniqueSolution: a pivot falls below tolerance.
    """
    n = require_square(a, "a")
    if len(b) != n:
        raise ShapeMismatch(f"b must have length {n}, got {len(b)}")

    # Augmented matrix [A | b]
    aug = np.column_stack([as_array(a, "a"), np.asarray(b, dtype=np.float64)])
    forward_eliminate(aug, tolerance, NoUniqueSolution)
    return back_substitute(aug).tolist()
