# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/numerics.py: tolerance config, errors, shape checks."""
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from linsig.domain.numerics import (
    PIVOT_TOLERANCE,
    InvalidLength,
    NoUniqueSolution,
    NumericConfig,
    NumericError,
    ShapeMismatch,
    SingularMatrix,
    ZeroPivot,
    as_array,
    matrix_shape,
    require_square,
)


class TestNumericConfig:
    def test_default_tolerance(self):
        assert PIVOT_TOLERANCE == 1e-10
        assert NumericConfig().tolerance == PIVOT_TOLERANCE

    def test_frozen(self):
        config = NumericConfig()
        with pytest.raises(FrozenInstanceError):
            config.tolerance = 1.0

    @pytest.mark.parametrize("tolerance", [0.0, -1e-9, float("inf"), float("nan")])
    def test_rejects_bad_tolerance(self, tolerance):
        with pytest.raises(ValueError):
            NumericConfig(tolerance=tolerance)


class TestErrorTaxonomy:
    @pytest.mark.parametrize("error", [
        ShapeMismatch, SingularMatrix, NoUniqueSolution, ZeroPivot, InvalidLength,
    ])
    def test_all_are_value_errors(self, error):
        assert issubclass(error, NumericError)
        assert issubclass(error, ValueError)


class TestShapeChecks:
    def test_matrix_shape(self):
        assert matrix_shape([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]) == (2, 3)

    def test_ragged_names_row(self):
        with pytest.raises(ShapeMismatch, match="row 2"):
            matrix_shape([[1.0, 2.0], [3.0, 4.0], [5.0]], "image")

    def test_zero_columns(self):
        with pytest.raises(ShapeMismatch):
            matrix_shape([[]])

    @pytest.mark.parametrize("value", [[1.0, 2.0], [[1.0, 2.0], 3.0], 5.0])
    def test_scalar_rows_rejected(self, value):
        with pytest.raises(ShapeMismatch, match="must be a sequence"):
            matrix_shape(value, "a")

    def test_require_square(self):
        assert require_square([[1.0]]) == 1
        with pytest.raises(ShapeMismatch, match="square"):
            require_square([[1.0, 2.0]])

    def test_as_array_copies(self):
        source = [[1, 2], [3, 4]]
        arr = as_array(source)
        assert arr.dtype == np.float64
        arr[0, 0] = 99.0
        assert source[0][0] == 1
