"""
linsig

Numerical linear algebra and signal processing over plain Python lists:
matrix multiply/add/scale/transpose, Gauss-Jordan inversion, cofactor and
pivoted determinants, Doolittle LU decomposition, linear system solving
with partial pivoting, recursive radix-2 FFT, 1-D and 2-D convolution,
Gaussian kernels and blur, nearest-neighbour image rotation, histogram
equalization, and rolling means.
"""

from linsig.domain.numerics import (
    PIVOT_TOLERANCE,
    NumericConfig,
    NumericError,
    ShapeMismatch,
    SingularMatrix,
    NoUniqueSolution,
    ZeroPivot,
    InvalidLength,
    matrix_shape,
)
from linsig.domain.vectors import (
    vec_dot,
    vec_magnitude,
    vec_normalize,
)
from linsig.domain.linalg import (
    mat_zeros,
    mat_identity,
    mat_multiply,
    mat_add,
    mat_scale,
    mat_transpose,
    mat_trace,
    mat_minor,
)
from linsig.domain.elimination import mat_inverse
from linsig.domain.factorization import (
    LUDecomposition,
    mat_determinant,
    mat_determinant_pivoted,
    lu_decompose,
)
from linsig.domain.linear_solver import solve_linear_system
from linsig.domain.spectral import (
    FFTResult,
    is_power_of_two,
    fft,
    ifft,
    inverse_fft,
)
from linsig.domain.convolution import (
    convolve_1d,
    convolve_2d,
    gaussian_kernel,
    gaussian_blur,
)
from linsig.domain.image_processing import (
    rotate_image,
    equalize_histogram,
)
from linsig.domain.time_series import rolling_mean

__all__ = [
    "PIVOT_TOLERANCE",
    "NumericConfig",
    "NumericError",
    "ShapeMismatch",
    "SingularMatrix",
    "NoUniqueSolution",
    "ZeroPivot",
    "InvalidLength",
    "matrix_shape",
    "vec_dot",
    "vec_magnitude",
    "vec_normalize",
    "mat_zeros",
    "mat_identity",
    "mat_multiply",
    "mat_add",
    "mat_scale",
    "mat_transpose",
    "mat_trace",
    "mat_minor",
    "mat_inverse",
    "LUDecomposition",
    "mat_determinant",
    "mat_determinant_pivoted",
    "lu_decompose",
    "solve_linear_system",
    "FFTResult",
    "is_power_of_two",
    "fft",
    "ifft",
    "inverse_fft",
    "convolve_1d",
    "convolve_2d",
    "gaussian_kernel",
    "gaussian_blur",
    "rotate_image",
    "equalize_histogram",
    "rolling_mean",
]
