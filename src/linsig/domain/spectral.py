# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Recursive radix-2 Cooley-Tukey FFT and its inverses.

Only lengths 1, 2, 4, 8, ... are supported.

X[k]       = E[k] + W^k · O[k]
X[k + n/2] = E[k] - W^k · O[k],   W = exp(-2*pi*i/n)

where E and O are the transforms of the even- and odd-indexed samples.
"""
import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from linsig.domain.numerics import InvalidLength, ShapeMismatch, Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FFTResult:
    """Complex spectrum as separate real and imaginary channels, bin 0..n-1."""
    real: tuple
    imag: tuple

    def __len__(self) -> int:
        return len(self.real)


def is_power_of_two(n: int) -> bool:
    """True for 1, 2, 4, 8, ..."""
    return n >= 1 and n & (n - 1) == 0


def _cooley_tukey(x: np.ndarray) -> np.ndarray:
    n = len(x)
    if n == 1:
        return x.astype(np.complex128)

    even = _cooley_tukey(x[0::2])
    odd = _cooley_tukey(x[1::2])

    twiddle = np.exp(-2j * np.pi * np.arange(n // 2) / n) * odd
    return np.concatenate([even + twiddle, even - twiddle])


def _check_length(n: int) -> None:
    if not is_power_of_two(n):
        raise InvalidLength(f"FFT length must be 1 or a power of two, got {n}")


def _spectrum_array(spectrum: FFTResult) -> np.ndarray:
    if len(spectrum.real) != len(spectrum.imag):
        raise ShapeMismatch(
            f"spectrum channels differ in length: {len(spectrum.real)} real, "
            f"{len(spectrum.imag)} imaginary"
        )
    return np.asarray(spectrum.real, dtype=np.float64) + 1j * np.asarray(
        spectrum.imag, dtype=np.float64
    )


def _to_result(values: np.ndarray) -> FFTResult:
    return FFTResult(
        real=tuple(float(v) for v in values.real),
        imag=tuple(float(v) for v in values.imag),
    )


def fft(signal: Sequence[float]) -> FFTResult:
    """Forward FFT of a real signal whose length is 1 or a power of two."""
    _check_length(len(signal))
    return _to_result(_cooley_tukey(np.asarray(signal, dtype=np.float64)))


def ifft(spectrum: FFTResult) -> Vector:
    """Real-channel inverse: forward FFT of spectrum.real scaled by 1/n.

    This is the historical behaviour of the kernel and only recovers
    the signal when the imaginary channel carries no information. Use
    inverse_fft for a true complex inverse.
    """
    n = len(spectrum.real)
    _check_length(n)
    if any(v != 0.0 for v in spectrum.imag):
        logger.debug("ifft ignores the non-zero imaginary channel of a %d-bin spectrum", n)
    transformed = _cooley_tukey(np.asarray(spectrum.real, dtype=np.float64))
    return (transformed.real / n).tolist()


def inverse_fft(spectrum: FFTResult) -> FFTResult:
    """Complex inverse FFT, x = conj(FFT(conj(X))) / n."""
    values = _spectrum_array(spectrum)
    n = len(values)
    _check_length(n)
    return _to_result(np.conj(_cooley_tukey(np.conj(values))) / n)
