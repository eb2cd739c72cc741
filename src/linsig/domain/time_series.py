# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Moving-window statistics over 1-D series."""
import math
from typing import Sequence

import numpy as np

from linsig.domain.numerics import Vector


def rolling_mean(series: Sequence[float], window: int) -> Vector:
    """Trailing mean over `window` samples.

    The first window - 1 positions have no complete window and are NaN.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")
    n = len(series)
    result = [math.nan] * n
    if n < window:
        return result

    windows = np.lib.stride_tricks.sliding_window_view(
        np.asarray(series, dtype=np.float64), window,
    )
    result[window - 1:] = windows.mean(axis=1).tolist()
    return result
