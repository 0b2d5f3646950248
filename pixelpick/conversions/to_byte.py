import math
import numpy as np
from numpy import ndarray as NDArray
from .numbers import clamp01

BYTE_MAX = 255


def unit_to_byte(c: float) -> int:
    """
    Scale a normalized channel to a byte, truncating toward zero.

    ``0.999`` maps to 254, not 255: values are never rounded up.
    """
    return int(math.floor(clamp01(c) * BYTE_MAX))


def np_unit_to_byte(c: NDArray) -> NDArray:
    """Vectorized: Scale normalized channels to bytes, truncating toward zero."""
    c = np.asarray(c, dtype=float)
    if np.isnan(c).any():
        raise ValueError("Channel values must not be NaN")
    return np.floor(np.clip(c, 0.0, 1.0) * BYTE_MAX).astype(np.int64)
