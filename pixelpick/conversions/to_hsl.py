import numpy as np
from numpy import ndarray as NDArray
from .numbers import UnitFloat


def hue_fraction(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """
    Hue as a fraction of a full turn for a chromatic color (``delta > 0``).

    The maximal channel is looked up in r, g, b order, so when two channels
    tie for the maximum the first one wins.
    """
    if max_c == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6


## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSL with the max/min channel algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    # Achromatic: grays, black, white
    if max_c == min_c:
        return 0.0, UnitFloat(0.0), UnitFloat(lightness)

    delta = max_c - min_c
    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    hue = hue_fraction(r, g, b, max_c, delta) * 360 % 360
    return hue, UnitFloat(saturation), UnitFloat(lightness)


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL with the max/min channel algorithm.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    chromatic = max_c != min_c

    # Saturation
    saturation = np.zeros(out_shape)
    light = chromatic & (lightness > 0.5)
    dark = chromatic & ~(lightness > 0.5)
    saturation[light] = delta[light] / (2 - max_c[light] - min_c[light])
    saturation[dark] = delta[dark] / (max_c[dark] + min_c[dark])
    saturation = np.clip(saturation, 0.0, 1.0)

    # Hue, first maximal channel in r, g, b order wins
    hue = np.zeros(out_shape)
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6, 0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4
    hue = hue / 6 * 360 % 360

    return np.stack([hue, saturation, lightness], axis=-1)
