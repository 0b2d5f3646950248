"""
PixelPick Color Space Conversions
=================================

Scalar and vectorized (numpy) helpers behind the text formatters and the
color wheel.

Conversion Functions
-------------------

Channel → byte:
    unit_to_byte(c)
        Scale a [0, 1] channel to 0..255, truncating toward zero
    np_unit_to_byte(c)
        Vectorized channel to byte conversion

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
        Scalar RGB to HSL conversion, hue in degrees
    np_unit_rgb_to_hsl(r, g, b)
        Vectorized RGB to HSL conversion

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
    np_hsv_to_unit_rgb(h, s, v)

Examples
--------
>>> from pixelpick.conversions import unit_rgb_to_hsl, unit_to_byte
>>> h, s, l = unit_rgb_to_hsl(0.0, 1.0, 0.0)
>>> unit_to_byte(0.999)
254
"""

from .numbers import UnitFloat, clamp01

# Channel → byte
from .to_byte import unit_to_byte, np_unit_to_byte

# RGB → HSL
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl

# RGB → HSV
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv

# HSV → RGB
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb, normalize_hue

__all__ = [
    'UnitFloat',
    'clamp01',

    # Channel → byte
    'unit_to_byte',
    'np_unit_to_byte',

    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # RGB → HSV
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # HSV → RGB
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'normalize_hue',
]
