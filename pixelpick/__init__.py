"""
PixelPick - Color Sampling Core
===============================

The non-UI core of a desktop color picker: normalized sRGB colors, RGB to
HSL/HSV conversions and deterministic hex/RGB/HSL text formatting, plus the
color wheel geometry, the recent-colors history and the preferences model.

Key Features
------------
- Immutable colors clamped to [0, 1]
- Hex, ``rgb(...)`` and ``hsl(...)`` text, with uppercase hex and legacy
  (wrapper-less) syntax switches
- Byte and percentage values truncated toward zero, never rounded
- Vectorized numpy conversions and a rasterized HSV color wheel

Quick Start
-----------
>>> from pixelpick import NormalizedColor, FormatOptions, format_color
>>>
>>> red = NormalizedColor(1.0, 0.0, 0.0)
>>> format_color(red, FormatOptions(uppercase_hex=True)).hex
'#FF0000'
>>> format_color(red, FormatOptions(legacy_syntax=True)).hsl
'0°, 100%, 50%'

Modules
-------
- types: NormalizedColor, FormatOptions, ColorFormat
- conversions: channel/byte, RGB/HSL and RGB/HSV conversion functions
- formatting: text formatters and hex parsing
- wheel: color wheel geometry and rendering
- history: recent colors
- preferences: settings model producing FormatOptions snapshots
"""

from .types import ColorFormat, FormatOptions, NormalizedColor
from .formatting import (
    ColorConverter,
    FormattedColor,
    to_hex,
    to_rgb_text,
    to_hsl_text,
    format_color,
    format_as,
    parse_hex,
)
from .conversions import (
    unit_to_byte,
    np_unit_to_byte,
    unit_rgb_to_hsl,
    np_unit_rgb_to_hsl,
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
)
from .wheel import ColorWheel
from .history import ColorHistory
from .preferences import Preferences, PreferenceKey, Appearance, resolve_appearance

__version__ = "1.0.0"

__all__ = [
    # Types
    "ColorFormat",
    "FormatOptions",
    "NormalizedColor",

    # Formatting
    "ColorConverter",
    "FormattedColor",
    "to_hex",
    "to_rgb_text",
    "to_hsl_text",
    "format_color",
    "format_as",
    "parse_hex",

    # Conversions
    "unit_to_byte",
    "np_unit_to_byte",
    "unit_rgb_to_hsl",
    "np_unit_rgb_to_hsl",
    "unit_rgb_to_hsv",
    "np_unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "np_hsv_to_unit_rgb",

    # Application models
    "ColorWheel",
    "ColorHistory",
    "Preferences",
    "PreferenceKey",
    "Appearance",
    "resolve_appearance",

    # Version
    "__version__",
]
