from .format_type import ColorFormat, FormatOptions, DEFAULT_OPTIONS
from .color_types import NormalizedColor, ColorLike, as_normalized

__all__ = [
    "ColorFormat",
    "FormatOptions",
    "DEFAULT_OPTIONS",
    "NormalizedColor",
    "ColorLike",
    "as_normalized",
]
