from .converter import (
    ColorConverter,
    FormattedColor,
    to_bytes,
    to_hex,
    to_rgb_text,
    to_hsl_text,
    format_color,
    format_as,
)
from .parse import parse_hex

__all__ = [
    "ColorConverter",
    "FormattedColor",
    "to_bytes",
    "to_hex",
    "to_rgb_text",
    "to_hsl_text",
    "format_color",
    "format_as",
    "parse_hex",
]
