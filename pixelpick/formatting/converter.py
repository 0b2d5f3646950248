from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Union

from ..conversions import unit_to_byte, unit_rgb_to_hsl
from ..types.color_types import ByteTriple, ColorLike, as_normalized
from ..types.format_type import ColorFormat, FormatOptions, DEFAULT_OPTIONS, PERCENT


@dataclass(frozen=True)
class FormattedColor:
    """The three text renderings of one color under one set of options."""

    hex: str
    rgb: str
    hsl: str


def _options(options: Optional[FormatOptions]) -> FormatOptions:
    return DEFAULT_OPTIONS if options is None else options


def to_bytes(color: ColorLike) -> ByteTriple:
    """Truncate each channel of ``color`` to a 0..255 integer."""
    r, g, b = as_normalized(color)
    return unit_to_byte(r), unit_to_byte(g), unit_to_byte(b)


def to_hex(color: ColorLike, options: Optional[FormatOptions] = None) -> str:
    """
    Render ``color`` as ``#rrggbb``.

    Digits are uppercase when ``options.uppercase_hex`` is set; the ``#``
    prefix is always present.
    """
    fmt = "#{:02X}{:02X}{:02X}" if _options(options).uppercase_hex else "#{:02x}{:02x}{:02x}"
    return fmt.format(*to_bytes(color))


def to_rgb_text(color: ColorLike, options: Optional[FormatOptions] = None) -> str:
    """Render ``color`` as ``rgb(R, G, B)``, or bare ``R, G, B`` in legacy syntax."""
    r, g, b = to_bytes(color)
    if _options(options).legacy_syntax:
        return f"{r}, {g}, {b}"
    return f"rgb({r}, {g}, {b})"


def to_hsl_text(color: ColorLike, options: Optional[FormatOptions] = None) -> str:
    """
    Render ``color`` as ``hsl(H, S%, L%)``, or ``H°, S%, L%`` in legacy syntax.

    Hue degrees and the saturation/lightness percentages are truncated
    toward zero, never rounded.
    """
    h, s, l = unit_rgb_to_hsl(*as_normalized(color))
    hue = int(h)
    sat = int(s * PERCENT)
    light = int(l * PERCENT)
    if _options(options).legacy_syntax:
        return f"{hue}°, {sat}%, {light}%"
    return f"hsl({hue}, {sat}%, {light}%)"


def format_color(color: ColorLike, options: Optional[FormatOptions] = None) -> FormattedColor:
    """Render ``color`` in every supported format."""
    color = as_normalized(color)
    return FormattedColor(
        hex=to_hex(color, options),
        rgb=to_rgb_text(color, options),
        hsl=to_hsl_text(color, options),
    )


FORMATTERS: Dict[ColorFormat, Callable[[ColorLike, Optional[FormatOptions]], str]] = {
    ColorFormat.HEX: to_hex,
    ColorFormat.RGB: to_rgb_text,
    ColorFormat.HSL: to_hsl_text,
}


def format_as(
    color: ColorLike,
    fmt: Union[ColorFormat, str],
    options: Optional[FormatOptions] = None,
) -> str:
    """
    Render ``color`` in a single format.

    Args:
        color: Color to render
        fmt: ColorFormat member or its string value ("hex", "rgb", "hsl")
        options: Formatting switches, defaults to lowercase hex and modern syntax

    Returns:
        The rendered text
    """
    try:
        key = ColorFormat(fmt.lower() if isinstance(fmt, str) else fmt)
    except ValueError:
        raise ValueError(f"Unknown color format: {fmt!r}") from None
    return FORMATTERS[key](color, options)


class ColorConverter:
    """
    Formatter bound to a fixed FormatOptions snapshot.

    >>> converter = ColorConverter(FormatOptions(uppercase_hex=True))
    >>> converter.to_hex((1.0, 0.0, 0.0))
    '#FF0000'
    """

    __slots__ = ('options',)

    def __init__(self, options: Optional[FormatOptions] = None) -> None:
        self.options = _options(options)

    def to_hex(self, color: ColorLike) -> str:
        return to_hex(color, self.options)

    def to_rgb_text(self, color: ColorLike) -> str:
        return to_rgb_text(color, self.options)

    def to_hsl_text(self, color: ColorLike) -> str:
        return to_hsl_text(color, self.options)

    def format(self, color: ColorLike) -> FormattedColor:
        return format_color(color, self.options)

    def format_as(self, color: ColorLike, fmt: Union[ColorFormat, str]) -> str:
        return format_as(color, fmt, self.options)
