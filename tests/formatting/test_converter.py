import math
import re

import pytest

from pixelpick.formatting import (
    ColorConverter,
    FormattedColor,
    to_bytes,
    to_hex,
    to_rgb_text,
    to_hsl_text,
    format_color,
    format_as,
)
from pixelpick.types import ColorFormat, FormatOptions, NormalizedColor
from samples import GRID

UPPER = FormatOptions(uppercase_hex=True)
LOWER = FormatOptions(uppercase_hex=False)
LEGACY = FormatOptions(legacy_syntax=True)
MODERN = FormatOptions(legacy_syntax=False)

GRID_COLORS = [(r, g, b) for r in GRID for g in GRID for b in GRID]


def test_red():
    red = NormalizedColor(1.0, 0.0, 0.0)
    assert to_hex(red, UPPER) == "#FF0000"
    assert to_hex(red, LOWER) == "#ff0000"
    assert to_rgb_text(red, MODERN) == "rgb(255, 0, 0)"
    assert to_hsl_text(red, MODERN) == "hsl(0, 100%, 50%)"


def test_black():
    black = NormalizedColor(0.0, 0.0, 0.0)
    assert to_hex(black, UPPER) == "#000000"
    assert to_hsl_text(black, MODERN) == "hsl(0, 0%, 0%)"


def test_white():
    white = NormalizedColor(1.0, 1.0, 1.0)
    assert to_hex(white, UPPER) == "#FFFFFF"
    assert to_hsl_text(white, MODERN) == "hsl(0, 0%, 100%)"


def test_green_legacy():
    green = NormalizedColor(0.0, 1.0, 0.0)
    assert to_rgb_text(green, LEGACY) == "0, 255, 0"
    assert to_hsl_text(green, LEGACY) == "120°, 100%, 50%"


def test_default_options_are_lowercase_and_modern():
    assert to_hex((1.0, 0.0, 0.0)) == "#ff0000"
    assert to_rgb_text((1.0, 0.0, 0.0)) == "rgb(255, 0, 0)"
    assert to_hsl_text((1.0, 0.0, 0.0)) == "hsl(0, 100%, 50%)"


def test_channels_are_truncated_not_rounded():
    gray = (0.5, 0.5, 0.5)
    assert to_bytes(gray) == (127, 127, 127)
    assert to_hex(gray) == "#7f7f7f"
    assert to_rgb_text(gray) == "rgb(127, 127, 127)"
    assert to_bytes((0.999, 0.999, 0.999)) == (254, 254, 254)


def test_hsl_percentages_are_truncated():
    assert to_hsl_text((0.999, 0.999, 0.999)) == "hsl(0, 0%, 99%)"
    assert to_hsl_text((1.0, 0.5, 0.5)) == "hsl(0, 100%, 75%)"


def test_hue_text_never_reads_360():
    assert to_hsl_text((1.0, 0.0, 1e-16), MODERN) == "hsl(0, 100%, 50%)"


def test_out_of_range_channels_are_clamped():
    assert to_hex((1.5, -0.5, 0.0)) == "#ff0000"
    assert to_rgb_text((2.0, 2.0, 2.0)) == "rgb(255, 255, 255)"


def test_nan_channel_is_rejected():
    with pytest.raises(ValueError):
        to_hex((float("nan"), 0.0, 0.0))


def test_wrong_channel_count_is_rejected():
    with pytest.raises(ValueError):
        to_hex((1.0, 0.0))


def test_hex_shape_and_case():
    upper_re = re.compile(r"^#[0-9A-F]{6}$")
    lower_re = re.compile(r"^#[0-9a-f]{6}$")
    for color in GRID_COLORS:
        assert upper_re.match(to_hex(color, UPPER))
        assert lower_re.match(to_hex(color, LOWER))


def test_uppercase_is_lowercase_uppercased():
    for color in GRID_COLORS:
        assert to_hex(color, UPPER) == to_hex(color, LOWER).upper()


def test_hex_digits_are_truncated_bytes():
    for r, g, b in GRID_COLORS:
        text = to_hex((r, g, b))
        assert int(text[1:3], 16) == math.floor(r * 255)
        assert int(text[3:5], 16) == math.floor(g * 255)
        assert int(text[5:7], 16) == math.floor(b * 255)


def test_achromatic_inputs_have_zero_hue_and_saturation():
    for v in GRID:
        assert to_hsl_text((v, v, v), MODERN).startswith("hsl(0, 0%, ")
        assert to_hsl_text((v, v, v), LEGACY).startswith("0°, 0%, ")


def test_legacy_and_modern_share_numbers():
    for color in GRID_COLORS:
        assert to_rgb_text(color, MODERN) == f"rgb({to_rgb_text(color, LEGACY)})"
        legacy_hsl = to_hsl_text(color, LEGACY).replace("°", "", 1)
        assert to_hsl_text(color, MODERN) == f"hsl({legacy_hsl})"


def test_hex_ignores_legacy_syntax():
    color = (0.2, 0.4, 0.6)
    assert to_hex(color, LEGACY) == to_hex(color, MODERN)


def test_format_color():
    formatted = format_color((1.0, 0.0, 0.0), FormatOptions(uppercase_hex=True, legacy_syntax=True))
    assert formatted == FormattedColor(hex="#FF0000", rgb="255, 0, 0", hsl="0°, 100%, 50%")


def test_format_color_is_deterministic():
    options = FormatOptions(uppercase_hex=True)
    assert format_color((0.3, 0.6, 0.9), options) == format_color((0.3, 0.6, 0.9), options)


def test_format_as():
    green = (0.0, 1.0, 0.0)
    assert format_as(green, ColorFormat.HEX) == "#00ff00"
    assert format_as(green, "rgb", LEGACY) == "0, 255, 0"
    assert format_as(green, "HSL") == "hsl(120, 100%, 50%)"


def test_format_as_unknown_format():
    with pytest.raises(ValueError):
        format_as((0.0, 0.0, 0.0), "cmyk")


def test_color_converter_binds_options():
    converter = ColorConverter(FormatOptions(uppercase_hex=True, legacy_syntax=True))
    color = NormalizedColor(0.0, 1.0, 0.0)

    assert converter.to_hex(color) == "#00FF00"
    assert converter.to_rgb_text(color) == "0, 255, 0"
    assert converter.to_hsl_text(color) == "120°, 100%, 50%"
    assert converter.format(color).hex == "#00FF00"
    assert converter.format_as(color, "hex") == "#00FF00"


def test_color_converter_defaults():
    converter = ColorConverter()
    assert converter.options == FormatOptions()
    assert converter.to_hex((1.0, 1.0, 1.0)) == "#ffffff"
