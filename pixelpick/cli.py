"""
Format a color from the command line.

Usage:
    pixelpick "#FF5733"
    pixelpick 1 0.5 0 --uppercase
    pixelpick 0 1 0 --legacy --format hsl
"""
from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from .formatting import format_as, format_color, parse_hex
from .types.color_types import NormalizedColor
from .types.format_type import ColorFormat, FormatOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelpick",
        description="Convert a color to hex, RGB and HSL text",
    )
    parser.add_argument(
        'color', nargs='+',
        help='Hex color (#RRGGBB) or three normalized channels in [0, 1]',
    )
    parser.add_argument('--uppercase', '-u', action='store_true', help='Uppercase hex digits')
    parser.add_argument('--legacy', '-l', action='store_true', help='Omit the rgb()/hsl() wrappers')
    parser.add_argument(
        '--format', '-f', choices=[f.value for f in ColorFormat],
        help='Print only this format',
    )
    return parser


def parse_color(parser: argparse.ArgumentParser, values: List[str]) -> NormalizedColor:
    if len(values) == 1:
        try:
            return parse_hex(values[0])
        except ValueError as e:
            parser.error(str(e))
    if len(values) == 3:
        try:
            return NormalizedColor(*(float(v) for v in values))
        except ValueError as e:
            parser.error(f"Invalid channel values {values}: {e}")
    parser.error(f"Expected a hex color or 3 channels, got {len(values)} values")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    color = parse_color(parser, args.color)
    options = FormatOptions(uppercase_hex=args.uppercase, legacy_syntax=args.legacy)

    if args.format:
        print(format_as(color, args.format, options))
        return 0

    formatted = format_color(color, options)
    print(f"HEX: {formatted.hex}")
    print(f"RGB: {formatted.rgb}")
    print(f"HSL: {formatted.hsl}")
    return 0
