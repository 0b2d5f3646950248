from dataclasses import dataclass
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


@dataclass(frozen=True)
class FormatOptions:
    """Snapshot of the text formatting switches handed to each formatting call."""

    uppercase_hex: bool = False
    legacy_syntax: bool = False


DEFAULT_OPTIONS = FormatOptions()

PERCENT = 100
