from __future__ import annotations
from typing import Iterator, Sequence, Tuple, Union

from ..conversions.numbers import clamp01
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..conversions.to_byte import BYTE_MAX

Scalar = int | float
UnitTriple = Tuple[float, float, float]
ByteTriple = Tuple[int, int, int]


class NormalizedColor:
    """
    An sRGB color with each channel stored as a fraction of full intensity.

    Channels outside ``[0, 1]`` are clamped on construction; NaN channels
    raise ``ValueError``. Instances are frozen once built, so they can be
    shared freely between callers.

    >>> red = NormalizedColor(1.0, 0.0, 0.0)
    >>> r, g, b = red
    """

    __slots__ = ('_r', '_g', '_b', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar) -> None:
        self._r = clamp01(r)
        self._g = clamp01(g)
        self._b = clamp01(b)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int) -> NormalizedColor:
        """Build a color from 0..255 channel values."""
        return cls(r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> NormalizedColor:
        """Build a color from hue in degrees and saturation/value in ``[0, 1]``."""
        return cls(*hsv_to_unit_rgb(h, s, v))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def value(self) -> UnitTriple:
        return (self._r, self._g, self._b)

    def __iter__(self) -> Iterator[float]:
        return iter(self.value)

    def __len__(self) -> int:
        return 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizedColor):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"NormalizedColor(r={self._r!r}, g={self._g!r}, b={self._b!r})"


ColorLike = Union[NormalizedColor, Sequence[Scalar]]


def as_normalized(color: ColorLike) -> NormalizedColor:
    """
    Coerce a color-like value to a NormalizedColor.

    Args:
        color: NormalizedColor, or any sequence of three channel values in [0, 1]

    Returns:
        NormalizedColor instance
    """
    if isinstance(color, NormalizedColor):
        return color
    if len(color) != 3:
        raise ValueError(f"Expected 3 channels, got {len(color)}")
    return NormalizedColor(*color)
