import math
from typing import Union

RealNumber = Union[int, float]


def clamp01(value: RealNumber) -> float:
    """Clamp ``value`` into ``[0, 1]``. NaN is rejected rather than clamped."""
    value = float(value)
    if math.isnan(value):
        raise ValueError("Channel value must not be NaN")
    return min(1.0, max(0.0, value))


class UnitFloat(float):
    """A floating-point number clamped to the inclusive range ``[0, 1]``."""

    def __new__(cls, value: RealNumber):
        if not 0.0 <= value <= 1.0:
            value = clamp01(value)
        return super().__new__(cls, value)

    def __repr__(self):
        return f"UnitFloat({float(self)})"
