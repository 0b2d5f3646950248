from __future__ import annotations

import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Optional, Tuple

from ..conversions import unit_rgb_to_hsv, np_hsv_to_unit_rgb
from ..types.color_types import ColorLike, NormalizedColor, UnitTriple, as_normalized

DEFAULT_MARGIN = 15.0


class ColorWheel:
    """
    Geometry of an HSV color wheel drawn at full brightness.

    Hue follows the angle around the center (0° pointing along +x, growing
    toward +y) and saturation grows linearly from the center to the rim.
    Coordinates are in the same units as ``width`` and ``height``.
    """

    def __init__(self, width: float, height: float, margin: float = DEFAULT_MARGIN) -> None:
        self.width = width
        self.height = height
        self.margin = margin

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2 - self.margin

    def color_at(self, x: float, y: float) -> Optional[NormalizedColor]:
        """
        Color under the pointer at ``(x, y)``.

        Points beyond the rim pick the fully saturated color at that angle.
        Returns None while the wheel has no positive radius.
        """
        radius = self.radius
        if radius <= 0:
            return None

        cx, cy = self.center
        dx = x - cx
        dy = y - cy
        distance = math.hypot(dx, dy)

        angle = math.degrees(math.atan2(dy, dx))
        if angle < 0:
            angle += 360
        saturation = min(distance / radius, 1.0)
        return NormalizedColor.from_hsv(angle, saturation, 1.0)

    def selector_position(self, color: ColorLike) -> Tuple[float, float]:
        """Point on the wheel where the selector ring for ``color`` is drawn."""
        h, s, _ = unit_rgb_to_hsv(*as_normalized(color))
        theta = math.radians(h)
        distance = s * max(self.radius, 0.0)
        cx, cy = self.center
        return cx + math.cos(theta) * distance, cy + math.sin(theta) * distance

    def render(self, background: UnitTriple = (0.0, 0.0, 0.0)) -> NDArray:
        """
        Rasterize the wheel.

        Args:
            background: RGB fill for pixels outside the rim

        Returns:
            NDArray with shape (height, width, 3), float RGB in [0, 1]
        """
        height = int(self.height)
        width = int(self.width)
        out = np.empty((height, width, 3), dtype=float)
        out[...] = np.asarray(background, dtype=float)

        radius = self.radius
        if radius <= 0:
            return out

        cx, cy = self.center
        # Sample at pixel centers
        ys, xs = np.mgrid[0:height, 0:width]
        dx = xs + 0.5 - cx
        dy = ys + 0.5 - cy
        distance = np.hypot(dx, dy)

        hue = np.degrees(np.arctan2(dy, dx)) % 360
        saturation = np.clip(distance / radius, 0.0, 1.0)
        wheel = np_hsv_to_unit_rgb(hue, saturation, 1.0)

        inside = distance <= radius
        out[inside] = wheel[inside]
        return out
