from __future__ import annotations
from typing import Iterator, List

from .formatting.converter import to_hex
from .types.color_types import ColorLike, NormalizedColor, as_normalized
from .types.format_type import FormatOptions

MAX_HISTORY = 10
WHITE = NormalizedColor(1.0, 1.0, 1.0)

# Entries are compared by their uppercase hex text
_KEY_OPTIONS = FormatOptions(uppercase_hex=True)


class ColorHistory:
    """
    Most-recent-first list of picked colors.

    Starts filled with white. Adding a color drops any earlier entry with the
    same hex text, so each visible swatch is distinct.
    """

    def __init__(self, capacity: int = MAX_HISTORY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._colors: List[NormalizedColor] = [WHITE] * capacity

    def add(self, color: ColorLike) -> NormalizedColor:
        color = as_normalized(color)
        key = to_hex(color, _KEY_OPTIONS)
        self._colors = [c for c in self._colors if to_hex(c, _KEY_OPTIONS) != key]
        self._colors.insert(0, color)
        del self._colors[self.capacity:]
        return color

    def clear(self) -> None:
        self._colors = [WHITE] * self.capacity

    @property
    def most_recent(self) -> NormalizedColor:
        return self._colors[0]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[NormalizedColor]:
        return iter(list(self._colors))

    def __getitem__(self, index: int) -> NormalizedColor:
        return self._colors[index]

    def __repr__(self) -> str:
        return f"ColorHistory({[to_hex(c, _KEY_OPTIONS) for c in self._colors]})"
