import re

from ..types.color_types import NormalizedColor

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def parse_hex(text: str) -> NormalizedColor:
    """
    Parse ``#rrggbb``, ``rrggbb`` or the ``#rgb`` shorthand, in either case.

    Raises:
        ValueError: if ``text`` is not a hex color
    """
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Not a hex color: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return NormalizedColor.from_bytes(r, g, b)
