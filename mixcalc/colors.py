import math
import re
from typing import Tuple

RGB = Tuple[int, int, int]

WHITE = "#ffffff"
BLACK = "#000000"
FALLBACK_RGB: RGB = (128, 128, 128)

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

def hex_to_rgb(hex_color: str) -> RGB:
    """'#rrggbb' or 'rrggbb' to a channel triple; anything else is mid gray."""
    m = _HEX_RE.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if not m:
        return FALLBACK_RGB
    return tuple(int(part, 16) for part in m.groups())

def _to_channel(value: float) -> int:
    return max(0, min(255, int(math.floor(value + 0.5))))

def rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#{:02x}{:02x}{:02x}".format(_to_channel(r), _to_channel(g), _to_channel(b))

def luminance(hex_color: str) -> float:
    r, g, b = hex_to_rgb(hex_color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255.0

def contrast_color(hex_color: str) -> str:
    """Black or white text, whichever reads on ``hex_color``."""
    return BLACK if luminance(hex_color) > 0.5 else WHITE
