import random
from typing import Dict, List, Optional

from PIL import Image, ImageDraw

from mixcalc.colors import hex_to_rgb

# Tailwind *-400 tones
CHIP_COLORS = [
    "#fb923c", "#60a5fa", "#f87171", "#facc15",
    "#4ade80", "#c084fc", "#f472b6", "#2dd4bf",
]
BACKGROUND = "#f5f5f4"

def generate_chips(count: int = 40, seed: Optional[int] = None) -> List[Dict]:
    """Random terrazzo chips; the same seed always gives the same chips."""
    rng = random.Random(seed)
    chips = []
    for i in range(count):
        chips.append({
            "id": i,
            "left": rng.random(),
            "top": rng.random(),
            "width": rng.random() * 40 + 10,
            "height": rng.random() * 40 + 10,
            "rotation": rng.random() * 360,
            "color": rng.choice(CHIP_COLORS),
            "radius": rng.random() * 0.5,
            "opacity": rng.random() * 0.5 + 0.1,
        })
    return chips

def _chip_image(chip: Dict) -> Image.Image:
    w, h = max(1, int(chip["width"])), max(1, int(chip["height"]))
    alpha = int(round(chip["opacity"] * 255))
    tile = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    radius = int(min(w, h) * chip["radius"])
    ImageDraw.Draw(tile).rounded_rectangle(
        (0, 0, w - 1, h - 1), radius=radius, fill=hex_to_rgb(chip["color"]) + (alpha,)
    )
    return tile.rotate(chip["rotation"], expand=True)

def render_splash(chips: List[Dict], width: int = 900, height: int = 240) -> Image.Image:
    canvas = Image.new("RGB", (width, height), BACKGROUND)
    for chip in chips:
        tile = _chip_image(chip)
        x = int(chip["left"] * width) - tile.width // 2
        y = int(chip["top"] * height) - tile.height // 2
        canvas.paste(tile, (x, y), tile)
    return canvas
