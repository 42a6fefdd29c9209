from dataclasses import asdict, dataclass, replace
from typing import Dict, List, Sequence
import math
import uuid

from mixcalc.colors import WHITE, hex_to_rgb, rgb_to_hex
from mixcalc.presets import MAX_PIGMENT_LIQUID, MAX_PIGMENT_POWDER, POWDER_PIGMENT_PRODUCTS
from mixcalc.utils import round_half_up

def new_id() -> str:
    return uuid.uuid4().hex

@dataclass
class PigmentEntry:
    name: str
    pigment_id: str
    color: str
    percentage: float
    is_custom: bool = False
    id: str = ""

    def __post_init__(self):
        if not self.id:
            self.id = new_id()

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "PigmentEntry":
        percentage = float(data.get("percentage", 0.0))
        if not math.isfinite(percentage) or percentage < 0:
            raise ValueError(f"invalid pigment percentage {percentage!r}")
        return cls(
            name=str(data.get("name", "")),
            pigment_id=str(data.get("pigment_id", "")),
            color=str(data.get("color", "")),
            percentage=percentage,
            is_custom=bool(data.get("is_custom", False)),
            id=str(data.get("id") or ""),
        )

def get_max_percentage(product_id: str) -> float:
    """Safety ceiling for the total pigment load of a product."""
    if product_id in POWDER_PIGMENT_PRODUCTS:
        return MAX_PIGMENT_POWDER
    return MAX_PIGMENT_LIQUID

def compute_weights(
    pigments: Sequence[PigmentEntry],
    base_weight: float,
    liquid_weight: float,
) -> List[Dict]:
    total_mix = base_weight + liquid_weight
    return [
        dict(p.to_dict(), weight=round_half_up(total_mix * p.percentage / 100.0))
        for p in pigments
    ]

def total_percentage(pigments: Sequence[PigmentEntry]) -> float:
    return round_half_up(sum(p.percentage for p in pigments), 2)

def rebalance(
    pigments: Sequence[PigmentEntry],
    changed_index: int,
    new_percentage: float,
    max_total: float,
) -> List[PigmentEntry]:
    """Set one pigment's percentage and shrink the others to stay under ``max_total``.

    The excess is taken from the other entries in proportion to their
    current share. Entries never drop below 0; when that clipping happens
    the total can end up under the cap and is left there. If every other
    entry is already 0 the changed entry itself is capped at ``max_total``.
    The caller clamps ``new_percentage`` into [0, max_total] first.
    """
    balanced = list(pigments)
    balanced[changed_index] = replace(balanced[changed_index], percentage=new_percentage)

    new_total = sum(p.percentage for p in balanced)
    if new_total <= max_total:
        return balanced

    excess = new_total - max_total
    others_sum = sum(p.percentage for i, p in enumerate(pigments) if i != changed_index)

    if others_sum == 0:
        balanced[changed_index] = replace(balanced[changed_index], percentage=max_total)
        return balanced

    for i, p in enumerate(balanced):
        if i == changed_index:
            continue
        reduction = excess * (p.percentage / others_sum)
        balanced[i] = replace(p, percentage=round_half_up(max(0.0, p.percentage - reduction), 2))
    return balanced

def mix_color(pigments: Sequence[PigmentEntry], max_total: float) -> str:
    """Approximate cured color of a pigment recipe in a white base.

    Weighted RGB average of the pigments, then a linear blend over white
    with opacity total/max_total (saturating at 1). Not a colorimetric model.
    """
    if not pigments:
        return WHITE
    total = total_percentage(pigments)
    if total == 0:
        return WHITE

    mixed = [0.0, 0.0, 0.0]
    for p in pigments:
        if p.color and p.percentage > 0:
            weight = p.percentage / total
            for channel, value in enumerate(hex_to_rgb(p.color)):
                mixed[channel] += value * weight

    opacity = min(total / max_total, 1.0)
    r, g, b = (255.0 * (1.0 - opacity) + c * opacity for c in mixed)
    return rgb_to_hex(r, g, b)
