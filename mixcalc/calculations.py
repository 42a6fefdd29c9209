import logging
import math
from typing import Dict, List

from mixcalc.presets import DEFAULT_PRODUCT, FORMULATIONS, Formulation
from mixcalc.utils import round_half_up

logger = logging.getLogger(__name__)

ZERO_MIX = {"liquid": 0.0, "base": 0.0, "total_wet": 0.0, "estimated_dry": 0.0}

def list_products() -> List[str]:
    return list(FORMULATIONS)

def get_formulation(product_id: str) -> Formulation:
    formulation = FORMULATIONS.get(product_id)
    if formulation is None:
        logger.debug("Unknown product %r, using %s", product_id, DEFAULT_PRODUCT)
        formulation = FORMULATIONS[DEFAULT_PRODUCT]
    return formulation

def compute_mix(
    volume: float,
    waste_percent: float = 0.0,
    product_id: str = DEFAULT_PRODUCT,
) -> Dict[str, float]:
    """Base and liquid weights for a mold holding ``volume`` grams of water.

    1 g of water is taken as 1 mL of mold capacity. Negative or non-finite
    inputs give an all-zero result rather than an error.
    """
    if volume < 0 or waste_percent < 0 or not (math.isfinite(volume) and math.isfinite(waste_percent)):
        return dict(ZERO_MIX)

    f = get_formulation(product_id)
    waste_multiplier = 1.0 + waste_percent / 100.0

    total_wet = volume * f.wet_density * waste_multiplier
    total_parts = f.ratio_base + f.ratio_liquid
    liquid = total_wet * (f.ratio_liquid / total_parts)
    base = total_wet * (f.ratio_base / total_parts)

    estimated_dry = volume * f.dry_density * waste_multiplier
    if not (math.isfinite(total_wet) and math.isfinite(estimated_dry)):
        return dict(ZERO_MIX)

    return {
        "liquid": round_half_up(liquid),
        "base": round_half_up(base),
        "total_wet": round_half_up(total_wet),
        "estimated_dry": round_half_up(estimated_dry),
    }
