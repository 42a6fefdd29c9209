from typing import Dict, NamedTuple

class Formulation(NamedTuple):
    ratio_base: float
    ratio_liquid: float
    wet_density: float  # g/mL
    dry_density: float  # g/mL

# Base : Liquid by weight
FORMULATIONS: Dict[str, Formulation] = {
    "AC100": Formulation(ratio_base=2.5, ratio_liquid=1.0, wet_density=1.845, dry_density=1.745),
    "AC200": Formulation(ratio_base=2.0, ratio_liquid=1.0, wet_density=1.845, dry_density=1.745),
    "AC300": Formulation(ratio_base=3.0, ratio_liquid=1.0, wet_density=1.845, dry_density=1.745),
    "AC730": Formulation(ratio_base=5.0, ratio_liquid=1.0, wet_density=1.950, dry_density=1.850),
}

DEFAULT_PRODUCT = "AC100"

# AC730 takes powder pigment; the others take liquid pigment
POWDER_PIGMENT_PRODUCTS = frozenset({"AC730"})
MAX_PIGMENT_POWDER = 5.0
MAX_PIGMENT_LIQUID = 2.0

DEFAULT_PIGMENT_PERCENTAGE = 0.5

DEFAULT_INPUTS = {
    "product": DEFAULT_PRODUCT,
    "water_weight": 0.0,
    "waste_percentage": 10.0,
}
