import math

import pytest

from mixcalc.calculations import compute_mix, get_formulation, list_products
from mixcalc.presets import DEFAULT_PRODUCT, FORMULATIONS

ZERO = {"liquid": 0.0, "base": 0.0, "total_wet": 0.0, "estimated_dry": 0.0}

def test_ac100_example():
    # 100 g water, 2.5:1, wet 1.845, dry 1.745
    out = compute_mix(100.0, 0.0, "AC100")
    assert out["total_wet"] == 184.5
    assert out["liquid"] == 52.7
    assert out["base"] == 131.8
    assert out["estimated_dry"] == 174.5

def test_ac200_example():
    out = compute_mix(100.0, 0.0, "AC200")
    assert out["liquid"] == 61.5
    assert out["base"] == 123.0

def test_ac730_example():
    out = compute_mix(100.0, 0.0, "AC730")
    assert out["total_wet"] == 195.0
    assert out["liquid"] == 32.5
    assert out["base"] == 162.5
    assert out["estimated_dry"] == 185.0

def test_waste_margin():
    # 202.95 -> 203.0, 191.95 -> 192.0
    out = compute_mix(100.0, 10.0, "AC100")
    assert out["total_wet"] == 203.0
    assert out["liquid"] == 58.0
    assert out["base"] == 145.0
    assert out["estimated_dry"] == 192.0

def test_zero_volume():
    assert compute_mix(0.0, 0.0) == ZERO

@pytest.mark.parametrize("volume,waste", [(-100.0, 0.0), (100.0, -5.0), (-1.0, -1.0)])
def test_negative_inputs_give_zero(volume, waste):
    assert compute_mix(volume, waste, "AC100") == ZERO

def test_unknown_product_uses_default():
    assert compute_mix(250.0, 10.0, "NOPE") == compute_mix(250.0, 10.0, DEFAULT_PRODUCT)
    assert get_formulation("NOPE") == FORMULATIONS[DEFAULT_PRODUCT]

@pytest.mark.parametrize("product", sorted(FORMULATIONS))
@pytest.mark.parametrize("volume", [0.0, 1.0, 37.3, 100.0, 512.9, 2500.0])
@pytest.mark.parametrize("waste", [0.0, 7.5, 10.0, 33.0])
def test_base_plus_liquid_is_total(product, volume, waste):
    out = compute_mix(volume, waste, product)
    assert math.isclose(out["base"] + out["liquid"], out["total_wet"], abs_tol=0.1 + 1e-9)
    assert all(v >= 0 for v in out.values())

def test_list_products():
    assert list_products() == ["AC100", "AC200", "AC300", "AC730"]

@pytest.mark.parametrize("volume,waste", [
    (float("inf"), 0.0),
    (100.0, float("inf")),
    (float("nan"), 10.0),
    (1e308, 50.0),
])
def test_non_finite_inputs_give_zero(volume, waste):
    assert compute_mix(volume, waste, "AC100") == ZERO
