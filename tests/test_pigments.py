import pytest

from mixcalc.pigments import (
    PigmentEntry,
    compute_weights,
    get_max_percentage,
    mix_color,
    rebalance,
    total_percentage,
)

def entry(pct, color="#0066cc", name="Blue"):
    return PigmentEntry(name=name, pigment_id=name.lower(), color=color, percentage=pct)

def pcts(pigments):
    return [p.percentage for p in pigments]

@pytest.mark.parametrize("product", ["AC100", "AC200", "AC300", "unknown", ""])
def test_max_percentage_liquid_products(product):
    assert get_max_percentage(product) == 2

def test_max_percentage_powder_product():
    assert get_max_percentage("AC730") == 5

def test_weights_single():
    out = compute_weights([entry(1.0)], 125, 50)
    # 175 * 0.01 = 1.75 -> 1.8
    assert out[0]["weight"] == 1.8
    assert out[0]["name"] == "Blue"

def test_weights_multiple_and_zero():
    pigments = [entry(0.8), entry(0.5, "#ffffff", "White")]
    out = compute_weights(pigments, 125, 50)
    assert [o["weight"] for o in out] == [1.4, 0.9]
    assert compute_weights([entry(1.0)], 0, 0)[0]["weight"] == 0
    assert "weight" not in pigments[0].to_dict()

def test_total_percentage():
    assert total_percentage([entry(0.8), entry(0.5)]) == 1.3
    assert total_percentage([]) == 0

def test_rebalance_under_max_is_untouched():
    pigments = [entry(0.5), entry(0.5)]
    out = rebalance(pigments, 0, 0.8, 2)
    assert pcts(out) == [0.8, 0.5]
    assert out[1] is pigments[1]
    assert pcts(pigments) == [0.5, 0.5]

def test_rebalance_two_pigments():
    out = rebalance([entry(1.0), entry(1.0)], 0, 1.5, 2)
    assert pcts(out) == [1.5, 0.5]
    assert total_percentage(out) == 2

def test_rebalance_three_pigments_proportional():
    out = rebalance([entry(0.6), entry(0.6), entry(0.6)], 0, 1.0, 2)
    assert pcts(out) == [1.0, 0.5, 0.5]
    assert total_percentage(out) == 2

def test_rebalance_unequal_shares():
    out = rebalance([entry(0.2), entry(0.4), entry(1.2)], 0, 1.0, 2)
    # excess 0.6 split 1:3 across the others
    assert pcts(out) == [1.0, 0.25, 0.75]
    assert total_percentage(out) == 2

def test_rebalance_single_entry_clamps():
    out = rebalance([entry(1.0)], 0, 3.0, 2)
    assert pcts(out) == [2]

def test_rebalance_others_zero_clamps():
    out = rebalance([entry(0.0), entry(4.0), entry(0.0)], 1, 7.0, 5)
    assert pcts(out) == [0.0, 5, 0.0]

def test_rebalance_reducing_needs_no_balance():
    out = rebalance([entry(1.5), entry(0.5)], 0, 1.0, 2)
    assert pcts(out) == [1.0, 0.5]
    assert total_percentage(out) == 1.5

def test_rebalance_is_idempotent():
    once = rebalance([entry(0.6), entry(0.6), entry(0.6)], 0, 1.0, 2)
    twice = rebalance(once, 0, 1.0, 2)
    assert pcts(twice) == pcts(once)

def test_rebalance_does_not_mutate_input():
    pigments = [entry(1.0), entry(1.0)]
    rebalance(pigments, 0, 1.5, 2)
    assert pcts(pigments) == [1.0, 1.0]

def test_rebalance_clipping_can_leave_total_under_cap():
    # changed entry above the cap on its own: others floor at 0
    out = rebalance([entry(1.0), entry(0.5)], 0, 2.4, 2)
    assert pcts(out) == [2.4, 0.0]

def test_mix_color_empty_and_zero_are_white():
    assert mix_color([], 2) == "#ffffff"
    assert mix_color([entry(0.0), entry(0.0, "#000000")], 2) == "#ffffff"

def test_mix_color_single_pigment_at_max_is_its_own_color():
    assert mix_color([entry(2.0, "#0066CC")], 2) == "#0066cc"
    assert mix_color([entry(5.0, "#6e0902")], 5) == "#6e0902"

def test_mix_color_half_strength_black():
    # opacity 0.5 over white: 127.5 -> 128
    assert mix_color([entry(1.0, "#000000")], 2) == "#808080"

def test_mix_color_weighted_average():
    pigments = [entry(1.0, "#ff0000"), entry(1.0, "#0000ff")]
    assert mix_color(pigments, 2) == "#800080"

def test_mix_color_skips_zero_entries():
    pigments = [entry(2.0, "#000000"), entry(0.0, "#ffffff")]
    assert mix_color(pigments, 2) == "#000000"

def test_mix_color_invalid_hex_is_gray():
    assert mix_color([entry(2.0, "not-a-color")], 2) == "#808080"
