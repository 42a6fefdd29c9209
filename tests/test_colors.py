import pytest

from mixcalc.colors import contrast_color, hex_to_rgb, rgb_to_hex

def test_hex_to_rgb():
    assert hex_to_rgb("#FF160C") == (255, 22, 12)
    assert hex_to_rgb("0066cc") == (0, 102, 204)

@pytest.mark.parametrize("bad", ["", "#fff", "#gg0000", "#0066cc00", "#0066cc\n", None, 42])
def test_hex_to_rgb_invalid_is_gray(bad):
    assert hex_to_rgb(bad) == (128, 128, 128)

def test_rgb_to_hex_rounds_and_clamps():
    assert rgb_to_hex(0, 102, 204) == "#0066cc"
    assert rgb_to_hex(127.5, 0.4, 300) == "#8000ff"
    assert rgb_to_hex(-12, 255.2, 15.6) == "#00ff10"

def test_contrast_color():
    assert contrast_color("#ffffff") == "#000000"
    assert contrast_color("#ffea00") == "#000000"
    assert contrast_color("#000000") == "#ffffff"
    assert contrast_color("#0066cc") == "#ffffff"
    # mid gray sits just above the threshold
    assert contrast_color("#808080") == "#000000"
