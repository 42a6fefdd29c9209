from mixcalc.library import (
    PIGMENT_LIBRARY,
    get_pigment_by_id,
    get_pigment_by_name,
    pigment_options,
    pigments_by_category,
)

def test_library_ids_unique():
    ids = [p.id for p in PIGMENT_LIBRARY]
    assert len(ids) == len(set(ids)) == 13
    assert PIGMENT_LIBRARY[0].name == "White"

def test_lookup_by_id():
    assert get_pigment_by_id("red-oxide").hex == "#6e0902"
    assert get_pigment_by_id("custom") is None

def test_lookup_by_name_is_case_insensitive():
    assert get_pigment_by_name("  bright YELLOW ").id == "bright-yellow"
    assert get_pigment_by_name("Mauve") is None

def test_categories():
    groups = pigments_by_category()
    assert set(groups) == {"core", "new"}
    assert [p.id for p in groups["new"]] == ["pink", "purple", "orange"]

def test_pigment_options_grouped_with_custom_last():
    options = pigment_options()
    assert options[-1] == "custom"
    assert options[:-1] == [p.id for group in pigments_by_category().values() for p in group]
    assert options.index("orange") > options.index("yellow-oxide")
    assert len(options) == 14
