import streamlit as st

from mixcalc.calculations import get_formulation

COLOR_DISCLAIMER = (
    "This approximation shows the estimated mix color. "
    "Actual results vary by percentage, material, and conditions."
)

def default_guide_text() -> str:
    return (
        "Measure the mold: fill it with water and weigh the water; 1 g of water is 1 mL of capacity. "
        "Enter that weight with a waste margin (10% covers residue left in cups and on tools). "
        "Weigh the liquid into a clean container, add pigment to the liquid first and mix thoroughly, "
        "then add the base powder gradually while stirring until smooth and lump free. "
        "Pour in a thin stream into the lowest point of the mold, tap out air, and demold once cured."
    )

def pigment_tips(product_id: str, max_percentage: float) -> list:
    return [
        "Start with 0.5% for pastel colors and adjust by eye during mixing.",
        f"Exceeding {max_percentage:g}% may prevent proper setting for {product_id}.",
        "Add pigment to the liquid component first, mix thoroughly, then add base powder.",
    ]

def guide_ui(product_id: str, max_percentage: float):
    st.markdown("##### Mixing procedure")
    st.text_area("Reference", value=default_guide_text(), height=140)

    f = get_formulation(product_id)
    st.markdown(f"##### {product_id} formulation")
    col1, col2, col3 = st.columns(3)
    col1.metric("Base : Liquid", f"{f.ratio_base:g} : {f.ratio_liquid:g}")
    col2.metric("Wet density (g/mL)", f"{f.wet_density:.3f}")
    col3.metric("Dry density (g/mL)", f"{f.dry_density:.3f}")

    st.markdown("##### Pigment")
    for tip in pigment_tips(product_id, max_percentage):
        st.markdown(f"- {tip}")
    st.caption(COLOR_DISCLAIMER)
