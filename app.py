import logging
import os

import streamlit as st
from dotenv import load_dotenv

from mixcalc.calculations import compute_mix, list_products
from mixcalc.colors import contrast_color
from mixcalc.guide import COLOR_DISCLAIMER, guide_ui, pigment_tips
from mixcalc.library import get_pigment_by_id, pigment_options
from mixcalc.pigments import compute_weights, get_max_percentage, mix_color, total_percentage
from mixcalc.recipes import WorkingRecipe, snapshot_recipe, validate_recipe
from mixcalc.splash import generate_chips, render_splash
from mixcalc.storage import DEFAULT_STATE_PATH, load_state, save_state
from mixcalc.utils import format_number, parse_number

# Load environment variables from a .env file for local development
load_dotenv()

def _get_setting(name: str, default=None):
    value = os.getenv(name)
    if not value:
        try:
            value = st.secrets.get(name, None)
        except Exception:
            value = None
    return value or default

logging.basicConfig(
    level=str(_get_setting("MIXCALC_LOG_LEVEL", "INFO")).upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("mixcalc.app")

STATE_PATH = _get_setting("MIXCALC_STATE_PATH", DEFAULT_STATE_PATH)

st.set_page_config(page_title="Casting Mix Calculator", page_icon="🧱", layout="wide")

# ------------------------------------------------------------------
# STATE
# ------------------------------------------------------------------
if "app_state" not in st.session_state:
    st.session_state.app_state = load_state(STATE_PATH)
    st.session_state.saved_snapshot = st.session_state.app_state.to_dict()
if "working" not in st.session_state:
    st.session_state.working = WorkingRecipe()
if "flash" not in st.session_state:
    st.session_state.flash = None
if "confirm_delete" not in st.session_state:
    st.session_state.confirm_delete = None

state = st.session_state.app_state
working: WorkingRecipe = st.session_state.working

@st.cache_resource(show_spinner=False)
def _splash_image(seed):
    return render_splash(generate_chips(seed=seed))

def swatch_html(color: str, label: str, height: int = 120) -> str:
    return (
        f'<div style="background:{color};color:{contrast_color(color)};height:{height}px;'
        f'border-radius:12px;border:1px solid #d6d3d1;display:flex;align-items:center;'
        f'justify-content:center;font-weight:700;font-family:monospace">{label}</div>'
    )

# ------------------------------------------------------------------
# CALLBACKS
# ------------------------------------------------------------------
def _pct_key(entry_id): return f"pct_{entry_id}"
def _sel_key(entry_id): return f"sel_{entry_id}"
def _color_key(entry_id): return f"color_{entry_id}"

def _sync_percentages():
    for p in working.pigments:
        st.session_state[_pct_key(p.id)] = float(p.percentage)

def on_percentage_change(entry_id, max_pct):
    working.set_percentage(entry_id, st.session_state[_pct_key(entry_id)], max_pct)
    _sync_percentages()

def on_selection_change(entry_id):
    working.select_pigment(entry_id, st.session_state[_sel_key(entry_id)])
    for p in working.pigments:
        if p.id == entry_id:
            st.session_state[_color_key(entry_id)] = p.color

def on_color_change(entry_id):
    working.set_color(entry_id, st.session_state[_color_key(entry_id)])

def on_save_recipe(product_id):
    working.name = st.session_state.get("recipe_name", "")
    working.notes = st.session_state.get("recipe_notes", "")
    problem = validate_recipe(working.name, working.pigments)
    if problem:
        st.session_state.flash = ("error", problem)
        return
    recipe = snapshot_recipe(working, product_id)
    state.recipes.save(recipe)
    working.clear()
    st.session_state.recipe_name = ""
    st.session_state.recipe_notes = ""
    st.session_state.flash = ("success", f"Saved recipe '{recipe.name}'.")

def on_load_recipe(recipe_id):
    recipe = state.recipes.get(recipe_id)
    if recipe is None:
        return
    working.load(recipe)
    st.session_state.recipe_name = working.name
    st.session_state.recipe_notes = working.notes

def on_request_delete(recipe_id):
    st.session_state.confirm_delete = recipe_id

def on_confirm_delete(recipe_id):
    state.recipes.delete(recipe_id)
    st.session_state.confirm_delete = None

def on_cancel_delete():
    st.session_state.confirm_delete = None

def on_clear_recipe():
    working.clear()
    st.session_state.recipe_name = ""
    st.session_state.recipe_notes = ""

# ------------------------------------------------------------------
# HEADER
# ------------------------------------------------------------------
seed = _get_setting("MIXCALC_SPLASH_SEED")
st.image(_splash_image(int(seed) if seed is not None else None))
st.title("Casting Mix Calculator")
st.caption("Base and liquid weights from the water weight of your mold, plus pigment recipes.")

# ------------------------------------------------------------------
# SIDEBAR - Mix inputs
# ------------------------------------------------------------------
with st.sidebar:
    st.header("Mix Inputs")
    if "input_product" not in st.session_state:
        st.session_state.input_product = state.product
        st.session_state.input_water = float(state.water_weight)
        st.session_state.input_waste = float(state.waste_percentage)
    state.product = st.selectbox("Product", list_products(), key="input_product")
    state.water_weight = st.number_input(
        "Water Weight (g)", min_value=0.0, step=10.0, key="input_water",
        help="Weight of water filling your mold.",
    )
    state.waste_percentage = st.number_input(
        "Waste Margin (%)", min_value=0.0, step=1.0, key="input_waste",
        help="Extra material for spillage/residue.",
    )

results = compute_mix(
    parse_number(state.water_weight), parse_number(state.waste_percentage), state.product
)
max_pct = get_max_percentage(state.product)

with st.sidebar:
    st.write("Base (g):", format_number(results["base"]))
    st.write("Liquid (g):", format_number(results["liquid"]))

# ------------------------------------------------------------------
# MAIN TABS
# ------------------------------------------------------------------
tab_mix, tab_builder, tab_saved, tab_guide = st.tabs([
    "Mix Calculator", "Pigment Recipe Builder", "Saved Recipes", "Mixing Guide"
])

with tab_mix:
    st.subheader(f"{state.product} mix")
    col1, col2 = st.columns(2)
    col1.metric("Base (Powder) (g)", format_number(results["base"]))
    col1.metric("Liquid (g)", format_number(results["liquid"]))
    col2.metric("Total Wet Mix (g)", format_number(results["total_wet"]))
    col2.metric("Est. Dry Weight (g)", format_number(results["estimated_dry"]))

with tab_builder:
    st.subheader("Pigment Recipe Builder")
    st.caption("Create custom pigment recipes. Total percentage will auto-balance to stay within safe limits.")

    if st.session_state.flash:
        kind, message = st.session_state.flash
        (st.error if kind == "error" else st.success)(message)
        st.session_state.flash = None

    options = pigment_options()

    def _option_label(pigment_id):
        pigment = get_pigment_by_id(pigment_id)
        if pigment is None:
            return "Custom Color"
        return f"{pigment.category.title()} · {pigment.name}"

    weighted = compute_weights(working.pigments, results["base"], results["liquid"])
    for entry, row in zip(list(working.pigments), weighted):
        if _pct_key(entry.id) not in st.session_state:
            st.session_state[_pct_key(entry.id)] = float(entry.percentage)
        if _sel_key(entry.id) not in st.session_state:
            st.session_state[_sel_key(entry.id)] = entry.pigment_id
        if _color_key(entry.id) not in st.session_state:
            st.session_state[_color_key(entry.id)] = entry.color

        c_sel, c_color, c_pct, c_weight, c_rm = st.columns([3, 1, 2, 1, 1])
        c_sel.selectbox(
            "Pigment", options, key=_sel_key(entry.id), format_func=_option_label,
            on_change=on_selection_change, args=(entry.id,),
        )
        if entry.is_custom:
            c_color.color_picker(
                "Color", key=_color_key(entry.id), on_change=on_color_change, args=(entry.id,),
            )
        else:
            c_color.markdown(swatch_html(entry.color, "", height=38), unsafe_allow_html=True)
        c_pct.number_input(
            "Percentage (%)", min_value=0.0, step=0.1, key=_pct_key(entry.id),
            on_change=on_percentage_change, args=(entry.id, max_pct),
        )
        c_weight.metric("Weight (g)", format_number(row["weight"]))
        c_rm.button("Remove", key=f"rm_{entry.id}", on_click=working.remove_pigment, args=(entry.id,))

    st.button("Add Pigment", on_click=working.add_pigment)

    total = total_percentage(working.pigments)
    st.progress(min(total / max_pct, 1.0), text=f"Total pigment: {total:.2f}% of {max_pct:g}% max")

    mixed = mix_color(working.pigments, max_pct)
    st.markdown(swatch_html(mixed, mixed), unsafe_allow_html=True)
    st.caption(COLOR_DISCLAIMER)

    st.text_input("Recipe Name", key="recipe_name")
    st.text_area("Notes", key="recipe_notes", placeholder="e.g., Perfect for small vases, adjust by eye...")
    b1, b2 = st.columns(2)
    b1.button("Save Recipe", on_click=on_save_recipe, args=(state.product,))
    b2.button("Clear", on_click=on_clear_recipe)

    with st.expander("Tips"):
        for tip in pigment_tips(state.product, max_pct):
            st.markdown(f"- {tip}")

with tab_saved:
    st.subheader(f"Saved Recipes ({len(state.recipes)})")
    if not len(state.recipes):
        st.info("No saved recipes yet. Build one in the Pigment Recipe Builder tab.")
    for recipe in list(state.recipes):
        with st.container(border=True):
            left, right = st.columns([1, 3])
            left.markdown(swatch_html(recipe.mixed_color, recipe.mixed_color, height=80), unsafe_allow_html=True)
            right.markdown(f"**{recipe.name}** · {recipe.product} · {total_percentage(recipe.pigments):.2f}%")
            for row in compute_weights(recipe.pigments, results["base"], results["liquid"]):
                right.write(f"{row['name'] or 'Unnamed pigment'}: {row['percentage']:.2f}% ({format_number(row['weight'])} g)")
            if recipe.notes:
                right.caption(recipe.notes)
            right.button("Load", key=f"load_{recipe.id}", on_click=on_load_recipe, args=(recipe.id,))
            if st.session_state.confirm_delete == recipe.id:
                right.warning("Delete this recipe?")
                right.button("Yes, delete", key=f"del_yes_{recipe.id}", on_click=on_confirm_delete, args=(recipe.id,))
                right.button("Cancel", key=f"del_no_{recipe.id}", on_click=on_cancel_delete)
            else:
                right.button("Delete", key=f"del_{recipe.id}", on_click=on_request_delete, args=(recipe.id,))

with tab_guide:
    guide_ui(state.product, max_pct)

# ------------------------------------------------------------------
# PERSIST
# ------------------------------------------------------------------
current = state.to_dict()
if current != st.session_state.saved_snapshot:
    try:
        save_state(state, STATE_PATH)
        st.session_state.saved_snapshot = current
    except OSError as e:
        logger.error("Failed to save state to %s: %s", STATE_PATH, e)
        st.warning(f"Could not save to {STATE_PATH}: {e}")
