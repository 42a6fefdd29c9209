"""Persistent app state: calculator inputs and the saved recipe book.

The state lives in one JSON document. It is read once at startup with
:func:`load_state` and written back with :func:`save_state` after each change.
"""

import json
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Dict

from mixcalc.presets import DEFAULT_INPUTS, FORMULATIONS
from mixcalc.recipes import Recipe, RecipeBook
from mixcalc.utils import atomic_write, parse_number

logger = logging.getLogger(__name__)

DEFAULT_STATE_PATH = "mixcalc_state.json"

def _stored_input(data: Dict, name: str) -> float:
    default = DEFAULT_INPUTS[name]
    value = parse_number(data.get(name), default)
    if not math.isfinite(value) or value < 0:
        logger.warning("Ignoring stored %s=%r, using %s", name, data.get(name), default)
        return default
    return value

@dataclass
class AppState:
    product: str = DEFAULT_INPUTS["product"]
    water_weight: float = DEFAULT_INPUTS["water_weight"]
    waste_percentage: float = DEFAULT_INPUTS["waste_percentage"]
    recipes: RecipeBook = field(default_factory=RecipeBook)

    def to_dict(self) -> Dict:
        return {
            "product": self.product,
            "water_weight": self.water_weight,
            "waste_percentage": self.waste_percentage,
            "recipes": self.recipes.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "AppState":
        product = data.get("product")
        if not isinstance(product, str) or product not in FORMULATIONS:
            product = DEFAULT_INPUTS["product"]

        raw_recipes = data.get("recipes") or []
        if not isinstance(raw_recipes, list):
            logger.warning("Ignoring recipes: expected a list, got %s", type(raw_recipes).__name__)
            raw_recipes = []

        recipes = []
        for raw in raw_recipes:
            try:
                recipes.append(Recipe.from_dict(raw))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping unreadable recipe %r: %s", raw, e)

        return cls(
            product=product,
            water_weight=_stored_input(data, "water_weight"),
            waste_percentage=_stored_input(data, "waste_percentage"),
            recipes=RecipeBook(recipes),
        )

def load_state(path: str = DEFAULT_STATE_PATH) -> AppState:
    if not os.path.exists(path):
        logger.info("No saved state at %s, starting fresh", path)
        return AppState()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to load state from %s: %s", path, e)
        return AppState()
    if not isinstance(data, dict):
        logger.error("Ignoring state at %s: expected a JSON object", path)
        return AppState()
    return AppState.from_dict(data)

def save_state(state: AppState, path: str = DEFAULT_STATE_PATH):
    with atomic_write(path) as f:
        json.dump(state.to_dict(), f, indent=2)
    logger.debug("Saved state to %s (%d recipes)", path, len(state.recipes))
