import copy
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, Iterator, List, Optional

from mixcalc.library import (
    CUSTOM_DEFAULT_COLOR,
    CUSTOM_PIGMENT_ID,
    CUSTOM_PIGMENT_NAME,
    PIGMENT_LIBRARY,
    get_pigment_by_id,
)
from mixcalc.pigments import PigmentEntry, get_max_percentage, mix_color, new_id, rebalance
from mixcalc.presets import DEFAULT_PIGMENT_PERCENTAGE
from mixcalc.utils import parse_number

logger = logging.getLogger(__name__)

def _now() -> str:
    return datetime.now(timezone.utc).isoformat()

def new_pigment() -> PigmentEntry:
    default = PIGMENT_LIBRARY[0]
    return PigmentEntry(
        name=default.name,
        pigment_id=default.id,
        color=default.hex,
        percentage=DEFAULT_PIGMENT_PERCENTAGE,
    )

def _rekeyed(pigments: List[PigmentEntry]) -> List[PigmentEntry]:
    return [replace(copy.deepcopy(p), id=new_id()) for p in pigments]

@dataclass
class Recipe:
    name: str
    product: str
    pigments: List[PigmentEntry]
    mixed_color: str
    notes: str = ""
    id: str = field(default_factory=new_id)
    created_at: str = field(default_factory=_now)
    updated_at: str = field(default_factory=_now)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "product": self.product,
            "pigments": [p.to_dict() for p in self.pigments],
            "mixed_color": self.mixed_color,
            "notes": self.notes,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Recipe":
        created = data.get("created_at") or _now()
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            product=str(data["product"]),
            pigments=[PigmentEntry.from_dict(p) for p in data.get("pigments", [])],
            mixed_color=str(data["mixed_color"]),
            notes=str(data.get("notes") or ""),
            created_at=created,
            updated_at=data.get("updated_at") or created,
        )

class WorkingRecipe:
    """The unsaved recipe being edited; entries are changed in place."""

    def __init__(self):
        self.name = ""
        self.notes = ""
        self.pigments: List[PigmentEntry] = []

    def _index(self, entry_id: str) -> int:
        for i, p in enumerate(self.pigments):
            if p.id == entry_id:
                return i
        return -1

    def add_pigment(self) -> PigmentEntry:
        entry = new_pigment()
        self.pigments.append(entry)
        return entry

    def remove_pigment(self, entry_id: str):
        self.pigments = [p for p in self.pigments if p.id != entry_id]

    def select_pigment(self, entry_id: str, pigment_id: str):
        i = self._index(entry_id)
        if i == -1:
            return
        entry = self.pigments[i]
        if pigment_id == CUSTOM_PIGMENT_ID:
            entry.name = CUSTOM_PIGMENT_NAME
            entry.pigment_id = CUSTOM_PIGMENT_ID
            entry.color = CUSTOM_DEFAULT_COLOR
            entry.is_custom = True
            return
        pigment = get_pigment_by_id(pigment_id)
        if pigment is None:
            return
        entry.name = pigment.name
        entry.pigment_id = pigment.id
        entry.color = pigment.hex
        entry.is_custom = False

    def set_color(self, entry_id: str, color: str):
        i = self._index(entry_id)
        if i != -1:
            self.pigments[i].color = color

    def set_percentage(self, entry_id: str, value, max_total: float):
        i = self._index(entry_id)
        if i == -1:
            return
        clamped = float(max(0.0, min(max_total, parse_number(value))))
        self.pigments = rebalance(self.pigments, i, clamped, max_total)

    def clear(self):
        self.name = ""
        self.notes = ""
        self.pigments = []

    def load(self, recipe: Recipe):
        self.pigments = _rekeyed(recipe.pigments)
        self.name = recipe.name
        self.notes = recipe.notes or ""

def validate_recipe(name: str, pigments: List[PigmentEntry]) -> Optional[str]:
    if not name.strip():
        return "Please enter a recipe name"
    if not pigments:
        return "Please add at least one pigment"
    return None

def snapshot_recipe(working: WorkingRecipe, product_id: str) -> Recipe:
    """Freeze the working recipe; later edits to it do not reach the snapshot."""
    return Recipe(
        name=working.name,
        product=product_id,
        pigments=_rekeyed(working.pigments),
        mixed_color=mix_color(working.pigments, get_max_percentage(product_id)),
        notes=working.notes,
    )

class RecipeBook:
    def __init__(self, recipes: Optional[List[Recipe]] = None):
        self._recipes: List[Recipe] = list(recipes or [])

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        for r in self._recipes:
            if r.id == recipe_id:
                return r
        return None

    def save(self, recipe: Recipe):
        self._recipes.append(recipe)
        logger.debug("Saved recipe %s (%s)", recipe.name, recipe.id)

    def delete(self, recipe_id: str) -> bool:
        before = len(self._recipes)
        self._recipes = [r for r in self._recipes if r.id != recipe_id]
        removed = len(self._recipes) < before
        if removed:
            logger.debug("Deleted recipe %s", recipe_id)
        return removed

    def to_list(self) -> List[Dict]:
        return [r.to_dict() for r in self._recipes]
