"""Commercial pigment library.

Hex codes are approximations from the color names, not manufacturer data.
Cured color depends on percentage, material, lighting and curing.
"""

from typing import Dict, List, NamedTuple, Optional

class LibraryPigment(NamedTuple):
    id: str
    name: str
    hex: str
    category: str

CUSTOM_PIGMENT_ID = "custom"
CUSTOM_PIGMENT_NAME = "Custom"
CUSTOM_DEFAULT_COLOR = "#808080"

PIGMENT_LIBRARY = (
    # Core range
    LibraryPigment("white", "White", "#ffffff", "core"),
    LibraryPigment("black", "Black", "#000000", "core"),
    LibraryPigment("blue", "Blue", "#0066cc", "core"),
    LibraryPigment("green", "Green", "#228b22", "core"),
    LibraryPigment("coade", "Coade", "#c19a6b", "core"),
    LibraryPigment("terracotta", "Terracotta", "#e2725b", "core"),
    LibraryPigment("bright-red", "Bright Red", "#ff160c", "core"),
    LibraryPigment("red-oxide", "Red Oxide", "#6e0902", "core"),
    LibraryPigment("bright-yellow", "Bright Yellow", "#ffea00", "core"),
    LibraryPigment("yellow-oxide", "Yellow Oxide", "#fecb52", "core"),
    # New colors
    LibraryPigment("pink", "Pink", "#ff69b4", "new"),
    LibraryPigment("purple", "Purple", "#8b00ff", "new"),
    LibraryPigment("orange", "Orange", "#ff6600", "new"),
)

_BY_ID = {p.id: p for p in PIGMENT_LIBRARY}

def get_pigment_by_id(pigment_id: str) -> Optional[LibraryPigment]:
    return _BY_ID.get(pigment_id)

def get_pigment_by_name(name: str) -> Optional[LibraryPigment]:
    wanted = name.strip().lower()
    for p in PIGMENT_LIBRARY:
        if p.name.lower() == wanted:
            return p
    return None

def pigments_by_category() -> Dict[str, List[LibraryPigment]]:
    groups: Dict[str, List[LibraryPigment]] = {}
    for p in PIGMENT_LIBRARY:
        groups.setdefault(p.category, []).append(p)
    return groups

def pigment_options() -> List[str]:
    """Selectable ids grouped by category, with the custom option last."""
    options = [p.id for group in pigments_by_category().values() for p in group]
    options.append(CUSTOM_PIGMENT_ID)
    return options
