"""Ingredient domain entity: name, per-100g purines and calories, inflammatory level, tags."""
from typing import Any, Dict, List, Optional

from family_meal.domain.schema import normalize_ingredient
from family_meal.utilities.constants import INFLAMMATION_BANDS, UNCATEGORIZED


def inflammation_band(level: float) -> str:
    """low (<= 3), medium (<= 6) or high."""
    if level <= INFLAMMATION_BANDS["low"][1]:
        return "low"
    if level <= INFLAMMATION_BANDS["medium"][1]:
        return "medium"
    return "high"


class Ingredient:
    def __init__(self, name: str = "", purines_per_100g: float = 0, kcals_per_100g: float = 0,
                 inflammatory_level: float = 5, tags: str = "", notes: str = "",
                 id: Optional[str] = None):
        if purines_per_100g < 0 or kcals_per_100g < 0:
            raise ValueError("Nutrition amounts cannot be negative")
        self.id = id
        self.name = name
        self.purines_per_100g = purines_per_100g
        self.kcals_per_100g = kcals_per_100g
        self.inflammatory_level = inflammatory_level
        self.tags = tags or ""
        self.notes = notes or ""

    def tag_list(self) -> List[str]:
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    def category(self) -> str:
        '''First tag token, used to group shopping rows.'''
        tags = self.tag_list()
        return tags[0] if tags else UNCATEGORIZED

    def inflammation_band(self) -> str:
        return inflammation_band(self.inflammatory_level)

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.purines_per_100g}mg purines, {self.kcals_per_100g} kcal /100g",
                 f"Inflammation: {self.inflammatory_level}"]
        if self.tags:
            parts.append(f"Tags: {self.tags}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Ingredient":
        '''Creates an Ingredient from a stored document of either schema version.'''
        d = normalize_ingredient(data)
        return Ingredient(
            name=d["name"],
            purines_per_100g=d["purinesPer100g"],
            kcals_per_100g=d["kcalsPer100g"],
            inflammatory_level=d["inflammatoryLevel"],
            tags=d["tags"],
            notes=d["notes"],
            id=d["id"] or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the Ingredient to its stored (v2) document, without the id.'''
        return {
            "name": self.name,
            "purinesPer100g": self.purines_per_100g,
            "kcalsPer100g": self.kcals_per_100g,
            "inflammatoryLevel": self.inflammatory_level,
            "tags": self.tags,
            "notes": self.notes,
        }
