"""Recipe domain entity: name, type, servings, ingredient quantities, derived nutrition totals."""
from typing import Any, Dict, List, Mapping, Optional

from family_meal.domain.schema import normalize_recipe, normalize_recipe_ingredients
from family_meal.logic.nutrition.recipe_calculator import calculate_recipe_nutrition, per_serving


class Recipe:
    def __init__(self, name: str = "", servings: int = 1, ingredients: Optional[List[Dict[str, Any]]] = None,
                 type: Optional[str] = None, tags: str = "", notes: str = "", id: Optional[str] = None):
        self.id = id
        self.name = name
        self.type = type
        self.servings = servings
        self.ingredients = normalize_recipe_ingredients(ingredients or [])
        self.tags = tags or ""
        self.notes = notes or ""
        # Derived; only ever set by recompute()
        self.total_purines_mg = 0.0
        self.total_kcals = 0.0
        self.inflammatory_level = 0.0
        self.safe_for_gout = True

    def recompute(self, catalog: Mapping[str, Mapping[str, Any]]) -> "Recipe":
        '''Refreshes the derived totals from the ingredient list and catalog.'''
        totals = calculate_recipe_nutrition(self.ingredients, catalog)
        self.total_purines_mg = totals["total_purines_mg"]
        self.total_kcals = totals["total_kcals"]
        self.inflammatory_level = totals["inflammatory_level"]
        self.safe_for_gout = totals["safe_for_gout"]
        return self

    def ingredient_ids(self) -> List[str]:
        return [pair["ingredientId"] for pair in self.ingredients]

    def per_serving(self) -> Dict[str, float]:
        return per_serving({"total_purines_mg": self.total_purines_mg, "total_kcals": self.total_kcals},
                           self.servings)

    def __str__(self) -> str:
        safe = "safe" if self.safe_for_gout else "caution"
        return (f"{self.name} - {self.servings} servings - {self.total_purines_mg:.1f}mg purines - "
                f"{self.total_kcals:.0f} kcal - Inflammation: {self.inflammatory_level} ({safe})")

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        d = normalize_recipe(data)
        recipe = Recipe(
            name=d["name"],
            servings=d["servings"],
            ingredients=d["ingredients"],
            type=d.get("type"),
            tags=d["tags"],
            notes=d.get("notes") or "",
            id=d["id"] or None,
        )
        recipe.total_purines_mg = d["total_purines_mg"]
        recipe.total_kcals = d["total_kcals"]
        recipe.inflammatory_level = d["inflammatory_level"]
        recipe.safe_for_gout = d["safe_for_gout"]
        return recipe

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "servings": self.servings,
            "ingredients": [dict(pair) for pair in self.ingredients],
            "total_purines_mg": self.total_purines_mg,
            "total_kcals": self.total_kcals,
            "inflammatory_level": self.inflammatory_level,
            "safe_for_gout": self.safe_for_gout,
            "tags": self.tags,
            "notes": self.notes,
        }
