"""Recipe nutrition calculator.

Provides calculate_recipe_nutrition(pairs, catalog): per-recipe purine, calorie and
inflammation totals from (ingredientId, grams) pairs and the ingredient catalog.
"""
from typing import Any, Dict, Iterable, Mapping

from family_meal.domain.schema import to_number
from family_meal.utilities.constants import GOUT_SAFE_PURINE_THRESHOLD_MG

__all__ = ["calculate_recipe_nutrition", "per_serving", "is_safe_for_gout"]


def is_safe_for_gout(total_purines_mg: float) -> bool:
    return total_purines_mg < GOUT_SAFE_PURINE_THRESHOLD_MG


def calculate_recipe_nutrition(pairs: Iterable[Mapping[str, Any]],
                               catalog: Mapping[str, Mapping[str, Any]]) -> Dict[str, Any]:
    """Sum nutrition over a recipe's ingredient list.

    Args:
        pairs: {ingredientId, quantity} items, quantity in grams.
        catalog: ingredient id -> normalized ingredient record (per-100g values).

    Returns:
        { total_purines_mg, total_kcals, inflammatory_level, safe_for_gout }

    Pairs whose ingredient is not in the catalog contribute nothing. The
    inflammatory level is the quantity-scaled sum divided by the number of
    resolved pairs, rounded to one decimal.
    """
    total_purines = 0.0
    total_kcals = 0.0
    total_inflammatory = 0.0
    resolved = 0
    for pair in pairs or []:
        ingredient = catalog.get(pair.get("ingredientId"))
        if not ingredient:
            continue
        scale = to_number(pair.get("quantity")) / 100
        total_purines += to_number(ingredient.get("purinesPer100g")) * scale
        total_kcals += to_number(ingredient.get("kcalsPer100g")) * scale
        total_inflammatory += to_number(ingredient.get("inflammatoryLevel")) * scale
        resolved += 1

    avg_inflammatory = total_inflammatory / resolved if resolved else 0
    return {
        "total_purines_mg": total_purines,
        "total_kcals": total_kcals,
        "inflammatory_level": round(avg_inflammatory, 1),
        "safe_for_gout": is_safe_for_gout(total_purines),
    }


def per_serving(nutrition: Mapping[str, Any], servings: float) -> Dict[str, float]:
    """Purines and calories per serving, as shown in the recipe editor."""
    if not servings or servings <= 0:
        return {"purines_per_serving": 0.0, "kcals_per_serving": 0.0}
    return {
        "purines_per_serving": round(nutrition.get("total_purines_mg", 0) / servings, 1),
        "kcals_per_serving": round(nutrition.get("total_kcals", 0) / servings),
    }
