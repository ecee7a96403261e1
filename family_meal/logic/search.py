"""Catalog search helpers used by the ingredient and recipe listings."""
from typing import Any, Dict, Iterable, List

from family_meal.domain.Ingredient import inflammation_band

__all__ = ["matches_text", "filter_ingredients", "filter_recipes"]


def matches_text(record: Dict[str, Any], text: str) -> bool:
    """Case-insensitive substring match on name or tags."""
    needle = (text or "").strip().lower()
    if not needle:
        return True
    return needle in (record.get("name") or "").lower() or needle in (record.get("tags") or "").lower()


def filter_ingredients(ingredients: Iterable[Dict[str, Any]], search: str = "",
                       inflammation: str = "all") -> List[Dict[str, Any]]:
    result = []
    for ing in ingredients:
        if not matches_text(ing, search):
            continue
        if inflammation != "all" and inflammation_band(ing.get("inflammatoryLevel", 0)) != inflammation:
            continue
        result.append(ing)
    return result


def filter_recipes(recipes: Iterable[Dict[str, Any]], search: str = "", safe: str = "all") -> List[Dict[str, Any]]:
    result = []
    for r in recipes:
        if not matches_text(r, search):
            continue
        if safe == "safe" and not r.get("safe_for_gout"):
            continue
        if safe == "unsafe" and r.get("safe_for_gout"):
            continue
        result.append(r)
    return result
