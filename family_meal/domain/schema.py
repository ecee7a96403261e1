"""Record normalization at the data-model boundary.

Stored ingredient documents exist in two shapes:

  v1 (legacy): per-unit nutrition (purinesPerUnit, kcalsPerUnit, unitGrams) and a
               categorical inflammation label (low / medium / high).
  v2 (current): per-100g nutrition (purinesPer100g, kcalsPer100g) and a numeric
               1-10 inflammatoryLevel.

Everything read from the store goes through normalize_* so the aggregators only
ever see v2 records.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from family_meal.utilities.constants import INFLAMMATION_CATEGORY_LEVELS

SCHEMA_VERSION = 2

__all__ = [
    "SCHEMA_VERSION", "to_number", "normalize_tags", "normalize_inflammation",
    "normalize_ingredient", "normalize_recipe_ingredients", "normalize_recipe",
    "index_by_id", "normalize_pantry_stock", "normalize_pantry",
]


def to_number(value: Any, default: float = 0) -> float:
    """Coerce a stored value to a number; anything unparseable becomes default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return default


def normalize_tags(tags: Any) -> str:
    if tags is None:
        return ""
    if isinstance(tags, (list, tuple)):
        return ", ".join(str(t).strip() for t in tags if str(t).strip())
    return str(tags).strip()


def normalize_inflammation(value: Any, clamp: bool = True) -> float:
    '''Categorical low/medium/high become 2/5/8; numbers are clamped to 1-10 unless clamp is off.'''
    if isinstance(value, str) and value.strip().lower() in INFLAMMATION_CATEGORY_LEVELS:
        return INFLAMMATION_CATEGORY_LEVELS[value.strip().lower()]
    level = to_number(value, default=0)
    if not clamp:
        return max(level, 0)
    if level <= 0:
        return 0
    return min(max(level, 1), 10)


def _per_100g(record: Dict[str, Any], v2_key: str, snake_key: str, unit_key: str) -> float:
    if v2_key in record:
        amount = to_number(record.get(v2_key))
    elif snake_key in record:
        amount = to_number(record.get(snake_key))
    elif unit_key in record:
        unit_grams = to_number(record.get("unitGrams"), default=100)
        if unit_grams <= 0:
            unit_grams = 100
        amount = to_number(record.get(unit_key)) * 100 / unit_grams
    else:
        amount = 0
    return max(amount, 0)


def normalize_ingredient(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a v2 copy of an ingredient document, whatever shape it was stored in."""
    d = dict(record) if isinstance(record, dict) else {}
    if "inflammatoryLevel" in d:
        raw_level = d.get("inflammatoryLevel")
    else:
        raw_level = d.get("inflammation", d.get("inflammatory_level"))
    result = {
        "id": str(d.get("id", "")),
        "name": str(d.get("name", "") or ""),
        "purinesPer100g": _per_100g(d, "purinesPer100g", "purines_per_100g", "purinesPerUnit"),
        "kcalsPer100g": _per_100g(d, "kcalsPer100g", "kcals_per_100g", "kcalsPerUnit"),
        "inflammatoryLevel": normalize_inflammation(raw_level),
        "tags": normalize_tags(d.get("tags")),
        "notes": d.get("notes") or "",
        "schemaVersion": SCHEMA_VERSION,
    }
    for stamp in ("createdAt", "updatedAt"):
        if stamp in d:
            result[stamp] = d[stamp]
    return result


def normalize_recipe_ingredients(items: Any) -> List[Dict[str, Any]]:
    pairs: List[Dict[str, Any]] = []
    if not isinstance(items, list):
        return pairs
    for item in items:
        if not isinstance(item, dict) or not item.get("ingredientId"):
            continue
        quantity = item.get("quantity", item.get("quantityGrams", 0))
        pairs.append({"ingredientId": str(item["ingredientId"]), "quantity": to_number(quantity)})
    return pairs


def normalize_recipe(record: Dict[str, Any]) -> Dict[str, Any]:
    d = dict(record) if isinstance(record, dict) else {}
    d["id"] = str(d.get("id", ""))
    d["name"] = str(d.get("name", "") or "")
    d["servings"] = to_number(d.get("servings"), default=1) or 1
    d["ingredients"] = normalize_recipe_ingredients(d.get("ingredients"))
    d["total_purines_mg"] = to_number(d.get("total_purines_mg"))
    d["total_kcals"] = to_number(d.get("total_kcals"))
    # Derived average, may legitimately sit below 1
    d["inflammatory_level"] = normalize_inflammation(d.get("inflammatory_level"), clamp=False)
    d["safe_for_gout"] = bool(d.get("safe_for_gout", False))
    d["tags"] = normalize_tags(d.get("tags"))
    d["schemaVersion"] = SCHEMA_VERSION
    return d


def index_by_id(records: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """Map id -> record; later duplicates do not replace the first one."""
    index: Dict[str, Dict[str, Any]] = {}
    for r in records or []:
        rid = r.get("id") if isinstance(r, dict) else None
        if rid and rid not in index:
            index[rid] = r
    return index


def normalize_pantry_stock(items: Any) -> List[Dict[str, Any]]:
    stock: List[Dict[str, Any]] = []
    if not isinstance(items, list):
        return stock
    for item in items:
        if not isinstance(item, dict) or not item.get("ingredientId"):
            continue
        grams = item.get("quantityGrams", item.get("quantity", 0))
        stock.append({"ingredientId": str(item["ingredientId"]), "quantityGrams": max(to_number(grams), 0)})
    return stock


def normalize_pantry(record: Dict[str, Any]) -> Dict[str, Any]:
    d = dict(record) if isinstance(record, dict) else {}
    d["id"] = str(d.get("id", ""))
    d["name"] = str(d.get("name", "") or "")
    d["ingredients"] = normalize_pantry_stock(d.get("ingredients"))
    d["isActive"] = bool(d.get("isActive", False))
    return d
