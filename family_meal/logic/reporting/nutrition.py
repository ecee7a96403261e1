"""Daily and weekly nutrition aggregation per person."""
from typing import Any, Callable, Dict, Iterable, List, Optional

from family_meal.domain.MealPlanEntry import slots_for, week_dates
from family_meal.domain.Person import person_targets, water_total
from family_meal.domain.schema import index_by_id, normalize_inflammation, to_number
from family_meal.utilities.constants import KCAL_WARNING_RATIO, PURINE_WARNING_RATIO

SlotLookup = Callable[[str, str, str], Optional[Dict[str, Any]]]

__all__ = [
    "build_slot_lookup", "compute_daily_nutrition", "threshold_status", "purine_status",
    "kcal_status", "compute_week_nutrition",
]


def build_slot_lookup(entries: Iterable[Dict[str, Any]], recipes: Iterable[Dict[str, Any]]) -> SlotLookup:
    """Return lookup(person_id, date, slot) -> recipe dict or None.

    When several entries share a slot the first one wins; entries pointing at a
    missing recipe resolve to None.
    """
    recipe_index = index_by_id(recipes)
    by_slot: Dict[tuple, str] = {}
    for e in entries or []:
        key = (e.get("personId"), e.get("date"), e.get("slot"))
        if key not in by_slot:
            by_slot[key] = e.get("recipeId")

    def lookup(person_id: str, date: str, slot: str) -> Optional[Dict[str, Any]]:
        recipe_id = by_slot.get((person_id, date, slot))
        return recipe_index.get(recipe_id) if recipe_id else None

    return lookup


def compute_daily_nutrition(person_id: str, date: str, lookup: SlotLookup) -> Dict[str, Any]:
    """Totals across one person's meal slots for a day.

    Returns { total_purines_mg, total_kcals, average_inflammatory_level, meal_count, slots }.
    """
    total_purines = 0.0
    total_kcals = 0.0
    total_inflammatory = 0.0
    meal_count = 0
    slots = slots_for(person_id, date)
    for slot in slots:
        recipe = lookup(person_id, date, slot)
        if not recipe:
            continue
        total_purines += to_number(recipe.get("total_purines_mg"))
        total_kcals += to_number(recipe.get("total_kcals"))
        total_inflammatory += normalize_inflammation(recipe.get("inflammatory_level"), clamp=False)
        meal_count += 1
    return {
        "total_purines_mg": total_purines,
        "total_kcals": total_kcals,
        "average_inflammatory_level": total_inflammatory / meal_count if meal_count else 0,
        "meal_count": meal_count,
        "slots": slots,
    }


def threshold_status(value: float, maximum: Optional[float], warning_ratio: float) -> str:
    if not maximum:
        return "ok"
    if value > maximum:
        return "over"
    if value > maximum * warning_ratio:
        return "warning"
    return "ok"


def purine_status(total_purines_mg: float, maximum: Optional[float]) -> str:
    return threshold_status(total_purines_mg, maximum, PURINE_WARNING_RATIO)


def kcal_status(total_kcals: float, maximum: Optional[float]) -> str:
    return threshold_status(total_kcals, maximum, KCAL_WARNING_RATIO)


def compute_week_nutrition(week_start: str, person_ids: Iterable[str],
                           entries: List[Dict[str, Any]], recipes: List[Dict[str, Any]],
                           persons: List[Dict[str, Any]] = (), water: List[Dict[str, Any]] = ()):
    """Aggregate nutrition for every person over the Monday-Sunday week containing week_start.

    Returns structure:
    {
      'dates': ['YYYY-MM-DD', ...],
      'persons': {
         'exan': {
            'targets': {...},
            'days': {
               'YYYY-MM-DD': { total_purines_mg, total_kcals, average_inflammatory_level,
                               meal_count, slots, meals: {slot: recipe name},
                               purine_status, kcal_status, water_ml },
               ...
            },
            'week_totals': { 'total_purines_mg': float, 'total_kcals': float, 'meal_count': int }
         },
         ...
      }
    }
    """
    dates = week_dates(week_start)
    lookup = build_slot_lookup(entries, recipes)
    result = {"dates": dates, "persons": {}}
    for person_id in person_ids:
        targets = person_targets(person_id, persons)
        days = {}
        week_purines = week_kcals = 0.0
        week_meals = 0
        for d in dates:
            day = compute_daily_nutrition(person_id, d, lookup)
            meals = {}
            for slot in day["slots"]:
                recipe = lookup(person_id, d, slot)
                if recipe:
                    meals[slot] = recipe.get("name", "")
            day["meals"] = meals
            day["purine_status"] = purine_status(day["total_purines_mg"], targets.get("purineMaxPerDay"))
            day["kcal_status"] = kcal_status(day["total_kcals"], targets.get("kcalMaxPerDay"))
            day["water_ml"] = water_total(water, person_id, d)
            days[d] = day
            week_purines += day["total_purines_mg"]
            week_kcals += day["total_kcals"]
            week_meals += day["meal_count"]
        result["persons"][person_id] = {
            "targets": targets,
            "days": days,
            "week_totals": {
                "total_purines_mg": week_purines,
                "total_kcals": week_kcals,
                "meal_count": week_meals,
            },
        }
    return result
